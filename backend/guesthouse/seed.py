"""Demo dataset for a fresh guesthouse database.

Each table is only filled when it is empty, so running this twice is harmless.
"""

import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from guesthouse.errors import StorageError
from guesthouse.models import Booking, Category, Client, InventoryItem, Room

logger = logging.getLogger(__name__)

SAMPLE_DATA = [
    (Category, [
        {"id": 1, "name": "Beverages"},
        {"id": 2, "name": "Snacks"},
        {"id": 3, "name": "Food"},
    ]),
    (InventoryItem, [
        {"id": 1, "name": "Coca Cola 500ml", "category_id": 1, "quantity": 100, "unit": "bottles",
         "cost_price": 1500.00, "selling_price": 2000.00, "reorder_level": 20},
        {"id": 2, "name": "Nile Special Beer", "category_id": 1, "quantity": 50, "unit": "bottles",
         "cost_price": 3000.00, "selling_price": 4000.00, "reorder_level": 10},
        {"id": 3, "name": "Crisps (Salted)", "category_id": 2, "quantity": 75, "unit": "packs",
         "cost_price": 800.00, "selling_price": 1200.00, "reorder_level": 15},
    ]),
    (Room, [
        {"id": 1, "room_number": "101", "type": "Standard", "price_per_night": 50000.00, "status": "Available"},
        {"id": 2, "room_number": "102", "type": "Deluxe", "price_per_night": 80000.00, "status": "Occupied"},
        {"id": 3, "room_number": "201", "type": "Suite", "price_per_night": 120000.00, "status": "Available"},
    ]),
    (Client, [
        {"id": 1, "name": "John Doe", "contact_info": "john@example.com, 0771234567"},
        {"id": 2, "name": "Jane Smith", "contact_info": "jane@example.com, 0772345678"},
    ]),
    (Booking, [
        {"id": 1, "room_id": 1, "client_id": 1, "check_in_date": date(2025, 8, 1),
         "check_out_date": date(2025, 8, 5), "total_price": 200000.00, "status": "Confirmed"},
        {"id": 2, "room_id": 2, "client_id": 2, "check_in_date": date(2025, 7, 20),
         "check_out_date": date(2025, 7, 22), "total_price": 160000.00, "status": "Completed"},
    ]),
]


# sample ids are remapped to the ids the store hands out
REFERENCES = {"category_id": Category, "room_id": Room, "client_id": Client}


def seed_sample_data(db: Session) -> int:
    """Insert the demo rows into empty tables; returns how many rows were added"""
    added = 0
    new_ids = {}
    try:
        for model, rows in SAMPLE_DATA:
            if db.query(model.id).first() is not None:
                logger.info("Skipping sample %s, table already has rows", model.__tablename__)
                continue
            for row in rows:
                values = dict(row)
                sample_id = values.pop("id")
                for column, parent in REFERENCES.items():
                    if column in values:
                        values[column] = new_ids.get((parent, values[column]), values[column])
                record = model(**values)
                db.add(record)
                db.flush()
                new_ids[(model, sample_id)] = record.id
                added += 1
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Could not insert sample data")
        raise StorageError() from e

    logger.info("Seeded %s sample row(s)", added)
    return added
