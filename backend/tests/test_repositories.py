"""
Repository tests against a real session, below the HTTP layer
"""

from concurrent.futures import ThreadPoolExecutor
import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from guesthouse.config import Settings
from guesthouse.database import Database
from guesthouse.errors import NotFound, StorageError, ValidationError
from guesthouse.models import Booking
from guesthouse.repositories import (
    BookingRepository,
    CategoryRepository,
    ClientRepository,
    InventoryRepository,
    PLACEHOLDER,
    RoomRepository,
)


class TestRepository:

    def test_create_then_get(self, db):
        repo = ClientRepository(db)

        created = repo.create({"name": "John Doe", "contact_info": "john@example.com"})

        assert repo.get(created["id"]) == {"id": 1, "name": "John Doe", "contact_info": "john@example.com"}

    def test_strings_are_trimmed(self, db):
        created = CategoryRepository(db).create({"name": "  Snacks "})

        assert created["name"] == "Snacks"

    def test_unknown_fields_are_ignored(self, db):
        created = CategoryRepository(db).create({"name": "Food", "id": 40, "colour": "red"})

        assert created == {"id": 1, "name": "Food"}

    def test_validation_runs_before_lookup(self, db):
        with pytest.raises(ValidationError):
            RoomRepository(db).update(123, {"room_number": "101"})

    def test_update_missing_raises_not_found(self, db):
        repo = CategoryRepository(db)
        repo.create({"name": "Food"})

        with pytest.raises(NotFound) as exc_info:
            repo.update(2, {"name": "Drinks"})

        assert exc_info.value.message == "Category not found"
        assert repo.list() == [{"id": 1, "name": "Food"}]

    def test_delete_missing_raises_not_found(self, db):
        with pytest.raises(NotFound, match="Item not found"):
            InventoryRepository(db).delete(1)

    def test_update_with_same_values_still_succeeds(self, db):
        repo = RoomRepository(db)
        fields = {"room_number": "101", "type": "Standard", "price_per_night": 50000, "status": "Available"}
        created = repo.create(fields)

        assert repo.update(created["id"], fields) == created

    def test_ids_are_not_reused_after_delete(self, db):
        repo = CategoryRepository(db)
        repo.create({"name": "Beverages"})
        second = repo.create({"name": "Snacks"})
        repo.delete(second["id"])

        assert repo.create({"name": "Food"})["id"] == 3

    def test_storage_fault_becomes_storage_error(self, db):
        repo = CategoryRepository(db)
        db.execute(text("DROP TABLE categories"))

        with pytest.raises(StorageError) as exc_info:
            repo.list()

        assert exc_info.value.message == "A database error occurred"
        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestBookingJoin:

    def test_left_join_keeps_dangling_bookings(self, db):
        rooms = RoomRepository(db)
        room = rooms.create({"room_number": "101", "type": "Standard", "price_per_night": 50000})
        guest = ClientRepository(db).create({"name": "John Doe", "contact_info": None})
        repo = BookingRepository(db)
        repo.create({
            "room_id": room["id"],
            "client_id": guest["id"],
            "check_in_date": "2025-08-01",
            "check_out_date": "2025-08-05",
            "total_price": 200000,
        })

        rooms.delete(room["id"])
        detailed = repo.list_detailed()

        assert len(detailed) == 1
        assert detailed[0]["room_number"] == PLACEHOLDER
        assert detailed[0]["room_type"] == PLACEHOLDER
        assert detailed[0]["client_name"] == "John Doe"
        # an existing client with no contact info is not a dangling reference
        assert detailed[0]["client_contact_info"] is None

    def test_get_detailed_missing(self, db):
        with pytest.raises(NotFound, match="Booking not found"):
            BookingRepository(db).get_detailed(9)


class TestNumericDecode:

    def test_text_numbers_from_driver_come_back_numeric(self, db):
        repo = BookingRepository(db)
        booking = Booking(room_id=1, client_id=1, total_price="160000.00", status="Completed")

        record = repo.to_dict(booking)

        assert record["total_price"] == 160000.0
        assert isinstance(record["total_price"], float)
        assert record["check_in_date"] is None


class TestConcurrentCreates:

    def test_ids_are_distinct_and_increasing(self, tmp_path):
        settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'guesthouse.db'}", DB_POOL_SIZE=4)
        database = Database(settings)
        database.open()
        database.create_schema()

        def create(n):
            db = database.session()
            try:
                return ClientRepository(db).create({"name": f"Guest {n}"})["id"]
            finally:
                db.close()

        try:
            with ThreadPoolExecutor(max_workers=4) as pool:
                ids = list(pool.map(create, range(12)))

            db = database.session()
            try:
                listed = [record["id"] for record in ClientRepository(db).list()]
            finally:
                db.close()
        finally:
            database.close()

        assert len(set(ids)) == 12
        assert sorted(ids) == list(range(1, 13))
        assert listed == sorted(listed) == sorted(ids)
