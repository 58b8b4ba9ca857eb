"""
Fixtures for the guesthouse API tests

Every test gets its own in-memory SQLite store, so ids always start at 1.
"""

import pytest
from fastapi.testclient import TestClient

from guesthouse.config import Settings
from guesthouse.database import Database
from guesthouse.main import create_app


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", SEED_SAMPLE_DATA=False, LOG_LEVEL="DEBUG")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """HTTP client with the application lifespan running"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(settings):
    database = Database(settings)
    database.open()
    database.create_schema()
    yield database
    database.close()


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.close()


# ====================
# Payload factories
# ====================


@pytest.fixture
def room_payload():
    return {"room_number": "101", "type": "Standard", "price_per_night": 50000.00, "status": "Available"}


@pytest.fixture
def client_payload():
    return {"name": "John Doe", "contact_info": "john@example.com, 0771234567"}


@pytest.fixture
def category_payload():
    return {"name": "Beverages"}


@pytest.fixture
def inventory_payload():
    return {
        "name": "Coca Cola 500ml",
        "category_id": 1,
        "quantity": 100,
        "unit": "bottles",
        "cost_price": 1500.00,
        "selling_price": 2000.00,
        "reorder_level": 20,
    }


@pytest.fixture
def booking_payload():
    return {
        "room_id": 1,
        "client_id": 1,
        "check_in_date": "2025-08-01",
        "check_out_date": "2025-08-05",
        "total_price": 200000.00,
        "status": "Confirmed",
    }
