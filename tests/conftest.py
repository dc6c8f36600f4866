import pytest

from unittest.mock import MagicMock
from sqlalchemy import insert

from sqlalchemy_rowselect import Database

from models import metadata, pairs, items, Event, PAIRS, ITEMS, EVENTS

@pytest.fixture
def database():
    db = Database(tag=1)

    metadata.create_all(db.connection)
    db.connection.commit()

    db.execute(insert(pairs), PAIRS)
    db.execute(insert(items), ITEMS)
    db.execute(insert(Event.__table__), EVENTS)

    yield db

    db.close()

@pytest.fixture
def fake_database():
    """
    A database whose prepare() hands out whatever statement the test assigns.
    """
    db = MagicMock(tag=7, path="/tmp/fake.db")
    yield db
