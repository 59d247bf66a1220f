from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from dashboard_api.db.mongo import MongoStore
from dashboard_api.main import create_app


@pytest.fixture
def store():
    return MongoStore(products=MagicMock(name="products"), orders=MagicMock(name="orders"))


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def product_id():
    return ObjectId("65f1a2b3c4d5e6f7a8b9c0d1")


@pytest.fixture
def order_id():
    return ObjectId("65f1a2b3c4d5e6f7a8b9c0e2")


def set_page(collection, docs):
    """Make ``find().sort().skip().limit()`` yield ``docs``."""
    collection.find.return_value.sort.return_value.skip.return_value.limit.return_value = docs
