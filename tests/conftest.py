"""Pytest configuration and fixtures."""

import random

import mongomock
import pytest

from luckydraw.config import TestingConfig
from luckydraw.repositories.order_repository import OrderRepository
from luckydraw.services.redemption_service import RedemptionService


@pytest.fixture
def mongo_client():
    """In-memory document store standing in for MongoDB."""
    return mongomock.MongoClient()


@pytest.fixture
def orders_collection(mongo_client):
    return mongo_client[TestingConfig.MONGODB_DB][TestingConfig.ORDERS_COLLECTION]


@pytest.fixture
def repository(orders_collection):
    return OrderRepository(collection=orders_collection)


@pytest.fixture
def service(repository):
    return RedemptionService(repository=repository, rng=random.Random(42))


@pytest.fixture
def app(mongo_client):
    """Create Flask application for testing."""
    from luckydraw import create_app

    return create_app(TestingConfig, mongo_client=mongo_client, draw_rng=random.Random(42))


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sales_headers():
    return {"x-role": "sales"}
