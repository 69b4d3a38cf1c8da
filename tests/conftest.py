"""Shared fixtures: in-memory Motor collection and an HTTP client bound to it."""

import os

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "employee_management_test")
os.environ.setdefault("MONGODB_COLLECTION_NAME", "employees")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from employee_api.database import get_employee_repository
from employee_api.main import app
from employee_api.repository import EmployeeRepository


@pytest.fixture
def collection():
    return AsyncMongoMockClient()["employee_management_test"]["employees"]


@pytest.fixture
def repository(collection):
    return EmployeeRepository(collection)


@pytest.fixture
async def client(repository):
    """Client for the app with the repository dependency overridden.

    ASGITransport skips the lifespan, so no real MongoDB is contacted.
    """
    app.dependency_overrides[get_employee_repository] = lambda: repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def ann():
    return {"name": "Ann", "email": "ann@x.com", "phone": "123", "department": "Eng"}
