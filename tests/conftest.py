"""
Pytest fixtures: SQLite in-memory database, session and test client.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app import create_app
from app.database.connection import engine


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh tables for every test."""
    import app.models  # noqa: F401

    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session() -> Session:
    with Session(engine) as session:
        yield session


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())
