"""
Pytest configuration and fixtures for test suite.
"""

import os
import pytest

# Set test environment variables before importing the app
os.environ["APP_ENV"] = "development"
os.environ["LOG_FORMAT"] = "console"
os.environ["LOG_LEVEL"] = "warning"

from fastapi.testclient import TestClient
from todoapi.config import Settings
from todoapi.main import create_app
from todoapi.models.database import Database
from todoapi.repositories.todo_repository import TodoRepository


@pytest.fixture
def settings():
    """Settings for a development app with an in-memory store."""
    return Settings(app_env="development", log_format="console", log_level="warning")


@pytest.fixture
def app(settings):
    """A fresh application; each one owns an empty store."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def database():
    """An empty in-memory store outside of any application."""
    database = Database("sqlite://")
    database.create_tables()
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def repository(db_session):
    return TodoRepository(db_session)
