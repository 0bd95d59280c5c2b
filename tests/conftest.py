# tests/conftest.py

from __future__ import annotations

import os

# Settings are read once at import, so the test environment must be in place first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_KEY"] = "test-api-key"

import pytest
from fastapi.testclient import TestClient

from taskmanagement.core.database import Base, SessionLocal, engine
from taskmanagement.main import app
from taskmanagement.models import Task, TaskPriority, TaskStatus, User

API_KEY_HEADER = "X-API-KEY"
API_KEY_VALUE = "test-api-key"


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app, headers={API_KEY_HEADER: API_KEY_VALUE})


@pytest.fixture()
def anonymous_client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def make_user(db):
    def _make(name: str = "John Doe", email: str = "john@example.com") -> User:
        user = User(name=name, email=email)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_task(db):
    def _make(
        title: str = "Task",
        status: TaskStatus = TaskStatus.TODO,
        priority: TaskPriority = TaskPriority.MEDIUM,
        assigned_to: User | None = None,
        description: str | None = None,
    ) -> Task:
        task = Task(
            title=title,
            description=description,
            status=status.value,
            priority=priority.value,
            assigned_to_id=assigned_to.id if assigned_to is not None else None,
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make
