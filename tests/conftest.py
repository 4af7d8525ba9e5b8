"""Shared fixtures: an in-memory database per test and an API client."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import date, datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

import main
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import Category, Transaction, User


@pytest.fixture(autouse=True)
def _reset_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    def _register(name="Alice", email="alice@example.com", password="secret123"):
        response = client.post("/users/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        login = client.post("/users/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        data = login.json()["data"]
        return data["user"], {"Authorization": f"Bearer {data['accessToken']}"}

    return _register


@pytest.fixture
def auth(register):
    """(user, headers) for a freshly registered user."""
    return register()


@pytest.fixture
def make_category(db):
    def _make(owner_id, name="Salary", type="income"):
        category = Category(name=name, type=type, created_by=owner_id)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category

    return _make


@pytest.fixture
def make_transaction(db):
    def _make(owner_id, category, amount, tx_date, created_at=None, description="entry"):
        tx = Transaction(
            amount=Decimal(str(amount)),
            description=description,
            category_id=category.id,
            type=category.type,
            date=date.fromisoformat(tx_date) if isinstance(tx_date, str) else tx_date,
            created_by=owner_id,
            created_at=created_at or datetime.utcnow(),
        )
        db.add(tx)
        db.commit()
        db.refresh(tx)
        return tx

    return _make


@pytest.fixture
def make_user(db):
    def _make(name="Bob", email="bob@example.com", password="secret123"):
        user = User(name=name, email=email)
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make
