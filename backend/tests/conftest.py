"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Settings are read at import time: point the app at an in-memory database
# and keep startup from creating tables on it.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET", "test-secret-for-pricing-api-tests-0123456789")

import uuid
from datetime import date, datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rest_api.main import app
from rest_api.models import Base, PriceList, PriceListVersionComponent, Transaction
from shared.infrastructure.db import build_engine, get_db
from shared.security.auth import sign_jwt


# SQLite in-memory database shared by every connection of the test engine
engine = build_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ALL_ENTITLEMENTS = ["Create", "Read", "Update", "Delete"]


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def _override_get_db(db_session):
    def override_get_db():
        yield db_session
    return override_get_db


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    app.dependency_overrides[get_db] = _override_get_db(db_session)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def unsafe_client(db_session):
    """Test client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Auth
# =============================================================================


@pytest.fixture
def make_auth_headers():
    """Build Authorization headers for a token with the given entitlements claim."""

    def _make(entitlements: dict, sub: str = "test-user", ttl_seconds: int | None = None) -> dict:
        token = sign_jwt({"sub": sub, "entitlements": entitlements}, ttl_seconds=ttl_seconds)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def auth_headers(make_auth_headers):
    """Headers granting every entitlement on every resource."""
    return make_auth_headers({"*": ALL_ENTITLEMENTS})


@pytest.fixture
def read_only_headers(make_auth_headers):
    """Headers granting only Read on every resource."""
    return make_auth_headers({"*": ["Read"]})


# =============================================================================
# Seed data
# =============================================================================


@pytest.fixture
def seed_price_list(db_session):
    """Create a test price list."""
    price_list = PriceList(
        id=uuid.uuid4(),
        name="Retail",
        code="RET",
        description="Standard retail prices",
        currency="USD",
        valid_from=date(2024, 1, 1),
    )
    db_session.add(price_list)
    db_session.commit()
    db_session.refresh(price_list)
    return price_list


@pytest.fixture
def seed_component(db_session, seed_price_list):
    """Create a version component on the test price list."""
    component = PriceListVersionComponent(
        id=uuid.uuid4(),
        price_list_id=seed_price_list.id,
        version_number=1,
        component_name="Base fee",
        component_type="fee",
        amount=Decimal("12.5000"),
        effective_date=date(2024, 1, 1),
    )
    db_session.add(component)
    db_session.commit()
    db_session.refresh(component)
    return component


@pytest.fixture
def seed_transactions(db_session):
    """Create three transactions A, B, C with amounts 10, 20, 30."""
    rows = []
    for reference, amount, status in (("A", 10, "pending"), ("B", 20, "settled"), ("C", 30, "settled")):
        transaction = Transaction(
            id=uuid.uuid4(),
            reference=reference,
            description=f"Transaction {reference}",
            amount=Decimal(amount),
            currency="USD",
            transaction_date=datetime(2024, 3, amount // 10, 12, 0, 0),
            status=status,
        )
        db_session.add(transaction)
        rows.append(transaction)
    db_session.commit()
    return rows
