"""
Shared test fixtures.

Every test runs against a fresh in-memory SQLite database. The seed data
mirrors the boutique's reference fixtures: three clients and three sales
dated in 2023 (two for "Cliente 1", one for "Cliente 2").
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from boutique.config.database import Base, get_db
from boutique.core.auth.service import AuthService
from boutique.main import app
from boutique.shared.database.models import (
    Category, Client, Phone, Sell, User, UserRole, ROLE_ADMIN, ROLE_USER
)

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def today():
    """Reference day for service tests: 2023 dates are valid, 2025 dates are not."""
    return date(2024, 6, 30)


@pytest.fixture
def db():
    """Empty database session."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db):
    """Database with clients, phones, categories and sales."""
    db.add_all([
        Client(id=1, name="Cliente 1", address="Rua das Flores, 10"),
        Client(id=2, name="Cliente 2", address="Avenida Central, 200"),
        Client(id=3, name="Cliente 3", address="Travessa do Sol, 3"),
    ])
    db.add_all([
        Sell(id=1, client_id=1, date=date(2023, 1, 1)),
        Sell(id=2, client_id=1, date=date(2023, 1, 15)),
        Sell(id=3, client_id=2, date=date(2023, 5, 10)),
    ])
    db.add_all([
        Phone(id=1, number="11999990001", client_id=1),
        Phone(id=2, number="11999990002", client_id=1),
        Phone(id=3, number="11999990001", client_id=2),
    ])
    db.add_all([
        Category(id=1, description="Vestidos"),
        Category(id=2, description="Blusas"),
        Category(id=3, description="Acessórios"),
    ])
    db.commit()
    return db


def create_user(db, email: str, roles, password: str = "secret123", name: str = "Test User") -> User:
    user = User(
        name=name,
        email=email,
        password_hash=AuthService.get_password_hash(password),
        is_active=True,
    )
    user.role_entries = [UserRole(role=role) for role in roles]
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {AuthService.create_access_token(user)}"}


@pytest.fixture
def admin_user(db):
    return create_user(db, "admin@boutique.com", [ROLE_ADMIN], name="Admin")


@pytest.fixture
def regular_user(db):
    return create_user(db, "user@boutique.com", [ROLE_USER], name="Regular")


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def user_headers(regular_user):
    return auth_headers(regular_user)


@pytest.fixture
def client(db):
    """HTTP client bound to the test database."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
