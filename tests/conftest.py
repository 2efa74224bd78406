"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. StaticPool keeps the single
connection alive so the TestClient's worker thread sees the same tables.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.security import get_password_hash
from app.db.session import create_db_and_tables, enable_sqlite_foreign_keys, get_session
from app.main import app
from app.models.category import Category
from app.models.product import Product
from app.models.user import User

# Hashing with argon2 is slow; hash once for every user the factories create
DEFAULT_PASSWORD = "s3cret-pass"
DEFAULT_PASSWORD_HASH = get_password_hash(DEFAULT_PASSWORD)


@pytest.fixture
def password():
    """Plain-text password of every user built by make_user"""
    return DEFAULT_PASSWORD


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    # No context manager: the lifespan hook would create tables on the real engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    counter = {"n": 0}

    def _make_user(username=None, email=None):
        counter["n"] += 1
        n = counter["n"]
        user = User(
            username=username or f"user{n}",
            email=email or f"user{n}@example.com",
            password_hash=DEFAULT_PASSWORD_HASH,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_category(session):
    def _make_category(name="Laptops", description=None):
        category = Category(name=name, description=description)
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    return _make_category


@pytest.fixture
def make_product(session):
    def _make_product(
        name="Test Product",
        price=10.0,
        stock_count=10,
        is_available=True,
        category="Peripherals",
        category_id=None,
    ):
        product = Product(
            name=name,
            category=category,
            price=price,
            stock_count=stock_count,
            is_available=is_available,
            category_id=category_id,
        )
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make_product
