"""
Test configuration and fixtures.
"""
import os
import pytest
from typing import Generator
from sqlalchemy.orm import Session, sessionmaker
from fastapi.testclient import TestClient

# Set test database URL before importing app
os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL", "sqlite:///./flavorfare_test.db")

from flavorfare.main import app
from flavorfare.db.base import Base
from flavorfare.db.session import build_engine, get_db
from flavorfare.models.restaurant import Restaurant  # noqa: F401  registers the table
from flavorfare.repositories.restaurant_repository import SqlAlchemyRestaurantRepository
from flavorfare.schemas.restaurant import RestaurantCreate, RestaurantUpdate
from flavorfare.services.restaurant_service import RestaurantService

TEST_DATABASE_URL = os.environ["DATABASE_URL"]
engine = build_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Create a database session for the test.

    Tables are created fresh for every test and dropped afterwards, so
    each test starts with an empty store and ids counting from 1.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database session override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def service(db: Session) -> RestaurantService:
    """RestaurantService wired to the SQLAlchemy repository."""
    return RestaurantService(SqlAlchemyRestaurantRepository(db))


@pytest.fixture
def restaurant_a() -> RestaurantCreate:
    return RestaurantCreate(
        name="Trattoria Roma",
        address="Gedimino pr. 1, Vilnius",
        phone_number="+37060000001",
        description="Wood-fired pizza and fresh pasta",
    )


@pytest.fixture
def restaurant_b() -> RestaurantCreate:
    return RestaurantCreate(
        name="Sushi Bar Koi",
        address="Pilies g. 12, Vilnius",
    )


@pytest.fixture
def restaurant_update() -> RestaurantUpdate:
    return RestaurantUpdate(
        name="Trattoria Roma Nuova",
        address="Vokieciu g. 4, Vilnius",
        phone_number="+37060000002",
        description="Now with a terrace",
    )
