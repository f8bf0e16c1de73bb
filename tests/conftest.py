# tests/conftest.py
import pytest
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from uuid import uuid4

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import alembic.command
import alembic.config

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from catalog_core.db.repositories.product_repository import ProductRepository
from catalog_core.db.repositories.store_repository import StoreRepository
from catalog_core.schemas.actor import Actor, Role
from catalog_core.services.category_service import CategoryService
from catalog_core.services.offer_service import OfferService

FIXED_NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create a migrated SQLite database for a single test."""
    database_url = f"sqlite:///{tmp_path / 'catalog_test.db'}"

    alembic_ini_path = project_root / "alembic.ini"
    alembic_cfg = alembic.config.Config(str(alembic_ini_path.resolve()))
    alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    alembic.command.upgrade(alembic_cfg, "head")

    engine = create_engine(database_url)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a test database session."""
    connection = db_engine.connect()
    transaction = connection.begin()

    Session = sessionmaker(autocommit=False, autoflush=False, bind=connection)
    session = Session()

    yield session

    # Roll back transaction to undo any changes
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def category_service(db_session):
    """Create a category service for testing."""
    return CategoryService(db_session)


@pytest.fixture
def offer_service(db_session, now):
    """Create an offer service with a frozen clock."""
    return OfferService(db_session, clock=lambda: now)


@pytest.fixture
def vendor():
    return Actor(id=uuid4(), role=Role.VENDOR)


@pytest.fixture
def other_vendor():
    return Actor(id=uuid4(), role=Role.VENDOR)


@pytest.fixture
def admin():
    return Actor(id=uuid4(), role=Role.ADMIN)


@pytest.fixture
def store(db_session, vendor):
    """A store owned by ``vendor``."""
    return StoreRepository(db_session).create(name="Jarir Riyadh", owner_user_id=vendor.id)


@pytest.fixture
def product(db_session):
    return ProductRepository(db_session).create(name="Galaxy S24")


@pytest.fixture
def offer_payload(store, product, now):
    """Valid create payload for ``store`` and ``product``."""
    return {
        "product_id": product.id,
        "store_id": store.id,
        "title": "Ramadan deal",
        "original_price": "100.00",
        "discounted_price": "80.00",
        "start_date": now - timedelta(days=1),
        "end_date": now + timedelta(days=13),
    }
