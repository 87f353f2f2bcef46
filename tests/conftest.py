import os

import bcrypt

TEST_USER = "sync-user"
TEST_PASSWORD = "estoesunaprueba"

os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_USER", TEST_USER)
os.environ.setdefault(
    "AUTH_PASSWORD_HASH",
    bcrypt.hashpw(TEST_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8"),
)
os.environ.setdefault("EMAIL_NOTIFICATIONS_ENABLED", "false")
os.environ.setdefault("AUDIT_LOG_TO_DB", "false")
os.environ.setdefault("DELETE_RECORD", "true")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_sync.db.base import Base, get_db
from catalog_sync.db.models import Catalog, City, Product
from catalog_sync.domain.audit import AuditLog
from catalog_sync.services.notifications import ErrorNotifier, get_notifier


class RecordingAuditLog(AuditLog):
    """Audit sink that keeps entries in memory."""

    def __init__(self):
        super().__init__(session_factory=None)
        self.entries = []

    async def record(self, entry):
        self.entries.append(entry)


class RecordingNotifier(ErrorNotifier):
    def __init__(self):
        self.enabled = True
        self.messages = []

    async def send_error_email(self, error_message: str) -> bool:
        self.messages.append(error_message)
        return True


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory):
    """Two cities, one catalog per city and two products."""
    async with session_factory() as session:
        bog = City(name="BOG", prefix="BO")
        med = City(name="MED", prefix="ME")
        session.add_all([bog, med])
        await session.flush()
        session.add_all(
            [
                Catalog(name="GENERAL", city_id=bog.id, is_active=1),
                Catalog(name="GENERAL", city_id=med.id, is_active=1),
                Product(reference="P-001", name="Arroz 500g", vat=0, is_active=1),
                Product(reference="P-002", name="Aceite 1L", vat=19, is_active=1),
            ]
        )
        await session.commit()
        return {"BOG": bog.id, "MED": med.id}


@pytest.fixture
def fetch_all(session_factory):
    async def _fetch_all(model):
        async with session_factory() as session:
            result = await session.execute(select(model))
            return result.scalars().all()

    return _fetch_all


@pytest.fixture
def count_rows(session_factory):
    async def _count_rows(model):
        async with session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count_rows


@pytest.fixture
def audit_log():
    return RecordingAuditLog()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def auth_headers():
    return {"username": TEST_USER, "password": TEST_PASSWORD}


@pytest.fixture
async def client(session_factory, notifier):
    from catalog_sync.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
