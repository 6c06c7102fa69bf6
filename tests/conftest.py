"""Shared pytest fixtures for the Zelvix API tests."""

import os
import tempfile

# Settings are read at import time, so the environment comes first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="zelvix-uploads-")

import io

import pandas as pd
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from zelvix.core.database import enable_sqlite_foreign_keys, get_db
from zelvix.core.security import SecurityUtils
from zelvix.main import app
from zelvix.models import Base, Category, City, Country, Pincode, Product, State, User


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client bound to the app with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def country(db_session):
    record = Country(name="India", iso_code="IN", phone_code="+91")
    db_session.add(record)
    await db_session.commit()
    return record


@pytest.fixture
async def state(db_session, country):
    record = State(country_id=country.id, name="Karnataka", state_code="KA")
    db_session.add(record)
    await db_session.commit()
    return record


@pytest.fixture
async def city(db_session, state):
    record = City(state_id=state.id, name="Bengaluru")
    db_session.add(record)
    await db_session.commit()
    return record


@pytest.fixture
async def pincode(db_session, city):
    record = Pincode(city_id=city.id, pincode="560001", area_name="MG Road")
    db_session.add(record)
    await db_session.commit()
    return record


@pytest.fixture
async def category(db_session):
    record = Category(name="Hair Care", slug="hair-care")
    db_session.add(record)
    await db_session.commit()
    return record


@pytest.fixture
async def product(db_session, category):
    """Hair oil priced 1199 with an 899 offer price and two pack offers."""
    record = Product(
        name="Bhringraj Hair Oil",
        slug="bhringraj-hair-oil",
        sku="ZLX-HO-100",
        category_id=category.id,
        qty=50,
        price=1199,
        offer_price=899,
        qty_offers=[
            {"quantity": 1, "unit_price": 899, "label": "Single", "secondary_label": ""},
            {"quantity": 3, "unit_price": 799, "label": "Pack of 3", "secondary_label": "Most popular"},
        ],
        status="active",
    )
    db_session.add(record)
    await db_session.commit()
    return record


@pytest.fixture
def make_user(db_session):
    """Factory for users with a real bcrypt hash."""

    async def _make_user(email="asha@zelvix.in", password="secret1", role="user", status="not_block", name=None):
        user = User(
            name=name,
            email=email,
            password_hash=SecurityUtils.hash_password(password),
            role=role,
            status=status,
        )
        db_session.add(user)
        await db_session.commit()
        return user

    return _make_user


@pytest.fixture
def excel_file():
    """Build .xlsx bytes from a list of row dicts."""

    def _excel_file(rows, columns=None):
        buffer = io.BytesIO()
        pd.DataFrame(rows, columns=columns).to_excel(buffer, index=False, engine="openpyxl")
        return buffer.getvalue()

    return _excel_file
