"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager swapped for one bound to the test engine, so get_db and the
      readiness probe both hit the test database
    - seed_book inserts 0691161206 before the test and hands its payload back;
      nothing is shared between tests

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Assertions read through fresh sessions (fetch_book) so the identity map of
      another session never masks what the request committed
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from book_catalog.db.base import Base
from book_catalog.db.session import create_session_factory
from book_catalog.infrastructure.database import DatabaseSessionManager
import book_catalog.infrastructure.database as db_module
import book_catalog.models  # noqa: F401
from book_catalog.models.book import Book
from book_catalog.main import app


@pytest.fixture
def book_payload():
    return {
        "isbn": "0691161206",
        "amazon_url": "http://a.co/dugYeC5",
        "author": "Michelle Obama",
        "language": "English",
        "pages": 448,
        "publisher": "Crown Publishing Group",
        "title": "Becoming",
        "year": 2018,
    }


@pytest.fixture
def new_book_payload():
    return {
        "isbn": "0582375253",
        "amazon_url": "http://a.co/eobPtX3",
        "author": "Barack Obama",
        "language": "english",
        "pages": 768,
        "publisher": "Crown Publishing Group",
        "title": "A Promised Land",
        "year": 2020,
    }


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(engine=test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine):
    """FastAPI test client wired to the test database."""
    original_manager = db_module.db_manager
    db_module.db_manager = DatabaseSessionManager.from_engine(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_book(test_session_factory, book_payload):
    """Insert the 'Becoming' row and return its payload."""
    async with test_session_factory() as session:
        session.add(Book(**book_payload))
        await session.commit()
    return book_payload


@pytest.fixture
def fetch_book(test_session_factory):
    """Read a row through a fresh session; None when absent."""
    async def _fetch(isbn: str) -> dict | None:
        async with test_session_factory() as session:
            book = await session.get(Book, isbn)
            if book is None:
                return None
            return {
                column.name: getattr(book, column.name)
                for column in Book.__table__.columns
            }
    return _fetch


@pytest.fixture
def count_books(test_session_factory):
    async def _count() -> int:
        from sqlalchemy import func, select
        async with test_session_factory() as session:
            result = await session.execute(select(func.count()).select_from(Book))
            return result.scalar_one()
    return _count
