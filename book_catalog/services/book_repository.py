"""SQL Book Repository — all reads and writes against the books table.

Invariants:
    - One repository per AsyncSession; every write commits before returning
    - Missing rows raise BookNotFoundError, key collisions raise BookConflictError
    - A failed write is rolled back before the error leaves the repository
    - Values the column types reject (DataError) are a 400, not a storage fault

Design Decisions:
    - Existence checked with session.get() before insert/rename: a duplicate key is
      reported as a conflict without relying on driver-specific IntegrityError text.
      IntegrityError is still mapped for the race where two requests insert at once
    - Update mutates the mapped row in place, including isbn (ORM primary key switch)
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from book_catalog.core.domain_types import Isbn, BookRecord
from book_catalog.core.errors import (
    BookConflictError, BookNotFoundError, BookValidationError,
)
from book_catalog.models.book import Book

logger = logging.getLogger(__name__)


class SqlBookRepository:
    """BookRepository backed by a SQLAlchemy AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, record: BookRecord) -> Book:
        isbn = record["isbn"]
        if await self._db.get(Book, isbn) is not None:
            raise BookConflictError(isbn)
        book = Book(**record)
        self._db.add(book)
        await self._commit(isbn)
        await self._db.refresh(book)
        logger.info(f"Book {isbn} created", extra={"isbn": isbn})
        return book

    async def list_all(
        self, limit: int | None = None, offset: int = 0,
    ) -> Sequence[Book]:
        query = select(Book).order_by(Book.title, Book.isbn).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self._db.execute(query)
        return result.scalars().all()

    async def get_by_isbn(self, isbn: Isbn) -> Book:
        book = await self._db.get(Book, isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        return book

    async def update(self, isbn: Isbn, record: BookRecord) -> Book:
        book = await self.get_by_isbn(isbn)
        new_isbn = record.get("isbn", isbn)
        if new_isbn != isbn and await self._db.get(Book, new_isbn) is not None:
            raise BookConflictError(new_isbn)
        for name, value in record.items():
            setattr(book, name, value)
        await self._commit(new_isbn)
        await self._db.refresh(book)
        logger.info(f"Book {isbn} updated", extra={"isbn": new_isbn})
        return book

    async def delete_by_isbn(self, isbn: Isbn) -> None:
        book = await self.get_by_isbn(isbn)
        await self._db.delete(book)
        await self._db.commit()
        logger.info(f"Book {isbn} deleted", extra={"isbn": isbn})

    async def _commit(self, isbn: str) -> None:
        """Commit, mapping constraint violations to client errors."""
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(f"Integrity error writing book {isbn}: {e.orig}")
            raise BookConflictError(isbn) from e
        except DataError as e:
            await self._db.rollback()
            logger.warning(f"Data error writing book {isbn}: {e.orig}")
            raise BookValidationError(
                ["Value out of range for the books table"],
            ) from e
