"""Boundary Protocols — contracts between the router and persistence.

Invariants:
    - Routes depend on BookRepository, never on SQLAlchemy statements
    - Missing rows raise BookNotFoundError; duplicate keys raise BookConflictError

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async methods: implementations do IO
"""

from typing import Protocol, Sequence

from book_catalog.core.domain_types import Isbn, BookRecord
from book_catalog.models.book import Book


class BookRepository(Protocol):
    """Contract for book persistence, implemented by services.book_repository."""
    async def create(self, record: BookRecord) -> Book: ...
    async def list_all(
        self, limit: int | None = None, offset: int = 0,
    ) -> Sequence[Book]: ...
    async def get_by_isbn(self, isbn: Isbn) -> Book: ...
    async def update(self, isbn: Isbn, record: BookRecord) -> Book: ...
    async def delete_by_isbn(self, isbn: Isbn) -> None: ...
