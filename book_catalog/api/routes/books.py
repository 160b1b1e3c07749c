"""Book Routes — CRUD endpoints for the catalog, keyed by ISBN.

Invariants:
    - Write bodies are validated against the book JSON schema BEFORE any storage call
    - A missing, empty or unparseable write body is a validation failure (400), never a 404
    - Every response wraps records: {"book": ...}, {"books": [...]}, {"message": ...}
    - Routes contain no SQL; persistence goes through BookRepository

Design Decisions:
    - Body read from the raw request instead of a pydantic parameter: the schema
      validator owns the 400 response and its error list
    - DELETE of an unknown isbn is a 404, not a silent success
"""

import json
import logging

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from book_catalog.infrastructure.database import get_db
from book_catalog.core.domain_types import Isbn, BookRecord
from book_catalog.core.errors import BookValidationError
from book_catalog.core.repository_protocols import BookRepository
from book_catalog.core.validate_book import validate_book
from book_catalog.models.book import Book
from book_catalog.schemas.book import (
    BookEnvelope, BookListEnvelope, BookResponse, MessageResponse,
)
from book_catalog.services.book_repository import SqlBookRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


def get_book_repository(db: AsyncSession = Depends(get_db)) -> BookRepository:
    return SqlBookRepository(db)


async def read_book_payload(request: Request) -> BookRecord:
    """Parse the JSON body and run it through the book schema."""
    raw = await request.body()
    if not raw.strip():
        payload = {}
    else:
        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError):
            raise BookValidationError(["Request body must be valid JSON"])
    result = validate_book(payload)
    if not result.valid:
        raise BookValidationError(result.errors)
    return payload


def _envelope(book: Book) -> BookEnvelope:
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.post(
    "", response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    payload: BookRecord = Depends(read_book_payload),
    repo: BookRepository = Depends(get_book_repository),
):
    """Add a new book to the catalog."""
    book = await repo.create(payload)
    return _envelope(book)


@router.get("", response_model=BookListEnvelope)
async def list_books(
    limit: int | None = Query(None, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    repo: BookRepository = Depends(get_book_repository),
):
    """List books, optionally sliced with limit/offset."""
    books = await repo.list_all(limit=limit, offset=offset)
    return BookListEnvelope(
        books=[BookResponse.model_validate(b) for b in books],
    )


@router.get("/{isbn}", response_model=BookEnvelope)
async def get_book(
    isbn: str, repo: BookRepository = Depends(get_book_repository),
):
    """Get a single book by isbn."""
    book = await repo.get_by_isbn(Isbn(isbn))
    return _envelope(book)


@router.put("/{isbn}", response_model=BookEnvelope)
async def update_book(
    isbn: str,
    payload: BookRecord = Depends(read_book_payload),
    repo: BookRepository = Depends(get_book_repository),
):
    """Replace every field of an existing book. The body isbn becomes the new key."""
    book = await repo.update(Isbn(isbn), payload)
    return _envelope(book)


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_book(
    isbn: str, repo: BookRepository = Depends(get_book_repository),
):
    """Remove a book from the catalog."""
    await repo.delete_by_isbn(Isbn(isbn))
    return MessageResponse(message="Book deleted")
