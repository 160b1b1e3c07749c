"""Book Schemas — pydantic response models for the /books endpoints.

Invariants:
    - Responses always wrap records: {"book": ...} or {"books": [...]}
    - BookResponse reads straight from ORM rows (from_attributes)

Design Decisions:
    - Request bodies are NOT parsed with pydantic: they go through the JSON schema
      validator so the router controls the 400 response and its error list
"""

from pydantic import BaseModel, ConfigDict


class BookResponse(BaseModel):
    """Public representation of a book row."""
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookEnvelope(BaseModel):
    book: BookResponse


class BookListEnvelope(BaseModel):
    books: list[BookResponse]


class MessageResponse(BaseModel):
    message: str
