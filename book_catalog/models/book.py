"""Book ORM — one row per catalog entry, keyed by ISBN.

Invariants:
    - isbn is the natural primary key (no surrogate id)
    - every column is NOT NULL
    - an update may rewrite isbn itself; the ORM issues UPDATE ... WHERE isbn = <old>
"""

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column

from book_catalog.core.book_schema import ISBN_MAX_LENGTH
from book_catalog.db.base import Base


class Book(Base):
    """Book entity."""
    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(
        String(ISBN_MAX_LENGTH), primary_key=True,
    )
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(Text, nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Book isbn={self.isbn!r} title={self.title!r}>"
