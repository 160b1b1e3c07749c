"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is complete before create_all or autogenerate
"""

from book_catalog.models.book import Book  # noqa: F401
