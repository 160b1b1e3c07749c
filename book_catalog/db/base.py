"""SQLAlchemy Declarative Base — shared base class for the catalog ORM models.

Invariants:
    - Every mapped table inherits from Base
    - Base.metadata is what alembic and the test fixtures create tables from
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Book Catalog ORM models."""
    pass
