"""Infrastructure Layer — database engine lifecycle and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - SQLAlchemy exceptions leave this layer as core.errors.DatabaseError
"""
