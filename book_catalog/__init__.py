"""Book Catalog — REST API for a catalog of books keyed by ISBN.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
