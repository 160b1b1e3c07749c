"""Book JSON Schema — declared field constraints for submitted book records.

Invariants:
    - All eight book fields are required on create AND update (full replacement)
    - Text fields must be strings; pages and year must be integers; pages >= 1
    - Bounds mirror the books columns: isbn fits String(32), integers fit int4
    - 2020.0 is not an integer here (see validate_book)
    - Unknown fields are rejected (additionalProperties: false)

Design Decisions:
    - Plain dict schema over a pydantic model: bool and numeric strings are never
      coerced, so a mistyped field is always a 400
"""

ISBN_MAX_LENGTH = 32
INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647

BOOK_FIELDS: tuple[str, ...] = (
    "isbn", "amazon_url", "author", "language",
    "pages", "publisher", "title", "year",
)

BOOK_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://book-catalog/schemas/book.json",
    "title": "Book",
    "type": "object",
    "properties": {
        "isbn": {
            "type": "string", "minLength": 1, "maxLength": ISBN_MAX_LENGTH,
        },
        "amazon_url": {"type": "string", "format": "uri"},
        "author": {"type": "string"},
        "language": {"type": "string"},
        "pages": {"type": "integer", "minimum": 1, "maximum": INT4_MAX},
        "publisher": {"type": "string"},
        "title": {"type": "string"},
        "year": {"type": "integer", "minimum": INT4_MIN, "maximum": INT4_MAX},
    },
    "required": list(BOOK_FIELDS),
    "additionalProperties": False,
}
