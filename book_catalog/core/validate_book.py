"""Book Validation — runs submitted records through the book JSON schema.

Invariants:
    - validate_book is PURE: never raises on bad input, returns a ValidationResult
    - errors are sorted by field path so responses are deterministic
    - valid is True exactly when errors is empty
    - "integer" means a JSON integer literal: 2020.0 is rejected, not stored as 2020
"""

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator, FormatChecker, validators

from book_catalog.core.book_schema import BOOK_SCHEMA


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one submitted record."""
    valid: bool
    errors: list[str] = field(default_factory=list)


def _is_strict_integer(checker, instance) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine(
        "integer", _is_strict_integer,
    ),
)

_validator = StrictIntegerValidator(BOOK_SCHEMA, format_checker=FormatChecker())


def _format_error(error) -> str:
    """Prefix the message with its field path (e.g. 'pages: 0 is less than ...')."""
    path = ".".join(str(p) for p in error.absolute_path)
    return f"{path}: {error.message}" if path else error.message


def validate_book(record: Any) -> ValidationResult:
    """Check a record against BOOK_SCHEMA."""
    errors = sorted(
        _validator.iter_errors(record),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    messages = [_format_error(e) for e in errors]
    return ValidationResult(valid=not messages, errors=messages)
