"""Domain Types — named types for the values that cross the repository boundary.

Invariants:
    - Isbn is the only identity type; never a bare str in repository signatures
    - BookRecord is a validated mapping of the eight book fields
"""

from typing import Any, NewType


Isbn = NewType("Isbn", str)

BookRecord = dict[str, Any]
