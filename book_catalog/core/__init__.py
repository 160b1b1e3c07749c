"""Core Layer — pure domain logic: errors, schema, validation, boundary protocols.

Invariants:
    - No module in core/ performs IO
    - core/ never imports from services/, api/ or infrastructure/
"""
