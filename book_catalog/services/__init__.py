"""Services Layer — IO-bound implementations of the core protocols.

Invariants:
    - Services own their SQL; routes never build statements
"""
