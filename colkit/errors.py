from __future__ import annotations


class InvalidFilterPattern(ValueError):
    """Raised when the --filter expression is not a valid regular expression."""


class InvalidColumnSpec(ValueError):
    """Raised for a column spec that is non-numeric, zero, or a malformed range."""
