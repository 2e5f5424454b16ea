"""Input validation package."""

from quoteit.validation.validator import (
    ConflictingDateError,
    InvalidDateError,
    InvertedRangeError,
    UsageError,
    parse_date_arg,
    validate_date_constraints,
    validate_query,
)

__all__ = [
    "ConflictingDateError",
    "InvalidDateError",
    "InvertedRangeError",
    "UsageError",
    "parse_date_arg",
    "validate_date_constraints",
    "validate_query",
]
