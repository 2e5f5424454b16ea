"""
Input Validation

Everything here runs before the store is opened or queried. A request
that fails validation never reaches storage, so nothing is ever
partially applied.

Two kinds of checks:
- Date arguments must be MM-DD-YYYY and name a real calendar day
- Date constraints on a list request must be consistent with each other

IMPORTANT: Validation NEVER silently fixes input.
It reports the problem and the command stops.
"""

from datetime import date, datetime
from typing import Optional

from quoteit.models.quote import DATE_FORMAT, DATE_PATTERN, QuoteQuery


class UsageError(Exception):
    """Base exception for invalid command usage."""
    pass


class InvalidDateError(UsageError):
    """A date argument is not a valid MM-DD-YYYY calendar day."""
    pass


class ConflictingDateError(UsageError):
    """An exact date was given together with a range bound."""
    pass


class InvertedRangeError(UsageError):
    """The before bound is earlier than the after bound."""
    pass


def parse_date_arg(value: str) -> date:
    """
    Parse a MM-DD-YYYY argument into a calendar date.

    The shape is checked first so that strptime's leniency (single-digit
    months, missing zero padding) never gets a chance to accept it.

    Raises:
        InvalidDateError: If the value is malformed or not a real day
    """
    if not DATE_PATTERN.match(value):
        raise InvalidDateError(
            f"Invalid date '{value}': expected MM-DD-YYYY"
        )
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid date '{value}': {e}") from e


def validate_date_constraints(
    on: Optional[date],
    before: Optional[date],
    after: Optional[date],
) -> None:
    """
    Check that a set of date constraints can be turned into a filter.

    Rules:
    - An exact date excludes both range bounds
    - With both bounds, before must not precede after (equal is fine)

    Raises:
        ConflictingDateError: on combined with before or after
        InvertedRangeError: before < after
    """
    if on is not None and (before is not None or after is not None):
        raise ConflictingDateError(
            "Cannot specify an exact date alongside a range bound"
        )

    if before is not None and after is not None and before < after:
        raise InvertedRangeError(
            "Invalid range: before precedes after"
        )


def validate_query(query: QuoteQuery) -> None:
    """Validate the date constraints of a list request."""
    validate_date_constraints(query.on, query.before, query.after)
