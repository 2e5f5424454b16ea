"""
Filter Expressions

A small closed set of predicates the store backends know how to run:

- Equals(field, value)   field == value
- AtMost(field, value)   field <= value
- AtLeast(field, value)  field >= value
- AndFilter(clauses)     every clause holds

DESIGN DECISION: Filters are plain data. Each storage backend translates
them into its own native query form, so building a filter never depends
on how quotes are actually stored.
"""

from datetime import date
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from quoteit.models.quote import QuoteQuery
from quoteit.validation import validate_query


FilterField = Literal["author", "date"]
FilterValue = Union[str, date]


class Equals(BaseModel):
    """Field equals value."""
    model_config = ConfigDict(frozen=True)

    op: Literal["eq"] = "eq"
    field: FilterField
    value: FilterValue


class AtMost(BaseModel):
    """Field is less than or equal to value."""
    model_config = ConfigDict(frozen=True)

    op: Literal["lte"] = "lte"
    field: FilterField
    value: FilterValue


class AtLeast(BaseModel):
    """Field is greater than or equal to value."""
    model_config = ConfigDict(frozen=True)

    op: Literal["gte"] = "gte"
    field: FilterField
    value: FilterValue


Predicate = Union[Equals, AtMost, AtLeast]


class AndFilter(BaseModel):
    """Conjunction of two or more predicates."""
    model_config = ConfigDict(frozen=True)

    op: Literal["and"] = "and"
    clauses: tuple[Predicate, ...] = Field(..., min_length=2)


QuoteFilter = Union[Equals, AtMost, AtLeast, AndFilter]


def build_filter(query: QuoteQuery) -> Optional[QuoteFilter]:
    """
    Build the store filter for a list request.

    Validates the date constraints first. Predicates are emitted in a
    fixed order: author, date <= before, date == on, date >= after.

    Returns:
        None when there are no constraints (match everything), a bare
        predicate for a single constraint, an AndFilter otherwise.

    Raises:
        UsageError: If the date constraints are inconsistent
    """
    validate_query(query)

    clauses: list[Predicate] = []
    if query.author is not None:
        clauses.append(Equals(field="author", value=query.author))
    if query.before is not None:
        clauses.append(AtMost(field="date", value=query.before))
    if query.on is not None:
        clauses.append(Equals(field="date", value=query.on))
    if query.after is not None:
        clauses.append(AtLeast(field="date", value=query.after))

    # Some backends treat an empty conjunction differently from no filter
    if not clauses:
        return None
    if len(clauses) == 1:
        return clauses[0]
    return AndFilter(clauses=tuple(clauses))


def iter_predicates(quote_filter: QuoteFilter) -> tuple[Predicate, ...]:
    """Flatten a filter into its predicates."""
    if isinstance(quote_filter, AndFilter):
        return quote_filter.clauses
    return (quote_filter,)
