"""
Core Data Models for quote-it

These models define the schemas for everything flowing between the CLI,
the service and the store. They are designed to:
1. Reject empty quotes at construction time
2. Stay immutable once created
3. Round-trip through the store's document form

DESIGN DECISION: Dates are plain calendar dates (year, month, day).
No time zones, no instants, no midnight normalization. What the user
stamps is exactly what gets stored, compared and displayed.
"""

import re
import datetime as dt
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# Display and argument format for calendar dates
DATE_FORMAT = "%m-%d-%Y"
DATE_PATTERN = re.compile(r"^\d{2}-\d{2}-\d{4}$")


def format_date(value: dt.date) -> str:
    """Format a calendar date as MM-DD-YYYY."""
    return value.strftime(DATE_FORMAT)


# =============================================================================
# QUOTE RECORD
# =============================================================================

class Quote(BaseModel):
    """
    A single journal entry.

    CRITICAL: Quotes are append-only. There is no update path, so the
    model is frozen and text can only be set once.
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        min_length=1,
        description="The quote body"
    )
    author: Optional[str] = Field(
        default=None,
        description="Who said it, stored exactly as given"
    )
    date: Optional[dt.date] = Field(
        default=None,
        description="Calendar day the quote was stamped with"
    )

    @field_validator('text')
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        """A quote made only of whitespace is still empty."""
        if not v.strip():
            raise ValueError("Quote text cannot be empty")
        return v

    def to_document(self) -> dict[str, Any]:
        """
        Convert to the store's document form.

        Absent optional fields are left out of the document entirely.
        """
        document: dict[str, Any] = {"text": self.text}
        if self.author is not None:
            document["author"] = self.author
        if self.date is not None:
            document["date"] = self.date.isoformat()
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Quote":
        """
        Build a Quote from a stored document.

        Missing optional fields default to absent. Unknown keys are ignored.

        Raises:
            ValueError: If the document is not a valid quote
        """
        if not isinstance(document, dict):
            raise ValueError(f"Expected a document object, got {type(document).__name__}")

        stored_date = document.get("date")
        if stored_date is not None:
            if not isinstance(stored_date, str):
                raise ValueError(f"Malformed stored date: {stored_date!r}")
            stored_date = dt.date.fromisoformat(stored_date)

        return cls(
            text=document.get("text"),
            author=document.get("author"),
            date=stored_date,
        )


# =============================================================================
# LIST REQUEST
# =============================================================================

class QuoteQuery(BaseModel):
    """
    Constraints for listing quotes.

    Holds the raw request only. Whether the date constraints make sense
    together is decided by the validation module, before any filter is
    built.
    """
    model_config = ConfigDict(frozen=True)

    author: Optional[str] = None
    on: Optional[dt.date] = None
    before: Optional[dt.date] = None
    after: Optional[dt.date] = None

    @property
    def has_constraints(self) -> bool:
        """Check if any constraint was given at all."""
        return any(
            value is not None
            for value in (self.author, self.on, self.before, self.after)
        )


class QueryResult(BaseModel):
    """
    Result of executing a QuoteQuery.

    query_description is the human-readable summary shown to the user
    when nothing matched.
    """

    data_found: bool = Field(
        ...,
        description="Was any quote found?"
    )
    result_count: int = Field(
        ge=0,
        description="Number of matching quotes"
    )
    quotes: list[Quote] = Field(
        default_factory=list,
        description="Matching quotes in store order"
    )
    query_description: str = Field(
        ...,
        description="Human-readable description of what was queried"
    )
