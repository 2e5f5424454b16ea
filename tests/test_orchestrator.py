"""Tests for the add and list flows of QuoteService."""

import pytest
from datetime import date
from unittest.mock import patch

from quoteit.config import QuoteItSettings
from quoteit.models.quote import Quote, QuoteQuery
from quoteit.orchestrator import QuoteService, create_app_components
from quoteit.queries import CREATE_HINT
from quoteit.rendering import render_result
from quoteit.services.storage import (
    InMemoryQuoteStorage,
    SQLiteQuoteStorage,
    StorageError,
)
from quoteit.validation import ConflictingDateError, InvertedRangeError


TODAY = date(2024, 3, 10)


@pytest.fixture
def storage():
    return InMemoryQuoteStorage()


@pytest.fixture
def service(storage):
    return QuoteService(storage=storage, today=lambda: TODAY)


class FailingStorage(InMemoryQuoteStorage):
    """Store whose every operation fails."""

    def insert(self, quote):
        raise StorageError("disk full")

    def find(self, quote_filter=None):
        raise StorageError("read failed")


class TestAddQuote:
    """Tests for the add flow."""

    def test_add_without_date(self, service, storage):
        """Test the documented example record."""
        service.add_quote("Stay hungry, stay foolish.", author="Steve Jobs", stamp_date=False)
        assert storage.documents == [
            {"text": "Stay hungry, stay foolish.", "author": "Steve Jobs"}
        ]

    def test_add_with_stamp(self, service):
        """Test the stamp flag tags the quote with today's date."""
        quote = service.add_quote("Carpe diem.", stamp_date=True)
        assert quote.date == TODAY

    @pytest.mark.parametrize("author", [None, "Horace"])
    @pytest.mark.parametrize("stamp", [False, True])
    def test_add_then_list(self, service, author, stamp):
        """Test adding then listing yields exactly the new record."""
        service.add_quote("Carpe diem.", author=author, stamp_date=stamp)

        result = service.list_quotes()
        assert result.result_count == 1
        (quote,) = result.quotes
        assert quote.text == "Carpe diem."
        assert quote.author == author
        assert (quote.date is not None) == stamp

    def test_stamped_date_displays_as_today(self, storage):
        """Test a stamped quote renders with the real local date."""
        service = QuoteService(storage=storage)
        service.add_quote("Now.", stamp_date=True)
        rendered = render_result(service.list_quotes())
        assert f" on {date.today().strftime('%m-%d-%Y')}" in rendered

    def test_empty_text_rejected(self, service, storage):
        """Test an empty quote is never written."""
        with pytest.raises(ValueError):
            service.add_quote("")
        assert storage.documents == []

    def test_storage_failure_propagates(self):
        """Test insert failures reach the caller."""
        service = QuoteService(storage=FailingStorage())
        with pytest.raises(StorageError, match="disk full"):
            service.add_quote("Lost")


class TestListQuotes:
    """Tests for the list flow."""

    @pytest.fixture(autouse=True)
    def seed(self, service):
        service.add_quote("Stay hungry, stay foolish.", author="Steve Jobs")

    def test_list_by_author(self, service):
        """Test the documented author listing."""
        result = service.list_quotes(QuoteQuery(author="Steve Jobs"))
        assert render_result(result) == (
            '\n"Stay hungry, stay foolish."\n  - Steve Jobs\n------------'
        )

    def test_list_on_unmatched_day(self, service):
        """Test the documented no-match message."""
        result = service.list_quotes(QuoteQuery(on=date(2030, 1, 1)))
        assert render_result(result) == "No quotes found on 01-01-2030"

    def test_inverted_range_touches_nothing(self, service, storage):
        """Test the documented inverted range is rejected before the store."""
        with patch.object(storage, "find", wraps=storage.find) as find:
            with pytest.raises(InvertedRangeError):
                service.list_quotes(QuoteQuery(before=date(2000, 1, 1), after=date(2030, 1, 1)))
        find.assert_not_called()

    def test_on_with_bound_touches_nothing(self, service, storage):
        """Test on plus a bound is rejected before the store."""
        with patch.object(storage, "find", wraps=storage.find) as find:
            with pytest.raises(ConflictingDateError):
                service.list_quotes(QuoteQuery(on=date(2024, 1, 1), after=date(2023, 1, 1)))
        find.assert_not_called()

    def test_equal_bounds_allowed(self, service):
        """Test a one-day range is valid."""
        result = service.list_quotes(QuoteQuery(before=TODAY, after=TODAY))
        assert result.data_found is False

    def test_unconstrained_listing_has_no_hint(self, service):
        """Test records are printed and no hint is shown."""
        rendered = render_result(service.list_quotes())
        assert "Stay hungry" in rendered
        assert CREATE_HINT not in rendered

    def test_storage_failure_propagates(self):
        """Test query failures reach the caller with no result."""
        service = QuoteService(storage=FailingStorage())
        with pytest.raises(StorageError, match="read failed"):
            service.list_quotes()


class TestCreateAppComponents:
    """Tests for wiring the real components."""

    def test_creates_store_on_first_use(self, tmp_path):
        """Test directory and file are created, then the store works."""
        settings = QuoteItSettings(data_dir=tmp_path / "journal")
        service, storage = create_app_components(settings)
        with storage:
            assert isinstance(storage, SQLiteQuoteStorage)
            service.add_quote("First!")
            assert [q.text for q in service.list_quotes().quotes] == ["First!"]

        assert (tmp_path / "journal" / "quotes.db").is_file()

    def test_existing_store_reused(self, tmp_path):
        """Test a second run sees the first run's quotes."""
        settings = QuoteItSettings(data_dir=tmp_path)
        service, storage = create_app_components(settings)
        with storage:
            service.add_quote("Kept", author="Me")

        service, storage = create_app_components(settings)
        with storage:
            assert service.list_quotes(QuoteQuery(author="Me")).quotes == [
                Quote(text="Kept", author="Me")
            ]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
