"""Tests for terminal rendering."""

import pytest
from datetime import date

from quoteit.models.quote import QueryResult, Quote
from quoteit.rendering import SEPARATOR, render_quote, render_result


class TestRenderQuote:
    """Tests for single quote blocks."""

    def test_text_only(self):
        assert render_quote(Quote(text="Hello")) == '"Hello"\n------------'

    def test_with_author(self):
        quote = Quote(text="Stay hungry, stay foolish.", author="Steve Jobs")
        assert render_quote(quote) == (
            '"Stay hungry, stay foolish."\n  - Steve Jobs\n------------'
        )

    def test_with_author_and_date(self):
        """Test the date goes on the author line."""
        quote = Quote(text="Hi", author="Me", date=date(2024, 7, 4))
        assert render_quote(quote) == '"Hi"\n  - Me on 07-04-2024\n------------'

    def test_date_without_author(self):
        """Test the date goes on the text line when there is no author."""
        quote = Quote(text="Hi", date=date(2024, 7, 4))
        assert render_quote(quote) == '"Hi" on 07-04-2024\n------------'

    def test_inner_quotes_escaped(self):
        quote = Quote(text='She said "no"\nthen left')
        assert render_quote(quote).splitlines()[0] == r'"She said \"no\"\nthen left"'

    def test_separator(self):
        assert SEPARATOR == "------------"


class TestRenderResult:
    """Tests for whole listings."""

    def test_no_results_shows_description(self):
        result = QueryResult(
            data_found=False,
            result_count=0,
            query_description="No quotes found by Me",
        )
        assert render_result(result) == "No quotes found by Me"

    def test_each_block_preceded_by_blank_line(self):
        quotes = [Quote(text="One"), Quote(text="Two", author="B")]
        result = QueryResult(
            data_found=True,
            result_count=2,
            quotes=quotes,
            query_description="No quotes found",
        )
        assert render_result(result) == (
            '\n"One"\n------------\n\n"Two"\n  - B\n------------'
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
