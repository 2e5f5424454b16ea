"""
Terminal rendering for quotes.

Output only. Nothing here is ever parsed back.
"""

import json

from quoteit.models.quote import QueryResult, Quote, format_date


SEPARATOR = "-" * 12


def render_quote(quote: Quote) -> str:
    """
    Render one quote as a text block.

        "Stay hungry, stay foolish."
          - Steve Jobs on 04-01-2005
        ------------

    The date goes on the author line, or on the text line when there is
    no author.
    """
    # JSON string escaping gives us the quotes and escapes inner ones
    rendered = json.dumps(quote.text, ensure_ascii=False)
    if quote.author is not None:
        rendered += f"\n  - {quote.author}"
    if quote.date is not None:
        rendered += f" on {format_date(quote.date)}"
    rendered += f"\n{SEPARATOR}"
    return rendered


def render_result(result: QueryResult) -> str:
    """
    Render a list result for the terminal.

    Every quote block is preceded by a blank line. With no matches the
    result's description is shown instead.
    """
    if not result.data_found:
        return result.query_description
    return "\n".join(f"\n{render_quote(quote)}" for quote in result.quotes)
