"""
Command-line entry point for quote-it.

    quote-it "Stay hungry, stay foolish." -A "Steve Jobs" -d
    quote-it list -A "Steve Jobs" -a 01-01-2005 -b 12-31-2005

Bare quote text is shorthand for the add command, so the first line above
is the same as `quote-it add "Stay hungry, stay foolish." ...`.

This is the only place errors are caught: each one is logged as an audit
event, reported on stderr and mapped to an exit status.
"""

import argparse
import sys
from typing import Optional, Sequence

from quoteit import __version__
from quoteit.audit import AuditLogger, configure_logging
from quoteit.config import EnvironmentSetupError, QuoteItSettings, get_settings
from quoteit.models.quote import QuoteQuery
from quoteit.orchestrator import create_app_components
from quoteit.rendering import render_result
from quoteit.services.storage import StorageError
from quoteit.validation import UsageError, parse_date_arg, validate_query

PROG = "quote-it"
DESCRIPTION = "A quoting utility in the terminal"
ADD_COMMAND = "add"
LIST_COMMAND = "list"
COMMANDS = (ADD_COMMAND, LIST_COMMAND)

# Add options that consume the next token as their value
VALUE_OPTIONS = ("-A", "--author")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _date_arg(value: str):
    """argparse type for MM-DD-YYYY arguments."""
    try:
        return parse_date_arg(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=f'Quote text may be given without a command: {PROG} "Your quote here"',
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", title="commands")

    add_parser = subparsers.add_parser(
        ADD_COMMAND,
        help="Store a quote (the default)",
        description="Stores a quote on the device",
    )
    add_parser.add_argument("quote", nargs="?", help="The quote to store")
    add_parser.add_argument("-A", "--author", help="Specify an author")
    add_parser.add_argument(
        "-d", "--date", action="store_true", help="Stamp the quote with today's date"
    )

    list_parser = subparsers.add_parser(
        LIST_COMMAND,
        help="List stored quotes",
        description="Lists quotes stored on the device",
    )
    list_parser.add_argument("-A", "--author", help="Lists quotes made by specified author")
    list_parser.add_argument(
        "-b", "--before", type=_date_arg, metavar="MM-DD-YYYY",
        help="Lists quotes dated on or before this day",
    )
    list_parser.add_argument(
        "-o", "--on", type=_date_arg, metavar="MM-DD-YYYY",
        help="Lists quotes dated on this exact day",
    )
    list_parser.add_argument(
        "-a", "--after", type=_date_arg, metavar="MM-DD-YYYY",
        help="Lists quotes dated on or after this day",
    )
    return parser


def _is_bare_quote(argv: Sequence[str]) -> bool:
    """True if the first positional token is quote text rather than a command name."""
    expects_value = False
    for token in argv:
        if expects_value:
            expects_value = False
        elif token == "--":
            return True
        elif token in VALUE_OPTIONS:
            expects_value = True
        elif token == "-" or not token.startswith("-"):
            return token not in COMMANDS
    return False


def main(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[QuoteItSettings] = None,
) -> int:
    """
    Run one command and return the exit status.

    Argument errors exit through argparse (status 2) before the store is
    touched. Options placed before a command name are rejected, so
    `quote-it -d list` never stores the word "list".
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    if _is_bare_quote(argv):
        argv.insert(0, ADD_COMMAND)

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    audit_logger = AuditLogger()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == LIST_COMMAND:
        query = QuoteQuery(
            author=args.author,
            on=args.on,
            before=args.before,
            after=args.after,
        )
        # Reject bad date combinations before the store is even opened
        try:
            validate_query(query)
        except UsageError as e:
            return _usage_error(audit_logger, e)
        return _run(settings, audit_logger, lambda service: _list(service, query))

    if args.command is None or args.quote is None:
        parser.print_help()
        return EXIT_OK
    if not args.quote.strip():
        parser.error("quote text cannot be empty")

    return _run(
        settings,
        audit_logger,
        lambda service: service.add_quote(args.quote, author=args.author, stamp_date=args.date),
    )


def _list(service, query: QuoteQuery) -> None:
    result = service.list_quotes(query)
    print(render_result(result))


def _usage_error(audit_logger: AuditLogger, error: UsageError) -> int:
    audit_logger.log_usage_error(str(error))
    print(f"{PROG}: error: {error}", file=sys.stderr)
    return EXIT_USAGE


def _run(settings: QuoteItSettings, audit_logger: AuditLogger, command) -> int:
    """Open the store, run the command, close the store, map errors to a status."""
    try:
        service, storage = create_app_components(settings)
    except EnvironmentSetupError as e:
        audit_logger.log_environment_error(str(e))
        print(f"{PROG}: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except StorageError as e:
        audit_logger.log_storage_error(type(e).__name__, str(e))
        print(f"{PROG}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        with storage:
            command(service)
    except UsageError as e:
        return _usage_error(audit_logger, e)
    except StorageError as e:
        audit_logger.log_storage_error(type(e).__name__, str(e))
        print(f"{PROG}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
