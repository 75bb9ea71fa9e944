# ABOUTME: CLI entry point for the feed reader.
# ABOUTME: Provides subcommands: read, parsers.

import argparse
import logging
import sys
from datetime import datetime

import structlog

from feed_reader.config import get_settings
from feed_reader.exceptions import FeedError, FeedNotModified
from feed_reader.models import FeedContent
from feed_reader.reader import Selector, build_reader


def configure_logging() -> None:
    """Configure structlog for console or JSON output."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        timestamper = structlog.processors.TimeStamper(fmt="iso")
        renderer = structlog.processors.JSONRenderer()
    else:
        timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    # stdout carries feed output only.
    structlog.configure(
        processors=[timestamper, structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _selector_from_args(args: argparse.Namespace) -> Selector:
    if args.limit is not None:
        return Selector.limit_to(args.limit)
    if args.since:
        return Selector.since_moment(datetime.fromisoformat(args.since))
    return Selector.none()


def _print_feed(feed: FeedContent, as_json: bool) -> None:
    if as_json:
        print(feed.model_dump_json(indent=2))
        return

    print(feed.title)
    if feed.link:
        print(feed.link)
    print()
    for item in feed.items:
        updated = item.updated.isoformat() if item.updated else "-"
        print(f"[{updated}] {item.title}")
        if item.link:
            print(f"    {item.link}")


def cmd_read(args: argparse.Namespace) -> int:
    """Fetch one feed and print its items."""
    log = structlog.get_logger()
    log.info("cmd_read_start", url=args.url)

    try:
        selector = _selector_from_args(args)
    except ValueError as e:
        log.error("cmd_read_invalid_arguments", error=str(e))
        return 1

    reader = build_reader()
    try:
        feed = reader.fetch(args.url, selector)
    except FeedNotModified:
        log.info("cmd_read_not_modified", url=args.url)
        print("Feed not modified.")
        return 0
    except FeedError as e:
        log.error(
            "cmd_read_failed",
            url=args.url,
            kind=e.kind.value,
            status=e.status_code,
            error=e.message,
        )
        return 1
    finally:
        reader.transport.close()

    _print_feed(feed, args.json)
    log.info("cmd_read_complete", items=feed.item_count)
    return 0


def cmd_parsers(_args: argparse.Namespace) -> int:
    """List registered parsers in selection order."""
    reader = build_reader()
    for position, parser in enumerate(reader.parsers, start=1):
        print(f"{position}. {parser.name}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="feed_reader",
        description="Fetch and parse RSS/Atom feeds",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # read command
    read_parser = subparsers.add_parser(
        "read",
        help="Fetch a feed and print its items",
    )
    read_parser.add_argument("url", help="Feed URL")
    selection = read_parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--limit",
        type=int,
        help="Keep at most this many items",
    )
    selection.add_argument(
        "--since",
        type=str,
        help="Only items newer than this ISO 8601 timestamp",
    )
    read_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the feed as JSON",
    )

    # parsers command
    subparsers.add_parser(
        "parsers",
        help="List registered parsers in selection order",
    )

    return parser


def main() -> int:
    """Main entry point."""
    configure_logging()

    parser = create_parser()
    args = parser.parse_args()

    commands = {
        "read": cmd_read,
        "parsers": cmd_parsers,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
