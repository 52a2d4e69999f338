from __future__ import annotations

import argparse
import logging
import sys

from tmdb_data_provider.config import MissingApiKeyError, resolve_config
from tmdb_data_provider.integrations.tmdb.client import TmdbClientInitError
from tmdb_data_provider.output import SerializationError, render_results_json
from tmdb_data_provider.search.multi_search import SearchRequestError, search

logger = logging.getLogger(__name__)

PROG = "tmdbclientdataprovider"


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return parsed


def _build_parser() -> tuple[argparse.ArgumentParser, dict[str, argparse.ArgumentParser]]:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="CLI app to fetch data from TMDB.",
    )
    parser.add_argument("--api-key", default=None, help="TMDB API key (falls back to TMDB_API_KEY).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    parser.add_argument(
        "--image-timeout",
        type=_positive_float,
        default=None,
        help="Timeout in seconds for each poster download (default: no timeout).",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="Number of concurrent poster downloads (default: 1).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    search_parser = subparsers.add_parser(
        "search",
        help="Search for a movie or TV show on TMDB.",
        description="Search for a movie or TV show on TMDB.",
    )
    search_parser.add_argument("query", nargs="+", help="Query terms, joined with single spaces.")

    help_parser = subparsers.add_parser("help", help="Show help for a command.")
    help_parser.add_argument("topic", nargs="?", default=None, help="Command to describe.")

    return parser, {"search": search_parser, "help": help_parser}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _write_utf8(text: str) -> None:
    """Write UTF-8 bytes to stdout regardless of the locale encoding of the text layer."""

    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(text.encode("utf-8"))
    buffer.flush()


def _print_help(parser: argparse.ArgumentParser, commands: dict[str, argparse.ArgumentParser], topic: str | None) -> int:
    if topic is None:
        parser.print_help()
        return 0
    command = commands.get(topic)
    if command is None:
        print(f"Unknown help topic {topic!r}", file=sys.stderr)
        return 1
    command.print_help()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser, commands = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.verbose)

    if args.command == "help":
        return _print_help(parser, commands, args.topic)

    try:
        config = resolve_config(
            args.api_key,
            image_timeout_seconds=args.image_timeout,
            image_workers=args.workers,
        )
    except MissingApiKeyError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        results = search(config, args.query)
    except TmdbClientInitError as exc:
        print(f"Error initializing TMDB client: {exc}", file=sys.stderr)
        return 1
    except SearchRequestError as exc:
        print(f"Error searching TMDB: {exc}", file=sys.stderr)
        return 1

    try:
        output = render_results_json(results)
    except SerializationError as exc:
        print(exc, file=sys.stderr)
        return 1

    logger.debug("Printing %d results", len(results))
    _write_utf8(output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
