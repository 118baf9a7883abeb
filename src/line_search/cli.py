"""Command line entry point: index a text file and print its best matching lines."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

from line_search.config import Settings
from line_search.observability import configure_logging, init_tracing
from line_search.search.engine import SearchEngine


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-search",
        description="Rank the lines of a text file against a free-text query using TF-IDF",
    )
    parser.add_argument("file", help="Text file to index, or '-' to read standard input")
    parser.add_argument("query", help="Free-text query")
    parser.add_argument(
        "-n",
        "--results",
        type=int,
        default=None,
        help="Maximum number of lines to print (default: LINE_SEARCH_DEFAULT_RESULTS_COUNT or 10)",
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Prefix each line with its relevance score",
    )
    parser.add_argument("--log-level", help="Override LINE_SEARCH_LOG_LEVEL")
    log_format = parser.add_mutually_exclusive_group()
    log_format.add_argument(
        "--json-logs",
        dest="json_logs",
        action="store_const",
        const=True,
        default=None,
        help="Emit structured JSON logs (default: LINE_SEARCH_JSON_LOGS)",
    )
    log_format.add_argument(
        "--plain-logs",
        dest="json_logs",
        action="store_const",
        const=False,
        help="Emit human-readable log lines",
    )
    return parser


def _validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.results is not None and args.results < 0:
        parser.error("--results must be >= 0")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    _validate_args(parser, args)

    try:
        settings = Settings()
    except ValueError as exc:
        configure_logging("INFO", json_output=False)
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(
        args.log_level or settings.log_level,
        json_output=settings.json_logs if args.json_logs is None else args.json_logs,
    )
    provider = init_tracing(settings.service_name) if settings.tracing_enabled else None
    try:
        return _run(args, settings)
    finally:
        if provider is not None:
            # flushes batched spans before the process exits
            provider.shutdown()


def _run(args: argparse.Namespace, settings: Settings) -> int:
    try:
        text = _read_text(args.file)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 1
    except UnicodeDecodeError as exc:
        logger.error("%s is not valid UTF-8: %s", args.file, exc)
        return 1

    engine = SearchEngine(settings)
    engine.build_index(text)
    results_count = settings.default_results_count if args.results is None else args.results
    results = engine.search_ranked(args.query, results_count)

    for entry in results:
        if args.scores:
            print(f"{entry.score:.6f}\t{entry.text}")
        else:
            print(entry.text)

    stats = engine.stats()
    logger.info(
        "Matched %d of %d indexed lines",
        len(results),
        stats.indexed_line_count,
        extra={"vocabulary_size": stats.vocabulary_size},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
