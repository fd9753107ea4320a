from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .commands import compare as cmd_compare
from .commands import dedupe as cmd_dedupe
from .commands import rank as cmd_rank
from .commands import sanitize as cmd_sanitize
from .config import Settings, load_settings
from .core.similarity import NameMatcher

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}

logger = logging.getLogger(__name__)


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fuzzy string and personal name similarity")
    parser.add_argument("--config", type=Path, help="Path to namesim.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare_parser = subparsers.add_parser("compare", help="Score two values and show the breakdown")
    compare_parser.add_argument("a")
    compare_parser.add_argument("b")
    compare_parser.add_argument(
        "--strings",
        action="store_true",
        help="Compare as plain strings instead of personal names (default: matching.mode)",
    )
    compare_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")

    sanitize_parser = subparsers.add_parser("sanitize", help="Print the canonical form of each name")
    sanitize_parser.add_argument("names", nargs="+")

    rank_parser = subparsers.add_parser("rank", help="Rank candidates by similarity to a query")
    rank_parser.add_argument("query")
    rank_parser.add_argument("candidates", nargs="+")
    rank_parser.add_argument("--limit", type=_positive_int, default=None, help="Maximum number of results")
    rank_parser.add_argument("--threshold", type=float, default=None, help="Override the match threshold")
    rank_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")

    dedupe_parser = subparsers.add_parser("dedupe", help="Find likely duplicates in a list of names")
    dedupe_parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="File with one name per line (default: stdin)",
    )
    dedupe_parser.add_argument("--threshold", type=float, default=None, help="Override the match threshold")
    dedupe_parser.add_argument(
        "--clusters",
        action="store_true",
        help="Group duplicates into clusters instead of listing pairs",
    )
    dedupe_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")
    return parser


def _make_matcher(settings: Settings, threshold: float | None) -> NameMatcher:
    matching = settings.matching
    return NameMatcher(
        threshold=matching.threshold if threshold is None else threshold,
        mode=matching.mode,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        match args.command:
            case "compare":
                cmd_compare.run(
                    args.a,
                    args.b,
                    strings=args.strings or settings.matching.mode == "strings",
                    json_output=args.json,
                )
            case "sanitize":
                cmd_sanitize.run(args.names)
            case "rank":
                cmd_rank.run(
                    _make_matcher(settings, args.threshold),
                    args.query,
                    args.candidates,
                    limit=settings.matching.limit if args.limit is None else args.limit,
                    json_output=args.json,
                )
            case "dedupe":
                cmd_dedupe.run(
                    _make_matcher(settings, args.threshold),
                    cmd_dedupe.read_names(args.file),
                    clusters=args.clusters,
                    json_output=args.json,
                )
            case _:
                parser.error("Unknown command")
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
