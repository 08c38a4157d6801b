# src/docgrep/cli.py
from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Sequence
from pathlib import Path

from .constants import VERBOSITY_INDICES, VERBOSITY_PATH, VERBOSITY_TEXT
from .core import run
from .types import ScanConfig
from .utils.logging import get_logger


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from e
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {depth}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="docgrep",
        description="Search .odt/.doc/.docx documents for a regular expression.",
    )
    p.add_argument("pattern", help="Regular expression (^ and $ anchor per line)")
    p.add_argument(
        "--path",
        type=Path,
        default=Path("."),
        help="Directory to search (default: current directory)",
    )
    p.add_argument(
        "--depth",
        type=_depth,
        default=None,
        help="Maximum directory levels below --path to descend (default: unlimited)",
    )
    p.add_argument(
        "--verbosity",
        "-v",
        type=int,
        choices=[VERBOSITY_PATH, VERBOSITY_INDICES, VERBOSITY_TEXT],
        default=VERBOSITY_PATH,
        help="1 = path, 2 = path + paragraph indices, 3 = path + paragraphs",
    )
    p.add_argument(
        "--ignore-case",
        "-i",
        action="store_true",
        help="Case-insensitive matching",
    )
    p.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Log skipped files and their reasons to stderr (use --debug / --no-debug).",
    )
    return p


def main(argv: Sequence[str] | None = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    get_logger().setLevel(logging.DEBUG if args.debug else logging.INFO)

    # Everything below must be valid before the filesystem is touched
    try:
        config = ScanConfig.from_args(
            args.pattern,
            root_path=args.path,
            max_depth=args.depth,
            verbosity=args.verbosity,
            ignore_case=args.ignore_case,
        )
    except re.error as e:
        p.error(f"invalid pattern {args.pattern!r}: {e}")
    if not args.path.exists():
        p.error(f"path not found: {args.path}")

    for response in run(config):
        print(response, flush=True)


if __name__ == "__main__":
    main()
