"""CLI entrypoint: text file -> pig latin text file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from piglatin.config import LOG_LEVELS, get_encoding, get_log_level, load_environment
from piglatin.pipeline import convert_file

logger = logging.getLogger("piglatin")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rewrite every word of a text file in pig latin.")
    parser.add_argument("source", type=Path, help="Text file to read")
    parser.add_argument("destination", type=Path, help="File to write (truncated if it exists)")
    parser.add_argument("--encoding", type=str, default=None, help="Text encoding for both files (default: PIGLATIN_ENCODING or utf-8)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Logging level (default: PIGLATIN_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    load_environment()

    logging.basicConfig(
        level=args.log_level or get_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    encoding = args.encoding or get_encoding()
    try:
        result = convert_file(args.source, args.destination, encoding=encoding)
    except (OSError, UnicodeError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    logger.info(
        "Converted %s: %s lines, %s tokens",
        result.source,
        result.lines,
        result.tokens,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
