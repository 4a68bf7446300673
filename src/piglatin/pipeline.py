"""File-to-file pig latin conversion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, Tuple

from piglatin.config import DEFAULT_ENCODING
from piglatin.transform import transform_line_counted

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


@dataclass
class ConversionResult:
    """Summary of a finished file conversion."""

    source: Path
    destination: Path
    lines: int
    tokens: int


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of an open text stream without their terminators."""
    for line in stream:
        yield line.rstrip("\r\n")


def convert_stream(lines: Iterable[str], sink: IO[str]) -> Tuple[int, int]:
    """Write the pig latin form of each line to ``sink``.

    Returns the number of lines and tokens written.
    """
    line_count = 0
    token_count = 0
    for line in lines:
        transformed, tokens = transform_line_counted(line)
        sink.write(transformed)
        sink.write(LINE_TERMINATOR)
        line_count += 1
        token_count += tokens
        logger.debug("Line %d: %d tokens", line_count, tokens)
    return line_count, token_count


def convert_file(
    source: str | Path,
    destination: str | Path,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> ConversionResult:
    """Convert ``source`` line by line into ``destination``.

    The destination is truncated before the first write. Any I/O or decoding
    failure propagates unchanged and leaves the destination incomplete.
    """
    source_path = Path(source)
    destination_path = Path(destination)
    logger.info("Converting %s -> %s", source_path, destination_path)

    try:
        # Source is opened first so a missing input never truncates the output.
        with open(source_path, "r", encoding=encoding) as src, open(
            destination_path, "w", encoding=encoding, newline=LINE_TERMINATOR
        ) as sink:
            lines, tokens = convert_stream(iter_lines(src), sink)
            sink.flush()
    except (OSError, UnicodeError):
        logger.exception("Failed to convert %s -> %s", source_path, destination_path)
        raise

    logger.info("Wrote %d lines (%d tokens) to %s", lines, tokens, destination_path)
    return ConversionResult(
        source=source_path,
        destination=destination_path,
        lines=lines,
        tokens=tokens,
    )
