"""Character-definition (char.def) conversion."""

from __future__ import annotations

import logging
import string
from typing import BinaryIO

from sudachi_vibrato_converter.streams import (
    LINE_NEWLINE,
    iter_lines,
    text_reader,
    text_writer,
    unreadable_input,
)

logger = logging.getLogger(__name__)

# Sudachi-only category flag with no meaning for the target runtime
OBSOLETE_CATEGORY = "NOOOVBOW"

_HEX_DIGITS = frozenset(string.hexdigits)


def is_hex_codepoint(token: str) -> bool:
    """``0x`` followed by at least one hexadecimal digit."""
    return (
        len(token) > 2
        and token.startswith("0x")
        and all(c in _HEX_DIGITS for c in token[2:])
    )


def is_codepoint_range(token: str) -> bool:
    """A single codepoint literal or a ``start..end`` pair of them."""
    if ".." in token:
        start, end = token.split("..", 1)
        return is_hex_codepoint(start) and is_hex_codepoint(end)
    return is_hex_codepoint(token)


def convert_char_line(line: str) -> str | None:
    """Convert one char.def line (without its line terminator).

    Returns the line to emit, or ``None`` when a range line is left with no
    category once the obsolete flag is removed.
    """
    stripped = line.lstrip()
    if not stripped or stripped.startswith("#"):
        return line

    body, sep, comment = line.partition("#")
    tokens = body.split()
    if len(tokens) < 2 or not is_codepoint_range(tokens[0]):
        return line

    categories = [t for t in tokens[1:] if t != OBSOLETE_CATEGORY]
    if not categories:
        return None

    out = " ".join([tokens[0], *categories])
    if sep:
        out += " #" + comment
    return out


def convert_char_definition(source: BinaryIO, destination: BinaryIO) -> None:
    """Stream a char.def from *source* to *destination*, one LF-terminated line each.

    Lines split on LF only; a CR is removed only when it ends a line.
    """
    dropped = 0
    line_number = 0
    with text_reader(source, newline=LINE_NEWLINE) as src, text_writer(destination) as dst:
        try:
            for line_number, line in enumerate(iter_lines(src), start=1):
                converted = convert_char_line(line)
                if converted is None:
                    dropped += 1
                    continue
                dst.write(converted + "\n")
        except UnicodeDecodeError as e:
            raise unreadable_input(e, "char", line_number) from e

    logger.debug("Dropped %d category-less range lines from char.def", dropped)
