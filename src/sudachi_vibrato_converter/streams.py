"""Text views over caller-owned byte streams.

Converters take binary streams so they can be driven from files, pipes or
``io.BytesIO`` alike.  The wrappers below never close the underlying
stream: they are detached when the ``with`` block exits, error or not.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from sudachi_vibrato_converter.exceptions import UnreadableInputError

ENCODING = "utf-8"

# Readers for line-oriented files split on LF only, so a stray CR inside a
# line is kept; CSV readers need newline="" for quoted fields.
CSV_NEWLINE = ""
LINE_NEWLINE = "\n"


@contextmanager
def text_reader(
    stream: BinaryIO, newline: str = CSV_NEWLINE
) -> Iterator[io.TextIOWrapper]:
    """Yield a UTF-8 text reader over *stream* with newlines left untranslated."""
    wrapper = io.TextIOWrapper(stream, encoding=ENCODING, newline=newline)
    try:
        yield wrapper
    finally:
        wrapper.detach()


@contextmanager
def text_writer(stream: BinaryIO) -> Iterator[io.TextIOWrapper]:
    """Yield a UTF-8 text writer over *stream*; flushed and detached on exit."""
    wrapper = io.TextIOWrapper(stream, encoding=ENCODING, newline="", write_through=True)
    try:
        yield wrapper
    finally:
        wrapper.flush()
        wrapper.detach()


def iter_lines(src: io.TextIOWrapper) -> Iterator[str]:
    """Lines of *src* without the LF terminator or a trailing CR."""
    for raw in src:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def unreadable_input(error: Exception, kind: str, last_row: int) -> UnreadableInputError:
    """Wrap a decode or CSV error raised while reading past row *last_row*."""
    return UnreadableInputError(
        f"failed to read {kind} row near line {last_row + 1}: {error}",
        kind=kind, row_number=last_row + 1,
    )
