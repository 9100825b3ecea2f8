"""Appending supplementary definition fragments to converted outputs."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from sudachi_vibrato_converter.convert_lex import convert_lexicon
from sudachi_vibrato_converter.convert_unk import convert_unknown_dictionary
from sudachi_vibrato_converter.exceptions import MalformedRowError
from sudachi_vibrato_converter.stats import ConversionStats
from sudachi_vibrato_converter.streams import (
    LINE_NEWLINE,
    iter_lines,
    text_reader,
    text_writer,
    unreadable_input,
)

logger = logging.getLogger(__name__)


def append_text_as_lines(source: BinaryIO, destination: BinaryIO) -> None:
    """Copy *source* to *destination* line by line with LF line endings."""
    line_number = 0
    with text_reader(source, newline=LINE_NEWLINE) as src, text_writer(destination) as dst:
        try:
            for line_number, line in enumerate(iter_lines(src), start=1):
                dst.write(line + "\n")
        except UnicodeDecodeError as e:
            raise unreadable_input(e, "text", line_number) from e


def append_text_files_as_lines(
    destination: BinaryIO, paths: Iterable[str | Path]
) -> None:
    """Append each file verbatim (line endings normalized)."""
    for path in paths:
        logger.debug("Appending %s", path)
        with open(path, "rb") as f:
            append_text_as_lines(f, destination)


def append_unknown_definitions(
    destination: BinaryIO, paths: Iterable[str | Path]
) -> None:
    """Convert each unknown-word fragment and append it."""
    for path in paths:
        logger.debug("Appending converted unknown-word fragment %s", path)
        with open(path, "rb") as f:
            try:
                convert_unknown_dictionary(f, destination)
            except MalformedRowError as e:
                raise e.in_file(path) from e


def append_lexicon_files(
    destination: BinaryIO,
    paths: Iterable[str | Path],
    stats: ConversionStats,
) -> None:
    """Convert each lexicon fragment into *destination*, counting into *stats*.

    A malformed row is reported with the fragment's path; its row number
    counts from the start of that fragment.
    """
    for path in paths:
        logger.debug("Appending converted lexicon fragment %s", path)
        with open(path, "rb") as f:
            try:
                convert_lexicon(f, destination, stats)
            except MalformedRowError as e:
                raise e.in_file(path) from e


def write_rewrite_definition(
    rewrite_in: str | Path,
    rewrite_out: str | Path,
    rewrite_append: Iterable[str | Path] = (),
) -> None:
    """Copy a rewrite.def to *rewrite_out*, then append each fragment."""
    with open(rewrite_out, "wb") as out:
        with open(rewrite_in, "rb") as f:
            append_text_as_lines(f, out)
        append_text_files_as_lines(out, rewrite_append)
