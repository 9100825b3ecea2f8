"""Lexicon (known-word dictionary) conversion."""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Sequence
from typing import BinaryIO

from sudachi_vibrato_converter.exceptions import MalformedRowError
from sudachi_vibrato_converter.models import Emitted, RowOutcome, Skipped, SkipReason
from sudachi_vibrato_converter.normalize import (
    normalize_cform,
    normalize_ctype,
    normalize_pos,
    normalize_text_or_star,
)
from sudachi_vibrato_converter.stats import ConversionStats
from sudachi_vibrato_converter.streams import text_reader, text_writer, unreadable_input

logger = logging.getLogger(__name__)

LEX_MIN_FIELDS = 11

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def csv_writer(stream):
    """CSV writer producing the output dictionary dialect (minimal quoting, LF)."""
    return csv.writer(stream, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)


def parse_int_field(
    fields: Sequence[str],
    index: int,
    name: str,
    row_number: int,
    *,
    kind: str,
) -> int:
    """Parse ``fields[index]`` as a signed 32-bit decimal integer."""
    if index >= len(fields):
        raise MalformedRowError(
            f"missing {name} at {kind} row {row_number}",
            kind=kind, row_number=row_number, field=name,
        )
    value = fields[index].strip()
    if not _INT_RE.fullmatch(value) or not _I32_MIN <= int(value) <= _I32_MAX:
        raise MalformedRowError(
            f"failed to parse {name}='{value}' at {kind} row {row_number}",
            kind=kind, row_number=row_number, field=name, value=value,
        )
    return int(value)


def _field(fields: Sequence[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def convert_lexicon_row(fields: Sequence[str], row_number: int) -> RowOutcome:
    """Convert one Sudachi lexicon record into the 13-column output schema.

    Raises:
        MalformedRowError: too few fields or a non-integer id/cost.
    """
    if len(fields) == 0:
        return Skipped(SkipReason.BLANK)
    if len(fields) < LEX_MIN_FIELDS:
        raise MalformedRowError(
            f"invalid lex row at line {row_number}: "
            f"expected >={LEX_MIN_FIELDS} columns, got {len(fields)}",
            kind="lex", row_number=row_number, observed=len(fields),
        )

    left = parse_int_field(fields, 1, "left_id", row_number, kind="lex")
    right = parse_int_field(fields, 2, "right_id", row_number, kind="lex")
    parse_int_field(fields, 3, "cost", row_number, kind="lex")

    if left < 0 or right < 0:
        return Skipped(SkipReason.NEGATIVE_CONN_ID)

    original_pos = tuple(normalize_text_or_star(_field(fields, i)) for i in range(5, 9))
    pos = normalize_pos(fields[5], fields[6])

    ctype, ctype_fallback = normalize_ctype(fields[9])
    cform, cform_fallback = normalize_cform(fields[10])

    base = normalize_text_or_star(fields[4])
    reading = normalize_text_or_star(_field(fields, 11))

    row = (
        fields[0], fields[1], fields[2], fields[3],
        *pos,
        ctype, cform,
        base, reading, reading,
    )
    return Emitted(
        row=row,
        pos_normalized=original_pos != pos,
        ctype_fallback=ctype_fallback,
        cform_fallback=cform_fallback,
    )


def convert_lexicon(
    source: BinaryIO,
    destination: BinaryIO,
    stats: ConversionStats,
) -> None:
    """Stream a Sudachi lexicon CSV from *source* to *destination*, updating *stats*.

    The first malformed row aborts the conversion with
    :class:`MalformedRowError` (or :class:`UnreadableInputError` for bytes
    that are not UTF-8 CSV); rows written before it stay in *destination*.
    """
    written_before = stats.written
    row_number = 0
    with text_reader(source) as src, text_writer(destination) as dst:
        writer = csv_writer(dst)
        try:
            for row_number, fields in enumerate(csv.reader(src), start=1):
                outcome = convert_lexicon_row(fields, row_number)
                if isinstance(outcome, Emitted):
                    writer.writerow(outcome.row)
                stats.record(outcome)
        except (UnicodeDecodeError, csv.Error) as e:
            raise unreadable_input(e, "lex", row_number) from e

    logger.debug("Converted %d lexicon rows", stats.written - written_before)
