"""Unknown-word (unk.def) conversion."""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from typing import BinaryIO

from sudachi_vibrato_converter.convert_lex import csv_writer, parse_int_field
from sudachi_vibrato_converter.exceptions import MalformedRowError
from sudachi_vibrato_converter.models import Emitted, RowOutcome, Skipped, SkipReason
from sudachi_vibrato_converter.normalize import (
    STAR,
    normalize_cform,
    normalize_ctype,
    normalize_pos,
)
from sudachi_vibrato_converter.streams import text_reader, text_writer, unreadable_input

logger = logging.getLogger(__name__)

UNK_MIN_FIELDS = 10


def convert_unknown_row(fields: Sequence[str], row_number: int) -> RowOutcome:
    """Convert one unknown-word record.

    Negative connection ids are kept as-is. Lexical fields (base form,
    reading, pronunciation) are always ``*``.
    """
    if len(fields) == 0:
        return Skipped(SkipReason.BLANK)
    if fields[0].lstrip().startswith("#"):
        return Skipped(SkipReason.COMMENT)
    if len(fields) < UNK_MIN_FIELDS:
        raise MalformedRowError(
            f"invalid unk row at line {row_number}: "
            f"expected >={UNK_MIN_FIELDS} columns, got {len(fields)}",
            kind="unk", row_number=row_number, observed=len(fields),
        )

    parse_int_field(fields, 1, "left_id", row_number, kind="unk")
    parse_int_field(fields, 2, "right_id", row_number, kind="unk")
    parse_int_field(fields, 3, "cost", row_number, kind="unk")

    pos = normalize_pos(fields[4], fields[5])
    ctype, ctype_fallback = normalize_ctype(fields[8])
    cform, cform_fallback = normalize_cform(fields[9])

    row = (
        fields[0], fields[1], fields[2], fields[3],
        *pos,
        ctype, cform,
        STAR, STAR, STAR,
    )
    return Emitted(row=row, ctype_fallback=ctype_fallback, cform_fallback=cform_fallback)


def convert_unknown_dictionary(source: BinaryIO, destination: BinaryIO) -> None:
    """Stream an unknown-word CSV from *source* to *destination*."""
    emitted = 0
    row_number = 0
    with text_reader(source) as src, text_writer(destination) as dst:
        writer = csv_writer(dst)
        try:
            for row_number, fields in enumerate(csv.reader(src), start=1):
                outcome = convert_unknown_row(fields, row_number)
                if isinstance(outcome, Emitted):
                    writer.writerow(outcome.row)
                    emitted += 1
        except (UnicodeDecodeError, csv.Error) as e:
            raise unreadable_input(e, "unk", row_number) from e

    logger.debug("Converted %d unknown-word rows", emitted)
