"""Shared test fixtures for sudachi-vibrato-converter."""

import csv
import io

import pytest

from sudachi_vibrato_converter import ConversionStats


def parse_csv_rows(data: bytes) -> list:
    """Parse converter output back into rows."""
    return list(csv.reader(io.StringIO(data.decode("utf-8"), newline="")))


@pytest.fixture
def stats():
    """Fresh statistics accumulator."""
    return ConversionStats()


@pytest.fixture
def run_lex(stats):
    """Convert a lexicon CSV string; returns parsed output rows."""
    from sudachi_vibrato_converter import convert_lexicon

    def _run(text: str) -> list:
        out = io.BytesIO()
        convert_lexicon(io.BytesIO(text.encode("utf-8")), out, stats)
        return parse_csv_rows(out.getvalue())

    return _run


@pytest.fixture
def run_unk():
    """Convert an unknown-word CSV string; returns parsed output rows."""
    from sudachi_vibrato_converter import convert_unknown_dictionary

    def _run(text: str) -> list:
        out = io.BytesIO()
        convert_unknown_dictionary(io.BytesIO(text.encode("utf-8")), out)
        return parse_csv_rows(out.getvalue())

    return _run


@pytest.fixture
def run_char():
    """Convert a char.def string; returns the output text."""
    from sudachi_vibrato_converter import convert_char_definition

    def _run(text: str) -> str:
        out = io.BytesIO()
        convert_char_definition(io.BytesIO(text.encode("utf-8")), out)
        return out.getvalue().decode("utf-8")

    return _run


@pytest.fixture
def parse_rows():
    """Parser for raw converter output bytes."""
    return parse_csv_rows
