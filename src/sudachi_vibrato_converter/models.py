"""Row outcome dataclasses and enums for sudachi-vibrato-converter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SkipReason(str, Enum):
    """Why a row produced no output without being an error."""

    BLANK = "blank"
    COMMENT = "comment"
    NEGATIVE_CONN_ID = "negative_conn_id"
    NO_CATEGORY = "no_category"


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Emitted:
    """A converted output row.

    The flags record what normalization had to do to the source row; only
    the lexicon converter reports them to statistics.
    """

    row: tuple[str, ...]
    pos_normalized: bool = False
    ctype_fallback: bool = False
    cform_fallback: bool = False


@dataclass(frozen=True)
class Skipped:
    """A row that was dropped on purpose."""

    reason: SkipReason


RowOutcome = Union[Emitted, Skipped]
