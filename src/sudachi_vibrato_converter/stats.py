"""Conversion statistics for a single run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TextIO

from sudachi_vibrato_converter.models import Emitted, RowOutcome, SkipReason

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    """Counters populated by the lexicon converter.

    Field order is the order the counters are written out in.
    """

    written: int = 0
    skipped_negative_conn_ids: int = 0
    normalized_pos_rows: int = 0
    fallback_ctype_rows: int = 0
    fallback_cform_rows: int = 0

    def record(self, outcome: RowOutcome) -> None:
        """Apply one lexicon row outcome to the counters."""
        if isinstance(outcome, Emitted):
            self.written += 1
            if outcome.pos_normalized:
                self.normalized_pos_rows += 1
            if outcome.ctype_fallback:
                self.fallback_ctype_rows += 1
            if outcome.cform_fallback:
                self.fallback_cform_rows += 1
        elif outcome.reason is SkipReason.NEGATIVE_CONN_ID:
            self.skipped_negative_conn_ids += 1

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def dump(self, stream: TextIO) -> None:
        """Write ``key=value`` lines to *stream*."""
        for key, value in self.as_dict().items():
            stream.write(f"{key}={value}\n")

    def write_env_file(self, path: str | Path) -> None:
        """Create (or truncate) *path* and write the counters to it."""
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            self.dump(f)
        logger.debug("Wrote conversion stats to %s", path)
