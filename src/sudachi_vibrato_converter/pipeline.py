"""
Runs a full conversion described by a manifest.

Opens every file named in the manifest, streams each through its
converter, appends fragments, and writes the statistics file last.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from sudachi_vibrato_converter.convert_char import convert_char_definition
from sudachi_vibrato_converter.convert_lex import convert_lexicon
from sudachi_vibrato_converter.convert_unk import convert_unknown_dictionary
from sudachi_vibrato_converter.inject import (
    append_lexicon_files,
    append_text_files_as_lines,
    append_unknown_definitions,
    write_rewrite_definition,
)
from sudachi_vibrato_converter.manifest import ConversionManifest
from sudachi_vibrato_converter.stats import ConversionStats

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a completed run."""
    stats: ConversionStats
    duration_seconds: float


def run_conversion(manifest: ConversionManifest) -> ConversionResult:
    """Execute a conversion run.

    Args:
        manifest: Files to read and write

    Returns:
        ConversionResult with the lexicon statistics

    Raises:
        MalformedRowError: On the first structurally invalid row
        OSError: If a file cannot be opened, read or written
    """
    start_time = time.time()
    stats = ConversionStats()

    logger.info(f"Converting lexicon {manifest.lexicon.input}")
    with open(manifest.lexicon.input, "rb") as src, open(manifest.lexicon.output, "wb") as dst:
        convert_lexicon(src, dst, stats)
        append_lexicon_files(dst, manifest.lexicon.append, stats)

    logger.info(f"Converting unknown-word table {manifest.unknown.input}")
    with open(manifest.unknown.input, "rb") as src, open(manifest.unknown.output, "wb") as dst:
        convert_unknown_dictionary(src, dst)
        append_unknown_definitions(dst, manifest.unknown.append)

    logger.info(f"Converting character definition {manifest.char.input}")
    with open(manifest.char.input, "rb") as src, open(manifest.char.output, "wb") as dst:
        convert_char_definition(src, dst)
        append_text_files_as_lines(dst, manifest.char.append)

    if manifest.rewrite is not None:
        logger.info(f"Copying rewrite definition {manifest.rewrite.input}")
        write_rewrite_definition(
            manifest.rewrite.input,
            manifest.rewrite.output,
            manifest.rewrite.append,
        )

    stats.write_env_file(manifest.stats)

    if stats.fallback_ctype_rows or stats.fallback_cform_rows:
        logger.warning(
            "Inflection fallbacks: %d ctype, %d cform rows reset to '*'",
            stats.fallback_ctype_rows, stats.fallback_cform_rows,
        )

    return ConversionResult(stats=stats, duration_seconds=time.time() - start_time)
