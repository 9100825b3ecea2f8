"""Convert SudachiDict resources to the Vibrato/jpreprocess (IPADIC) schema."""

__version__ = "0.1.0"

from sudachi_vibrato_converter.convert_char import (
    convert_char_definition as convert_char_definition,
    convert_char_line as convert_char_line,
)
from sudachi_vibrato_converter.convert_lex import (
    convert_lexicon as convert_lexicon,
    convert_lexicon_row as convert_lexicon_row,
)
from sudachi_vibrato_converter.convert_unk import (
    convert_unknown_dictionary as convert_unknown_dictionary,
    convert_unknown_row as convert_unknown_row,
)
from sudachi_vibrato_converter.exceptions import (
    ConverterError as ConverterError,
    MalformedRowError as MalformedRowError,
    ManifestError as ManifestError,
    UnreadableInputError as UnreadableInputError,
)
from sudachi_vibrato_converter.inject import (
    append_lexicon_files as append_lexicon_files,
    append_text_files_as_lines as append_text_files_as_lines,
    append_unknown_definitions as append_unknown_definitions,
    write_rewrite_definition as write_rewrite_definition,
)
from sudachi_vibrato_converter.manifest import (
    ConversionManifest as ConversionManifest,
    FileSpec as FileSpec,
    load_manifest as load_manifest,
)
from sudachi_vibrato_converter.models import (
    Emitted as Emitted,
    Skipped as Skipped,
    SkipReason as SkipReason,
)
from sudachi_vibrato_converter.normalize import (
    ALLOWED_CFORM as ALLOWED_CFORM,
    ALLOWED_CTYPE as ALLOWED_CTYPE,
    normalize_cform as normalize_cform,
    normalize_ctype as normalize_ctype,
    normalize_pos as normalize_pos,
    normalize_text_or_star as normalize_text_or_star,
    strip_spaces as strip_spaces,
)
from sudachi_vibrato_converter.pipeline import (
    ConversionResult as ConversionResult,
    run_conversion as run_conversion,
)
from sudachi_vibrato_converter.stats import ConversionStats as ConversionStats
from sudachi_vibrato_converter.tokens import (
    merge_scientific_notation_tokens as merge_scientific_notation_tokens,
)

__all__ = [
    # Converters
    "convert_lexicon",
    "convert_lexicon_row",
    "convert_unknown_dictionary",
    "convert_unknown_row",
    "convert_char_definition",
    "convert_char_line",
    # Fragments
    "append_lexicon_files",
    "append_text_files_as_lines",
    "append_unknown_definitions",
    "write_rewrite_definition",
    # Normalization
    "ALLOWED_CTYPE",
    "ALLOWED_CFORM",
    "normalize_text_or_star",
    "strip_spaces",
    "normalize_ctype",
    "normalize_cform",
    "normalize_pos",
    "merge_scientific_notation_tokens",
    # Results and statistics
    "Emitted",
    "Skipped",
    "SkipReason",
    "ConversionStats",
    "ConversionResult",
    "run_conversion",
    # Configuration
    "ConversionManifest",
    "FileSpec",
    "load_manifest",
    # Exceptions
    "ConverterError",
    "MalformedRowError",
    "ManifestError",
    "UnreadableInputError",
]
