"""
YAML manifest describing one conversion run.

Example manifest::

    lexicon:
      input: sudachi/lex.csv
      output: out/lex.csv
      append: [extra/lex.append.csv]
    unknown:
      input: sudachi/unk.def
      output: out/unk.def
    char:
      input: sudachi/char.def
      output: out/char.def
      append: [extra/char.append.def]
    rewrite:
      input: ipadic/rewrite.def
      output: out/rewrite.def
    stats: out/stats.env

Relative paths are resolved against the manifest's directory.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from sudachi_vibrato_converter.exceptions import ManifestError

REQUIRED_SECTIONS = ("lexicon", "unknown", "char")
OPTIONAL_SECTIONS = ("rewrite",)


@dataclass
class FileSpec:
    """Input/output pair plus fragments appended after the converted input."""
    input: Path
    output: Path
    append: List[Path] = field(default_factory=list)


@dataclass
class ConversionManifest:
    """Everything one conversion run reads and writes."""
    lexicon: FileSpec
    unknown: FileSpec
    char: FileSpec
    stats: Path
    rewrite: Optional[FileSpec] = None
    source_file: Optional[Path] = None


def load_manifest(
    source: Union[str, Path, Dict[str, Any]],
) -> ConversionManifest:
    """Load a conversion manifest from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, or parsed dictionary

    Returns:
        ConversionManifest with all paths resolved

    Raises:
        ManifestError: If the manifest cannot be parsed or is incomplete
        FileNotFoundError: If the file does not exist
    """
    source_path: Optional[Path] = None

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        source_path = Path(source)
        if not source_path.exists():
            raise FileNotFoundError(f"File not found: {source_path}")
        with open(source_path, "r", encoding="utf-8") as f:
            data = _load_yaml(f.read())
    else:
        data = _load_yaml(source)

    base_dir = source_path.parent if source_path else None
    return _parse_manifest(data, base_dir, source_path)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path rather than YAML content."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(text: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ManifestError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        raise ManifestError("Empty manifest")
    if not isinstance(data, dict):
        raise ManifestError("Manifest root must be a mapping (dictionary)")
    return data


def _parse_manifest(
    data: Dict[str, Any],
    base_dir: Optional[Path],
    source_path: Optional[Path],
) -> ConversionManifest:
    sections: Dict[str, Optional[FileSpec]] = {}
    for name in REQUIRED_SECTIONS:
        if name not in data:
            raise ManifestError(f"Missing required section: '{name}'")
        sections[name] = _parse_file_spec(name, data[name], base_dir)

    rewrite = data.get("rewrite")
    sections["rewrite"] = (
        _parse_file_spec("rewrite", rewrite, base_dir) if rewrite is not None else None
    )

    stats = data.get("stats")
    if not stats:
        raise ManifestError("Missing required field: 'stats'")
    if not isinstance(stats, str):
        raise ManifestError("Field 'stats' must be a string")

    unknown = set(data) - set(REQUIRED_SECTIONS) - set(OPTIONAL_SECTIONS) - {"stats"}
    if unknown:
        raise ManifestError(f"Unknown section(s): {', '.join(sorted(unknown))}")

    return ConversionManifest(
        lexicon=sections["lexicon"],
        unknown=sections["unknown"],
        char=sections["char"],
        rewrite=sections["rewrite"],
        stats=_resolve(stats, base_dir),
        source_file=source_path,
    )


def _parse_file_spec(name: str, data: Any, base_dir: Optional[Path]) -> FileSpec:
    if not isinstance(data, dict):
        raise ManifestError(f"Section '{name}' must be a mapping")

    paths = {}
    for key in ("input", "output"):
        value = data.get(key)
        if not value:
            raise ManifestError(f"Section '{name}': missing required field '{key}'")
        if not isinstance(value, str):
            raise ManifestError(f"Section '{name}': field '{key}' must be a string")
        paths[key] = _resolve(value, base_dir)

    append = data.get("append", [])
    if isinstance(append, str):
        append = [append]
    if not isinstance(append, list) or not all(isinstance(p, str) for p in append):
        raise ManifestError(f"Section '{name}': field 'append' must be a list of paths")

    return FileSpec(
        input=paths["input"],
        output=paths["output"],
        append=[_resolve(p, base_dir) for p in append],
    )


def _resolve(value: str, base_dir: Optional[Path]) -> Path:
    path = Path(value)
    if base_dir is not None and not path.is_absolute():
        return base_dir / path
    return path
