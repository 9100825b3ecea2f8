"""Tests for YAML manifest loading."""

from pathlib import Path

import pytest

from sudachi_vibrato_converter import ManifestError, load_manifest

MINIMAL = """
lexicon:
  input: in/lex.csv
  output: out/lex.csv
unknown:
  input: in/unk.def
  output: out/unk.def
char:
  input: in/char.def
  output: out/char.def
  append: extra/char.append.def
stats: out/stats.env
"""


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_load_from_string(self):
        """Test loading a manifest from a YAML string."""
        manifest = load_manifest(MINIMAL)

        assert manifest.lexicon.input == Path("in/lex.csv")
        assert manifest.unknown.output == Path("out/unk.def")
        assert manifest.char.append == [Path("extra/char.append.def")]
        assert manifest.lexicon.append == []
        assert manifest.rewrite is None
        assert manifest.stats == Path("out/stats.env")

    def test_load_from_file_resolves_relative_paths(self, tmp_path):
        """Test that relative paths resolve against the manifest directory."""
        path = tmp_path / "convert.yaml"
        path.write_text(MINIMAL, encoding="utf-8")

        manifest = load_manifest(path)

        assert manifest.source_file == path
        assert manifest.lexicon.input == tmp_path / "in" / "lex.csv"
        assert manifest.stats == tmp_path / "out" / "stats.env"

    def test_absolute_paths_are_kept(self, tmp_path):
        """Test that absolute paths are left alone."""
        path = tmp_path / "convert.yaml"
        absolute = tmp_path / "elsewhere" / "lex.csv"
        path.write_text(MINIMAL.replace("in/lex.csv", str(absolute)), encoding="utf-8")

        assert load_manifest(path).lexicon.input == absolute

    def test_load_from_dict_with_rewrite(self):
        """Test loading a dictionary with a rewrite section."""
        manifest = load_manifest({
            "lexicon": {"input": "a", "output": "b"},
            "unknown": {"input": "c", "output": "d"},
            "char": {"input": "e", "output": "f"},
            "rewrite": {"input": "g", "output": "h", "append": ["i", "j"]},
            "stats": "s",
        })
        assert manifest.rewrite.append == [Path("i"), Path("j")]

    def test_missing_section(self):
        """Test that a missing required section raises ManifestError."""
        with pytest.raises(ManifestError, match="unknown"):
            load_manifest({
                "lexicon": {"input": "a", "output": "b"},
                "char": {"input": "e", "output": "f"},
                "stats": "s",
            })

    def test_missing_stats(self):
        """Test that a missing stats field raises ManifestError."""
        with pytest.raises(ManifestError, match="stats"):
            load_manifest(MINIMAL.replace("stats: out/stats.env", ""))

    def test_missing_output(self):
        """Test that a section without output raises ManifestError."""
        with pytest.raises(ManifestError, match="'char'.*'output'"):
            load_manifest(MINIMAL.replace("  output: out/char.def\n", ""))

    def test_bad_append_type(self):
        """Test that a non-list append raises ManifestError."""
        with pytest.raises(ManifestError, match="append"):
            load_manifest(MINIMAL.replace("append: extra/char.append.def", "append: {a: 1}"))

    def test_unknown_section(self):
        """Test that an unknown section raises ManifestError."""
        with pytest.raises(ManifestError, match="matrix"):
            load_manifest(MINIMAL + "matrix: {input: a, output: b}\n")

    def test_invalid_yaml(self, tmp_path):
        """Test that invalid YAML reports its line."""
        path = tmp_path / "bad.yaml"
        path.write_text("lexicon: [invalid yaml", encoding="utf-8")

        with pytest.raises(ManifestError, match="Invalid YAML"):
            load_manifest(path)

    def test_root_must_be_mapping(self):
        """Test that a non-mapping root raises ManifestError."""
        with pytest.raises(ManifestError, match="mapping"):
            load_manifest("- a\n- b\n")

    def test_file_not_found(self):
        """Test that a missing manifest file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_manifest("nonexistent/convert.yaml")
