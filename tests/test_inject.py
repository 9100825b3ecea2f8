"""Tests for fragment appending and rewrite.def copying."""

import io

import pytest

from sudachi_vibrato_converter import (
    ConversionStats,
    MalformedRowError,
    append_lexicon_files,
    append_text_files_as_lines,
    append_unknown_definitions,
    convert_char_definition,
    convert_unknown_dictionary,
    write_rewrite_definition,
)


class TestAppendFragments:
    """Tests for appending fragments after converted content."""

    def test_char_definition_can_append_custom_rules(self, tmp_path):
        """Test that custom char.def rules follow the converted file."""
        append_path = tmp_path / "char.append.def"
        append_path.write_text(
            "0x0030..0x0039 NUMERIC ALPHA\r\n0xFF10..0xFF19 NUMERIC ALPHA",
            encoding="utf-8",
        )

        out = io.BytesIO()
        convert_char_definition(
            io.BytesIO(b"DEFAULT 0 1 0\n0x0030..0x0039 NUMERIC NOOOVBOW\n"), out
        )
        append_text_files_as_lines(out, [append_path])

        assert out.getvalue().decode("utf-8") == (
            "DEFAULT 0 1 0\n"
            "0x0030..0x0039 NUMERIC\n"
            "0x0030..0x0039 NUMERIC ALPHA\n"
            "0xFF10..0xFF19 NUMERIC ALPHA\n"
        )

    def test_appended_char_fragment_is_not_converted(self, tmp_path):
        """Test that appended char.def fragments are copied, not converted."""
        append_path = tmp_path / "char.append.def"
        append_path.write_text("0x0030 NOOOVBOW\n", encoding="utf-8")

        out = io.BytesIO()
        append_text_files_as_lines(out, [append_path])
        assert out.getvalue() == b"0x0030 NOOOVBOW\n"

    def test_unknown_fragments_are_normalized(self, tmp_path, parse_rows):
        """Test that unknown-word fragments go through conversion."""
        append_path = tmp_path / "unk.append.def"
        append_path.write_text("NUMERIC,0,0,100,名詞,数,*,*,*,*\n", encoding="utf-8")

        out = io.BytesIO()
        convert_unknown_dictionary(
            io.BytesIO("ALPHA,0,0,100,名詞,普通名詞,一般,*,*,*\n".encode()), out
        )
        append_unknown_definitions(out, [append_path])

        rows = parse_rows(out.getvalue())
        assert len(rows) == 2
        assert rows[1][0] == "NUMERIC"
        assert rows[1][4:6] == ["名詞", "数"]
        assert rows[1][10] == "*"

    def test_lexicon_fragments_share_stats(self, tmp_path, parse_rows):
        """Test that lexicon fragments count into the shared stats."""
        first = tmp_path / "a.csv"
        second = tmp_path / "b.csv"
        first.write_text("甲,1,1,0,甲,名詞,*,*,*,*,*,コウ\n", encoding="utf-8")
        second.write_text("乙,-1,1,0,乙,名詞,*,*,*,*,*,オツ\n", encoding="utf-8")

        stats = ConversionStats()
        out = io.BytesIO()
        append_lexicon_files(out, [first, second], stats)

        assert [r[0] for r in parse_rows(out.getvalue())] == ["甲"]
        assert stats.written == 1
        assert stats.skipped_negative_conn_ids == 1

    def test_malformed_lexicon_fragment_names_its_path(self, tmp_path):
        """Test that a malformed lexicon fragment is reported with its path."""
        good = tmp_path / "a.csv"
        bad = tmp_path / "b.csv"
        good.write_text("甲,1,1,0,甲,名詞,*,*,*,*,*,コウ\n", encoding="utf-8")
        bad.write_text("乙,1,1,0,乙,名詞,*,*,*,*,*,オツ\n乙,x,1\n", encoding="utf-8")

        with pytest.raises(MalformedRowError, match="b.csv") as exc_info:
            append_lexicon_files(io.BytesIO(), [good, bad], ConversionStats())

        assert exc_info.value.path == bad
        assert exc_info.value.kind == "lex"
        assert exc_info.value.row_number == 2

    def test_malformed_unknown_fragment_names_its_path(self, tmp_path):
        """Test that a malformed unknown-word fragment is reported with its path."""
        bad = tmp_path / "unk.append.def"
        bad.write_text("NUMERIC,0,zero,100,名詞,数,*,*,*,*\n", encoding="utf-8")

        with pytest.raises(MalformedRowError, match="unk.append.def") as exc_info:
            append_unknown_definitions(io.BytesIO(), [bad])

        assert exc_info.value.path == bad
        assert exc_info.value.field == "right_id"

    def test_no_fragments_is_noop(self):
        """Test that an empty fragment list writes nothing."""
        out = io.BytesIO()
        append_text_files_as_lines(out, [])
        append_unknown_definitions(out, [])
        assert out.getvalue() == b""


class TestRewriteDefinition:
    """Tests for rewrite.def copying."""

    def test_copied_and_appended(self, tmp_path):
        """Test that rewrite.def is copied and fragments appended."""
        rewrite_in = tmp_path / "rewrite.in.def"
        rewrite_out = tmp_path / "rewrite.out.def"
        append = tmp_path / "rewrite.append.def"
        rewrite_in.write_text(
            "[unigram rewrite]\nfoo,*,*,* bar,*,*,*\n[left rewrite]\n", encoding="utf-8"
        )
        append.write_text("# custom\n[right rewrite]\na,b,c d,e,f\n", encoding="utf-8")

        write_rewrite_definition(rewrite_in, rewrite_out, [append])

        assert rewrite_out.read_text(encoding="utf-8") == (
            "[unigram rewrite]\n"
            "foo,*,*,* bar,*,*,*\n"
            "[left rewrite]\n"
            "# custom\n"
            "[right rewrite]\n"
            "a,b,c d,e,f\n"
        )

    def test_copy_without_append_files(self, tmp_path):
        """Test copying rewrite.def with no fragments."""
        rewrite_in = tmp_path / "rewrite.in.def"
        rewrite_out = tmp_path / "rewrite.out.def"
        text = "[unigram rewrite]\nx,*,* y,*,*\n"
        rewrite_in.write_text(text, encoding="utf-8")

        write_rewrite_definition(rewrite_in, rewrite_out)

        assert rewrite_out.read_text(encoding="utf-8") == text

    def test_lone_carriage_return_is_kept(self, tmp_path):
        """Test that a CR inside a line is copied unchanged."""
        rewrite_in = tmp_path / "rewrite.in.def"
        rewrite_out = tmp_path / "rewrite.out.def"
        rewrite_in.write_bytes(b"a\rb\n")

        write_rewrite_definition(rewrite_in, rewrite_out)

        assert rewrite_out.read_bytes() == b"a\rb\n"

    def test_crlf_line_endings_become_lf(self, tmp_path):
        """Test that CRLF line endings are written as LF."""
        rewrite_in = tmp_path / "rewrite.in.def"
        rewrite_out = tmp_path / "rewrite.out.def"
        rewrite_in.write_bytes(b"[unigram rewrite]\r\nx y\r\n")

        write_rewrite_definition(rewrite_in, rewrite_out)

        assert rewrite_out.read_bytes() == b"[unigram rewrite]\nx y\n"
