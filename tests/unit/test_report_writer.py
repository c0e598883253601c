"""
Unit tests for ReportWriter.

Tests report layout, SQL echo, the no-match sentence and the
post-filter numbering of unnamed blocks.
"""

import pytest
from unittest.mock import Mock

from argos_search.config import DEFAULT_NO_MATCH_MESSAGE
from argos_search.models import DataBlock
from argos_search.services import ReportWriter


def make_block(name="", lines=None, reports=None):
    return DataBlock(name=name, content_original=lines or [], reports=reports or [])


@pytest.fixture
def writer(scanner_config):
    return ReportWriter(config=scanner_config)


class TestRender:
    """Test text rendering."""

    def test_block_with_reports(self, writer):
        block = make_block("Payroll", ["select 1"], ["Checks", "Stubs"])

        result = writer.render([block], [])

        assert result.text == (
            "DataBlock: Payroll\n"
            "Reports:\n"
            "  - Checks\n"
            "  - Stubs\n"
            "\n"
        )
        assert result.matched_count == 1

    def test_block_without_reports(self, writer):
        result = writer.render([make_block("Lonely")], [])
        assert "Reports:\n  (No reports)\n" in result.text

    def test_blocks_separated_by_blank_line(self, writer):
        blocks = [make_block("A"), make_block("B")]

        result = writer.render(blocks, [])

        assert result.text == (
            "DataBlock: A\nReports:\n  (No reports)\n\n"
            "DataBlock: B\nReports:\n  (No reports)\n\n"
        )

    def test_sql_echo(self, scanner_config):
        writer = ReportWriter(extract_sql=True, config=scanner_config)
        block = make_block("Q", ["SELECT SSN", "<Condition>x</Condition>"], ["R"])

        result = writer.render([block], ["ssn"])

        assert result.text == (
            "DataBlock: Q\n"
            "Reports:\n"
            "  - R\n"
            "\n"
            "SQL:\n"
            "SELECT SSN\n"
            "<Condition>x</Condition>\n"
            "\n"
        )

    def test_sql_not_echoed_by_default(self, writer):
        result = writer.render([make_block("Q", ["SELECT SSN"])], [])
        assert "SQL:" not in result.text
        assert "SELECT SSN" not in result.text

    def test_no_blocks(self, writer):
        result = writer.render([], [])
        assert result.text == DEFAULT_NO_MATCH_MESSAGE + "\n"
        assert result.matched_count == 0

    def test_terms_matching_nothing(self, writer):
        result = writer.render([make_block("A", ["select 1"])], ["ssn"])
        assert result.text == DEFAULT_NO_MATCH_MESSAGE + "\n"

    def test_only_matching_blocks_written(self, writer):
        blocks = [
            make_block("Hit", ["select ssn"]),
            make_block("Miss", ["select 1"]),
        ]

        result = writer.render(blocks, ["ssn"])

        assert "DataBlock: Hit" in result.text
        assert "DataBlock: Miss" not in result.text
        assert result.matched_count == 1

    def test_uses_injected_matcher(self, scanner_config):
        matcher = Mock()
        matcher.matches = Mock(side_effect=[False, True])
        writer = ReportWriter(matcher=matcher, config=scanner_config)

        result = writer.render([make_block("A"), make_block("B")], ["x"])

        assert result.text.startswith("DataBlock: B\n")
        assert matcher.matches.call_count == 2


class TestUnnamedNumbering:
    """Unnamed blocks are numbered in the order they are written."""

    def test_counter_skips_filtered_blocks(self, writer):
        blocks = [
            make_block("", ["select 1"]),          # filtered out
            make_block("", ["select ssn"]),        # UnnamedDataBlock_1
            make_block("Named", ["ssn again"]),
            make_block("Main", ["ssn once more"]), # UnnamedDataBlock_2
        ]

        result = writer.render(blocks, ["ssn"])

        assert result.text.count("DataBlock: ") == 3
        assert "DataBlock: UnnamedDataBlock_1\n" in result.text
        assert "DataBlock: Named\n" in result.text
        assert "DataBlock: UnnamedDataBlock_2\n" in result.text
        assert "UnnamedDataBlock_3" not in result.text

    def test_placeholder_name_gets_fallback(self, writer):
        result = writer.render([make_block("main")], [])
        assert result.text.startswith("DataBlock: UnnamedDataBlock_1\n")


class TestWrite:
    """Test writing the report file."""

    def test_write_creates_file(self, writer, tmp_path):
        output = tmp_path / "SearchMatches.txt"

        result = writer.write([make_block("A")], [], output)

        assert result.output_path == output
        assert output.read_text(encoding="utf-8") == result.text

    def test_write_overwrites(self, writer, tmp_path):
        output = tmp_path / "SearchMatches.txt"
        output.write_text("stale content that is longer than the report\n" * 20, encoding="utf-8")

        writer.write([], [], output)

        assert output.read_text(encoding="utf-8") == DEFAULT_NO_MATCH_MESSAGE + "\n"

    def test_write_is_idempotent(self, writer, tmp_path):
        output = tmp_path / "SearchMatches.txt"
        blocks = [make_block("A", ["x"], ["R"]), make_block("", ["y"])]

        writer.write(blocks, [], output)
        first = output.read_bytes()
        writer.write(blocks, [], output)

        assert output.read_bytes() == first

    def test_write_utf8(self, writer, tmp_path):
        output = tmp_path / "SearchMatches.txt"

        writer.write([make_block("Résumé", reports=["Überblick"])], [], output)

        assert "DataBlock: Résumé" in output.read_text(encoding="utf-8")
