# tests/unit/core/test_report.py
# Unit tests for the summary table & idempotent upsert between markers

from datetime import datetime

import pytest

from taptimer.core.block_config import parse_report_config
from taptimer.core.constants import REPORT_END_MARKER, REPORT_START_MARKER
from taptimer.core.exceptions import NoteNotFoundError
from taptimer.core.report import build_report_table, generate_report, upsert_report_lines
from taptimer.core.types import TimerMeta

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0)


class TestBuildReportTable:

    # * Verify header block & one row per timer
    def test_rows(self, store, clock):
        store.start("a")
        clock.advance(90_000)
        store.pause("a")
        table = build_report_table(
            "Legs.md",
            [TimerMeta("a", "Squats"), TimerMeta("b", "")],
            store,
            parse_report_config(""),
            now=FIXED_NOW,
        )
        lines = table.split("\n")
        assert lines[0] == "## Timer Summary"
        assert lines[2] == "Note: Legs.md"
        assert lines[3].startswith("Updated: ")
        assert lines[5] == "| ID | Title | Final Value |"
        assert lines[6] == "| --- | --- | --- |"
        assert lines[7] == "| a | Squats | 00:01:30 |"
        assert lines[8] == "| b |  | 00:00:00 |"

    # * Verify the placeholder row when there are no timers
    def test_empty(self, store):
        table = build_report_table("n.md", [], store, parse_report_config(""), now=FIXED_NOW)
        assert table.split("\n")[-1] == "| (no timers) |  | 00:00:00 |"

    # * Verify pipes in titles are escaped
    def test_escapes(self, store):
        table = build_report_table(
            "n.md", [TimerMeta("a", "A|B")], store, parse_report_config(""), now=FIXED_NOW
        )
        assert "| a | A\\|B | 00:00:00 |" in table


class TestUpsertReportLines:

    # * Verify insertion after the section end wraps the report in blank lines & markers
    def test_insert_after_section(self):
        lines = ["a", "b", "c"]
        result = upsert_report_lines(lines, "REPORT", section_end=0)
        assert result == ["a", "", REPORT_START_MARKER, "REPORT", REPORT_END_MARKER, "", "b", "c"]

    # * Verify default insertion at the end of the note
    def test_insert_at_end(self):
        result = upsert_report_lines(["a"], "R")
        assert result == ["a", "", REPORT_START_MARKER, "R", REPORT_END_MARKER, ""]

    # * Verify a section end past the note is clamped
    def test_section_end_clamped(self):
        result = upsert_report_lines(["a"], "R", section_end=99)
        assert result[:2] == ["a", ""]

    # * Verify an existing marker pair is replaced in place
    def test_replace_existing(self):
        lines = ["x", REPORT_START_MARKER, "old", "old2", REPORT_END_MARKER, "y"]
        result = upsert_report_lines(lines, "new", section_end=0)
        assert result == ["x", REPORT_START_MARKER, "new", REPORT_END_MARKER, "y"]

    # * Verify reversed markers are treated as absent
    def test_reversed_markers_insert(self):
        lines = [REPORT_END_MARKER, REPORT_START_MARKER]
        result = upsert_report_lines(lines, "R")
        assert result.count(REPORT_START_MARKER) == 2


class TestGenerateReport:

    # * Verify the same state upserted twice yields identical text & one marker pair
    def test_idempotent(self, vault, vault_dir, store, workout_note):
        note = vault_dir / "Legs.md"
        note.write_text(workout_note, encoding="utf-8")
        config = parse_report_config("")

        generate_report(vault, store, "Legs.md", config, section_end=19, now=FIXED_NOW)
        first = note.read_text(encoding="utf-8")
        generate_report(vault, store, "Legs.md", config, section_end=19, now=FIXED_NOW)
        second = note.read_text(encoding="utf-8")

        assert first == second
        assert second.count(REPORT_START_MARKER) == 1
        assert second.count(REPORT_END_MARKER) == 1
        # inserted right after the report block, before the trailing paragraph
        assert second.index(REPORT_END_MARKER) < second.index("Notes below.")

    # * Verify a missing note raises w/out creating a file
    def test_missing_note(self, vault, vault_dir, store):
        with pytest.raises(NoteNotFoundError):
            generate_report(vault, store, "missing.md", parse_report_config(""))
        assert not (vault_dir / "missing.md").exists()
