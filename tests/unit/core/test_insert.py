# tests/unit/core/test_insert.py
# Unit tests for inserting new timer blocks into notes

import re

from taptimer.core.insert import insert_block_lines, insert_timer_block, render_timer_block
from taptimer.core.scanner import collect_timers


class TestRenderTimerBlock:

    # * Verify the inserted block text
    def test_block_text(self):
        assert render_timer_block("timer-x-abcde") == (
            "```tap-timer\ntitle: New timer\nid: timer-x-abcde\nindependent: false\n```"
        )
        assert "independent: true" in render_timer_block("t", independent=True)


class TestInsertBlockLines:

    # * Verify appending leaves the existing lines (trailing blanks included) untouched
    def test_append(self):
        result = insert_block_lines(["# Title", "", ""], "B1\nB2")
        assert result == ["# Title", "", "", "B1", "B2", ""]

    # * Verify a note w/out a final newline gets a blank separator line
    def test_append_without_final_newline(self):
        assert insert_block_lines(["# Title"], "B") == ["# Title", "", "B", ""]


    # * Verify appending to an empty note
    def test_append_empty(self):
        assert insert_block_lines([""], "B") == ["B", ""]

    # * Verify insertion before a 1-based line
    def test_before_line(self):
        result = insert_block_lines(["a", "b"], "B", before_line=2)
        assert result == ["a", "B", "", "b"]


class TestInsertTimerBlock:

    # * Verify the note gains a discoverable timer w/ a fresh unique id
    def test_insert(self, vault, vault_dir):
        note = vault_dir / "n.md"
        note.write_text("# Plan\n", encoding="utf-8")

        timer_id = insert_timer_block(vault, "n.md", title="Plank")

        assert re.fullmatch(r"timer-[0-9a-z]+-[0-9a-z]{5}", timer_id)
        timers = collect_timers(note.read_text(encoding="utf-8"), "n.md")
        assert [(t.id, t.title) for t in timers] == [(timer_id, "Plank")]

    # * Verify the original note text survives as a prefix of the updated note
    def test_insert_preserves_existing_text(self, vault, vault_dir):
        original = "# Plan\n\nWarm up first.\n\n\n"
        note = vault_dir / "n.md"
        note.write_text(original, encoding="utf-8")

        insert_timer_block(vault, "n.md", timer_id="timer-x-abcde")

        text = note.read_text(encoding="utf-8")
        assert text.startswith(original)
        assert text.endswith("id: timer-x-abcde\nindependent: false\n```\n")
