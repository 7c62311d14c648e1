# tests/unit/core/test_scanner.py
# Unit tests for fenced block discovery, id derivation & timer deduplication

from taptimer.core.constants import BlockKind
from taptimer.core.scanner import (
    collect_timer_blocks,
    collect_timers,
    find_blocks,
    find_first_block,
    location_timer_id,
)


class TestFindBlocks:

    # * Verify block location & buffered source
    def test_locates_blocks(self, workout_note):
        blocks = find_blocks(workout_note, BlockKind.TIMER)
        assert [(b.start_line, b.end_line) for b in blocks] == [(2, 5), (7, 9), (11, 15)]
        assert blocks[0].source == "id: squat\ntitle: Squats"

    # * Verify other block kinds are found by their tag
    def test_report_block(self, workout_note):
        block = find_first_block(workout_note, BlockKind.REPORT)
        assert block is not None
        assert (block.start_line, block.end_line) == (17, 19)
        assert find_first_block(workout_note, BlockKind.SAVE_SESSION) is None

    # * Verify the opening fence is case-insensitive & tolerates indentation/trailing spaces
    def test_fence_matching(self):
        text = "  ```TAP-TIMER   \ntitle: A\n```"
        assert len(find_blocks(text, "tap-timer")) == 1

    # * Verify a longer tag does not open a timer block
    def test_prefix_tag_not_matched(self):
        text = "```tap-timer-report\n```"
        assert find_blocks(text, BlockKind.TIMER) == []

    # * Verify unterminated blocks are dropped
    def test_unterminated_block_dropped(self):
        text = "```tap-timer\ntitle: A\n```\n\n```tap-timer\ntitle: B"
        blocks = find_blocks(text, BlockKind.TIMER)
        assert len(blocks) == 1
        assert blocks[0].source == "title: A"

    # * Verify CRLF notes report the same line numbers
    def test_crlf_lines(self):
        text = "intro\r\n```tap-timer\r\ntitle: A\r\n```\r\n"
        blocks = find_blocks(text, BlockKind.TIMER)
        assert blocks[0].start_line == 1
        assert blocks[0].end_line == 3


class TestCollectTimers:

    # * Verify explicit ids are used & id-less blocks get location ids
    def test_ids(self, workout_note):
        timers = collect_timers(workout_note, "Legs.md")
        assert [t.id for t in timers] == ["squat", "Legs.md:7", "rest"]
        assert [t.title for t in timers] == ["Squats", "Lunges", "Rest"]
        assert [t.independent for t in timers] == [False, False, True]

    # * Verify two id-less blocks get distinct ids stable across rescans
    def test_location_ids_distinct_and_stable(self):
        text = "```tap-timer\n```\n```tap-timer\n```"
        first = [t.id for t in collect_timers(text, "n.md")]
        second = [t.id for t in collect_timers(text, "n.md")]
        assert first == ["n.md:0", "n.md:2"]
        assert first == second

    # * Verify the same block in different notes yields different ids
    def test_location_ids_differ_between_notes(self):
        text = "```tap-timer\n```"
        assert collect_timers(text, "a.md")[0].id != collect_timers(text, "b.md")[0].id
        assert location_timer_id("a.md", 3) == "a.md:3"

    # * Verify duplicates collapse, keeping first position & preferring a titled entry
    def test_dedup_prefers_titled(self):
        text = "\n".join(
            [
                "```tap-timer",
                "id: x",
                "```",
                "```tap-timer",
                "id: y",
                "title: Y",
                "```",
                "```tap-timer",
                "id: x",
                "title: Later title",
                "```",
                "```tap-timer",
                "id: x",
                "title: Ignored",
                "```",
            ]
        )
        timers = collect_timers(text, "n.md")
        assert [t.id for t in timers] == ["x", "y"]
        assert timers[0].title == "Later title"

    # * Verify every occurrence is kept by collect_timer_blocks
    def test_collect_timer_blocks_keeps_duplicates(self):
        text = "```tap-timer\nid: x\n```\n```tap-timer\nid: x\n```"
        blocks = collect_timer_blocks(text, "n.md")
        assert [b.id for b in blocks] == ["x", "x"]
        assert blocks[1].block.start_line == 3

    # * Verify a note w/out timers yields nothing
    def test_no_timers(self):
        assert collect_timers("plain text\n```python\nprint()\n```", "n.md") == []
