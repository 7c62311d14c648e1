# taptimer/core/insert.py
# Insertion of freshly created timer blocks into a note

from __future__ import annotations

from .constants import BlockKind
from .formatting import create_timer_id
from .output import LogCategory
from .scanner import split_lines
from .types import NoteStorage
from .verbose import vlog


def render_timer_block(timer_id: str, title: str = "New timer", independent: bool = False) -> str:
    return "\n".join(
        [
            f"```{BlockKind.TIMER.value}",
            f"title: {title}",
            f"id: {timer_id}",
            f"independent: {'true' if independent else 'false'}",
            "```",
        ]
    )


# * Insert a block before the 1-based `before_line`, or append it after the note's existing lines
def insert_block_lines(lines: list[str], block: str, before_line: int | None = None) -> list[str]:
    updated = list(lines)
    block_lines = split_lines(block)

    if before_line is None:
        if updated in ([], [""]):
            return [*block_lines, ""]
        # a note ending in a newline already supplies the separating blank line
        separator = [] if updated[-1] == "" else [""]
        return [*updated, *separator, *block_lines, ""]

    index = min(max(before_line - 1, 0), len(updated))
    updated[index:index] = [*block_lines, ""]
    return updated


# * Add a new timer w/ a globally unique id to the note; returns the id
def insert_timer_block(
    storage: NoteStorage,
    note_path: str,
    title: str = "New timer",
    independent: bool = False,
    before_line: int | None = None,
    timer_id: str | None = None,
) -> str:
    timer_id = timer_id or create_timer_id()
    content = storage.read(note_path)
    block = render_timer_block(timer_id, title, independent)
    lines = insert_block_lines(split_lines(content), block, before_line)
    storage.modify(note_path, "\n".join(lines))
    vlog(LogCategory.TIMER, f"Inserted timer block {timer_id} in {note_path}")
    return timer_id
