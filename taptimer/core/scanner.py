# taptimer/core/scanner.py
# Line-based tokenizer locating fenced blocks in note text & deriving timer ids

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Pattern

from .block_config import TimerConfig, parse_timer_config
from .constants import BlockKind
from .types import FencedBlock, TimerMeta
from .verbose import vlog_scan

_CLOSING_FENCE = re.compile(r"^```")


@lru_cache(maxsize=None)
def _opening_fence(language: str) -> Pattern[str]:
    return re.compile(rf"^```{re.escape(language)}\s*$", re.IGNORECASE)


# one occurrence of a timer block w/ its parsed config & effective id
@dataclass(frozen=True)
class TimerBlock:
    id: str
    config: TimerConfig
    block: FencedBlock


def split_lines(text: str) -> list[str]:
    return re.split(r"\r?\n", text)


# * Id for a block w/out an explicit id: stable while its opening fence stays on the same line
def location_timer_id(note_path: str, start_line: int) -> str:
    return f"{note_path}:{start_line}"


# * Find every terminated block of one language; unterminated blocks are dropped
def find_blocks(text: str, language: str | BlockKind) -> list[FencedBlock]:
    tag = language.value if isinstance(language, BlockKind) else language
    opening = _opening_fence(tag)
    blocks: list[FencedBlock] = []
    inside = False
    start_line = 0
    buffered: list[str] = []

    for index, line in enumerate(split_lines(text)):
        trimmed = line.strip()
        if not inside:
            if opening.match(trimmed):
                inside = True
                start_line = index
                buffered = []
            continue

        if _CLOSING_FENCE.match(trimmed):
            blocks.append(
                FencedBlock(
                    language=tag,
                    start_line=start_line,
                    end_line=index,
                    source="\n".join(buffered),
                )
            )
            inside = False
            buffered = []
            continue

        buffered.append(line)

    return blocks


def find_first_block(text: str, language: str | BlockKind) -> FencedBlock | None:
    blocks = find_blocks(text, language)
    return blocks[0] if blocks else None


# * Every timer block occurrence in document order (duplicates kept)
def collect_timer_blocks(text: str, note_path: str) -> list[TimerBlock]:
    occurrences = []
    for block in find_blocks(text, BlockKind.TIMER):
        config = parse_timer_config(block.source)
        timer_id = config.id or location_timer_id(note_path, block.start_line)
        occurrences.append(TimerBlock(id=timer_id, config=config, block=block))
    return occurrences


# * One block per id; a later titled duplicate replaces an untitled first one in place
def distinct_timer_blocks(blocks: list[TimerBlock]) -> list[TimerBlock]:
    unique: dict[str, TimerBlock] = {}
    for occurrence in blocks:
        existing = unique.get(occurrence.id)
        if existing is None or (not existing.config.title and occurrence.config.title):
            unique[occurrence.id] = occurrence
    return list(unique.values())


def collect_timers(text: str, note_path: str) -> list[TimerMeta]:
    timers = [
        TimerMeta(
            id=occurrence.id,
            title=occurrence.config.title or "",
            independent=bool(occurrence.config.independent),
        )
        for occurrence in distinct_timer_blocks(collect_timer_blocks(text, note_path))
    ]
    vlog_scan(note_path, BlockKind.TIMER.value, len(timers))
    return timers
