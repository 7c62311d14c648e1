# taptimer/core/report.py
# Markdown summary table of a note's timers & idempotent upsert between sentinel markers

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from .block_config import ReportConfig
from .constants import REPORT_START_MARKER, REPORT_END_MARKER, ZERO_DURATION
from .formatting import escape_table_cell, format_duration, local_timestamp
from .output import LogCategory
from .scanner import collect_timers, split_lines
from .timer_store import TimerStore
from .types import NoteStorage, TimerMeta
from .verbose import vlog


def build_report_table(
    note_path: str,
    timers: Sequence[TimerMeta],
    store: TimerStore,
    config: ReportConfig,
    now: datetime | None = None,
) -> str:
    rows = [
        f"| {escape_table_cell(config.id_header)} | {escape_table_cell(config.title_header)} "
        f"| {escape_table_cell(config.value_header)} |",
        "| --- | --- | --- |",
    ]

    for timer in timers:
        elapsed_text = format_duration(store.elapsed_snapshot(timer.id))
        rows.append(
            f"| {escape_table_cell(timer.id)} | {escape_table_cell(timer.title)} | {elapsed_text} |"
        )

    if not timers:
        rows.append(f"| {escape_table_cell(config.empty_label)} |  | {ZERO_DURATION} |")

    updated = local_timestamp(now or datetime.now())
    return "\n".join(
        [
            f"## {config.report_title}",
            "",
            f"{config.note_label}: {note_path}",
            f"{config.updated_label}: {updated}",
            "",
            *rows,
        ]
    )


def _index_of(lines: list[str], needle: str) -> int:
    try:
        return lines.index(needle)
    except ValueError:
        return -1


# * Replace a previous marker-bounded report, or insert one after section_end (default: end of note)
def upsert_report_lines(
    lines: list[str],
    report: str,
    section_end: int | None = None,
) -> list[str]:
    updated = list(lines)
    start_idx = _index_of(updated, REPORT_START_MARKER)
    end_idx = _index_of(updated, REPORT_END_MARKER)
    wrapped = [REPORT_START_MARKER, report, REPORT_END_MARKER]

    if start_idx != -1 and end_idx != -1 and end_idx >= start_idx:
        updated[start_idx : end_idx + 1] = wrapped
        return updated

    line_end = section_end if section_end is not None else len(updated) - 1
    insert_at = min(len(updated), line_end + 1)
    updated[insert_at:insert_at] = ["", *wrapped, ""]
    return updated


def upsert_report(
    storage: NoteStorage,
    note_path: str,
    report: str,
    section_end: int | None = None,
) -> None:
    content = storage.read(note_path)
    lines = upsert_report_lines(split_lines(content), report, section_end)
    storage.modify(note_path, "\n".join(lines))


# * Scan the note, build the table & upsert it; returns the generated table
def generate_report(
    storage: NoteStorage,
    store: TimerStore,
    note_path: str,
    config: ReportConfig,
    section_end: int | None = None,
    now: datetime | None = None,
) -> str:
    content = storage.read(note_path)
    timers = collect_timers(content, note_path)
    report = build_report_table(note_path, timers, store, config, now=now)
    upsert_report(storage, note_path, report, section_end)
    vlog(LogCategory.REPORT, f"Report upserted in {note_path}", f"{len(timers)} timer(s)")
    return report
