# taptimer/core/session.py
# Session snapshots of a note's timers, markdown rendering & append-only session log

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from .block_config import SaveSessionConfig
from .constants import ZERO_DURATION
from .exceptions import NoteNotFoundError
from .formatting import (
    escape_table_cell,
    format_duration,
    iso_timestamp,
    local_timestamp,
    random_suffix,
)
from .output import LogCategory
from .scanner import collect_timers
from .timer_store import TimerStore
from .types import NoteStorage, Session, SessionDetail, TimerMeta
from .verbose import vlog


# * Snapshot every timer's elapsed time at this moment
def build_session(
    note_path: str,
    workout: str,
    timers: Sequence[TimerMeta],
    store: TimerStore,
    now: datetime | None = None,
) -> Session:
    created_at = now or datetime.now().astimezone()
    details = []
    for timer in timers:
        elapsed_ms = store.elapsed_snapshot(timer.id)
        details.append(
            SessionDetail(
                id=timer.id,
                section=timer.title or timer.id,
                elapsed_ms=elapsed_ms,
                elapsed_text=format_duration(elapsed_ms),
            )
        )
    total_ms = sum(item.elapsed_ms for item in details)
    created_iso = iso_timestamp(created_at)

    return Session(
        session_id=f"{created_iso}-{random_suffix()}",
        created_at_iso=created_iso,
        created_at_local=local_timestamp(created_at),
        note_path=note_path,
        workout=workout,
        details=tuple(details),
        total_ms=total_ms,
        total_text=format_duration(total_ms),
    )


def render_session(session: Session, config: SaveSessionConfig) -> str:
    lines = [
        f"## {config.session_prefix} {session.session_id}",
        f"- {config.date_label}: {session.created_at_local}",
        f"- {config.date_iso_label}: {session.created_at_iso}",
        f"- {config.workout_label}: {session.workout}",
        f"- {config.note_label}: {session.note_path}",
        f"- {config.total_time_label}: {session.total_text}",
        "",
        f"| {escape_table_cell(config.section_header)} | {escape_table_cell(config.id_header)} "
        f"| {escape_table_cell(config.time_header)} |",
        "| --- | --- | --- |",
    ]

    if not session.details:
        lines.append(
            f"| {escape_table_cell(config.empty_section_label)} |  | {ZERO_DURATION} |"
        )
    else:
        for item in session.details:
            lines.append(
                f"| {escape_table_cell(item.section)} | {escape_table_cell(item.id)} "
                f"| {item.elapsed_text} |"
            )

    lines.extend(["", "---", ""])
    return "\n".join(lines)


# * Create each missing parent folder of file_path, outermost first
def ensure_folders_for_file(storage: NoteStorage, file_path: str) -> None:
    parts = [part for part in str(file_path or "").split("/") if part]
    if len(parts) <= 1:
        return

    current = ""
    for part in parts[:-1]:
        current = f"{current}/{part}" if current else part
        if not storage.exists(current):
            storage.create_folder(current)


# * Append a rendered session to the log note, creating it w/ the history title on first use
def append_session(
    storage: NoteStorage,
    log_path: str,
    session_markdown: str,
    history_title: str,
) -> None:
    ensure_folders_for_file(storage, log_path)

    if not storage.is_note(log_path):
        storage.create(log_path, "\n".join([history_title, "", session_markdown]))
        return

    content = storage.read(log_path)
    separator = "" if content.endswith("\n") else "\n"
    storage.modify(log_path, f"{content}{separator}\n{session_markdown}")


def save_session(
    storage: NoteStorage,
    store: TimerStore,
    note_path: str,
    config: SaveSessionConfig,
    now: datetime | None = None,
) -> Session:
    if not storage.is_note(note_path):
        raise NoteNotFoundError(f"Note not found: {note_path}", note_path)

    content = storage.read(note_path)
    timers = collect_timers(content, note_path)
    session = build_session(note_path, config.workout, timers, store, now=now)
    append_session(storage, config.log_path, render_session(session, config), config.history_title)
    vlog(LogCategory.SESSION, f"Session appended to {config.log_path}", f"total={session.total_text}")
    return session
