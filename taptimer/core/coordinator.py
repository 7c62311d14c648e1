# taptimer/core/coordinator.py
# Per-note timer coordination: pausing sibling timers, the toggle state machine & reset-all

from __future__ import annotations

from .output import LogCategory
from .scanner import collect_timers
from .timer_store import TimerStore
from .types import NoteStorage, TimerRecord
from .verbose import vlog


# * Pause every other standard timer of a note; True if any timer actually stopped
def pause_sibling_timers(
    storage: NoteStorage,
    store: TimerStore,
    note_path: str | None,
    exclude_id: str,
) -> bool:
    if not note_path or not storage.is_note(note_path):
        return False

    text = storage.read(note_path)
    changed = False
    for meta in collect_timers(text, note_path):
        if meta.id == exclude_id or meta.independent:
            continue
        changed = store.pause(meta.id) or changed

    if changed:
        vlog(LogCategory.TIMER, f"Paused sibling timers in {note_path}")
    return changed


# * RUNNING -> PAUSED directly; PAUSED -> RUNNING pauses standard siblings first
def toggle_timer(
    storage: NoteStorage,
    store: TimerStore,
    timer_id: str,
    note_path: str | None,
    independent: bool = False,
) -> TimerRecord:
    record = store.ensure(timer_id)

    if record.is_running:
        store.pause(timer_id)
    else:
        if not independent:
            pause_sibling_timers(storage, store, note_path, timer_id)
        store.start(timer_id)

    store.touch()
    return record


# * Zero every distinct timer of a note; returns how many were reset
def reset_all_timers(storage: NoteStorage, store: TimerStore, note_path: str) -> int:
    text = storage.read(note_path)
    timers = collect_timers(text, note_path)

    for meta in timers:
        store.reset(meta.id)

    store.touch()
    return len(timers)
