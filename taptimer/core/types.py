# taptimer/core/types.py
# Core value types: timer records, scanner output & fenced block locations

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


# mutable per-timer state; started_at is set iff is_running
@dataclass
class TimerRecord:
    elapsed_ms: int = 0
    is_running: bool = False
    started_at: int | None = None

    # * Serialize w/ the persisted camelCase keys
    def to_dict(self) -> dict[str, Any]:
        return {
            "elapsedMs": self.elapsed_ms,
            "isRunning": self.is_running,
            "startedAt": self.started_at,
        }

    # * Rebuild from persisted data, coercing bad values so the running invariant holds
    @classmethod
    def from_dict(cls, data: Any) -> "TimerRecord":
        if not isinstance(data, dict):
            return cls()

        elapsed = data.get("elapsedMs", 0)
        if isinstance(elapsed, bool) or not isinstance(elapsed, (int, float)):
            elapsed = 0
        elapsed = max(0, int(elapsed))

        started_at = data.get("startedAt")
        if isinstance(started_at, bool) or not isinstance(started_at, (int, float)):
            started_at = None
        else:
            started_at = int(started_at)

        is_running = data.get("isRunning") is True and started_at is not None
        return cls(
            elapsed_ms=elapsed,
            is_running=is_running,
            started_at=started_at if is_running else None,
        )


# one distinct timer discovered in a note
@dataclass(frozen=True)
class TimerMeta:
    id: str
    title: str = ""
    independent: bool = False


# location & raw text of one fenced block (0-based line indexes of both fences)
@dataclass(frozen=True)
class FencedBlock:
    language: str
    start_line: int
    end_line: int
    source: str


# per-timer line of a saved session
@dataclass(frozen=True)
class SessionDetail:
    id: str
    section: str
    elapsed_ms: int
    elapsed_text: str


# immutable snapshot of a note's timers at save time
@dataclass(frozen=True)
class Session:
    session_id: str
    created_at_iso: str
    created_at_local: str
    note_path: str
    workout: str
    details: tuple[SessionDetail, ...] = field(default_factory=tuple)
    total_ms: int = 0
    total_text: str = "00:00:00"


# host document storage as seen by the core (implemented by vault_io.vault.Vault)
class NoteStorage(Protocol):
    def exists(self, path: str) -> bool: ...

    def is_note(self, path: str) -> bool: ...

    def read(self, note_path: str) -> str: ...

    def modify(self, note_path: str, text: str) -> None: ...

    def create(self, note_path: str, text: str) -> None: ...

    def create_folder(self, path: str) -> None: ...
