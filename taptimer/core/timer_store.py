# taptimer/core/timer_store.py
# In-memory timer state keyed by timer id w/ start/pause/reset transitions & persisted-shape conversion

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Iterator

from .types import TimerRecord
from .verbose import vlog_timer

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


# * Single mutable store of timer records; owned by the application context & passed by handle
class TimerStore:
    def __init__(
        self,
        timers: dict[str, TimerRecord] | None = None,
        clock: Clock | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._timers: dict[str, TimerRecord] = dict(timers or {})
        self._clock = clock or wall_clock_ms
        self._lock = threading.RLock()
        # persistence hook, wired to the debounced flush by the owner
        self.on_change = on_change

    # build from persisted `{timers: {...}}` data merged over an empty default
    @classmethod
    def from_state(
        cls,
        data: dict[str, Any] | None,
        clock: Clock | None = None,
    ) -> "TimerStore":
        state: dict[str, Any] = {"timers": {}, **(data or {})}
        raw_timers = state.get("timers")
        if not isinstance(raw_timers, dict):
            raw_timers = {}
        timers = {
            str(timer_id): TimerRecord.from_dict(raw)
            for timer_id, raw in raw_timers.items()
        }
        return cls(timers, clock=clock)

    # * Whole store in the persisted shape
    def to_state(self) -> dict[str, Any]:
        with self._lock:
            return {
                "timers": {
                    timer_id: record.to_dict()
                    for timer_id, record in self._timers.items()
                }
            }

    def now(self) -> int:
        return self._clock()

    def touch(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def get(self, timer_id: str) -> TimerRecord | None:
        return self._timers.get(timer_id)

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._timers)

    def __contains__(self, timer_id: object) -> bool:
        return timer_id in self._timers

    def __len__(self) -> int:
        return len(self._timers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())

    # * Existing record, or a new paused zero record (persistence scheduled only on creation)
    def ensure(self, timer_id: str) -> TimerRecord:
        with self._lock:
            record = self._timers.get(timer_id)
            created = record is None
            if record is None:
                record = TimerRecord()
                self._timers[timer_id] = record
        if created:
            vlog_timer(timer_id, "created")
            self.touch()
        return record

    def elapsed_ms(self, record: TimerRecord) -> int:
        if not record.is_running or record.started_at is None:
            return record.elapsed_ms
        return record.elapsed_ms + max(0, self.now() - record.started_at)

    # projection only; unknown ids read as zero
    def elapsed_snapshot(self, timer_id: str) -> int:
        with self._lock:
            record = self._timers.get(timer_id)
            if record is None:
                return 0
            return self.elapsed_ms(record)

    def start(self, timer_id: str) -> None:
        record = self.ensure(timer_id)
        with self._lock:
            if record.is_running:
                return
            record.is_running = True
            record.started_at = self.now()
        vlog_timer(timer_id, "started", record.elapsed_ms)

    # * Fold running time into elapsed_ms; False when the timer was not running
    def pause(self, timer_id: str) -> bool:
        record = self.ensure(timer_id)
        with self._lock:
            if not record.is_running:
                return False
            record.elapsed_ms = self.elapsed_ms(record)
            record.is_running = False
            record.started_at = None
        vlog_timer(timer_id, "paused", record.elapsed_ms)
        return True

    def reset(self, timer_id: str) -> None:
        record = self.ensure(timer_id)
        with self._lock:
            record.elapsed_ms = 0
            record.is_running = False
            record.started_at = None
        vlog_timer(timer_id, "reset", 0)
