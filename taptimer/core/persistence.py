# taptimer/core/persistence.py
# Debounced persistence of the timer store w/ a guaranteed final flush on shutdown

from __future__ import annotations

import threading
from typing import Any, Callable

from .constants import DEFAULT_SAVE_DEBOUNCE_MS
from .debug import debug_error
from .scheduler import DebouncedTask
from .verbose import vlog_state


# * Collapses bursts of store mutations into one write of the whole snapshot
class PersistenceScheduler:
    def __init__(
        self,
        snapshot: Callable[[], dict[str, Any]],
        writer: Callable[[dict[str, Any]], None],
        delay_ms: int = DEFAULT_SAVE_DEBOUNCE_MS,
    ):
        self._snapshot = snapshot
        self._writer = writer
        self._task = DebouncedTask(self.flush, delay_ms / 1000.0, name="state-flush")
        self.flush_count = 0
        # the timer thread & shutdown may flush at the same time
        self._write_lock = threading.Lock()
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._task.pending

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self) -> None:
        if not self._closed:
            self._task.schedule()

    # best-effort: a failed write is logged & left for the next trigger; no-op once shut down
    def flush(self) -> bool:
        with self._write_lock:
            if self._closed:
                return False
            return self._write()

    # caller holds _write_lock
    def _write(self) -> bool:
        try:
            state = self._snapshot()
            self._writer(state)
        except Exception as e:
            debug_error(e, "Could not persist timer state")
            return False
        self.flush_count += 1
        vlog_state(f"Flushed {len(state.get('timers', {}))} timer record(s)")
        return True

    # * Stop debouncing & write the final snapshot; nothing is written after this returns
    def shutdown(self) -> bool:
        self._task.cancel(wait=True)
        with self._write_lock:
            if self._closed:
                return False
            self._closed = True
            return self._write()

