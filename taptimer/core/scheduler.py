# taptimer/core/scheduler.py
# Cancellable single-shot (debounced) & repeating background tasks built on threading

from __future__ import annotations

import threading
from threading import Timer
from typing import Callable

from .debug import debug_error


# single-shot task that restarts its countdown on every schedule() call
class DebouncedTask:
    def __init__(self, action: Callable[[], None], delay: float, name: str = "debounced"):
        self.action = action
        self.delay = delay
        self.name = name
        self._timer: Timer | None = None
        # most recently started timer; may still be running its action after firing
        self._last: Timer | None = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    # cancel existing timer & start new one (debounce)
    def schedule(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = Timer(self.delay, self._fire)
            timer.daemon = True
            self._timer = timer
            self._last = timer
            timer.start()

    # * Cancel the pending countdown; w/ wait=True also block until an already fired action returns
    def cancel(self, wait: bool = False) -> bool:
        with self._lock:
            timer, self._timer = self._timer, None
            last, self._last = self._last, None
        if timer is not None:
            timer.cancel()
        if wait and last is not None and last is not threading.current_thread():
            last.join()
        return timer is not None

    def _fire(self) -> None:
        with self._lock:
            # a newer schedule() may have replaced this timer while it was firing
            if self._timer is threading.current_thread():
                self._timer = None
        try:
            self.action()
        except Exception as e:
            debug_error(e, f"{self.name} task failed")


# repeating task bound to the lifetime of its target; stops itself once is_alive() turns False
class RepeatingTask:
    def __init__(
        self,
        action: Callable[[], None],
        interval: float,
        is_alive: Callable[[], bool] | None = None,
        name: str = "repeating",
    ):
        self.action = action
        self.interval = interval
        self.is_alive = is_alive or (lambda: True)
        self.name = name
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def cancel(self) -> None:
        self._stop.set()

    # block until the worker exits (after cancel or detach)
    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            if not self.is_alive():
                break
            try:
                self.action()
            except Exception as e:
                debug_error(e, f"{self.name} task failed")
        self._stop.set()
