# tests/unit/core/test_persistence.py
# Unit tests for debounced store persistence & the final flush on shutdown

import threading
import time
from unittest.mock import MagicMock

from taptimer.core.persistence import PersistenceScheduler
from taptimer.core.timer_store import TimerStore


class TestPersistenceScheduler:

    # * Verify a burst of mutations produces one write of the latest snapshot
    def test_debounced_single_write(self, clock):
        store = TimerStore(clock=clock)
        writer = MagicMock()
        persistence = PersistenceScheduler(store.to_state, writer, delay_ms=100)
        store.on_change = persistence.schedule

        store.ensure("a")
        store.ensure("b")
        store.ensure("c")
        time.sleep(0.4)

        writer.assert_called_once()
        assert set(writer.call_args.args[0]["timers"]) == {"a", "b", "c"}
        assert persistence.pending is False

    # * Verify shutdown cancels the pending write & flushes synchronously
    def test_shutdown_flushes(self):
        writer = MagicMock()
        persistence = PersistenceScheduler(lambda: {"timers": {}}, writer, delay_ms=10_000)
        persistence.schedule()
        assert persistence.pending is True

        assert persistence.shutdown() is True
        writer.assert_called_once_with({"timers": {}})
        assert persistence.pending is False

    # * Verify shutdown writes even when nothing is pending
    def test_shutdown_unconditional(self):
        writer = MagicMock()
        persistence = PersistenceScheduler(lambda: {"timers": {}}, writer)
        persistence.shutdown()
        writer.assert_called_once()

    # * Verify write failures are swallowed & reported as False
    def test_flush_failure_best_effort(self):
        writer = MagicMock(side_effect=OSError("read-only"))
        persistence = PersistenceScheduler(lambda: {"timers": {}}, writer)
        assert persistence.flush() is False
        assert persistence.flush_count == 0

    # * Verify no write lands after shutdown returns, even w/ a zero debounce racing it
    def test_no_write_after_shutdown(self):
        for _ in range(50):
            writes: list[float] = []
            persistence = PersistenceScheduler(
                lambda: {"timers": {}}, lambda state: writes.append(time.monotonic()), delay_ms=0
            )
            persistence.schedule()
            persistence.shutdown()
            returned_at = time.monotonic()
            time.sleep(0.005)
            assert all(at <= returned_at for at in writes)
            assert persistence.closed is True

    # * Verify a flush already in progress finishes before the final write
    def test_shutdown_waits_for_in_flight_flush(self):
        entered = threading.Event()
        release = threading.Event()
        order: list[str] = []

        def writer(state):
            if not entered.is_set():
                entered.set()
                release.wait(2.0)
                order.append("debounced")
            else:
                order.append("final")

        persistence = PersistenceScheduler(lambda: {"timers": {}}, writer, delay_ms=0)
        persistence.schedule()
        assert entered.wait(2.0)

        threading.Timer(0.1, release.set).start()
        assert persistence.shutdown() is True
        assert order == ["debounced", "final"]

    # * Verify flush & schedule are no-ops once shut down
    def test_closed_after_shutdown(self):
        writer = MagicMock()
        persistence = PersistenceScheduler(lambda: {"timers": {}}, writer, delay_ms=0)
        persistence.shutdown()
        writer.reset_mock()

        persistence.schedule()
        assert persistence.pending is False
        assert persistence.flush() is False
        assert persistence.shutdown() is False
        writer.assert_not_called()
