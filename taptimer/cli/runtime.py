# taptimer/cli/runtime.py
# Application context: vault, timer store & persistence wired together for one CLI invocation

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from ..config.settings import TapTimerSettings
from ..core.persistence import PersistenceScheduler
from ..core.timer_store import Clock, TimerStore
from ..core.verbose import vlog_config, vlog_state
from ..vault_io.state_file import StateFile
from ..vault_io.vault import Vault


@dataclass
class AppContext:
    settings: TapTimerSettings
    vault: Vault
    store: TimerStore
    state_file: StateFile
    persistence: PersistenceScheduler


# * Load the store once, flush it on every mutation (debounced) & unconditionally on exit
@contextmanager
def open_app_context(
    settings: TapTimerSettings,
    clock: Clock | None = None,
) -> Iterator[AppContext]:
    vault = Vault(settings.vault_path)
    state_file = StateFile(settings.state_path.resolve())
    vlog_config("vault", vault.root)
    vlog_config("state_file", state_file.path)

    store = TimerStore.from_state(state_file.load(), clock=clock)
    vlog_state(f"Loaded {len(store)} timer record(s)")

    persistence = PersistenceScheduler(
        store.to_state, state_file.save, delay_ms=settings.save_debounce_ms
    )
    store.on_change = persistence.schedule

    try:
        yield AppContext(
            settings=settings,
            vault=vault,
            store=store,
            state_file=state_file,
            persistence=persistence,
        )
    finally:
        store.on_change = None
        persistence.shutdown()
