# taptimer/ui/live_board.py
# Interactive board for one note: digits toggle timers, refreshed in the background until detached

from __future__ import annotations

from readchar import key, readkey
from rich.console import Group, RenderableType
from rich.live import Live
from rich.text import Text

from ..core.coordinator import toggle_timer
from ..core.debug import debug_error
from ..core.scanner import TimerBlock, collect_timer_blocks, distinct_timer_blocks
from ..core.scheduler import RepeatingTask
from ..core.timer_store import TimerStore
from ..core.types import NoteStorage
from ..vault_io.console import get_console
from .rich_components import themed_panel
from .timer_view import render_timer_table

QUIT_KEYS = ("q", "Q", key.ESC, key.CTRL_C)
RESCAN_KEYS = ("r", "R")


class LiveBoard:
    def __init__(
        self,
        storage: NoteStorage,
        store: TimerStore,
        note_path: str,
        refresh_interval_ms: int,
    ) -> None:
        self.storage = storage
        self.store = store
        self.note_path = note_path
        self.refresh_interval = refresh_interval_ms / 1000.0
        self.timers: list[TimerBlock] = []
        self.message = ""
        self._live: Live | None = None
        self.rescan()

    @property
    def attached(self) -> bool:
        return self._live is not None

    # * Re-read the note; blocks may have been added, removed or moved since the last scan
    def rescan(self) -> None:
        text = self.storage.read(self.note_path)
        self.timers = distinct_timer_blocks(collect_timer_blocks(text, self.note_path))

    def render(self) -> RenderableType:
        if self.timers:
            body: RenderableType = render_timer_table(self.store, self.timers)
        else:
            body = Text("(no timers)", style="dim")
        footer = Text("1-9 toggle · r rescan · q quit", style="dim")
        parts: list[RenderableType] = [body, Text(), footer]
        if self.message:
            parts.insert(1, Text(self.message, style="warning"))
        return themed_panel(Group(*parts), title=self.note_path)

    def toggle(self, position: int) -> None:
        if not 1 <= position <= len(self.timers):
            self.message = f"No timer #{position}"
            return
        timer = self.timers[position - 1]
        try:
            toggle_timer(
                self.storage,
                self.store,
                timer.id,
                self.note_path,
                independent=timer.config.independent,
            )
            self.message = ""
        except Exception as e:
            debug_error(e, timer.config.error_notice)
            self.message = timer.config.error_notice

    # * Apply one key press; False ends the session
    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            return False
        if k in RESCAN_KEYS:
            self.rescan()
            self.message = ""
        elif len(k) == 1 and k.isdigit() and k != "0":
            self.toggle(int(k))
        return True

    def _refresh(self) -> None:
        live = self._live
        if live is not None:
            live.update(self.render(), refresh=True)

    def run(self) -> None:
        refresher = RepeatingTask(
            self._refresh,
            self.refresh_interval,
            is_alive=lambda: self.attached,
            name="live-board-refresh",
        )
        with Live(self.render(), console=get_console(), auto_refresh=False) as live:
            self._live = live
            refresher.start()
            try:
                while self.handle_key(readkey()):
                    live.update(self.render(), refresh=True)
            finally:
                self._live = None
                refresher.cancel()
                refresher.join(self.refresh_interval * 2)
