# taptimer/ui/timer_view.py
# Rich rendering of timer blocks: title, live elapsed time & the label of the next action

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from ..core.formatting import format_duration
from ..core.scanner import TimerBlock
from ..core.timer_store import TimerStore
from .rich_components import themed_table
from .theming.theme_engine import TapTimerColors


def is_running(store: TimerStore, timer_id: str) -> bool:
    record = store.get(timer_id)
    return record is not None and record.is_running


# label of the button a click would trigger: stopLabel while running, startLabel otherwise
def action_label(store: TimerStore, timer: TimerBlock) -> str:
    if is_running(store, timer.id):
        return timer.config.stop_label
    return timer.config.start_label


# * One-line rendering of a single timer, as shown after a toggle
def render_timer(store: TimerStore, timer: TimerBlock) -> Text:
    running = is_running(store, timer.id)
    line = Text()
    if timer.config.title:
        line.append(timer.config.title, style="timer.title")
        line.append("  ")
    line.append(format_duration(store.elapsed_snapshot(timer.id)), style="timer.time")
    line.append("  ")
    line.append(
        "running" if running else "paused",
        style="timer.running" if running else "timer.paused",
    )
    line.append(f"  [{action_label(store, timer)}]", style="dim")
    return line


# * Table of every distinct timer of a note, numbered from 1
def render_timer_table(store: TimerStore, timers: Sequence[TimerBlock]) -> Table:
    table = themed_table(show_header=True, header_style="bold", pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style=f"bold {TapTimerColors.ACCENT_LIGHT}")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Time", style=f"bold {TapTimerColors.ACCENT_PRIMARY}", justify="right")
    table.add_column("State")
    table.add_column("Action", style=TapTimerColors.ACCENT_SECONDARY)

    for index, timer in enumerate(timers, start=1):
        running = is_running(store, timer.id)
        flags = " (independent)" if timer.config.independent else ""
        table.add_row(
            str(index),
            timer.config.title,
            timer.id,
            format_duration(store.elapsed_snapshot(timer.id)),
            Text(
                ("running" if running else "paused") + flags,
                style="timer.running" if running else "timer.paused",
            ),
            action_label(store, timer),
        )
    return table
