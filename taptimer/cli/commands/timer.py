# taptimer/cli/commands/timer.py
# Timer commands: insert a new timer block, list a note's timers & toggle one of them

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.coordinator import toggle_timer
from ...core.insert import insert_timer_block
from ...core.scanner import distinct_timer_blocks
from ...ui.theming.styled_helpers import styled_success_line
from ...ui.timer_view import render_timer, render_timer_table
from ...vault_io.console import console
from ..actions import run_guarded_action
from ..app import app
from ..decorators import handle_taptimer_error
from ..helpers import MISSING_NOTE_NOTICE, note_timer_blocks, resolve_note, resolve_timer
from ..runtime import open_app_context


# * Insert a fresh timer block w/ a globally unique id
@app.command()
@handle_taptimer_error
def new(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note to insert the timer into"),
    title: str = typer.Option("New timer", "--title", "-t", help="Timer title"),
    independent: bool = typer.Option(
        False, "--independent", help="Do not pause sibling timers when started"
    ),
    line: Optional[int] = typer.Option(
        None, "--line", min=1, help="Insert before this 1-based line (default: end of note)"
    ),
) -> None:
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        note_path = resolve_note(runtime.vault, note, MISSING_NOTE_NOTICE)
        timer_id = insert_timer_block(
            runtime.vault, note_path, title=title, independent=independent, before_line=line
        )
    console.print(*styled_success_line("Inserted timer", timer_id))


# * Show every distinct timer of a note w/ its current time
@app.command(name="list")
@handle_taptimer_error
def list_timers(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note to scan"),
) -> None:
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        note_path = resolve_note(runtime.vault, note, MISSING_NOTE_NOTICE)
        timers = distinct_timer_blocks(note_timer_blocks(runtime.vault, note_path))
        if not timers:
            console.print("[dim](no timers)[/]")
            return
        console.print(f"[taptimer.accent]{note_path}[/]")
        console.print(render_timer_table(runtime.store, timers))


# * Start or pause one timer; starting a standard timer pauses its siblings
@app.command()
@handle_taptimer_error
def toggle(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note holding the timer"),
    timer: str = typer.Argument(..., help="Timer id or 1-based position in the note"),
) -> None:
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        note_path = resolve_note(runtime.vault, note, MISSING_NOTE_NOTICE)
        selected = resolve_timer(note_timer_blocks(runtime.vault, note_path), timer)
        run_guarded_action(
            lambda: toggle_timer(
                runtime.vault,
                runtime.store,
                selected.id,
                note_path,
                independent=selected.config.independent,
            ),
            None,
            selected.config.error_notice,
        )
        console.print(render_timer(runtime.store, selected))
