# taptimer/cli/commands/live.py
# Interactive board toggling a note's timers from the keyboard

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...vault_io.console import console, is_interactive
from ...ui.live_board import LiveBoard
from ..app import app
from ..decorators import handle_taptimer_error
from ..helpers import MISSING_NOTE_NOTICE, is_test_environment, resolve_note
from ..runtime import open_app_context


@app.command()
@handle_taptimer_error
def live(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note whose timers are shown"),
) -> None:
    """Live board: 1-9 toggles a timer, r rescans the note, q or Esc quits."""
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        note_path = resolve_note(runtime.vault, note, MISSING_NOTE_NOTICE)
        if is_test_environment() or not is_interactive():
            console.print("[warning]The live board needs an interactive terminal[/]")
            raise typer.Exit(1)

        LiveBoard(
            runtime.vault,
            runtime.store,
            note_path,
            refresh_interval_ms=settings.refresh_interval_ms,
        ).run()
