# taptimer/cli/commands/session.py
# Save a session snapshot of a note's timers to the session log note

from __future__ import annotations

import typer

from rich.text import Text

from ...config.settings import get_settings
from ...core.block_config import apply_template, parse_save_session_config
from ...core.constants import BlockKind
from ...core.session import save_session
from ...vault_io.console import console
from ..actions import run_guarded_action
from ..app import app
from ..decorators import handle_taptimer_error
from ..helpers import action_block, confirm_action, resolve_note
from ..runtime import open_app_context


@app.command()
@handle_taptimer_error
def save(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note whose timers are recorded"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Append a session record (per-timer & total time) to the log note."""
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        defaults = parse_save_session_config("", note)
        note_path = resolve_note(runtime.vault, note, defaults.missing_note_notice)
        block = action_block(runtime.vault, note_path, BlockKind.SAVE_SESSION)
        config = parse_save_session_config(block.source if block else "", note_path)

        if not confirm_action(settings, config.confirm, yes):
            console.print("[dim]Cancelled[/]")
            return

        session = run_guarded_action(
            lambda: save_session(runtime.vault, runtime.store, note_path, config),
            config.busy_label,
            config.error_notice,
        )
        notice = apply_template(
            config.success_notice, {"log": config.log_path, "total": session.total_text}
        )
        console.print(Text(notice, style="success"))
