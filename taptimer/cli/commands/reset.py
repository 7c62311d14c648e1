# taptimer/cli/commands/reset.py
# Reset every timer of a note after confirmation

from __future__ import annotations

import typer

from rich.text import Text

from ...config.settings import get_settings
from ...core.block_config import apply_template, parse_reset_all_config
from ...core.constants import BlockKind
from ...core.coordinator import reset_all_timers
from ...vault_io.console import console
from ..actions import run_guarded_action
from ..app import app
from ..decorators import handle_taptimer_error
from ..helpers import action_block, confirm_action, resolve_note
from ..runtime import open_app_context


@app.command()
@handle_taptimer_error
def reset(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note whose timers are reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Reset all timers of a note to 00:00:00."""
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        defaults = parse_reset_all_config("")
        note_path = resolve_note(runtime.vault, note, defaults.missing_note_notice)
        block = action_block(runtime.vault, note_path, BlockKind.RESET_ALL)
        config = parse_reset_all_config(block.source) if block else defaults

        if not confirm_action(settings, config.confirm, yes):
            console.print("[dim]Cancelled[/]")
            return

        count = run_guarded_action(
            lambda: reset_all_timers(runtime.vault, runtime.store, note_path),
            config.busy_label,
            config.error_notice,
        )
        notice = apply_template(config.success_notice, {"count": count})
        console.print(Text(notice, style="success"))
