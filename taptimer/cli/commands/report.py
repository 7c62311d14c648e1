# taptimer/cli/commands/report.py
# Generate or refresh the note's timer summary table

from __future__ import annotations

import typer

from rich.text import Text

from ...config.settings import get_settings
from ...core.block_config import parse_report_config
from ...core.constants import BlockKind
from ...core.report import generate_report
from ...vault_io.console import console
from ..actions import run_guarded_action
from ..app import app
from ..decorators import handle_taptimer_error
from ..helpers import action_block, resolve_note
from ..runtime import open_app_context


@app.command()
@handle_taptimer_error
def report(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note to write the summary table into"),
) -> None:
    """Upsert the timer summary table between its markers (after the report block)."""
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        defaults = parse_report_config("")
        note_path = resolve_note(runtime.vault, note, defaults.missing_note_notice)
        block = action_block(runtime.vault, note_path, BlockKind.REPORT)
        config = parse_report_config(block.source) if block else defaults
        section_end = block.end_line if block else None

        run_guarded_action(
            lambda: generate_report(
                runtime.vault, runtime.store, note_path, config, section_end=section_end
            ),
            config.busy_label,
            config.error_notice,
        )
        console.print(Text(config.success_notice, style="success"))
