# taptimer/cli/commands/state.py
# Inspect the persisted timer store (every record, including orphans of deleted blocks)

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.formatting import format_duration
from ...ui.rich_components import themed_table
from ...vault_io.console import console
from ..app import app
from ..decorators import handle_taptimer_error
from ..runtime import open_app_context

state_app = typer.Typer(rich_markup_mode="rich", help="Inspect the persisted timer state")
app.add_typer(state_app, name="state")


def _show(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    with open_app_context(settings) as runtime:
        store = runtime.store
        ids = sorted(store.ids())
        if not ids:
            console.print("[dim](no timers stored)[/]")
            return

        table = themed_table(show_header=True, header_style="bold")
        table.add_column("ID", overflow="fold")
        table.add_column("Time", justify="right")
        table.add_column("State")
        for timer_id in ids:
            record = store.get(timer_id)
            running = record is not None and record.is_running
            table.add_row(
                timer_id,
                format_duration(store.elapsed_snapshot(timer_id)),
                "running" if running else "paused",
            )
        console.print(table)


@state_app.callback(invoke_without_command=True)
@handle_taptimer_error
def state_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _show(ctx)


@state_app.command()
@handle_taptimer_error
def show(ctx: typer.Context) -> None:
    _show(ctx)


# * Print the state file location for the current vault
@state_app.command()
@handle_taptimer_error
def path(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    console.print(
        str(settings.state_path.resolve()), soft_wrap=True, markup=False, highlight=False
    )
