# taptimer/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables (TAPTIMER_VAULT) once at startup
load_dotenv()

from ..config.settings import TapTimerSettings, settings_manager, with_overrides


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    help="Track tap timers embedded in markdown notes.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Resolve settings, theme & logging before any subcommand runs
@app.callback()
def main_callback(
    ctx: typer.Context,
    vault: Optional[Path] = typer.Option(
        None, "--vault", help="Vault directory (overrides TAPTIMER_VAULT & vault_dir)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    base = ctx.obj if isinstance(ctx.obj, TapTimerSettings) else settings_manager.load()
    try:
        ctx.obj = with_overrides(base, vault)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--vault")

    from ..ui.theming.console_theme import refresh_theme

    refresh_theme()

    # must be after settings load to check dev_mode
    from ..core.verbose import init_verbose, cleanup_verbose

    verbose_enabled = verbose or log_file is not None
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=ctx.obj.dev_mode)
    ctx.call_on_close(cleanup_verbose)


# ! import command modules here to avoid circular import w/ app object
from .commands import timer as _timer  # noqa: F401,E402
from .commands import report as _report  # noqa: F401,E402
from .commands import reset as _reset  # noqa: F401,E402
from .commands import session as _session  # noqa: F401,E402
from .commands import live as _live  # noqa: F401,E402
from .commands import state as _state  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
