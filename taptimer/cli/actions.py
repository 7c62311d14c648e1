# taptimer/cli/actions.py
# Guarded runner for user-triggered note actions: busy indicator, single failure notice, exit code

from __future__ import annotations

from contextlib import nullcontext
from typing import Callable, TypeVar

import typer

from rich.text import Text

from ..core.debug import debug_error
from ..vault_io.console import console
from .helpers import is_test_environment

T = TypeVar("T")


# * Run an action behind its busy label; any failure is logged & reported once w/ error_notice
def run_guarded_action(
    action: Callable[[], T],
    busy_label: str | None,
    error_notice: str,
) -> T:
    status = (
        nullcontext()
        if not busy_label or is_test_environment()
        else console.status(f"[taptimer.accent2]{busy_label}[/]", spinner="dots")
    )
    try:
        with status:
            return action()
    except typer.Exit:
        raise
    except Exception as e:
        debug_error(e, error_notice)
        console.print(Text(error_notice, style="error"))
        raise typer.Exit(1)
