# taptimer/cli/helpers.py
# Shared CLI helpers: note & timer resolution, action-block lookup & confirmation prompts

from __future__ import annotations

import os
from pathlib import Path

import typer

from rich.text import Text

from ..config.settings import TapTimerSettings
from ..core.constants import BlockKind
from ..core.exceptions import FileOperationError, TimerNotFoundError
from ..core.scanner import (
    TimerBlock,
    collect_timer_blocks,
    distinct_timer_blocks,
    find_first_block,
)
from ..core.types import FencedBlock
from ..vault_io.console import console
from ..vault_io.vault import Vault

# notice for commands whose note has no action block to supply one
MISSING_NOTE_NOTICE = "Could not identify the note."

# ---------------------------------------------------------------------------
# ACTION COMMAND PATTERN
# ---------------------------------------------------------------------------
#   settings = get_settings(ctx)
#   with open_app_context(settings) as app:
#       note_path = resolve_note(app.vault, note, <missing notice>)
#       block = action_block(app.vault, note_path, BlockKind.<KIND>)
#       config = parse_<kind>_config(block.source if block else "")
#       run_guarded_action(lambda: ..., config.busy_label, config.error_notice)
# ---------------------------------------------------------------------------


# * Detect if running in test environment to avoid TTY-dependent features
def is_test_environment() -> bool:
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True

    # typer test runner indicators
    if os.environ.get("NO_COLOR") == "1" and os.environ.get("TERM") == "dumb":
        return True

    return any(test_var in os.environ for test_var in ["_PYTEST_RAISE", "PYTEST_VERSION"])


# * Vault path of an existing note, or print the missing-note notice & exit 1
def resolve_note(vault: Vault, raw: str | Path, missing_notice: str) -> str:
    try:
        note_path = vault.note_path_for(raw)
    except FileOperationError:
        note_path = ""

    if not note_path or not vault.is_note(note_path):
        console.print(Text(missing_notice, style="error"))
        raise typer.Exit(1)
    return note_path


# * First block of an action kind in the note; its source configures the action
def action_block(vault: Vault, note_path: str, kind: BlockKind) -> FencedBlock | None:
    return find_first_block(vault.read(note_path), kind)


# * Select a timer block by explicit/derived id or by 1-based position among distinct timers
def resolve_timer(blocks: list[TimerBlock], selector: str) -> TimerBlock:
    distinct = distinct_timer_blocks(blocks)
    for block in distinct:
        if block.id == selector:
            return block

    if selector.isdigit():
        position = int(selector)
        if 1 <= position <= len(distinct):
            return distinct[position - 1]

    raise TimerNotFoundError(f"No timer '{selector}' in this note", selector)


def note_timer_blocks(vault: Vault, note_path: str) -> list[TimerBlock]:
    return collect_timer_blocks(vault.read(note_path), note_path)


# * Ask before destructive actions unless --yes or confirm_actions=false
def confirm_action(settings: TapTimerSettings, message: str, assume_yes: bool = False) -> bool:
    if assume_yes or not settings.confirm_actions:
        return True
    return typer.confirm(message, default=False)
