# taptimer/cli/commands/config.py
# Settings mgmt subcommands for taptimer CLI (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer
from builtins import list as builtin_list

from ...config.settings import settings_manager, TapTimerSettings
from ...vault_io.console import console
from ...ui.theming.theme_definitions import THEMES
from ...ui.theming.theme_engine import styled_checkmark
from ...ui.theming.styled_helpers import (
    styled_setting_line,
    format_setting_value,
    styled_success_line,
)
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[taptimer.accent2]Manage taptimer settings[/]"
)
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(TapTimerSettings)}


def _valid_themes() -> set[str]:
    return set(THEMES.keys())


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(
    raw: str,
) -> str | int | float | bool | None | builtin_list[Any] | dict[str, Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print("[bold taptimer.accent]Current Configuration[/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]", soft_wrap=True)
    console.print()

    for key, value in data.items():
        console.print(*styled_setting_line(key, format_setting_value(value)))

    console.print()
    console.print(
        "[dim]Use [/][taptimer.accent2]taptimer config --help[/][dim] to see available commands[/]"
    )


# * Show current settings when no subcommand is given
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = settings_manager.get(key)
    console.print(json.dumps(value), markup=False, highlight=False)


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    if key == "theme" and value not in _valid_themes():
        valid_themes = ", ".join(sorted(_valid_themes()))
        raise typer.BadParameter(
            f"Invalid theme '{value}'. Valid themes: {valid_themes}"
        )

    coerced = _coerce_value(value)
    # text settings keep the raw string (e.g. a vault_dir of "2024")
    if key in ("vault_dir", "base_dir", "state_filename", "theme"):
        coerced = value

    try:
        settings_manager.set(key, coerced)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if key == "theme":
        from ...vault_io.console import refresh_theme

        refresh_theme()

    console.print(
        *styled_success_line(f"Set {key}", f"[taptimer.accent2]{json.dumps(coerced)}[/]")
    )


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print(styled_checkmark(), "[success]Reset settings to defaults[/]")


# * Show the configuration file path
@config_app.command()
def path() -> None:
    console.print(str(settings_manager.config_path), soft_wrap=True, markup=False, highlight=False)


# * Explicit 'list' command to show current settings
@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()
