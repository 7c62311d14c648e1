# taptimer/ui/theming/styled_helpers.py
# Pre-composed styling helpers for common CLI output lines

from __future__ import annotations

import json
from typing import Any

from rich.text import Text

from .theme_engine import TapTimerColors, styled_arrow, styled_bullet, styled_checkmark


def styled_success_line(label: str, value: str | None = None) -> list:
    """Checkmark + label [+ arrow + value].

    Returns list of renderables for console.print(*result).
    """
    parts: list[Any] = [styled_checkmark(), Text(label, style=TapTimerColors.SUCCESS)]
    if value is not None:
        parts.extend([styled_arrow(), value])
    return parts


def styled_setting_line(key: str, value: str) -> list:
    return [
        styled_bullet(),
        f"[bold white]{key}[/]",
        "[taptimer.accent2]->",
        value,
    ]


def format_setting_value(value: Any) -> str:
    """Format a setting value with consistent styling."""
    if isinstance(value, str):
        return f'[taptimer.accent2]"{value}"[/]'
    elif isinstance(value, bool):
        return f"[taptimer.accent2]{str(value).lower()}[/]"
    elif isinstance(value, (int, float)):
        return f"[taptimer.accent2]{value}[/]"
    else:
        return f"[taptimer.accent2]{json.dumps(value)}[/]"
