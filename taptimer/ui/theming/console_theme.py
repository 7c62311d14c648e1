# taptimer/ui/theming/console_theme.py
# Console theme initialization & refresh after settings change

from __future__ import annotations

from rich.theme import ThemeStackError

from ...vault_io.console import console
from .theme_engine import get_taptimer_theme, reset_color_cache


# * Swap the pushed theme for one built from current settings
def refresh_theme() -> None:
    reset_color_cache()
    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_taptimer_theme())
