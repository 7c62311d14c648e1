# taptimer/ui/theming/theme_engine.py
# Theme engine: palette lookup, lazily resolved accent colors & Rich theme for taptimer output

from __future__ import annotations

from rich.text import Text
from rich.theme import Theme

from .theme_definitions import THEMES

DEFAULT_THEME = "deep_blue"


def _get_current_theme_name() -> str:
    # ! import here: config.settings validates theme names against this package
    from ...config.settings import settings_manager

    name = getattr(settings_manager.load(), "theme", DEFAULT_THEME)
    return name if name in THEMES else DEFAULT_THEME


# descriptor resolving an accent stop on first access; cache is keyed by theme name
class _LazyColorDescriptor:
    def __init__(self, index: int) -> None:
        self._index = index
        self._cached_theme: str | None = None
        self._cached_value: str | None = None

    def __get__(self, obj: object, objtype: type | None = None) -> str:
        current = _get_current_theme_name()
        if self._cached_theme != current:
            self._cached_value = THEMES[current][self._index]
            self._cached_theme = current
        return self._cached_value  # type: ignore[return-value]

    def reset(self) -> None:
        self._cached_theme = None
        self._cached_value = None


# * Accent colors follow the theme; status colors are fixed
class TapTimerColors:
    ACCENT_PRIMARY = _LazyColorDescriptor(0)
    ACCENT_LIGHT = _LazyColorDescriptor(1)
    ACCENT_SECONDARY = _LazyColorDescriptor(2)
    ACCENT_MEDIUM = _LazyColorDescriptor(3)
    ACCENT_DEEP = _LazyColorDescriptor(4)

    SUCCESS = "#10b981"  # emerald green
    RUNNING = "#10b981"
    PAUSED = "#aaaaaa"
    WARNING = "#ffaa00"  # amber
    ERROR = "#ff4444"  # red
    INFO = "#4488ff"  # blue
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"  # dim cyan

    CHECKMARK = SUCCESS


def reset_color_cache() -> None:
    for attr in (
        "ACCENT_PRIMARY",
        "ACCENT_LIGHT",
        "ACCENT_SECONDARY",
        "ACCENT_MEDIUM",
        "ACCENT_DEEP",
    ):
        desc = TapTimerColors.__dict__.get(attr)
        if isinstance(desc, _LazyColorDescriptor):
            desc.reset()


# * Rich theme w/ the semantic names used across command output
def get_taptimer_theme() -> Theme:
    return Theme(
        {
            "success": TapTimerColors.SUCCESS,
            "warning": TapTimerColors.WARNING,
            "error": TapTimerColors.ERROR,
            "info": TapTimerColors.INFO,
            "dim": TapTimerColors.DIM,
            "debug": TapTimerColors.DEBUG,
            "taptimer.accent": TapTimerColors.ACCENT_PRIMARY,
            "taptimer.accent2": TapTimerColors.ACCENT_SECONDARY,
            "taptimer.accent_deep": TapTimerColors.ACCENT_DEEP,
            "taptimer.checkmark": TapTimerColors.CHECKMARK,
            "timer.running": f"bold {TapTimerColors.RUNNING}",
            "timer.paused": TapTimerColors.PAUSED,
            "timer.title": f"bold {TapTimerColors.ACCENT_LIGHT}",
            "timer.time": f"bold {TapTimerColors.ACCENT_PRIMARY}",
        }
    )


def styled_checkmark() -> Text:
    return Text("✓", style=TapTimerColors.CHECKMARK)


def styled_arrow() -> Text:
    return Text("->", style=TapTimerColors.ACCENT_SECONDARY)


def styled_bullet() -> Text:
    return Text("•", style=TapTimerColors.ACCENT_SECONDARY)
