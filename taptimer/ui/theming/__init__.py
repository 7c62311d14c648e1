# taptimer/ui/theming/__init__.py
# Theme palettes, color access & console theme management

from .theme_definitions import THEMES
from .theme_engine import TapTimerColors, get_taptimer_theme, reset_color_cache
from .console_theme import refresh_theme

__all__ = [
    "THEMES",
    "TapTimerColors",
    "get_taptimer_theme",
    "reset_color_cache",
    "refresh_theme",
]
