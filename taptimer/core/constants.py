# taptimer/core/constants.py
# Block language tags, report markers & timing defaults shared across taptimer

from __future__ import annotations

from enum import Enum


# fenced block kinds recognized in note text
class BlockKind(str, Enum):
    TIMER = "tap-timer"
    REPORT = "tap-timer-report"
    RESET_ALL = "tap-timer-reset-all"
    SAVE_SESSION = "tap-timer-save-session"


# sentinel lines bounding a generated report
REPORT_START_MARKER = "<!-- tap-timer-report:start -->"
REPORT_END_MARKER = "<!-- tap-timer-report:end -->"

# values accepted as true by boolean block keys
TRUTHY_VALUES = frozenset({"true", "1", "yes", "y", "on"})

# placeholder duration for empty report/session tables
ZERO_DURATION = "00:00:00"

DEFAULT_SAVE_DEBOUNCE_MS = 300
DEFAULT_REFRESH_INTERVAL_MS = 250

DEFAULT_LOG_FOLDER = "Logs"
DEFAULT_LOG_FILE = "Sessions.md"
DEFAULT_WORKOUT = "Workout"
