# taptimer/core/block_config.py
# Permissive `key: value` parsing of fenced block text into typed configs via declarative field tables

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence, TypeVar

from .constants import (
    TRUTHY_VALUES,
    DEFAULT_LOG_FOLDER,
    DEFAULT_LOG_FILE,
    DEFAULT_WORKOUT,
)

C = TypeVar("C")

# setter applied to a config object w/ the trimmed, non-empty value
Setter = Callable[[Any, str], None]
FieldTable = Sequence[tuple[str, Setter]]

_LINE_PATTERN = re.compile(r"^(?P<key>\w+)\s*:\s*(?P<value>.+)$")
_TEMPLATE_TOKEN = re.compile(r"\{(\w+)\}")


def _text(attr: str) -> Setter:
    def setter(config: Any, value: str) -> None:
        setattr(config, attr, value)

    return setter


def _flag(attr: str) -> Setter:
    def setter(config: Any, value: str) -> None:
        setattr(config, attr, parse_boolean(value))

    return setter


def parse_boolean(raw_value: object) -> bool:
    return str(raw_value or "").strip().lower() in TRUTHY_VALUES


# * Apply every recognized `key: value` line of source to config; unknown & malformed lines are ignored
def parse_block(source: str, config: C, table: FieldTable) -> C:
    setters = {key.lower(): setter for key, setter in table}
    for raw_line in re.split(r"\r?\n", source or ""):
        match = _LINE_PATTERN.match(raw_line.strip())
        if match is None:
            continue
        setter = setters.get(match.group("key").lower())
        value = match.group("value").strip()
        if setter is None or not value:
            continue
        setter(config, value)
    return config


# * Replace {word} tokens w/ named values; unknown tokens stay literal
def apply_template(template: str | None, values: Mapping[str, object]) -> str:
    def substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        return str(values[key]) if key in values else match.group(0)

    return _TEMPLATE_TOKEN.sub(substitute, str(template or ""))


def workout_name_from_path(note_path: str | None) -> str:
    file_name = str(note_path or "").split("/")[-1] or DEFAULT_WORKOUT
    stem = re.sub(r"\.md$", "", file_name, flags=re.IGNORECASE).strip()
    return stem or DEFAULT_WORKOUT


def build_log_path(folder: str | None, file_name: str | None) -> str:
    clean_folder = str(folder or "").strip().rstrip("/")
    clean_file = str(file_name or DEFAULT_LOG_FILE).strip().lstrip("/")
    return f"{clean_folder}/{clean_file}" if clean_folder else clean_file


@dataclass
class TimerConfig:
    id: str = ""
    title: str = ""
    independent: bool = False
    start_label: str = "Start"
    stop_label: str = "Stop"
    error_notice: str = "Could not update timer."


TIMER_FIELDS: FieldTable = (
    ("id", _text("id")),
    ("title", _text("title")),
    ("independent", _flag("independent")),
    ("startLabel", _text("start_label")),
    ("stopLabel", _text("stop_label")),
    ("errorNotice", _text("error_notice")),
)


@dataclass
class ReportConfig:
    button: str = "Generate timer table"
    busy_label: str = "Generating..."
    missing_note_notice: str = "Could not identify the note to generate the table."
    success_notice: str = "Timer table generated/updated in the note."
    error_notice: str = "Could not generate timer table."
    report_title: str = "Timer Summary"
    note_label: str = "Note"
    updated_label: str = "Updated"
    id_header: str = "ID"
    title_header: str = "Title"
    value_header: str = "Final Value"
    empty_label: str = "(no timers)"


REPORT_FIELDS: FieldTable = (
    ("button", _text("button")),
    ("busyLabel", _text("busy_label")),
    ("missingNoteNotice", _text("missing_note_notice")),
    ("successNotice", _text("success_notice")),
    ("errorNotice", _text("error_notice")),
    ("reportTitle", _text("report_title")),
    ("noteLabel", _text("note_label")),
    ("updatedLabel", _text("updated_label")),
    ("idHeader", _text("id_header")),
    ("titleHeader", _text("title_header")),
    ("valueHeader", _text("value_header")),
    ("emptyLabel", _text("empty_label")),
)


@dataclass
class ResetAllConfig:
    button: str = "Reset note timers"
    busy_label: str = "Resetting..."
    confirm: str = "This will reset all timers in this note. Continue?"
    missing_note_notice: str = "Could not identify the note to reset timers."
    success_notice: str = "Timers reset: {count}."
    error_notice: str = "Could not reset timers."


RESET_ALL_FIELDS: FieldTable = (
    ("button", _text("button")),
    ("busyLabel", _text("busy_label")),
    ("confirm", _text("confirm")),
    ("missingNoteNotice", _text("missing_note_notice")),
    ("successNotice", _text("success_notice")),
    ("errorNotice", _text("error_notice")),
)


@dataclass
class SaveSessionConfig:
    button: str = "Save session"
    busy_label: str = "Saving..."
    confirm: str = "This will save this session to the session log. Continue?"
    missing_note_notice: str = "Could not identify the note to save the session."
    success_notice: str = "Session saved to {log}. Total: {total}."
    error_notice: str = "Could not save the session."
    workout: str = DEFAULT_WORKOUT
    folder: str = DEFAULT_LOG_FOLDER
    file: str = DEFAULT_LOG_FILE
    log: str = ""
    history_title: str = "# Timer Sessions History"
    session_prefix: str = "Session"
    date_label: str = "Date"
    date_iso_label: str = "Date ISO"
    workout_label: str = "Workout"
    note_label: str = "Note"
    total_time_label: str = "Total time"
    section_header: str = "Section"
    id_header: str = "ID"
    time_header: str = "Time"
    empty_section_label: str = "(no timers)"

    # explicit log wins over folder/file
    @property
    def log_path(self) -> str:
        return self.log or build_log_path(self.folder, self.file)


SAVE_SESSION_FIELDS: FieldTable = (
    ("button", _text("button")),
    ("busyLabel", _text("busy_label")),
    ("confirm", _text("confirm")),
    ("missingNoteNotice", _text("missing_note_notice")),
    ("successNotice", _text("success_notice")),
    ("errorNotice", _text("error_notice")),
    ("workout", _text("workout")),
    ("folder", _text("folder")),
    ("file", _text("file")),
    ("log", _text("log")),
    ("historyTitle", _text("history_title")),
    ("sessionPrefix", _text("session_prefix")),
    ("dateLabel", _text("date_label")),
    ("dateIsoLabel", _text("date_iso_label")),
    ("workoutLabel", _text("workout_label")),
    ("noteLabel", _text("note_label")),
    ("totalTimeLabel", _text("total_time_label")),
    ("sectionHeader", _text("section_header")),
    ("idHeader", _text("id_header")),
    ("timeHeader", _text("time_header")),
    ("emptySectionLabel", _text("empty_section_label")),
)


def parse_timer_config(source: str) -> TimerConfig:
    return parse_block(source, TimerConfig(), TIMER_FIELDS)


def parse_report_config(source: str) -> ReportConfig:
    return parse_block(source, ReportConfig(), REPORT_FIELDS)


def parse_reset_all_config(source: str) -> ResetAllConfig:
    return parse_block(source, ResetAllConfig(), RESET_ALL_FIELDS)


# workout defaults to the note's file name
def parse_save_session_config(source: str, note_path: str | None) -> SaveSessionConfig:
    config = SaveSessionConfig(workout=workout_name_from_path(note_path))
    return parse_block(source, config, SAVE_SESSION_FIELDS)
