# tests/unit/core/test_block_config.py
# Unit tests for block configuration parsing, boolean coercion & template helpers

import pytest

from taptimer.core.block_config import (
    apply_template,
    build_log_path,
    parse_boolean,
    parse_report_config,
    parse_reset_all_config,
    parse_save_session_config,
    parse_timer_config,
    workout_name_from_path,
)


class TestParseBoolean:

    # * Verify every accepted truthy spelling
    @pytest.mark.parametrize("raw", ["true", "TRUE", "1", "yes", "Y", "on", "  On  "])
    def test_truthy_values(self, raw):
        assert parse_boolean(raw) is True

    # * Verify anything else is false
    @pytest.mark.parametrize("raw", ["false", "0", "no", "enabled", "", None])
    def test_other_values_are_false(self, raw):
        assert parse_boolean(raw) is False


class TestTimerConfig:

    # * Verify defaults when the block is empty
    def test_defaults(self):
        config = parse_timer_config("")
        assert config.id == ""
        assert config.title == ""
        assert config.independent is False
        assert config.start_label == "Start"
        assert config.stop_label == "Stop"
        assert config.error_notice == "Could not update timer."

    # * Verify known keys overwrite defaults
    def test_known_keys(self):
        config = parse_timer_config(
            "id: bench\ntitle: Bench press\nindependent: yes\nstartLabel: Go\nstopLabel: Halt"
        )
        assert config.id == "bench"
        assert config.title == "Bench press"
        assert config.independent is True
        assert config.start_label == "Go"
        assert config.stop_label == "Halt"

    # * Verify keys match case-insensitively & whitespace around the colon is ignored
    def test_keys_case_insensitive(self):
        config = parse_timer_config("  TITLE :  Rows  \nStartLABEL:Begin")
        assert config.title == "Rows"
        assert config.start_label == "Begin"

    # * Verify empty values keep the default
    def test_empty_value_keeps_default(self):
        config = parse_timer_config("startLabel:\nstopLabel:   ")
        assert config.start_label == "Start"
        assert config.stop_label == "Stop"

    # * Verify unknown keys & malformed lines are ignored
    def test_unknown_and_malformed_lines_ignored(self):
        config = parse_timer_config("color: red\njust text\n: novalue\ntitle: Kept")
        assert config.title == "Kept"

    # * Verify CRLF line endings are handled
    def test_crlf_lines(self):
        config = parse_timer_config("id: a\r\ntitle: B\r\n")
        assert config.id == "a"
        assert config.title == "B"

    # * Verify values keep inner colons
    def test_value_with_colon(self):
        config = parse_timer_config("title: Set 1: warmup")
        assert config.title == "Set 1: warmup"


class TestActionConfigs:

    # * Verify report defaults & overrides
    def test_report_config(self):
        defaults = parse_report_config("")
        assert defaults.report_title == "Timer Summary"
        assert defaults.value_header == "Final Value"
        assert defaults.empty_label == "(no timers)"

        config = parse_report_config("reportTitle: Totals\nvalueHeader: Elapsed")
        assert config.report_title == "Totals"
        assert config.value_header == "Elapsed"
        assert config.id_header == "ID"

    # * Verify reset-all defaults carry the {count} placeholder
    def test_reset_all_config(self):
        config = parse_reset_all_config("busyLabel: Wait")
        assert config.busy_label == "Wait"
        assert config.success_notice == "Timers reset: {count}."
        assert config.confirm.startswith("This will reset all timers")

    # * Verify workout defaults to the note file name
    def test_save_session_workout_from_note(self):
        config = parse_save_session_config("", "Workouts/Leg Day.md")
        assert config.workout == "Leg Day"
        assert config.log_path == "Logs/Sessions.md"

    # * Verify explicit log wins over folder/file
    def test_save_session_log_override(self):
        config = parse_save_session_config(
            "folder: Archive\nfile: Runs.md\nlog: Custom/All.md", "a.md"
        )
        assert config.log_path == "Custom/All.md"

        config = parse_save_session_config("folder: Archive/\nfile: /Runs.md", "a.md")
        assert config.log_path == "Archive/Runs.md"


class TestHelpers:

    # * Verify template placeholders are substituted & unknown ones stay literal
    def test_apply_template(self):
        assert apply_template("Saved to {log}. Total: {total}.", {"log": "L.md", "total": "00:01:00"}) == (
            "Saved to L.md. Total: 00:01:00."
        )
        assert apply_template("Reset {count} of {other}", {"count": 2}) == "Reset 2 of {other}"
        assert apply_template(None, {}) == ""

    # * Verify workout name derivation
    @pytest.mark.parametrize(
        "note_path, expected",
        [
            ("Workouts/Legs.md", "Legs"),
            ("Push.MD", "Push"),
            ("notes/plain", "plain"),
            ("", "Workout"),
            (None, "Workout"),
            ("folder/.md", "Workout"),
        ],
    )
    def test_workout_name_from_path(self, note_path, expected):
        assert workout_name_from_path(note_path) == expected

    # * Verify log path joining
    def test_build_log_path(self):
        assert build_log_path("Logs", "Sessions.md") == "Logs/Sessions.md"
        assert build_log_path("Logs///", "//Sessions.md") == "Logs/Sessions.md"
        assert build_log_path("", "Sessions.md") == "Sessions.md"
