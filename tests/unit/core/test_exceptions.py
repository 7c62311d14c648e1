# tests/unit/core/test_exceptions.py
# Unit tests for the exception hierarchy & error message formatting

from pathlib import Path

import pytest

from taptimer.core.exceptions import (
    DocumentError,
    FileOperationError,
    FileReadError,
    FileWriteError,
    JSONParsingError,
    NoteNotFoundError,
    TapTimerError,
    TimerNotFoundError,
    format_error_message,
)


class TestHierarchy:

    # * Verify every error derives from TapTimerError
    @pytest.mark.parametrize(
        "error",
        [
            JSONParsingError("x"),
            NoteNotFoundError("x", "a.md"),
            TimerNotFoundError("x", "3"),
            FileReadError("x", "a"),
            FileWriteError("x", Path("a")),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, TapTimerError)

    # * Verify note & timer lookups are document errors
    def test_document_errors(self):
        assert issubclass(NoteNotFoundError, DocumentError)
        assert issubclass(TimerNotFoundError, DocumentError)
        assert issubclass(FileReadError, FileOperationError)


class TestAttributes:

    # * Verify extra context is kept & shown in repr
    def test_note_not_found(self):
        error = NoteNotFoundError("Note not found: a.md", "a.md")
        assert str(error) == "Note not found: a.md"
        assert error.note_path == "a.md"
        assert "note_path='a.md'" in repr(error)

    # * Verify string paths are converted to Path
    def test_file_error_path(self):
        error = FileWriteError("nope", "dir/file.json")
        assert error.path == Path("dir/file.json")

    # * Verify the selector is kept
    def test_timer_not_found(self):
        assert TimerNotFoundError("missing", "7").selector == "7"


# * Verify rich-formatted message
def test_format_error_message():
    assert format_error_message("File Error", "boom") == "[red]File Error:[/] boom"
