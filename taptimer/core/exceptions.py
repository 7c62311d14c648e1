# taptimer/core/exceptions.py
# Custom exception hierarchy for taptimer (pure - no I/O operations)

from pathlib import Path


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for taptimer
class TapTimerError(Exception):
    pass


# * JSON parsing errors (settings & state files)
class JSONParsingError(TapTimerError):
    pass


# * Base error for note processing
class DocumentError(TapTimerError):
    pass


# * Acting note cannot be resolved to an existing note in the vault
class NoteNotFoundError(DocumentError):
    def __init__(self, message: str, note_path: str):
        super().__init__(message)
        self.note_path = note_path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, note_path={self.note_path!r})"


# * Timer selector does not match any timer block of a note
class TimerNotFoundError(DocumentError):
    def __init__(self, message: str, selector: str):
        super().__init__(message)
        self.selector = selector

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, selector={self.selector!r})"


# * Base error for file I/O operations
class FileOperationError(TapTimerError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
