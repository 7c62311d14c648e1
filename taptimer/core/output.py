# taptimer/core/output.py
# Output levels, log categories & the output manager registry used by core modules
# * Pure (no I/O); the rich-backed OutputManager lives in taptimer/cli/output_manager.py

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Protocol, runtime_checkable


class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3

    # * Level requested by the CLI flags; DEBUG only w/ dev_mode on top of --verbose/--log-file
    @classmethod
    def from_flags(cls, verbose: bool, dev_mode: bool) -> OutputLevel:
        if not verbose:
            return cls.NORMAL
        return cls.DEBUG if dev_mode else cls.VERBOSE


# * Categories tagging every verbose line (console prefix & log file)
class LogCategory(StrEnum):
    FILE = "FILE"  # note & JSON reads/writes
    STATE = "STATE"  # state file load & flushes
    TIMER = "TIMER"  # start/pause/reset transitions, sibling pauses, inserts
    SCAN = "SCAN"  # fenced block discovery
    REPORT = "REPORT"
    SESSION = "SESSION"
    CONFIG = "CONFIG"  # effective settings & resolved paths
    ERROR = "ERROR"  # failures recorded by debug_error
    DEBUG = "DEBUG"


@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def is_debug_enabled(self) -> bool: ...

    def is_verbose_enabled(self) -> bool: ...

    def debug(self, msg: str, category: str = LogCategory.DEBUG) -> None: ...

    def verbose(self, msg: str, category: str, detail: str | None = None) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Registered until the CLI callback installs the real manager; library use stays silent
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def is_debug_enabled(self) -> bool:
        return False

    def is_verbose_enabled(self) -> bool:
        return False

    def debug(self, msg: str, category: str = LogCategory.DEBUG) -> None:
        pass

    def verbose(self, msg: str, category: str, detail: str | None = None) -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# * Back to the silent default (end of a CLI invocation, test isolation)
def reset_output_manager() -> None:
    global _output_manager
    _output_manager = NullOutputManager()
