# taptimer/core/verbose.py
# Verbose logging helpers for file I/O, timer transitions, scans, state flushes & settings

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import LogCategory, OutputLevel, get_output_manager, set_output_manager


# * Install the rich OutputManager for one CLI invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    # ! import here: core must not depend on cli at module load
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=OutputLevel.from_flags(enabled, dev_mode),
        dev_mode=dev_mode,
        log_file=log_file,
    )
    set_output_manager(manager)
    manager.start_session()


def vlog(category: LogCategory, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog(LogCategory.FILE, f"Read: {path}{size_str}")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog(LogCategory.FILE, f"Write: {path}{size_str}")


# * Log a timer state transition
def vlog_timer(timer_id: str, transition: str, elapsed_ms: int | None = None) -> None:
    detail = f"elapsed={elapsed_ms}ms" if elapsed_ms is not None else None
    vlog(LogCategory.TIMER, f"{timer_id}: {transition}", detail)


def vlog_scan(note_path: str, kind: str, count: int) -> None:
    vlog(LogCategory.SCAN, f"{note_path}: {count} {kind} block(s)")


def vlog_state(message: str, detail: str | None = None) -> None:
    vlog(LogCategory.STATE, message, detail)


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    vlog(LogCategory.CONFIG, f"{key} = {value}")


# * Close the log file & write the session footer
def cleanup_verbose() -> None:
    get_output_manager().end_session()
