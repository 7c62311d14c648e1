# taptimer/vault_io/state_file.py
# Durable JSON storage for the timer store: `{ "timers": { id: record } }` written wholesale

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from ..core.exceptions import JSONParsingError
from ..core.verbose import vlog_state
from .generics import read_json_safe, write_json_safe


class StateFile:
    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    # load persisted state; an unreadable file is moved aside so the next flush cannot destroy it
    def load(self) -> dict[str, Any]:
        if not self.path.exists():
            vlog_state(f"No state file at {self.path}; starting empty")
            return {"timers": {}}

        try:
            data = read_json_safe(self.path)
        except JSONParsingError as e:
            typer.echo(f"Warning: Invalid state file {self.path}: {e}", err=True)
            self.path.replace(self.backup_path)
            typer.echo(f"Moved it to {self.backup_path}; starting w/ empty timers", err=True)
            return {"timers": {}}

        return {"timers": {}, **data}

    def save(self, state: dict[str, Any]) -> None:
        write_json_safe(state, self.path)
