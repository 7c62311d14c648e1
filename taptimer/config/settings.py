# taptimer/config/settings.py
# Configuration management for taptimer including vault location, state file & timing settings

import os
from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict

from ..vault_io.generics import read_json_safe, write_json_safe
from ..core.constants import DEFAULT_SAVE_DEBOUNCE_MS, DEFAULT_REFRESH_INTERVAL_MS
from ..core.exceptions import JSONParsingError

# environment override for vault_dir (also read from .env)
VAULT_ENV_VAR = "TAPTIMER_VAULT"


# * Default settings dataclass for taptimer w/ vault paths & timing configuration
@dataclass
class TapTimerSettings:
    # vault root holding the notes
    vault_dir: str = "."

    # taptimer internal paths (relative to the vault)
    base_dir: str = ".taptimer"
    state_filename: str = "state.json"

    # persistence debounce & live board refresh
    save_debounce_ms: int = DEFAULT_SAVE_DEBOUNCE_MS
    refresh_interval_ms: int = DEFAULT_REFRESH_INTERVAL_MS

    # ask before reset & save-session
    confirm_actions: bool = True

    # theme setting
    theme: str = "deep_blue"

    # dev mode setting (enables debug-level output)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.vault_dir, str) or not self.vault_dir.strip():
            raise ValueError(f"vault_dir must be a non-empty string, got {self.vault_dir!r}")

        if not isinstance(self.state_filename, str) or not self.state_filename.strip():
            raise ValueError(
                f"state_filename must be a non-empty string, got {self.state_filename!r}"
            )

        # save_debounce_ms validation (non-negative integer)
        if (
            isinstance(self.save_debounce_ms, bool)
            or not isinstance(self.save_debounce_ms, int)
            or self.save_debounce_ms < 0
        ):
            raise ValueError(
                f"save_debounce_ms must be a non-negative integer, got {self.save_debounce_ms}"
            )

        # refresh_interval_ms validation (must be >= 50ms)
        if (
            isinstance(self.refresh_interval_ms, bool)
            or not isinstance(self.refresh_interval_ms, int)
            or self.refresh_interval_ms < 50
        ):
            raise ValueError(
                f"refresh_interval_ms must be an integer >= 50, got {self.refresh_interval_ms}"
            )

        if not isinstance(self.confirm_actions, bool):
            raise ValueError(
                f"confirm_actions must be a boolean (true/false), "
                f"got {type(self.confirm_actions).__name__}"
            )

        # dev_mode strict bool validation (no coercion)
        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

        from ..ui.theming.theme_definitions import THEMES

        if self.theme not in THEMES:
            valid = ", ".join(sorted(THEMES))
            raise ValueError(f"theme must be one of {valid}, got '{self.theme}'")

    @property
    def vault_path(self) -> Path:
        return Path(self.vault_dir).expanduser()

    # <vault>/<base_dir>/<state_filename>
    @property
    def state_path(self) -> Path:
        return self.vault_path / self.base_dir / self.state_filename


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".taptimer" / "config.json"
        self._settings: Optional[TapTimerSettings] = None

    # load settings from file or return defaults
    def load(self) -> TapTimerSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = TapTimerSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = TapTimerSettings()
        else:
            self._settings = TapTimerSettings()

        return self._settings

    # save setting to file
    def save(self, settings: TapTimerSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validated through the dataclass
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(TapTimerSettings(**data))

    # reset to default settings
    def reset(self) -> None:
        self.save(TapTimerSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Apply environment & CLI overrides to loaded settings w/out persisting them
def with_overrides(
    settings: TapTimerSettings, vault: Optional[Path] = None
) -> TapTimerSettings:
    data = asdict(settings)
    env_vault = os.environ.get(VAULT_ENV_VAR)
    if env_vault:
        data["vault_dir"] = env_vault
    if vault is not None:
        data["vault_dir"] = str(vault)
    return TapTimerSettings(**data)


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[TapTimerSettings] = None
) -> TapTimerSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for TapTimerSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, TapTimerSettings):
            return obj

    # fallback to loading from disk
    return with_overrides(settings_manager.load())
