# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path_factory, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path_factory.mktemp("fake_home")

    taptimer_dir = fake_home / ".taptimer"
    taptimer_dir.mkdir()

    # minimal config.json w/ test defaults; no debounce so flushes are immediate
    config_data = {
        "vault_dir": ".",
        "base_dir": ".taptimer",
        "state_filename": "state.json",
        "save_debounce_ms": 0,
        "refresh_interval_ms": 250,
        "confirm_actions": True,
        "theme": "deep_blue",
        "dev_mode": False,
    }

    config_file = taptimer_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("TAPTIMER_VAULT", raising=False)

    # ! reset global settings_manager state & point it at the isolated location
    from taptimer.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = fake_home / ".taptimer" / "config.json"

    # ! reset color cache to pick up isolated settings
    from taptimer.ui.theming.theme_engine import reset_color_cache

    reset_color_cache()

    # ! reset output manager to NullOutputManager for test isolation
    from taptimer.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


# * Manually advanced millisecond clock for deterministic timer tests
class FakeClock:
    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def vault_dir(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def vault(vault_dir):
    from taptimer.vault_io.vault import Vault

    return Vault(vault_dir)


@pytest.fixture
def store(clock):
    from taptimer.core.timer_store import TimerStore

    return TimerStore(clock=clock)


@pytest.fixture
def workout_note():
    # two standard timers (one w/out id), one independent timer & a report block
    return "\n".join(
        [
            "# Legs",
            "",
            "```tap-timer",
            "id: squat",
            "title: Squats",
            "```",
            "",
            "```tap-timer",
            "title: Lunges",
            "```",
            "",
            "```tap-timer",
            "id: rest",
            "title: Rest",
            "independent: yes",
            "```",
            "",
            "```tap-timer-report",
            "reportTitle: Summary",
            "```",
            "",
            "Notes below.",
        ]
    )
