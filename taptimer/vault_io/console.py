# taptimer/vault_io/console.py
# Shared rich console for command output, verbose logging & the live board

# * Commands, OutputManager & LiveBoard all print through `console`; tests swap the
# * underlying Console w/ configure_console()/reset_console() or patch a module's `console`

from __future__ import annotations

from typing import Any

from rich.console import Console


# stable module-level handle; the wrapped Console can be replaced w/out re-importing
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * The real Console (rich Live needs it, not the proxy)
def get_console() -> Console:
    if isinstance(console, _ConsoleProxy):
        return console._get_console()
    return console  # type: ignore[return-value]


# * True when keys can be read & the live board redrawn in place
def is_interactive() -> bool:
    return get_console().is_terminal


# * Replace the console, e.g. a wide recording one for tests
def configure_console(width: int | None = None, record: bool = False) -> Console:
    kwargs: dict[str, Any] = {"record": record}
    if width is not None:
        kwargs["width"] = width
    console._set_console(Console(**kwargs))
    return console._get_console()


def reset_console() -> Console:
    console._set_console(Console())
    return console._get_console()


# * Re-push the taptimer theme after the `theme` setting changes
def refresh_theme() -> None:
    # ! import here: ui.theming imports this module
    from ..ui.theming.console_theme import refresh_theme as _refresh_theme

    _refresh_theme()


__all__ = [
    "console",
    "get_console",
    "is_interactive",
    "configure_console",
    "reset_console",
    "refresh_theme",
]
