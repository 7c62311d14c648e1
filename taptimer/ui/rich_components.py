# taptimer/ui/rich_components.py
# Themed Rich builders shared by command output & the live board

from __future__ import annotations

from typing import Any

from rich.panel import Panel
from rich.table import Table


def themed_panel(
    content: Any,
    title: str | None = None,
    padding: tuple[int, int] = (0, 1),
    **kwargs: Any,
) -> Panel:
    from .theming.theme_engine import TapTimerColors

    formatted_title = f"[bold]{title}[/]" if title else None
    return Panel(
        content,
        title=formatted_title,
        title_align=kwargs.pop("title_align", "left"),
        border_style=kwargs.pop("border_style", TapTimerColors.ACCENT_SECONDARY),
        padding=padding,
        **kwargs,
    )


def themed_table(show_header: bool = False, **kwargs: Any) -> Table:
    from .theming.theme_engine import TapTimerColors

    return Table(
        border_style=kwargs.pop("border_style", TapTimerColors.ACCENT_SECONDARY),
        show_header=show_header,
        padding=kwargs.pop("padding", (0, 1, 0, 0)),
        box=kwargs.pop("box", None),
        **kwargs,
    )
