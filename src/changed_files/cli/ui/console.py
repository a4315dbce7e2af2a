from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme


DEFAULT_THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "red",
        "muted": "dim",
        "group": "bold",
        "path": "white",
        "pattern": "cyan",
    }
)


@dataclass(frozen=True)
class UIContext:
    """
    Shared UI context: stdout carries results, stderr carries errors and logs.
    """
    console: Console
    err_console: Console
    verbose: bool = False


_default_ctx: Optional[UIContext] = None


def get_ui(verbose: bool = False, *, force_new: bool = False) -> UIContext:
    """
    Get shared Rich consoles configured with a theme.
    """
    global _default_ctx
    if _default_ctx is None or force_new:
        _default_ctx = UIContext(
            console=Console(theme=DEFAULT_THEME),
            err_console=Console(theme=DEFAULT_THEME, stderr=True),
            verbose=verbose,
        )
    else:
        _default_ctx = UIContext(
            console=_default_ctx.console,
            err_console=_default_ctx.err_console,
            verbose=verbose,
        )
    return _default_ctx
