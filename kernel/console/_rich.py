"""kernel.console._rich -- Rich-based backend.

Provides coloured, structured output on standard error using the Rich library.
Lazily imports Rich sub-modules so that startup cost is minimal.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.theme import Theme

_THEME = Theme(
    {
        "error": "bold red",
        "param": "cyan",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self) -> None:
        self._con = Console(theme=_THEME, highlight=False, stderr=True)

    # -- General messages ---------------------------------------------------

    def text(self, message: str) -> None:
        self._con.print(message, markup=False)

    def error(self, message: str) -> None:
        self._con.print(f"  ✗ {message}", style="error", markup=False)

    # -- Structured output --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        from rich.table import Table

        t = Table(title=title or None, box=box.SIMPLE, show_edge=False, pad_edge=True)
        for i, h in enumerate(headers):
            t.add_column(h, style="param" if i == 0 else None)
        for r in rows:
            t.add_row(*r)
        self._con.print(t)

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        from rich.table import Table

        t = Table(
            title=title or None,
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold")
        t.add_column("Value")
        for k, v in data.items():
            t.add_row(k, v)
        self._con.print(t)
