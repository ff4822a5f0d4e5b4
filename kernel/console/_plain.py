"""kernel.console._plain -- Plain-text fallback backend.

Writes to standard error with built-in print() and no external dependencies.
Used when Rich is not installed or stderr is not a TTY.
"""

from __future__ import annotations

import sys


def _err(line: str = "") -> None:
    print(line, file=sys.stderr)


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print()."""

    # -- General messages ---------------------------------------------------

    def text(self, message: str) -> None:
        _err(message)

    def error(self, message: str) -> None:
        _err(f"  [error] {message}")

    # -- Structured output --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        if title:
            _err(f"{title}:")

        if not headers and not rows:
            return

        # Calculate column widths
        all_rows = [headers, *rows]
        col_widths = [
            max(len(str(row[i])) if i < len(row) else 0 for row in all_rows)
            for i in range(len(headers))
        ]

        _err("  " + "  ".join(h.ljust(w) for h, w in zip(headers, col_widths, strict=True)))
        _err("  " + "  ".join("-" * w for w in col_widths))

        for row in rows:
            cells = [
                str(row[i]).ljust(col_widths[i]) if i < len(row) else " " * col_widths[i]
                for i in range(len(headers))
            ]
            _err(("  " + "  ".join(cells)).rstrip())

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        if title:
            _err(f"{title}:")
        if not data:
            return
        max_key = max(len(k) for k in data)
        for k, v in data.items():
            _err(f"  {k.ljust(max_key)}  {v}")
