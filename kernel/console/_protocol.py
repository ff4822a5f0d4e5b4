"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the check_varnish diagnostic output.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """check_varnish diagnostic output protocol.

    Everything a backend prints goes to standard error. Standard output is
    reserved for the single result line read by the monitoring scheduler.

    **General messages**::

        console.text("usage: check_varnish ...")
        console.error("cannot open statistics")

    **Structured output** -- tables and key-value displays::

        console.table(["Parameter", "Description"], [["uptime", "Client uptime"]])
        console.kv({"-c N": "critical threshold"}, title="Valid options")
    """

    # -- General messages ---------------------------------------------------

    def text(self, message: str) -> None:
        """Print *message* verbatim."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured output --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...
