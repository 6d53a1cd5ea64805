"""Printer: default sink for user-visible messages.

Lines are written to stderr through a rich console. Markup and highlighting
are disabled so help text such as ``[FILE]`` is shown literally, and soft
wrapping keeps the help columns intact on narrow terminals.
"""

from typing import IO

from rich.console import Console


class Printer:
    def __init__(self, file: IO[str] | None = None):
        self.console = Console(
            file=file,
            stderr=file is None,
            markup=False,
            highlight=False,
            emoji=False,
        )

    def emit(self, line: str = "") -> None:
        """Write one line."""
        self.console.print(line, soft_wrap=True)
