"""Parser configuration: hooks, automatic help and the usage header."""

import logging
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from flagset.printer import Printer

if TYPE_CHECKING:
    from flagset.errors import OptionError
    from flagset.options import OptionSet

logger = logging.getLogger(__name__)

_FALSE_VALUES = ("0", "false", "no", "off")


def default_usage_header() -> str:
    """Usage line naming the running program."""
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "program"
    return f"Usage: {prog} [ options and/or arguments ]"


_printer: Printer | None = None


def _default_emit(line: str = "") -> None:
    global _printer
    if _printer is None:
        _printer = Printer()
    _printer.emit(line)


@dataclass
class ParserConfig:
    """Collaborators and switches used while parsing.

    Any hook left as ``None`` falls back to the default behavior:

    - ``show_usage``: emit the usage header, ``Options:`` and the help lines
    - ``on_error``: show usage, a blank line and the message, then exit(1)

    ``exit`` is called with 0 after automatic help and, by the default error
    handler, with 1 after an error.
    """

    auto_help: bool = True
    usage_header: str = field(default_factory=default_usage_header)
    emit: Callable[[str], None] = _default_emit
    show_usage: Callable[["OptionSet"], None] | None = None
    on_error: Callable[["OptionSet", "OptionError"], None] | None = None
    exit: Callable[[int], Any] = sys.exit
    # Positional arguments returned by the most recent parse using this config
    last_args: list[str] = field(default_factory=list)

    @classmethod
    def quiet(cls, **kwargs: Any) -> "ParserConfig":
        """Config whose error handler does nothing, for tests and embedding."""
        kwargs.setdefault("on_error", lambda options, error: None)
        return cls(**kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ParserConfig":
        """Config with overrides from the environment.

        ``FLAGSET_AUTO_HELP`` set to 0/false/no/off disables automatic help
        and ``FLAGSET_USAGE_HEADER`` replaces the usage header. Explicit
        keyword arguments take precedence.
        """
        auto_help = os.getenv("FLAGSET_AUTO_HELP")
        if auto_help is not None and auto_help.strip():
            kwargs.setdefault(
                "auto_help", auto_help.strip().lower() not in _FALSE_VALUES
            )

        header = os.getenv("FLAGSET_USAGE_HEADER")
        if header and header.strip():
            kwargs.setdefault("usage_header", header)

        return cls(**kwargs)

    def usage(self, options: "OptionSet") -> None:
        """Display the usage help for ``options``."""
        if self.show_usage is not None:
            self.show_usage(options)
            return
        self.emit(self.usage_header)
        self.emit("Options:")
        for line in options.format_help():
            self.emit(line)

    def report_error(self, options: "OptionSet", error: "OptionError") -> None:
        """Route a parse failure through the error hook."""
        logger.debug(f"Reporting option error: {error}")
        if self.on_error is not None:
            self.on_error(options, error)
            return
        self.usage(options)
        self.emit("")
        self.emit(str(error))
        self.exit(1)


default_config = ParserConfig()
