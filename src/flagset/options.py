"""Option definitions and the option set they are registered in."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from flagset.errors import SetupError
from flagset.targets import Target

if TYPE_CHECKING:
    from flagset.config import ParserConfig
    from flagset.parser import ParseResult

logger = logging.getLogger(__name__)

# Width of the names column in help output, including the two-space indent
HELP_COLUMN = 20


@dataclass
class OptionDef:
    """One option: whitespace-separated names, a target and help text.

    A definition without names and without a target is a section header whose
    help text is printed as-is in the help output.
    """

    names: str
    target: Any
    help: str = ""

    @property
    def name_list(self) -> list[str]:
        return self.names.split()

    def is_section_header(self) -> bool:
        return self.target is None and self.names == ""

    def is_target_ok(self) -> bool:
        """Whether the target is one of the supported shapes."""
        if self.is_section_header():
            return True
        return isinstance(self.target, Target) and self.target.is_valid()

    def takes_parameter(self) -> bool:
        return self.target.takes_parameter

    def format_names(self) -> str:
        """Names as shown in help: ``-x`` for short names, ``--xyz`` for long."""
        return ", ".join(
            f"-{name}" if len(name) == 1 else f"--{name}" for name in self.name_list
        )

    def split_help(self) -> tuple[str, str]:
        """Split a ``=NAME; text`` help string into ``("=NAME", "text")``.

        Help text without that prefix is returned unchanged with an empty
        parameter name.
        """
        semi = self.help.find(";")
        if semi > 0 and self.help.startswith("="):
            return self.help[:semi], self.help[semi + 1 :].lstrip(" ")
        return "", self.help


def option(names: str, target: Target, help: str = "") -> OptionDef:
    """Create an option definition.

    Args:
        names: Space-separated long and/or short names, e.g. ``"n number"``
        target: What to update or call when the option is found
        help: Help text; a ``=NAME; `` prefix names the parameter in the help
            output, e.g. ``"=NUM; Number of retries"``

    Returns:
        A new OptionDef
    """
    return OptionDef(names, target, help)


def section(header: str) -> OptionDef:
    """Create a section header entry for the help output."""
    return OptionDef("", None, header)


class OptionSet:
    """An ordered, indexed collection of option definitions.

    Registration methods return the set so calls can be chained. Problems in
    the definitions do not raise; the first one is kept in ``setup_error`` and
    reported when parsing is attempted.

    Example:
        >>> verbose = Ref(False)
        >>> size = Ref(3)
        >>> result = (
        ...     OptionSet()
        ...     .option("v verbose", Target.flag(verbose), "Verbose output")
        ...     .option("n size", Target.int32(size), "=NUM; Size (default=3)")
        ...     .parse(["-vn8", "file.txt"])
        ... )
        >>> result.args, verbose.value, size.value
        (['file.txt'], True, 8)
    """

    def __init__(self, *definitions: OptionDef):
        self._definitions: list[OptionDef] = []
        self._index: dict[str, OptionDef] = {}
        self._argument_action: OptionDef | None = None
        self._setup_error: SetupError | None = None
        self.add(*definitions)

    @property
    def definitions(self) -> Sequence[OptionDef]:
        """Definitions in registration order."""
        return tuple(self._definitions)

    @property
    def setup_error(self) -> SetupError | None:
        return self._setup_error

    @property
    def argument_action_def(self) -> OptionDef | None:
        return self._argument_action

    def _fail(self, message: str) -> None:
        logger.debug(f"Option setup problem: {message}")
        if self._setup_error is None:
            self._setup_error = SetupError(message)

    def add(self, *definitions: OptionDef) -> "OptionSet":
        """Register definitions, checking targets and name uniqueness.

        Registration of this batch stops at the first problem found.
        """
        for definition in definitions:
            self._definitions.append(definition)

            if not definition.is_target_ok():
                self._fail(
                    "unsupported target type for option "
                    f"'{definition.format_names()}'"
                )
                return self

            for name in definition.name_list:
                if name in self._index:
                    self._fail(f"option name '{name}' defined more than once")
                    return self
                self._index[name] = definition

            if definition.name_list:
                logger.debug(f"Registered option {definition.format_names()}")
        return self

    def option(self, names: str, target: Target, help: str = "") -> "OptionSet":
        """Shorthand for ``add(option(names, target, help))``."""
        return self.add(option(names, target, help))

    def section(self, header: str) -> "OptionSet":
        """Shorthand for ``add(section(header))``."""
        return self.add(section(header))

    def argument_action(self, target: Target) -> "OptionSet":
        """Handle non-option arguments with ``target`` instead of collecting them."""
        self._argument_action = OptionDef("", target)
        if not (isinstance(target, Target) and target.is_valid()):
            self._fail("unsupported target type for argument action")
        return self

    def lookup(self, name: str) -> OptionDef | None:
        """Find the definition registered under exactly ``name``."""
        return self._index.get(name)

    def format_help(self) -> list[str]:
        """Render the help lines for all definitions in registration order.

        Each option line holds the names, followed by any parameter name, in
        a left column of fixed width, then the help text. When the names do
        not fit, the help text moves to the next line, aligned to the column.
        """
        lines: list[str] = []
        for definition in self._definitions:
            if definition.is_section_header():
                lines.append(definition.help)
                continue

            param_name, text = definition.split_help()
            left = f"  {definition.format_names()}{param_name}".ljust(HELP_COLUMN)
            if left.endswith(" "):
                lines.append(left + text)
            else:
                lines.append(left)
                lines.append(" " * HELP_COLUMN + text)
        return lines

    def parse(
        self,
        args: Sequence[str] | None = None,
        config: "ParserConfig | None" = None,
    ) -> "ParseResult":
        """Parse ``args`` against this set; see ``flagset.parser.parse_args``."""
        from flagset.parser import parse_args

        return parse_args(self, args, config)
