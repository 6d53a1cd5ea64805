"""Command-line parsing against an OptionSet.

Options and positional arguments may be freely interleaved. Supported forms:

- ``--name``, ``--name=value``, ``--name value``
- ``-x``, ``-xvalue``, ``-x=value``, ``-x value``
- clusters of parameterless short options, optionally ending with one that
  takes a parameter: ``-abc``, ``-abn8``, ``-abn=8``
- ``--`` ends option recognition; every later token is positional
- a lone ``-`` is positional
"""

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from flagset.config import ParserConfig, default_config
from flagset.errors import (
    MissingParameterError,
    OptionError,
    OptionValueError,
    UnknownOptionError,
)
from flagset.options import OptionDef, OptionSet

logger = logging.getLogger(__name__)

# Token shown in error messages for failures of the argument action
ARGUMENT_LABEL = "<argument>"

HELP_NAMES = ("h", "help")


@dataclass
class ParseResult:
    """Positional arguments left after parsing, and the error if any.

    When parsing stops on an error, ``args`` holds the positional arguments
    seen up to that point, and targets already applied keep their new values.
    """

    args: list[str] = field(default_factory=list)
    error: OptionError | None = None
    help_shown: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> list[str]:
        """Raise the parse error if there was one, else return ``args``."""
        if self.error is not None:
            raise self.error
        return self.args


def _apply(definition: OptionDef, value: str, token: str) -> OptionValueError | None:
    """Apply ``value`` to the definition's target, wrapping expected failures."""
    target = definition.target
    try:
        target.apply(value)
    except ValueError as e:
        if not target.is_checked:
            raise
        error = OptionValueError(token, e)
        error.__cause__ = e
        return error
    return None


def parse_args(
    options: OptionSet,
    args: Sequence[str] | None = None,
    config: ParserConfig | None = None,
) -> ParseResult:
    """Parse command-line arguments according to ``options``.

    Args:
        options: The option definitions to match against
        args: Tokens to parse; ``sys.argv[1:]`` when omitted
        config: Hooks and switches; the module default config when omitted

    Returns:
        ParseResult with the positional arguments (unless an argument action
        consumed them) and the first error encountered, if any. Errors are
        also passed to ``config.report_error`` before returning.
    """
    if config is None:
        config = default_config
    args = list(sys.argv[1:] if args is None else args)

    if options.setup_error is not None:
        config.report_error(options, options.setup_error)
        return ParseResult(error=options.setup_error)

    logger.debug(f"Parsing {len(args)} arguments")
    positional: list[str] = []
    error: OptionError | None = None
    help_shown = False
    more_shorts = ""  # rest of a short option cluster, as "-<chars>"
    terminated = False  # "--" has been seen
    i = 0

    while i < len(args):
        from_cluster = bool(more_shorts)
        if from_cluster:
            token, more_shorts = more_shorts, ""
        else:
            token = args[i]

        name = ""
        parameter = ""
        is_long = False

        if from_cluster:
            # Always a short option, even when the next character is "-"
            name = token[1]
            parameter = token[2:]
        elif not terminated and token == "--":
            terminated = True
            i += 1
            continue
        elif not terminated and token.startswith("--"):
            name, sep, rest = token[2:].partition("=")
            parameter = sep + rest
            is_long = True
        elif not terminated and len(token) > 1 and token.startswith("-"):
            name = token[1]
            parameter = token[2:]
        else:
            action = options.argument_action_def
            if action is None:
                positional.append(token)
                i += 1
                continue
            # The argument action gets the whole token, whatever its shape
            error = _apply(action, token, ARGUMENT_LABEL)
            if error is not None:
                config.report_error(options, error)
                break
            i += 1
            continue

        definition = options.lookup(name)
        if definition is None:
            if (
                config.auto_help
                and name in HELP_NAMES
                and all(options.lookup(n) is None for n in HELP_NAMES)
            ):
                logger.debug(f"Showing automatic help for '{token}'")
                config.usage(options)
                config.exit(0)
                help_shown = True
                break
            error = UnknownOptionError(token)
            config.report_error(options, error)
            break

        if definition.takes_parameter():
            if not parameter:
                if i >= len(args) - 1:
                    error = MissingParameterError(token)
                    config.report_error(options, error)
                    break
                i += 1
                parameter = args[i]
            elif parameter.startswith("="):
                parameter = parameter[1:]
        elif parameter:
            if is_long:
                error = OptionValueError(token, "option does not take a parameter")
                config.report_error(options, error)
                break
            # Remaining characters are more short options
            more_shorts = "-" + parameter
            parameter = ""

        logger.debug(f"Applying option '{token}' ({definition.target.kind.value})")
        error = _apply(definition, parameter, token)
        if error is not None:
            config.report_error(options, error)
            break

        if not more_shorts:
            i += 1

    config.last_args = list(positional)
    return ParseResult(positional, error, help_shown)
