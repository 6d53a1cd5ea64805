"""flagset - small command-line option parser.

Options are defined by chaining calls on an OptionSet. Each call gives one or
more names (short and/or long), a target to update or call, and help text:

    from flagset import OptionSet, Ref, Target, choice

    num = Ref(3)
    color = Ref("")
    items = Ref([])
    flag = Ref(False)

    result = (
        OptionSet()
        .option("n number", Target.int32(num), "=NUM; Number value (default=3)")
        .option("c color", choice(color, ["red", "green", "blue"]),
                "=COLOR; Color (red, green or blue)")
        .option("list", Target.text_list(items), "=ITEM; String list value")
        .option("f flag", Target.flag(flag), "Boolean flag")
        .parse()
    )

``-h``/``--help`` print the generated help unless the program defines them.
"""

from flagset.config import ParserConfig, default_config
from flagset.errors import (
    ConversionError,
    InvalidChoiceError,
    MissingParameterError,
    OptionError,
    OptionValueError,
    SetupError,
    UnknownOptionError,
)
from flagset.options import OptionDef, OptionSet, option, section
from flagset.parser import ParseResult, parse_args
from flagset.targets import (
    Ref,
    Target,
    TargetKind,
    choice,
    decrement,
    increment,
    reset_flag,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "InvalidChoiceError",
    "MissingParameterError",
    "OptionDef",
    "OptionError",
    "OptionSet",
    "OptionValueError",
    "ParseResult",
    "ParserConfig",
    "Ref",
    "SetupError",
    "Target",
    "TargetKind",
    "UnknownOptionError",
    "choice",
    "decrement",
    "default_config",
    "increment",
    "option",
    "parse_args",
    "reset_flag",
    "section",
]
