"""Option targets: the variables and actions an option updates when matched.

A target is one of a fixed set of kinds. Variable kinds write into a ``Ref``,
a small mutable cell owned by the caller; action kinds call a function.

Example:
    >>> count = Ref(3)
    >>> Target.int32(count).apply("0x10")
    >>> count.value
    16
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from flagset.conversion import parse_float, parse_integer
from flagset.errors import InvalidChoiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """Mutable cell bound to a variable target.

    The initial value is the default used when the option never appears.
    """

    value: T


class TargetKind(Enum):
    """Supported target shapes."""

    TEXT = "text"
    UINT32 = "uint32"
    INT32 = "int32"
    UINT64 = "uint64"
    INT64 = "int64"
    FLOAT64 = "float64"
    FLAG = "flag"
    TEXT_LIST = "text_list"
    ACTION = "action"
    ACTION_WITH_PARAM = "action_with_param"
    CHECKED_ACTION = "checked_action"
    CHECKED_ACTION_WITH_PARAM = "checked_action_with_param"


VARIABLE_KINDS = frozenset(
    {
        TargetKind.TEXT,
        TargetKind.UINT32,
        TargetKind.INT32,
        TargetKind.UINT64,
        TargetKind.INT64,
        TargetKind.FLOAT64,
        TargetKind.FLAG,
        TargetKind.TEXT_LIST,
    }
)

# Kinds whose option is a bare switch and never consumes a parameter
PARAMETERLESS_KINDS = frozenset(
    {TargetKind.FLAG, TargetKind.ACTION, TargetKind.CHECKED_ACTION}
)

_INTEGER_WIDTHS = {
    TargetKind.UINT32: (32, False),
    TargetKind.INT32: (32, True),
    TargetKind.UINT64: (64, False),
    TargetKind.INT64: (64, True),
}


@dataclass(frozen=True)
class Target:
    """A tagged target: ``kind`` says how ``ref`` is updated or called.

    Build instances with the constructors below rather than directly.
    Checked actions report failure by raising ``ValueError``; unchecked
    actions are expected not to fail.
    """

    kind: TargetKind
    ref: Any

    @classmethod
    def text(cls, ref: Ref[str]) -> "Target":
        """Store the parameter verbatim."""
        return cls(TargetKind.TEXT, ref)

    @classmethod
    def uint32(cls, ref: Ref[int]) -> "Target":
        return cls(TargetKind.UINT32, ref)

    @classmethod
    def int32(cls, ref: Ref[int]) -> "Target":
        return cls(TargetKind.INT32, ref)

    @classmethod
    def uint64(cls, ref: Ref[int]) -> "Target":
        return cls(TargetKind.UINT64, ref)

    @classmethod
    def int64(cls, ref: Ref[int]) -> "Target":
        return cls(TargetKind.INT64, ref)

    @classmethod
    def float64(cls, ref: Ref[float]) -> "Target":
        return cls(TargetKind.FLOAT64, ref)

    @classmethod
    def flag(cls, ref: Ref[bool]) -> "Target":
        """Set the Ref to ``True``; the option takes no parameter."""
        return cls(TargetKind.FLAG, ref)

    @classmethod
    def text_list(cls, ref: Ref[list[str]]) -> "Target":
        """Append each occurrence's parameter to the list in the Ref."""
        return cls(TargetKind.TEXT_LIST, ref)

    @classmethod
    def action(cls, func: Callable[[], None]) -> "Target":
        return cls(TargetKind.ACTION, func)

    @classmethod
    def action_with_param(cls, func: Callable[[str], None]) -> "Target":
        return cls(TargetKind.ACTION_WITH_PARAM, func)

    @classmethod
    def checked_action(cls, func: Callable[[], None]) -> "Target":
        return cls(TargetKind.CHECKED_ACTION, func)

    @classmethod
    def checked_action_with_param(cls, func: Callable[[str], None]) -> "Target":
        return cls(TargetKind.CHECKED_ACTION_WITH_PARAM, func)

    @property
    def takes_parameter(self) -> bool:
        """Whether an option with this target consumes a parameter."""
        return self.kind not in PARAMETERLESS_KINDS

    def is_valid(self) -> bool:
        """Check that the payload matches the kind."""
        if not isinstance(self.kind, TargetKind):
            return False
        if self.kind in VARIABLE_KINDS:
            if not isinstance(self.ref, Ref):
                return False
            if self.kind == TargetKind.TEXT_LIST:
                return isinstance(self.ref.value, list)
            return True
        return callable(self.ref)

    def apply(self, value: str) -> None:
        """Update or call the target with a parameter.

        ``value`` is ignored by parameterless kinds. Numeric Refs are only
        written when the conversion succeeds.

        Raises:
            ConversionError: If a numeric parameter is malformed or out of range
            ValueError: If a checked action rejects the parameter
        """
        kind = self.kind
        if kind == TargetKind.TEXT:
            self.ref.value = value
        elif kind in _INTEGER_WIDTHS:
            bits, signed = _INTEGER_WIDTHS[kind]
            self.ref.value = parse_integer(value, bits, signed)
        elif kind == TargetKind.FLOAT64:
            self.ref.value = parse_float(value)
        elif kind == TargetKind.FLAG:
            self.ref.value = True
        elif kind == TargetKind.TEXT_LIST:
            self.ref.value.append(value)
        elif kind in (TargetKind.ACTION, TargetKind.CHECKED_ACTION):
            self.ref()
        elif kind in (
            TargetKind.ACTION_WITH_PARAM,
            TargetKind.CHECKED_ACTION_WITH_PARAM,
        ):
            self.ref(value)
        else:
            raise TypeError(f"Unsupported target kind: {kind!r}")

    @property
    def is_checked(self) -> bool:
        """Whether a ``ValueError`` from this target is an expected failure.

        Conversions of numeric kinds count as checked.
        """
        return self.kind in (
            TargetKind.CHECKED_ACTION,
            TargetKind.CHECKED_ACTION_WITH_PARAM,
            TargetKind.FLOAT64,
            *_INTEGER_WIDTHS,
        )


def increment(ref: Ref[int]) -> Target:
    """Target adding one to ``ref`` each time the option appears."""

    def _inc() -> None:
        ref.value += 1

    return Target.action(_inc)


def decrement(ref: Ref[int]) -> Target:
    """Target subtracting one from ``ref`` each time the option appears."""

    def _dec() -> None:
        ref.value -= 1

    return Target.action(_dec)


def reset_flag(ref: Ref[bool]) -> Target:
    """Target setting a boolean ``ref`` back to ``False``."""

    def _reset() -> None:
        ref.value = False

    return Target.action(_reset)


def choice(ref: Ref[str], choices: Sequence[str]) -> Target:
    """Target accepting only one of ``choices`` as its parameter.

    Args:
        ref: Receives the parameter when it is an accepted value
        choices: Accepted values, matched exactly

    Returns:
        A checked action that raises ``InvalidChoiceError`` otherwise
    """
    allowed = tuple(choices)

    def _choose(value: str) -> None:
        if value not in allowed:
            logger.debug(f"Rejected '{value}', expected one of {allowed}")
            raise InvalidChoiceError(value, allowed)
        ref.value = value

    return Target.checked_action_with_param(_choose)
