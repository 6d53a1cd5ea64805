"""Exception types raised and returned by flagset."""


class OptionError(Exception):
    """Base exception for option definition and parsing failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SetupError(OptionError):
    """Raised for structural problems found while building an option set.

    Duplicate names and unsupported targets are recorded when the options are
    registered and reported by the first parse attempt.
    """


class UnknownOptionError(OptionError):
    """An option name that is not registered was found on the command line."""

    def __init__(self, token: str):
        super().__init__(f"unknown option '{token}'")
        self.token = token


class MissingParameterError(OptionError):
    """An option that takes a parameter was the last token of the input."""

    def __init__(self, token: str):
        super().__init__(f"expected a parameter after option '{token}'")
        self.token = token


class OptionValueError(OptionError):
    """Applying a parameter to an option's target failed.

    The underlying failure is kept as ``__cause__`` and as ``original_error``.
    """

    def __init__(self, token: str, original_error: Exception | str):
        super().__init__(
            f"error with command line option '{token}': {original_error}"
        )
        self.token = token
        self.original_error = original_error


class ConversionError(ValueError):
    """A parameter could not be converted to the numeric type of its target."""

    def __init__(self, value: str, type_name: str, reason: str):
        super().__init__(f"parsing '{value}' as {type_name}: {reason}")
        self.value = value
        self.type_name = type_name
        self.reason = reason


class InvalidChoiceError(ValueError):
    """A parameter is not one of the values accepted by a choice target."""

    def __init__(self, value: str, choices: list[str] | tuple[str, ...]):
        super().__init__(f"invalid parameter value '{value}'")
        self.value = value
        self.choices = tuple(choices)
