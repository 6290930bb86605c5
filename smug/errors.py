"""Exception hierarchy shared by the whole package."""


class SmugError(Exception):
    """Base class for every error raised by this package."""


class PidError(SmugError, ValueError):
    """A process ID is not a valid, non-zero decimal number."""


class NumError(SmugError, ValueError):
    """A number, value type, expression or constraint could not be handled."""


class ParseNumberError(NumError):
    """Text could not be parsed as a number of the requested kind."""

    def __init__(self, text, kind, reason=""):
        self.text = text
        self.kind = kind
        self.reason = reason
        message = f"invalid {kind} number {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidConstraintError(NumError):
    """A constraint does not start with a known comparison operator."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"invalid constraint {text!r}")


class InvalidExpressionError(NumError):
    """An arithmetic expression is malformed or cannot be evaluated."""


class CommandError(SmugError):
    """A command was given bad arguments or could not complete."""