"""Exceptions that may be raised within grel."""

from .misc import Named


class GrelError(Exception):
    """Error in the evaluation of a grel function.

    Attributes:
        message: The error message.
    """

    def __init__(self, message):
        """Initialize a GrelError."""
        super().__init__(message)
        self.message = message


class GrelTypeError(GrelError):
    """Wrong type or number of arguments given to a function."""


class GrelNameError(GrelError):
    """Raised when a name is not found in the function registry."""


class UnknownFunction(GrelNameError):
    """Raised when calling a function that is not registered."""

    def __init__(self, name):
        """Initialize an UnknownFunction."""
        super().__init__(f"Unknown function: '{name}'")
        self.name = name


class GrelConfigError(GrelError, ValueError):
    """Invalid configuration value."""


# Signal for a function that does not apply to its arguments. The public
# calling convention returns None instead; this is what traces report.
NOT_APPLICABLE = Named("NOT_APPLICABLE")


def _format_nargs(expected):
    if isinstance(expected, tuple):
        lo, hi = expected
        return str(lo) if lo == hi else f"{lo} to {hi}"
    return str(expected)


def accepts_nargs(expected, got):
    """Whether `got` arguments satisfy `expected`.

    `expected` is either an exact count or an inclusive `(min, max)` pair.
    """
    if isinstance(expected, tuple):
        lo, hi = expected
        return lo <= got <= hi
    return got == expected


def type_error_nargs(ident, expected, got):
    """Return a GrelTypeError for number of arguments mismatch."""
    return GrelTypeError(
        f"Wrong number of arguments for '{ident}':"
        f" expected {_format_nargs(expected)}, got {got}."
    )


def check_nargs(ident, expected, args):
    """Raise a GrelTypeError for number of arguments mismatch."""
    got = len(args)
    if expected is not None and not accepts_nargs(expected, got):
        raise type_error_nargs(ident, expected, got)
    return args


__consolidate__ = True
__all__ = [
    "GrelConfigError",
    "GrelError",
    "GrelNameError",
    "GrelTypeError",
    "NOT_APPLICABLE",
    "UnknownFunction",
    "accepts_nargs",
    "check_nargs",
    "type_error_nargs",
]
