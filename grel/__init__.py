"""Functions of the grel expression language."""

from . import functions  # noqa: F401
from .dispatch import call_function, lookup, registered_functions  # noqa
from .sequences import FieldsList, HasFields, HasFieldsList, JsonArray  # noqa
from .utils import (  # noqa: F401
    GrelConfigError,
    GrelError,
    GrelTypeError,
    UnknownFunction,
)
