"""Numeric argument handling.

Index arguments may be any real number. They are narrowed to integers by
truncation toward zero, the way a C cast would do it, and infinities
saturate instead of overflowing.
"""

import math
import numbers
import sys
from decimal import Decimal
from fractions import Fraction

import numpy as np
from ovld import ovld

from .errors import GrelTypeError

INT_MAX = sys.maxsize
INT_MIN = -sys.maxsize - 1


def is_number(x):
    """Whether x can be used as a numeric argument.

    Booleans and complex numbers are not numbers for this purpose.
    """
    if isinstance(x, (bool, np.bool_)):
        return False
    if isinstance(x, numbers.Complex) and not isinstance(x, numbers.Real):
        return False
    return isinstance(x, numbers.Number)


def _truncate_float(x):
    if math.isnan(x):
        return 0
    elif math.isinf(x):
        return INT_MAX if x > 0 else INT_MIN
    return int(x)


def _saturate(x):
    # int() of a huge Decimal or Fraction materializes every digit
    if x >= INT_MAX:
        return INT_MAX
    elif x <= INT_MIN:
        return INT_MIN
    return int(x)


@ovld
def to_int(x: int):
    """Convert a numeric argument to an int, truncating toward zero."""
    return x


@ovld
def to_int(x: bool):  # noqa: F811
    raise GrelTypeError(f"Expected a number, not {x!r}")


@ovld
def to_int(x: float):  # noqa: F811
    return _truncate_float(x)


@ovld
def to_int(x: np.integer):  # noqa: F811
    return int(x)


@ovld
def to_int(x: Decimal):  # noqa: F811
    if x.is_nan():
        return 0
    return _saturate(x)


@ovld
def to_int(x: Fraction):  # noqa: F811
    return _saturate(x)


@ovld
def to_int(x: object):  # noqa: F811
    if not is_number(x):
        raise GrelTypeError(f"Expected a number, not {x!r}")
    if isinstance(x, numbers.Integral):
        return _saturate(x)
    return _truncate_float(float(x))


__consolidate__ = True
__all__ = [
    "INT_MAX",
    "INT_MIN",
    "is_number",
    "to_int",
]
