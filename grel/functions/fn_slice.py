"""Implementation of the `slice` function."""

from ..sequences import classify
from ..utils import is_number, to_int


def normalize_bounds(length, start, end=None):
    """Resolve a half-open range against a sequence of the given length.

    Negative indices count from the end. Both bounds saturate to the
    sequence, and `end` is never less than the normalized `start`, so an
    inverted range is empty rather than an error.

    Arguments:
        length: The length of the sequence.
        start: The first index, as an int.
        end: The index past the last element, or None for the end.

    Returns:
        A pair `(start, end)` with `0 <= start <= end <= length`.
    """
    if end is None:
        end = length

    if start < 0:
        start = length + start
    start = min(length, max(0, start))

    if end < 0:
        end = length + end
    end = min(length, max(start, end))

    return start, end


def pyimpl_slice(subject, from_=None, to=None):
    """Implement `slice`.

    Returns None when the subject is None, when `from_` is missing or not a
    number, or when `to` is given and is not a number.
    """
    if subject is None or not is_number(from_):
        return None
    if to is not None and not is_number(to):
        return None
    shape = classify(subject)
    start, end = normalize_bounds(
        len(shape), to_int(from_), None if to is None else to_int(to)
    )
    return shape.extract(start, end)


__function_defaults__ = {
    "name": "slice",
    "registered_name": "slice",
    "python_implementation": pyimpl_slice,
    "nargs": (2, 3),
    "description": (
        "Returns the substring of o starting from character or array index"
        " from, and up to (excluding) character or array index to. If the"
        " to argument is omitted, slice will output to the end of o. For"
        ' example, "profound".slice(3) returns the string "found", and'
        ' "profound".slice(2, 4) returns the string "of". Remember that'
        " character indices start from zero. A negative character index"
        ' counts from the end of the string. For example,'
        ' "profound".slice(0, -1) returns the string "profoun". If o is an'
        " array, returns o[from, to]."
    ),
    "params": "string or array o, number from, number to (optional)",
    "returns": "string, array, or array item (number, string, etc.)",
}
