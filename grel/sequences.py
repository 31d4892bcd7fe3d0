"""Subject shapes for sequence functions.

A subject is classified once into one of a closed set of shapes. Ordered
shapes share the `SequenceShape` interface (length, positional access and
construction from a run of items), so index arithmetic only has to be
written once. Anything that is not an ordered sequence is handled as text.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
from ovld import ovld

from .utils import GrelTypeError

TEXTUAL_TYPES = (str, bytes, bytearray)


class HasFields(ABC):
    """Object whose fields can be read by name from an expression."""

    @abstractmethod
    def get_field(self, name, bindings):
        """Return the value of the field `name`, or None."""


class HasFieldsList(HasFields):
    """Ordered collection of objects with fields.

    Sub-ranges are produced by the collection itself through
    `get_sub_list`.
    """

    @abstractmethod
    def length(self):
        """Return the number of elements."""

    @abstractmethod
    def get_sub_list(self, start, end):
        """Return the elements in `[start, end)` as a new collection."""


class FieldsList(HasFieldsList):
    """A HasFieldsList backed by a Python list."""

    def __init__(self, items=()):
        """Initialize a FieldsList."""
        self.items = list(items)

    def length(self):
        """Return the number of elements."""
        return len(self.items)

    def get_sub_list(self, start, end):
        """Return a new FieldsList over `items[start:end]`."""
        return FieldsList(self.items[start:end])

    def get_field(self, name, bindings):
        """Read field `name` from every element.

        Elements that do not have fields yield None.
        """
        return FieldsList(
            item.get_field(name, bindings)
            if isinstance(item, HasFields)
            else None
            for item in self.items
        )

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other):
        return isinstance(other, FieldsList) and self.items == other.items

    def __repr__(self):
        return f"FieldsList({self.items!r})"


class JsonArray:
    """A JSON array node, with positional access through `get`.

    Any object with callable `size()` and `get(i)` is sliced as a JSON array
    node, so `get` must take a position. Mappings whose `get` takes a key
    should not also define `size()`.
    """

    def __init__(self, items=()):
        """Initialize a JsonArray."""
        self._items = list(items)

    def size(self):
        """Return the number of elements."""
        return len(self._items)

    def get(self, i):
        """Return the element at position i, or None if out of range."""
        if 0 <= i < len(self._items):
            return self._items[i]
        return None

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        return isinstance(other, JsonArray) and self._items == other._items

    def __repr__(self):
        return f"JsonArray({self._items!r})"


def is_json_array(x):
    """Whether x exposes the JSON array node interface `size()`/`get(i)`.

    Detection is by method names only; `get` is assumed to be positional.
    """
    return callable(getattr(x, "size", None)) and callable(
        getattr(x, "get", None)
    )


@ovld
def to_object_list(x: list):
    """Return the elements of an array or list-like value as a list.

    A list is returned as is. Raises GrelTypeError for other values.
    """
    return x


@ovld
def to_object_list(x: tuple):  # noqa: F811
    return list(x)


@ovld
def to_object_list(x: np.ndarray):  # noqa: F811
    if x.ndim == 0:
        raise GrelTypeError("Cannot list the elements of a 0-d array")
    return list(x)


@ovld
def to_object_list(x: object):  # noqa: F811
    if isinstance(x, Sequence) and not isinstance(x, TEXTUAL_TYPES):
        return list(x)
    raise GrelTypeError(f"Expected an array or list, not {type(x).__name__}")


class Shape:
    """A classified subject."""

    def __init__(self, data):
        """Initialize a Shape."""
        self.data = data

    def __len__(self):
        return len(self.data)

    def extract(self, start, end):
        """Return the sub-range `[start, end)`; bounds are already valid."""
        raise NotImplementedError()


class TextShape(Shape):
    """Subject handled through its string form."""

    def __init__(self, subject):
        """Initialize a TextShape."""
        super().__init__(subject if isinstance(subject, str) else str(subject))

    def extract(self, start, end):
        """Return the substring `[start, end)`."""
        return self.data[start:end]


class SequenceShape(Shape):
    """Subject with a length and positional access to its elements."""

    def __getitem__(self, i):
        return self.data[i]

    def build(self, items):
        """Build the result container from an iterable of elements."""
        return list(items)

    def extract(self, start, end):
        """Copy the elements in `[start, end)` into a new container."""
        return self.build(self[i] for i in range(start, end))


class ArrayShape(SequenceShape):
    """Native fixed-size array: a tuple or a numpy array."""

    def build(self, items):
        """Build a tuple."""
        return tuple(items)

    def extract(self, start, end):
        """Return a new tuple, or a copy of the selected numpy rows."""
        if isinstance(self.data, np.ndarray):
            return self.data[start:end].copy()
        return super().extract(start, end)


class ListShape(SequenceShape):
    """Generic ordered list, read in place through `len` and indexing."""


class FieldsListShape(SequenceShape):
    """HasFieldsList, which extracts its own sub-ranges."""

    def __len__(self):
        return self.data.length()

    def extract(self, start, end):
        """Delegate to `get_sub_list`."""
        return self.data.get_sub_list(start, end)


class JsonArrayShape(SequenceShape):
    """JSON array node."""

    def __len__(self):
        return self.data.size()

    def __getitem__(self, i):
        return self.data.get(i)


def classify(subject):
    """Classify a subject into a Shape.

    Ordered sequences are recognized first, in priority order: native
    arrays, generic lists, has-fields lists and JSON array nodes. Any other
    value is textual, including 0-d numpy arrays.
    """
    if subject is None:
        raise GrelTypeError("Cannot classify None")
    elif isinstance(subject, tuple) or (
        isinstance(subject, np.ndarray) and subject.ndim > 0
    ):
        return ArrayShape(subject)
    elif isinstance(subject, Sequence) and not isinstance(
        subject, TEXTUAL_TYPES
    ):
        return ListShape(subject)
    elif isinstance(subject, HasFieldsList):
        return FieldsListShape(subject)
    elif is_json_array(subject):
        return JsonArrayShape(subject)
    else:
        return TextShape(subject)


def is_array_or_list(x):
    """Whether x is classified as an ordered sequence."""
    return x is not None and isinstance(classify(x), SequenceShape)


__all__ = [
    "ArrayShape",
    "FieldsList",
    "FieldsListShape",
    "HasFields",
    "HasFieldsList",
    "JsonArray",
    "JsonArrayShape",
    "ListShape",
    "SequenceShape",
    "Shape",
    "TextShape",
    "classify",
    "is_array_or_list",
    "is_json_array",
    "to_object_list",
]
