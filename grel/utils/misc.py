"""Miscellaneous utilities."""


class Named:
    """A named object.

    This class can be used to construct objects with a name that will be used
    for the string representation.

    """

    def __init__(self, name):
        """Construct a named object.

        Arguments:
            name: The name of this object.

        """
        self.name = name

    def __repr__(self):
        """Return the object's name."""
        return self.name


class HasDefaults:
    """Object that can return a defaults dictionary.

    The defaults can be given as a dictionary or as a path to a module.
    """

    def __init__(self, name, defaults, defaults_field):
        """Initialize a HasDefaults."""
        self.name = name
        self.defaults_field = defaults_field
        self.set_defaults(defaults)

    def set_defaults(self, defaults):
        """Set the defaults."""
        if isinstance(defaults, dict):
            self._defaults = defaults
        elif isinstance(defaults, str):
            self._defaults = None
            self._defaults_location = defaults
        else:
            ty = type(self).__qualname__
            raise TypeError(
                f"{ty} defaults must be a dict or the qualified name"
                " of a module."
            )

    def defaults(self):
        """Return defaults for this object."""
        if self._defaults is None:
            defaults = resolve_from_path(self._defaults_location)
            if not isinstance(defaults, dict):
                defaults = getattr(defaults, self.defaults_field)
            self._defaults = defaults
        return self._defaults


def resolve_from_path(path):
    """Resolve a module or object from a path of the form x.y.z."""
    modname, field = path.rsplit(".", 1)
    mod = __import__(modname, fromlist=[field])
    return getattr(mod, field)


__consolidate__ = True
__all__ = [
    "HasDefaults",
    "Named",
    "resolve_from_path",
]
