"""Utilities for grel functions."""

import inspect

from ..utils import HasDefaults, accepts_nargs


class Function(HasDefaults):
    """Represents a function of the expression language.

    The defaults dictionary, usually the `__function_defaults__` of the
    implementing module, holds:

    * `name`: the name the function is registered under.
    * `python_implementation`: the callable doing the work.
    * `nargs`: the accepted number of arguments, an int or `(min, max)`.
    * `description`, `params`, `returns`: documentation strings.
    """

    def __init__(self, name, defaults={}):
        """Initialize a Function."""
        super().__init__(name, defaults, "__function_defaults__")

    @property
    def implementation(self):
        """The Python implementation of this function."""
        return self.defaults()["python_implementation"]

    @property
    def nargs(self):
        """The accepted number of arguments."""
        return self.defaults().get("nargs", None)

    @property
    def description(self):
        """Human-readable description."""
        return self.defaults().get("description", "")

    @property
    def params(self):
        """Parameter signature, for documentation."""
        return self.defaults().get("params", "")

    @property
    def returns(self):
        """Description of the returned value, for documentation."""
        return self.defaults().get("returns", "")

    def accepts(self, args):
        """Whether this function can be called with these arguments."""
        nargs = self.nargs
        return nargs is None or accepts_nargs(nargs, len(args))

    def call(self, bindings, args):
        """Call the function from an expression.

        Returns None if the number of arguments is not accepted. The
        bindings are only given to implementations that declare a
        `bindings` keyword argument.
        """
        if not self.accepts(args):
            return None
        impl = self.implementation
        if "bindings" in inspect.signature(impl).parameters:
            return impl(*args, bindings=bindings)
        return impl(*args)

    def __call__(self, *args, **kwargs):
        """Call the Python implementation directly."""
        return self.implementation(*args, **kwargs)

    def __str__(self):
        return f"grel.functions.{self.name}"

    __repr__ = __str__
