"""Calling functions by name, as an expression evaluator does."""

from . import functions
from .config import STRICT, check_policy, parse_argcheck
from .functions import Function
from .utils import NOT_APPLICABLE, UnknownFunction, check_nargs, tracer


def registered_functions():
    """Return a dict of all registered functions, sorted by name."""
    fns = {
        fn.name: fn
        for fn in vars(functions).values()
        if isinstance(fn, Function)
    }
    return dict(sorted(fns.items()))


def lookup(name):
    """Return the function registered under `name`.

    Raises:
        UnknownFunction: There is no function with that name.
    """
    fn = registered_functions().get(name, None)
    if fn is None:
        raise UnknownFunction(name)
    return fn


def call_function(name, bindings, args, policy=None):
    """Call a function with evaluator bindings and positional arguments.

    Arguments:
        name: The name of the function.
        bindings: Evaluation bindings, passed through to the function.
        args: The positional arguments.
        policy: The argument check policy, `lenient` or `strict`. Defaults
            to the `GREL_ARGCHECK` environment variable.

    Returns:
        The result of the function, or None if it does not apply to
        these arguments.

    Raises:
        UnknownFunction: There is no function with that name.
        GrelTypeError: The policy is strict and the number of arguments is
            not accepted.
    """
    fn = lookup(name)
    policy = parse_argcheck() if policy is None else check_policy(policy)
    args = tuple(args)
    with tracer("call", function=name, args=args) as tr:
        if policy == STRICT and not fn.accepts(args):
            tracer().emit_arity_error(
                function=name, expected=fn.nargs, got=len(args)
            )
            check_nargs(name, fn.nargs, args)
        result = fn.call(bindings, args)
        if result is None:
            tracer().emit_not_applicable(function=name, nargs=len(args))
            tr.set_results(result=NOT_APPLICABLE)
        else:
            tr.set_results(result=result)
    return result
