"""
Command-line interface to the grel functions. To get help, run the
following command:

$ python -m grel -h
"""

import argparse
import json
import sys

from .config import LENIENT, STRICT
from .dispatch import call_function, lookup, registered_functions
from .sequences import FieldsList, JsonArray
from .utils import EventLog, GrelError

###############################
# Argument parser definitions #
###############################

parser = argparse.ArgumentParser(prog="grel")
subparsers = parser.add_subparsers(dest="command")

p_list = subparsers.add_parser("list", help="List the available functions")

p_describe = subparsers.add_parser("describe", help="Describe a function")
p_describe.add_argument("NAME", help="The name of the function.")

p_call = subparsers.add_parser(
    "call",
    help="Call a function on arguments given as JSON",
)
p_call.add_argument("NAME", help="The name of the function.")
p_call.add_argument(
    "ARGS",
    nargs="*",
    help="The arguments. Each is parsed as JSON, or else taken as a string.",
)
p_call.add_argument(
    "--json-arrays",
    "-j",
    action="store_true",
    help="Pass JSON arrays as JSON array nodes instead of lists.",
)
p_call.add_argument(
    "--trace",
    "-t",
    action="store_true",
    help="Print trace events on stderr.",
)
p_policy = p_call.add_mutually_exclusive_group()
p_policy.add_argument(
    "--strict",
    dest="policy",
    action="store_const",
    const=STRICT,
    help="Fail on a wrong number of arguments.",
)
p_policy.add_argument(
    "--lenient",
    dest="policy",
    action="store_const",
    const=LENIENT,
    help="Return null on a wrong number of arguments.",
)


#################
# Argument data #
#################


def parse_arg(text, json_arrays=False):
    """Parse a command-line argument."""
    try:
        value = json.loads(text)
    except ValueError:
        return text
    if json_arrays and isinstance(value, list):
        return JsonArray(value)
    return value


def _to_json(obj):
    if isinstance(obj, (JsonArray, FieldsList)):
        return list(obj)
    elif hasattr(obj, "tolist"):
        return obj.tolist()
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


############
# Commands #
############


def command_list(arguments):
    """Print the names of all functions."""
    for name in registered_functions():
        print(name)
    return 0


def command_describe(arguments):
    """Print the documentation of a function."""
    fn = lookup(arguments.NAME)
    print(f"{fn.name}({fn.params})")
    print(f"returns: {fn.returns}")
    print()
    print(fn.description)
    return 0


def command_call(arguments):
    """Call a function and print the result as JSON."""
    args = [parse_arg(a, arguments.json_arrays) for a in arguments.ARGS]
    if arguments.trace:
        with EventLog(file=sys.stderr):
            result = call_function(arguments.NAME, {}, args, arguments.policy)
    else:
        result = call_function(arguments.NAME, {}, args, arguments.policy)
    print(json.dumps(result, default=_to_json))
    return 0 if result is not None else 1


commands = {
    "list": command_list,
    "describe": command_describe,
    "call": command_call,
}


def main(argv=None):
    """Run the command line interface."""
    arguments = parser.parse_args(argv)
    if arguments.command is None:
        parser.print_help()
        return 2
    try:
        return commands[arguments.command](arguments)
    except GrelError as err:
        print(f"error: {err.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
