"""Script to regenerate Python files in grel.

This generates the following file:

* grel/functions/__init__.py

"""

import importlib
import os

# Files to ignore in grel/functions
functions_ignore = ["utils.py"]

functions_dir = os.path.join(
    os.path.dirname(os.path.dirname(os.path.realpath(__file__))),
    "grel",
    "functions",
)


# First lines of grel/functions/__init__.py
fninit_prelude = '''"""grel functions."""

###############################################################################
# THIS FILE IS GENERATED AUTOMATICALLY. DO NOT EDIT!                          #
# To regenerate this file, run `python scripts/regen.py`                      #
# The script will search for all functions it can find in grel.functions     #
###############################################################################

from .utils import Function  # noqa'''


# Format for a Function
fn_format = """
{registered_name} = Function(
    name='{name}',
    defaults='{path}'
)"""


def collect_functions():
    """Return the defaults of every function module, by registered name."""
    functions = {}
    for entry in sorted(os.listdir(functions_dir)):
        if entry in functions_ignore:
            continue
        if entry.startswith("_"):
            continue
        if not entry.endswith(".py"):
            continue

        module_name = f"grel.functions.{entry[:-3]}"
        mod = importlib.import_module(module_name)
        if hasattr(mod, "__function_defaults__"):
            data = dict(mod.__function_defaults__, path=module_name)
            functions[data["registered_name"]] = data
    return functions


def render_functions():
    """Return the contents of grel/functions/__init__.py."""
    lines = [fninit_prelude]
    for regname, data in sorted(collect_functions().items()):
        lines.append(fn_format.format(**data))
    return "\n".join(lines) + "\n"


def regen():
    """Regenerate all automatically generated Python files."""
    fnpath = os.path.join(functions_dir, "__init__.py")
    with open(fnpath, "w") as fnfile:
        fnfile.write(render_functions())
    print(f"Generated {fnpath}")


if __name__ == "__main__":
    regen()
