"""grel functions."""

###############################################################################
# THIS FILE IS GENERATED AUTOMATICALLY. DO NOT EDIT!                          #
# To regenerate this file, run `python scripts/regen.py`                      #
# The script will search for all functions it can find in grel.functions     #
###############################################################################

from .utils import Function  # noqa

slice = Function(
    name='slice',
    defaults='grel.functions.fn_slice'
)
