"""Configuration read from the environment.

* `GREL_ARGCHECK`: what to do when a function receives a number of
  arguments it does not accept. `lenient` (the default) makes the call
  return None; `strict` raises a GrelTypeError.
"""

import os

from .utils import GrelConfigError

LENIENT = "lenient"
STRICT = "strict"
POLICIES = (LENIENT, STRICT)


def check_policy(policy):
    """Return the policy if it is valid, else raise GrelConfigError."""
    if policy not in POLICIES:
        raise GrelConfigError(
            f"Unknown argument check policy {policy!r},"
            f" expected one of: {', '.join(POLICIES)}"
        )
    return policy


def parse_argcheck():
    """Return the argument check policy from the environment."""
    policy = os.environ.get("GREL_ARGCHECK", LENIENT).strip().lower()
    return check_policy(policy or LENIENT)
