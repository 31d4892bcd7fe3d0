"""General utilities."""

from .errors import *
from .misc import *
from .numeric import *
from .trace import *
