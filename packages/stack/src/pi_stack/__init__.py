"""
pi_stack — generic bounded stack with optional strict size.
"""
from .errors import StackError, StackOverflowError, StackSwapError
from .stack import Stack
from .types import StackOptions

VERSION: str = "0.0.1"
__version__ = VERSION

__all__ = [
    # errors
    "StackError",
    "StackOverflowError",
    "StackSwapError",
    # stack
    "Stack",
    # types
    "StackOptions",
    "VERSION",
    "__version__",
]
