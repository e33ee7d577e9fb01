"""
Errors raised by the stack container.
"""
from __future__ import annotations


class StackError(Exception):
    """Base class for stack failures."""


class StackOverflowError(StackError):
    """
    Raised when a strict-size stack is full and more items are pushed,
    or when it is initialised with more items than it can hold.
    """


class StackSwapError(StackError):
    """Raised when a swap names items or indexes that are not in the stack."""
