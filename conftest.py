"""
Root conftest.py — shared fixtures for the package test suites.

Fixtures:
  empty_stack    — unbounded, non-strict stack with no items
  bounded_stack  — factory building a stack with a size limit
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import pytest

from pi_stack import Stack, StackOptions


# ---------------------------------------------------------------------------
# Stacks
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_stack() -> Stack[Any]:
    return Stack()


@pytest.fixture
def bounded_stack() -> Callable[..., Stack[Any]]:
    """Build a stack: ``bounded_stack(items, size, strict=False)``."""

    def _make(items: Any = None, size: int = 3, strict: bool = False) -> Stack[Any]:
        return Stack(items, StackOptions(size=size, strict_size=strict))

    return _make


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def stack_debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by pi_stack."""
    caplog.set_level(logging.DEBUG, logger="pi_stack")
    return caplog
