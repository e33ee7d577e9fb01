"""
Generic bounded stack.

Items are stored bottom to top: index 0 is the oldest item and the last index
is the top.  A stack may be given a maximum size.  When it is full, pushing
either evicts the bottom item or, with ``strict_size``, raises
:class:`~pi_stack.errors.StackOverflowError`.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

from .errors import StackOverflowError, StackSwapError
from .types import DEFAULT_OPTIONS, StackOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _resolve_options(options: StackOptions | Mapping[str, Any] | None) -> StackOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, StackOptions):
        return options
    return StackOptions.model_validate(dict(options))


class Stack(Generic[T]):
    """
    LIFO container with an optional size limit.

    ``items`` may be a list or tuple of initial items (bottom first) or a
    single item.  ``options`` is a :class:`StackOptions` or a mapping of its
    fields.

    Iterating a stack yields items bottom to top; popping yields them top to
    bottom.
    """

    def __init__(
        self,
        items: list[T] | tuple[T, ...] | T | None = None,
        options: StackOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._options = _resolve_options(options)
        self._size = self._options.max_size
        self._strict_size = self._options.strict_size

        if items is None:
            self._items: list[T] = []
        elif isinstance(items, (list, tuple)):
            self._items = list(items)
        else:
            self._items = [items]

        if len(self._items) > self._size:
            if self._strict_size:
                raise StackOverflowError(
                    f"Stack size is {self._size}. Attempt to init stack with {len(self._items)} items."
                )
            dropped = len(self._items) - self._size
            logger.debug("Dropping %d oldest initial item(s) to fit stack size %d", dropped, self._size)
            del self._items[:dropped]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def push(self, item: T) -> None:
        """
        Push *item* onto the top of the stack.

        If the stack is full, the bottom item is evicted first.  With
        ``strict_size`` a full stack raises instead and is left unchanged.

        Raises:
            StackOverflowError: If the stack size is strict and the stack is full.
        """
        if len(self._items) + 1 > self._size:
            if self._strict_size:
                raise StackOverflowError(f"Stack size is {self._size}. Attempt to push item to full stack.")
            evicted = self._items.pop(0)
            logger.debug("Stack full (size %d), evicted bottom item %r", self._size, evicted)

        self._items.append(item)

    def pop(self) -> T | None:
        """Pop and return the top item, or None if empty."""
        return self._items.pop() if self._items else None

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()

    def swap(self, item1: T, item2: T) -> None:
        """
        Swap the positions of *item1* and *item2*.

        Items are located by their first occurrence using ``==``, so values
        compare by equality and objects without ``__eq__`` by identity.

        Raises:
            StackSwapError: If either item is not in the stack.
        """
        try:
            index1 = self._items.index(item1)
            index2 = self._items.index(item2)
        except ValueError:
            raise StackSwapError("Items not found") from None

        self.swap_by_index(index1, index2)

    def swap_by_index(self, index1: int, index2: int) -> None:
        """
        Swap the items at *index1* and *index2* (0 is the bottom).

        Raises:
            StackSwapError: If either index is outside ``0 <= index < len(stack)``.
        """
        length = len(self._items)
        if index1 < 0 or index2 < 0 or index1 >= length or index2 >= length:
            raise StackSwapError("Invalid indexes")

        self._items[index1], self._items[index2] = self._items[index2], self._items[index1]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def peek(self) -> T | None:
        """Return the top item without removing it, or None if empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def is_full(self) -> bool:
        return len(self._items) == self._size

    @property
    def items(self) -> list[T]:
        """The live list of items, bottom first.  Not a copy."""
        return self._items

    @property
    def size(self) -> int | float:
        """Maximum number of items; ``math.inf`` when unbounded."""
        return self._size

    @property
    def strict_size(self) -> bool:
        return self._strict_size

    @property
    def options(self) -> StackOptions:
        return self._options

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, size={self._size}, strict_size={self._strict_size})"
