from __future__ import annotations

from array import array
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

from inorder.errors import UnsupportedShapeError

T = TypeVar("T")


class OrderedView(Generic[T]):
    """Random-access, read-only window over an indexable container.

    ``drop`` moves the window start forward without copying, which is what
    the in-order scan needs after every match.
    """

    __slots__ = ("_items", "_start")

    def __init__(self, items: Sequence[T], start: int = 0) -> None:
        self._items = items
        self._start = min(max(start, 0), len(items))

    def __len__(self) -> int:
        return len(self._items) - self._start

    def __iter__(self) -> Iterator[T]:
        items = self._items
        for index in range(self._start, len(items)):
            yield items[index]

    def __getitem__(self, index: int) -> T:
        if index < 0 or index >= len(self):
            raise IndexError(index)
        return self._items[self._start + index]

    def drop(self, count: int) -> OrderedView[T]:
        return OrderedView(self._items, self._start + count)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __repr__(self) -> str:
        return f"OrderedView({list(self)!r})"


def view_of_sequence(items: Sequence[T]) -> OrderedView[T]:
    return OrderedView(items)


def view_of_iterator(items: Iterator[T]) -> OrderedView[T]:
    # Iterators are consumed exactly once; the scan may revisit elements.
    return OrderedView(tuple(items))


def view_of_array(items: array | memoryview) -> OrderedView[Any]:
    if isinstance(items, memoryview) and items.ndim == 0:
        raise UnsupportedShapeError("A 0-dimensional memoryview has no elements to order", details={"ndim": 0})
    if isinstance(items, memoryview) and items.ndim > 1:
        # Multi-dimensional views cannot be indexed by a single int; the
        # elements are the rows of the first dimension, as nested lists.
        return OrderedView(items.tolist())
    return OrderedView(items)


def view_of_list(items: MutableSequence[T]) -> OrderedView[T]:
    return OrderedView(items)


def view_of_string(text: str) -> OrderedView[str]:
    return OrderedView(text)


__all__ = [
    "OrderedView",
    "view_of_array",
    "view_of_iterator",
    "view_of_list",
    "view_of_sequence",
    "view_of_string",
]
