from __future__ import annotations

from abc import ABC, abstractmethod
from array import array
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from inorder.constants import SHAPE_ARRAY, SHAPE_ITERATOR, SHAPE_LIST, SHAPE_SEQUENCE, SHAPE_STRING
from inorder.equality.base import DEFAULT_EQUALITY, Equality
from inorder.messages import DEFAULT_MESSAGES, MessageCatalog
from inorder.sequencing.algorithms import (
    check_in_order,
    check_in_order_only,
    check_the_same_elements_in_order_as,
)
from inorder.sequencing.views import (
    OrderedView,
    view_of_array,
    view_of_iterator,
    view_of_list,
    view_of_sequence,
    view_of_string,
)

S = TypeVar("S")


class Sequencing(ABC, Generic[S]):
    """Order-sensitive containment queries for one container shape."""

    @abstractmethod
    def contains_in_order(self, sequence: S, elements: Sequence[Any]) -> bool:
        """True if ``sequence`` contains all of ``elements`` in their order of appearance."""

    @abstractmethod
    def contains_in_order_only(self, sequence: S, elements: Sequence[Any]) -> bool:
        """True if ``sequence`` holds only ``elements``, grouped in their order."""

    @abstractmethod
    def contains_the_same_elements_in_order_as(self, left: S, right: Iterable[Any]) -> bool:
        """True if ``left`` and ``right`` hold equal elements in the same order."""


class ViewSequencing(Sequencing[S]):
    """Sequencing that adapts its container to an ``OrderedView``.

    Subclasses only decide which containers they accept and how to view them;
    the comparison logic lives in ``inorder.sequencing.algorithms``.
    """

    shape: ClassVar[str]
    container_types: ClassVar[tuple[type, ...]]

    __slots__ = ("equality", "messages")

    def __init__(
        self,
        equality: Equality[Any] = DEFAULT_EQUALITY,
        *,
        messages: MessageCatalog = DEFAULT_MESSAGES,
    ) -> None:
        self.equality = equality
        self.messages = messages

    @classmethod
    def accepts(cls, container: Any) -> bool:
        return isinstance(container, cls.container_types)

    @abstractmethod
    def view(self, container: S) -> OrderedView[Any]:
        ...

    def contains_in_order(self, sequence: S, elements: Sequence[Any]) -> bool:
        return check_in_order(self.view(sequence), elements, self.equality, messages=self.messages)

    def contains_in_order_only(self, sequence: S, elements: Sequence[Any]) -> bool:
        return check_in_order_only(self.view(sequence), elements, self.equality)

    def contains_the_same_elements_in_order_as(self, left: S, right: Iterable[Any]) -> bool:
        return check_the_same_elements_in_order_as(self.view(left), right, self.equality)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.equality!r})"


class SequenceSequencing(ViewSequencing[Sequence[Any]]):
    shape = SHAPE_SEQUENCE
    container_types = (Sequence,)

    def view(self, container: Sequence[Any]) -> OrderedView[Any]:
        return view_of_sequence(container)


class IteratorSequencing(ViewSequencing[Iterator[Any]]):
    """Snapshots the iterator once per query, leaving it exhausted."""

    shape = SHAPE_ITERATOR
    container_types = (Iterator,)

    def view(self, container: Iterator[Any]) -> OrderedView[Any]:
        return view_of_iterator(container)


class ArraySequencing(ViewSequencing[Any]):
    shape = SHAPE_ARRAY
    container_types = (array, memoryview)

    def view(self, container: Any) -> OrderedView[Any]:
        return view_of_array(container)


class ListSequencing(ViewSequencing[MutableSequence[Any]]):
    shape = SHAPE_LIST
    container_types = (MutableSequence,)

    def view(self, container: MutableSequence[Any]) -> OrderedView[Any]:
        return view_of_list(container)


class StringSequencing(ViewSequencing[str]):
    """Treats a string as its sequence of single-character strings.

    The equality compares characters, so ``after_being(lower_cased)`` makes
    ``"HeLLo"`` contain ``["h", "l", "o"]`` in order.
    """

    shape = SHAPE_STRING
    container_types = (str,)

    def view(self, container: str) -> OrderedView[str]:
        return view_of_string(container)


__all__ = [
    "ArraySequencing",
    "IteratorSequencing",
    "ListSequencing",
    "SequenceSequencing",
    "Sequencing",
    "StringSequencing",
    "ViewSequencing",
]
