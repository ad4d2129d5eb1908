from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Equality(ABC, Generic[T]):
    """Pluggable "are these two values equal" strategy.

    ``b`` is deliberately typed ``Any``: implementations must answer ``False``
    for values outside their semantic type instead of raising.
    """

    @abstractmethod
    def are_equal(self, a: T, b: Any) -> bool:
        ...

    def is_instance_of_a(self, value: Any) -> bool:
        # Used when an arbitrary value has to play the left-hand role.
        return True


class DefaultEquality(Equality[T]):
    """Falls back to the native ``==`` of the left operand."""

    __slots__ = ()

    def are_equal(self, a: T, b: Any) -> bool:
        return bool(a == b)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DefaultEquality)

    def __hash__(self) -> int:
        return hash(DefaultEquality)

    def __repr__(self) -> str:
        return "DefaultEquality()"


DEFAULT_EQUALITY: Equality[Any] = DefaultEquality()


def try_equality(left: Any, right: Any, equality: Equality[T]) -> bool:
    """Compare two values of unknown type, treating non-members as unequal."""
    if not equality.is_instance_of_a(left):
        return False
    return equality.are_equal(left, right)


__all__ = [
    "DEFAULT_EQUALITY",
    "DefaultEquality",
    "Equality",
    "try_equality",
]
