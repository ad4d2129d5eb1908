"""Composable value normalizations.

A ``Normalization`` transforms a value before it is compared. Normalizations
are immutable: ``a & b`` (or ``a.and_(b)``) builds a new
``ComposedNormalization`` that applies ``a`` first and ``b`` to the result,
leaving both operands untouched. Composition is flattened, so
``(a & b) & c`` and ``a & (b & c)`` apply the same parts in the same order.

Normalizations are expected to be side-effect free. They are re-applied on
every comparison and nothing is cached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Normalization(ABC, Generic[T]):
    @abstractmethod
    def is_instance_of_a(self, b: Any) -> bool:
        ...

    @abstractmethod
    def normalized(self, a: T) -> T:
        ...

    def normalized_if_instance_of_a(self, b: Any) -> Any:
        if self.is_instance_of_a(b):
            return self.normalized(b)
        return b

    def and_(self, other: Normalization[T]) -> Normalization[T]:
        return ComposedNormalization(parts=(*_parts_of(self), *_parts_of(other)))

    def __and__(self, other: Normalization[T]) -> Normalization[T]:
        return self.and_(other)


@dataclass(frozen=True)
class TypedNormalization(Normalization[T]):
    """Normalization whose membership test is ``isinstance(b, element_type)``."""

    element_type: type | tuple[type, ...]

    def is_instance_of_a(self, b: Any) -> bool:
        return isinstance(b, self.element_type)

    @abstractmethod
    def normalized(self, a: T) -> T:
        ...


@dataclass(frozen=True)
class FunctionNormalization(TypedNormalization[T]):
    func: Callable[[T], T]
    name: str | None = None

    def normalized(self, a: T) -> T:
        return self.func(a)

    def __repr__(self) -> str:
        label = self.name or getattr(self.func, "__name__", repr(self.func))
        return f"FunctionNormalization({label})"


@dataclass(frozen=True)
class ComposedNormalization(Normalization[T]):
    parts: tuple[Normalization[T], ...]

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("ComposedNormalization requires at least one part")

    def is_instance_of_a(self, b: Any) -> bool:
        return self.parts[0].is_instance_of_a(b)

    def normalized(self, a: T) -> T:
        value = a
        for part in self.parts:
            value = part.normalized(value)
        return value

    def normalized_if_instance_of_a(self, b: Any) -> Any:
        value = b
        for part in self.parts:
            value = part.normalized_if_instance_of_a(value)
        return value


def _parts_of(normalization: Normalization[T]) -> tuple[Normalization[T], ...]:
    if isinstance(normalization, ComposedNormalization):
        return normalization.parts
    return (normalization,)


def as_normalization(element_type: type | tuple[type, ...], name: str | None = None):
    """Decorator turning a plain function into a ``FunctionNormalization``.

    >>> @as_normalization(str)
    ... def stripped(s):
    ...     return s.strip()
    """

    def wrap(func: Callable[[T], T]) -> FunctionNormalization[T]:
        return FunctionNormalization(element_type=element_type, func=func, name=name or func.__name__)

    return wrap


__all__ = [
    "ComposedNormalization",
    "FunctionNormalization",
    "Normalization",
    "TypedNormalization",
    "as_normalization",
]
