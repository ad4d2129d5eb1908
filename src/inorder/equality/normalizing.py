from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, TypeVar

from inorder.equality.base import DEFAULT_EQUALITY, Equality
from inorder.equality.normalization import Normalization

T = TypeVar("T")


class NormalizingEquality(Equality[T]):
    """Equality that normalizes both operands before comparing them.

    A left operand outside the element type is never equal to anything;
    members are always normalized. The right operand is normalized
    only when it is a member of the element type, so comparing a normalized
    string against an integer passes the integer through untouched. The
    normalized values are then compared with ``after_normalization_equality``,
    which defaults to native equality.

    Subclasses supply ``is_instance_of_a`` and ``normalized``::

        class TrimmedLowerEquality(NormalizingEquality[str]):
            def is_instance_of_a(self, b):
                return isinstance(b, str)

            def normalized(self, s):
                return s.strip().lower()
    """

    after_normalization_equality: Equality[T] = DEFAULT_EQUALITY

    def are_equal(self, a: T, b: Any) -> bool:
        # Not meant to be overridden; customize normalized() instead.
        if not self.is_instance_of_a(a):
            return False
        return self.after_normalization_equality.are_equal(
            self.normalized(a),
            self.normalized_if_instance_of_a(b),
        )

    @abstractmethod
    def is_instance_of_a(self, value: Any) -> bool:
        ...

    @abstractmethod
    def normalized(self, a: T) -> T:
        ...

    def normalized_if_instance_of_a(self, b: Any) -> Any:
        if self.is_instance_of_a(b):
            return self.normalized(b)
        return b

    def and_(self, other: Normalization[T]) -> NormalizingEquality[T]:
        return ComposedNormalizingEquality(
            normalization=self.to_normalization() & other,
            after_normalization_equality=self.after_normalization_equality,
        )

    def __and__(self, other: Normalization[T]) -> NormalizingEquality[T]:
        return self.and_(other)

    def to_normalization(self) -> Normalization[T]:
        return _EqualityNormalization(self)


class _EqualityNormalization(Normalization[T]):
    __slots__ = ("_equality",)

    def __init__(self, equality: NormalizingEquality[T]) -> None:
        self._equality = equality

    def is_instance_of_a(self, b: Any) -> bool:
        return self._equality.is_instance_of_a(b)

    def normalized(self, a: T) -> T:
        return self._equality.normalized(a)

    def normalized_if_instance_of_a(self, b: Any) -> Any:
        return self._equality.normalized_if_instance_of_a(b)

    def __repr__(self) -> str:
        return f"{self._equality!r}.to_normalization()"


@dataclass(frozen=True)
class ComposedNormalizingEquality(NormalizingEquality[T]):
    normalization: Normalization[T]
    after_normalization_equality: Equality[T] = DEFAULT_EQUALITY

    def is_instance_of_a(self, value: Any) -> bool:
        return self.normalization.is_instance_of_a(value)

    def normalized(self, a: T) -> T:
        return self.normalization.normalized(a)

    def normalized_if_instance_of_a(self, b: Any) -> Any:
        return self.normalization.normalized_if_instance_of_a(b)

    def to_normalization(self) -> Normalization[T]:
        return self.normalization


def after_being(
    first: Normalization[T],
    *rest: Normalization[T],
    equality: Equality[T] | None = None,
) -> NormalizingEquality[T]:
    """Build an equality that compares values after the given normalizations.

    ``after_being(lower_cased)`` makes ``"HI"`` and ``"hi"`` equal;
    ``after_being(trimmed, lower_cased)`` also ignores surrounding whitespace.
    """
    composed = first
    for other in rest:
        composed = composed & other
    return ComposedNormalizingEquality(
        normalization=composed,
        after_normalization_equality=equality if equality is not None else DEFAULT_EQUALITY,
    )


__all__ = [
    "ComposedNormalizingEquality",
    "NormalizingEquality",
    "after_being",
]
