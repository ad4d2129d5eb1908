"""Resolution of a ``Sequencing`` for a container shape.

Nothing is looked up implicitly: callers either ask for a shape by name with
an explicit ``Equality`` (``for_shape`` and the ``sequencing_for_*``
adapters) or let ``resolve`` pick the shape from the container's type. When
no equality is passed, ``resolve`` uses the equality registered for the
element type, falling back to ``DEFAULT_EQUALITY``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from inorder.constants import SHAPE_ARRAY, SHAPE_ITERATOR, SHAPE_LIST, SHAPE_SEQUENCE, SHAPE_STRING, SHAPES
from inorder.equality.base import DEFAULT_EQUALITY, Equality
from inorder.errors import UnsupportedShapeError
from inorder.messages import DEFAULT_MESSAGES, MessageCatalog
from inorder.sequencing.base import (
    ArraySequencing,
    IteratorSequencing,
    ListSequencing,
    SequenceSequencing,
    StringSequencing,
    ViewSequencing,
)

logger = logging.getLogger(__name__)


class SequencingRegistry:
    def __init__(self, *, messages: MessageCatalog = DEFAULT_MESSAGES) -> None:
        self.messages = messages
        self._factories: dict[str, type[ViewSequencing[Any]]] = {}
        self._order: list[str] = []
        self._equalities: dict[tuple[str | None, type], Equality[Any]] = {}

    def register(self, factory: type[ViewSequencing[Any]], *, shape: str | None = None) -> None:
        """Register ``factory`` for ``shape``, replacing any previous entry.

        New shapes are tried after the existing ones by ``resolve``.
        """
        name = shape or factory.shape
        if name not in self._factories:
            self._order.append(name)
        self._factories[name] = factory

    def register_equality(
        self,
        element_type: type,
        equality: Equality[Any],
        *,
        shape: str | None = None,
    ) -> None:
        """Make ``equality`` the default for ``element_type``, optionally only within ``shape``."""
        self._equalities[(shape, element_type)] = equality

    def shapes(self) -> list[str]:
        return list(self._order)

    def equality_for(self, element_type: type | None, *, shape: str | None = None) -> Equality[Any]:
        if element_type is None:
            return DEFAULT_EQUALITY
        for key in ((shape, element_type), (None, element_type)):
            if key in self._equalities:
                return self._equalities[key]
        return DEFAULT_EQUALITY

    def for_shape(self, shape: str, equality: Equality[Any] | None = None) -> ViewSequencing[Any]:
        try:
            factory = self._factories[shape]
        except KeyError:
            raise UnsupportedShapeError(
                f"Unknown container shape: {shape}. Known: {', '.join(self._order)}",
                details={"shape": shape},
            ) from None
        if equality is None:
            element_type = str if shape == SHAPE_STRING else None
            equality = self.equality_for(element_type, shape=shape)
        return factory(equality, messages=self.messages)

    def shape_of(self, container: Any) -> str:
        for shape in self._order:
            if self._factories[shape].accepts(container):
                return shape
        raise UnsupportedShapeError(
            f"No ordered container shape supports {type(container).__name__}",
            details={"type": type(container).__name__},
        )

    def resolve(
        self,
        container: Any,
        equality: Equality[Any] | None = None,
        *,
        element_type: type | None = None,
    ) -> ViewSequencing[Any]:
        shape = self.shape_of(container)
        if equality is None and element_type is not None:
            equality = self.equality_for(element_type, shape=shape)
        sequencing = self.for_shape(shape, equality)
        logger.debug("resolved %s sequencing for %s: %r", shape, type(container).__name__, sequencing)
        return sequencing


def build_default_registry(*, messages: MessageCatalog = DEFAULT_MESSAGES) -> SequencingRegistry:
    registry = SequencingRegistry(messages=messages)
    factories = {
        SHAPE_STRING: StringSequencing,
        SHAPE_ARRAY: ArraySequencing,
        SHAPE_LIST: ListSequencing,
        SHAPE_SEQUENCE: SequenceSequencing,
        SHAPE_ITERATOR: IteratorSequencing,
    }
    for shape in SHAPES:
        registry.register(factories[shape])
    return registry


DEFAULT_REGISTRY = build_default_registry()


def sequencing_for_sequence(equality: Equality[Any] = DEFAULT_EQUALITY) -> SequenceSequencing:
    return SequenceSequencing(equality)


def sequencing_for_iterator(equality: Equality[Any] = DEFAULT_EQUALITY) -> IteratorSequencing:
    return IteratorSequencing(equality)


def sequencing_for_array(equality: Equality[Any] = DEFAULT_EQUALITY) -> ArraySequencing:
    return ArraySequencing(equality)


def sequencing_for_list(equality: Equality[Any] = DEFAULT_EQUALITY) -> ListSequencing:
    return ListSequencing(equality)


def sequencing_for_string(equality: Equality[str] = DEFAULT_EQUALITY) -> StringSequencing:
    return StringSequencing(equality)


def convert_equality_to_sequencing(equality: Equality[Any], shape: str = SHAPE_SEQUENCE) -> ViewSequencing[Any]:
    """Turn a bare equality into a Sequencing, e.g. ``after_being(lower_cased)``."""
    return DEFAULT_REGISTRY.for_shape(shape, equality)


def contains_in_order(container: Any, elements: Sequence[Any], equality: Equality[Any] | None = None) -> bool:
    return DEFAULT_REGISTRY.resolve(container, equality).contains_in_order(container, elements)


def contains_in_order_only(container: Any, elements: Sequence[Any], equality: Equality[Any] | None = None) -> bool:
    return DEFAULT_REGISTRY.resolve(container, equality).contains_in_order_only(container, elements)


def contains_the_same_elements_in_order_as(
    container: Any,
    elements: Iterable[Any],
    equality: Equality[Any] | None = None,
) -> bool:
    return DEFAULT_REGISTRY.resolve(container, equality).contains_the_same_elements_in_order_as(container, elements)


__all__ = [
    "DEFAULT_REGISTRY",
    "SequencingRegistry",
    "build_default_registry",
    "contains_in_order",
    "contains_in_order_only",
    "contains_the_same_elements_in_order_as",
    "convert_equality_to_sequencing",
    "sequencing_for_array",
    "sequencing_for_iterator",
    "sequencing_for_list",
    "sequencing_for_sequence",
    "sequencing_for_string",
]
