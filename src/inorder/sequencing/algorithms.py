"""Order-sensitive containment checks shared by every Sequencing.

All three checks take the actual elements (``left``), the expected elements
(``right``) and the ``Equality`` used for every element comparison. Native
``==`` is never consulted directly.

**in order:** every expected element occurs in ``left`` in the same relative
order, with extra elements allowed anywhere. Each expected element is matched
at its *last* occurrence in what remains of ``left`` and the scan resumes just
after that index. Duplicates among the expected elements make the question
ambiguous and raise ``DuplicateElementError`` instead of answering ``False``.

**in order only:** ``left`` is a run-length expansion of ``right``: a run of
elements equal to ``right[0]``, then a run equal to ``right[1]``, and so on,
with nothing left over on either side.

**same elements in order:** pairwise equality in lockstep; both sides must
run out together.

Each check is a single pass (plus the bounded re-scan of the in-order check)
and keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from inorder.constants import MESSAGE_IN_ORDER_DUPLICATE
from inorder.equality.base import Equality, try_equality
from inorder.errors import DuplicateElementError
from inorder.messages import DEFAULT_MESSAGES, MessageCatalog
from inorder.sequencing.views import OrderedView

T = TypeVar("T")

_MISSING: Any = object()


def _find_duplicate(elements: Sequence[Any], equality: Equality[T]) -> Any:
    processed: list[Any] = []
    for element in elements:
        if any(try_equality(seen, element, equality) for seen in processed):
            return element
        processed.append(element)
    return _MISSING


def _last_index_of(view: OrderedView[T], element: Any, equality: Equality[T]) -> int | None:
    found: int | None = None
    for index, candidate in enumerate(view):
        if equality.are_equal(candidate, element):
            found = index
    return found


def check_in_order(
    left: OrderedView[T],
    right: Iterable[Any],
    equality: Equality[T],
    *,
    messages: MessageCatalog = DEFAULT_MESSAGES,
) -> bool:
    expected = tuple(right)
    duplicate = _find_duplicate(expected, equality)
    if duplicate is not _MISSING:
        raise DuplicateElementError(
            messages.lookup(MESSAGE_IN_ORDER_DUPLICATE, duplicate),
            element=duplicate,
        )

    remaining = left
    for element in expected:
        index = _last_index_of(remaining, element, equality)
        if index is None:
            return False
        remaining = remaining.drop(index + 1)
    return True


def check_in_order_only(left: Iterable[T], right: Iterable[Any], equality: Equality[T]) -> bool:
    left_iter = iter(left)
    right_iter = iter(right)
    current_left = next(left_iter, _MISSING)
    current_right = next(right_iter, _MISSING)
    if current_left is _MISSING or current_right is _MISSING:
        return current_left is _MISSING and current_right is _MISSING

    while True:
        # Every expected element must open its own run.
        if not equality.are_equal(current_left, current_right):
            return False

        next_left = _MISSING
        for candidate in left_iter:
            if not equality.are_equal(candidate, current_right):
                next_left = candidate
                break

        if next_left is _MISSING:
            return next(right_iter, _MISSING) is _MISSING

        current_right = next(right_iter, _MISSING)
        if current_right is _MISSING:
            return False
        current_left = next_left


def check_the_same_elements_in_order_as(left: Iterable[T], right: Iterable[Any], equality: Equality[T]) -> bool:
    left_iter = iter(left)
    right_iter = iter(right)
    while True:
        next_left = next(left_iter, _MISSING)
        next_right = next(right_iter, _MISSING)
        if next_left is _MISSING or next_right is _MISSING:
            return next_left is _MISSING and next_right is _MISSING
        if not equality.are_equal(next_left, next_right):
            return False


__all__ = [
    "check_in_order",
    "check_in_order_only",
    "check_the_same_elements_in_order_as",
]
