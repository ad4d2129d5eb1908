from __future__ import annotations

import pytest

from inorder.equality import DEFAULT_EQUALITY, after_being, lower_cased
from inorder.errors import DuplicateElementError
from inorder.messages import MessageCatalog
from inorder.sequencing.algorithms import (
    check_in_order,
    check_in_order_only,
    check_the_same_elements_in_order_as,
)
from inorder.sequencing.views import OrderedView


def _in_order(left: list, right: list, equality=DEFAULT_EQUALITY) -> bool:
    return check_in_order(OrderedView(left), right, equality)


class TestInOrder:
    def test_subsequence_with_gaps(self) -> None:
        assert _in_order([1, 2, 3, 4, 5], [2, 4])
        assert _in_order([1, 2, 3, 4, 5], [1, 5])
        assert _in_order([1, 2, 3], [1, 2, 3])

    def test_order_violation(self) -> None:
        assert not _in_order([1, 2, 3], [3, 1])

    def test_missing_element_fails(self) -> None:
        assert not _in_order([1, 2, 3], [2, 9])

    def test_empty_expected_is_always_satisfied(self) -> None:
        assert _in_order([], [])
        assert _in_order([1, 2], [])

    def test_expected_longer_than_actual(self) -> None:
        assert not _in_order([], [1])

    def test_matches_last_occurrence_of_each_element(self) -> None:
        # 1 is matched at its last position, so 2 must follow that position.
        assert _in_order([1, 1, 2], [1, 2])
        assert not _in_order([1, 2, 1], [1, 2])
        assert _in_order([1, 2, 1, 2], [1, 2])

    def test_duplicate_expected_raises(self) -> None:
        with pytest.raises(DuplicateElementError) as excinfo:
            _in_order([1, 2, 3], [1, 1])
        assert excinfo.value.element == 1
        assert "1" in str(excinfo.value)

    def test_duplicate_expected_raises_regardless_of_actual(self) -> None:
        with pytest.raises(DuplicateElementError):
            _in_order([], [1, 1])
        with pytest.raises(ValueError):
            _in_order([5, 6], [9, 3, 9])

    def test_duplicates_are_detected_with_the_active_equality(self) -> None:
        equality = after_being(lower_cased)
        with pytest.raises(DuplicateElementError) as excinfo:
            _in_order(["hi", "there"], ["HI", "hi"], equality)
        assert excinfo.value.element == "hi"

    def test_mixed_types_are_not_duplicates_under_normalizing_equality(self) -> None:
        equality = after_being(lower_cased)
        assert not _in_order(["a", "b"], [1, "A"], equality)
        assert _in_order(["x", "A", "y", "B"], ["a", "b"], equality)

    def test_custom_message_catalog(self) -> None:
        catalog = MessageCatalog().with_overrides({"in_order_duplicate": "dup: {0}"})
        with pytest.raises(DuplicateElementError, match="dup: 'x'"):
            check_in_order(OrderedView(["x"]), ["x", "x"], DEFAULT_EQUALITY, messages=catalog)

    def test_case_folded_matching(self) -> None:
        assert _in_order(["HI", "there"], ["hi"], after_being(lower_cased))
        assert not _in_order(["HI", "there"], ["hi"])


class TestInOrderOnly:
    def test_runs_of_each_expected_value(self) -> None:
        assert check_in_order_only([1, 1, 2, 2, 2, 3], [1, 2, 3], DEFAULT_EQUALITY)
        assert check_in_order_only([1, 2, 3], [1, 2, 3], DEFAULT_EQUALITY)

    def test_value_reappearing_after_another_run_fails(self) -> None:
        assert not check_in_order_only([1, 2, 1], [1, 2], DEFAULT_EQUALITY)

    def test_extra_trailing_group_fails(self) -> None:
        assert not check_in_order_only([1, 2, 3], [1, 2], DEFAULT_EQUALITY)

    def test_unconsumed_expected_fails(self) -> None:
        assert not check_in_order_only([1, 1, 2], [1, 2, 3], DEFAULT_EQUALITY)

    def test_each_expected_value_must_open_a_run(self) -> None:
        assert not check_in_order_only([1, 3], [1, 2, 3], DEFAULT_EQUALITY)

    def test_reordered_fails(self) -> None:
        assert not check_in_order_only([2, 1], [1, 2], DEFAULT_EQUALITY)

    def test_empty_sides(self) -> None:
        assert check_in_order_only([], [], DEFAULT_EQUALITY)
        assert not check_in_order_only([1], [], DEFAULT_EQUALITY)
        assert not check_in_order_only([], [1], DEFAULT_EQUALITY)

    def test_repeated_expected_values_are_allowed(self) -> None:
        assert check_in_order_only([1, 2, 2, 1], [1, 2, 1], DEFAULT_EQUALITY)

    def test_uses_equality(self) -> None:
        equality = after_being(lower_cased)
        assert check_in_order_only(["A", "a", "B"], ["a", "b"], equality)


class TestSameElementsInOrder:
    def test_pairwise_equal(self) -> None:
        assert check_the_same_elements_in_order_as([1, 2, 3], [1, 2, 3], DEFAULT_EQUALITY)
        assert not check_the_same_elements_in_order_as([1, 2, 3], [1, 3, 2], DEFAULT_EQUALITY)

    def test_length_mismatch(self) -> None:
        assert not check_the_same_elements_in_order_as([1, 2], [1, 2, 3], DEFAULT_EQUALITY)
        assert not check_the_same_elements_in_order_as([1, 2, 3], [1, 2], DEFAULT_EQUALITY)

    def test_empty_expected(self) -> None:
        assert check_the_same_elements_in_order_as([], [], DEFAULT_EQUALITY)
        assert not check_the_same_elements_in_order_as([1], [], DEFAULT_EQUALITY)

    def test_duplicates_are_fine(self) -> None:
        assert check_the_same_elements_in_order_as([1, 1], [1, 1], DEFAULT_EQUALITY)

    def test_right_side_may_be_any_iterable(self) -> None:
        assert check_the_same_elements_in_order_as(["A", "b"], iter(["a", "B"]), after_being(lower_cased))
