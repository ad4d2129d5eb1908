"""Property-based tests for the ordered-containment checks."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from inorder.equality import DEFAULT_EQUALITY, after_being, lower_cased, trimmed, upper_cased
from inorder.sequencing import (
    OrderedView,
    check_in_order,
    check_in_order_only,
    check_the_same_elements_in_order_as,
    sequencing_for_iterator,
    sequencing_for_sequence,
)

small_ints = st.lists(st.integers(min_value=0, max_value=5), max_size=12)
distinct_ints = st.lists(st.integers(min_value=0, max_value=50), unique=True, max_size=8)


@given(st.lists(st.tuples(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=5)), max_size=12))
def test_same_elements_in_order_is_pairwise_equality(pairs: list[tuple[int, int]]) -> None:
    left = [a for a, _ in pairs]
    right = [b for _, b in pairs]
    expected = all(DEFAULT_EQUALITY.are_equal(a, b) for a, b in pairs)
    assert check_the_same_elements_in_order_as(left, right, DEFAULT_EQUALITY) is expected


@given(small_ints)
def test_same_elements_with_itself(values: list[int]) -> None:
    assert check_the_same_elements_in_order_as(values, list(values), DEFAULT_EQUALITY)


@given(distinct_ints, st.lists(st.integers(min_value=1, max_value=4), min_size=8, max_size=8))
def test_run_length_expansion_matches_in_order_only(values: list[int], counts: list[int]) -> None:
    expanded = [value for value, count in zip(values, counts) for _ in range(count)]
    assert check_in_order_only(expanded, values, DEFAULT_EQUALITY)


@given(distinct_ints)
def test_in_order_only_rejects_a_reappearing_value(values: list[int]) -> None:
    if len(values) < 2:
        return
    assert not check_in_order_only([*values, values[0]], values, DEFAULT_EQUALITY)


@given(distinct_ints, st.lists(st.integers(min_value=100, max_value=110), max_size=8), st.randoms())
def test_interleaved_expected_elements_are_found_in_order(values: list[int], fillers: list[int], rnd) -> None:
    # Fillers never collide with expected values, so every value appears once.
    merged = list(fillers)
    for value in values:
        position = rnd.randint(0, len(merged))
        merged.insert(position, value)
    ordered = [item for item in merged if item < 100]
    assert check_in_order(OrderedView(merged), ordered, DEFAULT_EQUALITY)
    if len(ordered) >= 2:
        assert not check_in_order(OrderedView(merged), list(reversed(ordered)), DEFAULT_EQUALITY)


@given(small_ints)
def test_empty_expected_identities(values: list[int]) -> None:
    assert check_in_order(OrderedView(values), [], DEFAULT_EQUALITY)
    assert check_the_same_elements_in_order_as(values, [], DEFAULT_EQUALITY) is (not values)
    assert check_in_order_only(values, [], DEFAULT_EQUALITY) is (not values)


@given(small_ints, st.lists(st.integers(min_value=0, max_value=5), unique=True, max_size=4))
@settings(max_examples=200)
def test_iterator_matches_snapshot(values: list[int], expected: list[int]) -> None:
    source = iter(values)
    assert sequencing_for_iterator().contains_in_order(source, expected) == (
        sequencing_for_sequence().contains_in_order(tuple(values), expected)
    )
    assert next(source, None) is None
    assert sequencing_for_iterator().contains_in_order_only(iter(values), expected) == (
        sequencing_for_sequence().contains_in_order_only(tuple(values), expected)
    )


@given(st.text(max_size=20))
def test_normalization_composition_applies_in_order(text: str) -> None:
    assert (trimmed & upper_cased).normalized(text) == upper_cased.normalized(trimmed.normalized(text))
    assert ((trimmed & lower_cased) & upper_cased).normalized(text) == (
        trimmed & (lower_cased & upper_cased)
    ).normalized(text)


@given(st.one_of(st.integers(), st.none(), st.floats(allow_nan=False)))
def test_non_members_are_compared_unnormalized(other: object) -> None:
    equality = after_being(lower_cased)
    assert equality.are_equal("ABC", other) == DEFAULT_EQUALITY.are_equal("abc", other)
