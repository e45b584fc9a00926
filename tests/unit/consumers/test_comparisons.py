"""Unit tests for lexicographic cross-sequence comparisons."""

import math

import pytest

from lazyseq import CallbackContractError, Ordering, empty, from_collection, range
from lazyseq.core import consumers


@pytest.mark.unit
@pytest.mark.consumers
def test_cmp_is_lexicographic():
    """The first differing pair decides; a proper prefix is LESS."""
    assert range(0, 3).cmp([0, 1, 2]) is Ordering.EQUAL
    assert range(0, 3).cmp([0, 2]) is Ordering.LESS
    assert range(0, 3).cmp([0, 1]) is Ordering.GREATER
    assert range(0, 2).cmp([0, 1, 2]) is Ordering.LESS


@pytest.mark.unit
@pytest.mark.consumers
def test_cmp_by_uses_custom_comparator():
    """cmp_by compares pairs with the given comparator."""

    def by_length(a, b):
        return Ordering.of(len(a), len(b))

    assert from_collection(["aa", "b"]).cmp_by(["xx", "yy"], by_length) is Ordering.LESS


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.consumers
def test_empty_sequences_compare_equal():
    """Two empty sequences are EQUAL and eq."""
    assert empty().cmp(empty()) is Ordering.EQUAL
    assert empty().eq([])


@pytest.mark.unit
@pytest.mark.consumers
def test_eq_and_ne():
    """eq requires equal length and equal items."""
    assert range(0, 3).eq([0, 1, 2])
    assert not range(0, 3).eq([0, 1])
    assert range(0, 3).ne([0, 1, 3])


@pytest.mark.unit
@pytest.mark.consumers
def test_eq_by_with_custom_equality():
    """eq_by compares pairs with the given function."""
    words = from_collection(["Hello", "WORLD"])

    assert words.eq_by(["hello", "world"], lambda a, b: a.lower() == b.lower())


@pytest.mark.unit
@pytest.mark.consumers
def test_lt_le_gt_ge():
    """The relational helpers follow the lexicographic ordering."""
    assert range(0, 2).lt([0, 2])
    assert range(0, 2).le([0, 1])
    assert range(0, 3).gt([0, 1])
    assert range(0, 3).ge([0, 1, 2])
    assert not range(0, 3).lt([0, 1, 2])


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.consumers
def test_partial_cmp_with_nan_is_none():
    """A NaN at the first differing position makes the comparison undefined."""
    assert from_collection([1.0, math.nan]).partial_cmp([1.0, 2.0]) is None
    assert from_collection([0.0, math.nan]).partial_cmp([1.0, 2.0]) is Ordering.LESS


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.consumers
def test_nan_sequence_is_not_ordered_against_itself():
    """lt/le/gt/ge are all false for a NaN sequence compared with itself."""
    items = [math.nan]

    assert not from_collection(items).lt(items)
    assert not from_collection(items).le(items)
    assert not from_collection(items).gt(items)
    assert not from_collection(items).ge(items)
    assert from_collection(items).partial_cmp(items) is None


@pytest.mark.unit
@pytest.mark.consumers
def test_cmp_by_validates_comparator_once_under_its_own_name(monkeypatch):
    """cmp_by checks its comparator a single time, as stage cmp_by."""
    stages = []
    real_check = consumers.check_callback

    def recording_check(stage, func, arity):
        stages.append(stage)
        real_check(stage, func, arity)

    monkeypatch.setattr(consumers, "check_callback", recording_check)

    assert range(0, 2).cmp_by([0, 1], Ordering.of) is Ordering.EQUAL
    assert stages == ["cmp_by"]


@pytest.mark.unit
@pytest.mark.consumers
def test_cmp_by_rejection_names_cmp_by():
    """A wrongly shaped comparator is reported against cmp_by."""
    with pytest.raises(CallbackContractError) as error:
        range(0, 2).cmp_by([0, 1], lambda a: a)

    assert error.value.stage == "cmp_by"
