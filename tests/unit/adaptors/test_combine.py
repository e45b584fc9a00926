"""Unit tests for chain, zip, enumerate and flatten."""

from typing import Tuple

import pytest

from lazyseq import (
    EXHAUSTED,
    empty,
    from_collection,
    infinite_range,
    once,
    range,
    repeat,
)


@pytest.mark.unit
@pytest.mark.adaptors
def test_chain_yields_first_then_second():
    """chain yields all of the first sequence, then all of the second."""
    assert range(0, 3).chain(range(10, 12)).collect() == [0, 1, 2, 10, 11]


@pytest.mark.unit
@pytest.mark.adaptors
def test_chain_accepts_plain_iterables():
    """The second operand may be any iterable."""
    assert once(1).chain([2, 3]).collect() == [1, 2, 3]


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.adaptors
def test_chain_of_empties():
    """Chaining empty sequences gives an empty sequence."""
    assert empty().chain(empty()).collect() == []
    assert empty().chain([4]).collect() == [4]


@pytest.mark.unit
@pytest.mark.adaptors
def test_chain_switches_once(counted):
    """After the first sequence is exhausted it is never pulled again."""
    first = counted([1])
    pipeline = first.chain([2, 3])

    pipeline.collect()

    assert first.pulls == 2


@pytest.mark.unit
@pytest.mark.adaptors
def test_chain_from_the_back_drains_second_first():
    """Reading a chain from the back starts at the end of the second sequence."""
    pipeline = range(0, 2).chain(range(5, 7))

    assert pipeline.is_double_ended
    assert pipeline.advance_back() == 6
    assert pipeline.advance_back() == 5
    assert pipeline.advance_back() == 1
    assert pipeline.advance_back() == 0
    assert pipeline.advance_back() is EXHAUSTED


@pytest.mark.unit
@pytest.mark.adaptors
def test_zip_pairs_in_lockstep_until_shorter_ends():
    """zip stops as soon as either side is exhausted."""
    pairs = range(0, 10).zip(["a", "b", "c"]).collect()

    assert pairs == [(0, "a"), (1, "b"), (2, "c")]


@pytest.mark.unit
@pytest.mark.adaptors
def test_zip_item_type_is_tuple_of_both():
    """The zipped item type pairs the two input item types."""
    assert range(0, 2).zip(range(0.0, 1.0)).item_type == Tuple[int, float]


@pytest.mark.unit
@pytest.mark.adaptors
def test_enumerate_pairs_index_with_item():
    """enumerate yields (index, item) starting at zero."""
    assert from_collection("ab").enumerate().collect() == [(0, "a"), (1, "b")]


@pytest.mark.unit
@pytest.mark.adaptors
def test_enumerate_on_infinite_source_with_take():
    """enumerate is lazy over infinite upstreams."""
    assert infinite_range(5).enumerate().take(2).collect() == [(0, 5), (1, 6)]


@pytest.mark.unit
@pytest.mark.adaptors
def test_flatten_concatenates_inner_sequences():
    """flatten removes exactly one level of nesting."""
    nested = from_collection([[1, 2], [], [3], [[4]]])

    assert nested.flatten().collect() == [1, 2, 3, [4]]


@pytest.mark.unit
@pytest.mark.adaptors
def test_flatten_accepts_inner_sequences():
    """Inner items may themselves be lazy sequences."""
    nested = range(1, 4).map(lambda n: range(0, n))

    assert nested.flatten().collect() == [0, 0, 1, 0, 1, 2]


@pytest.mark.unit
@pytest.mark.adaptors
def test_flatten_of_strings_yields_characters():
    """Strings are iterables of characters."""
    assert from_collection(["ab", "c"]).flatten().collect("".join) == "abc"


@pytest.mark.edge_case
@pytest.mark.unit
@pytest.mark.adaptors
def test_flatten_rejects_non_iterable_item_at_pull_time():
    """A non-iterable inner item raises TypeError naming the stage."""
    pipeline = from_collection([[1], 2]).flatten()

    assert pipeline.advance() == 1
    with pytest.raises(TypeError, match="flatten"):
        pipeline.advance()


@pytest.mark.unit
@pytest.mark.adaptors
def test_flatten_leaves_inner_sequences_undrained():
    """Inner sequences are read through a copy and keep their position."""
    first, second = range(0, 2), range(0, 3)

    assert from_collection([first, second]).flatten().collect() == [0, 1, 0, 1, 2]
    assert first.collect() == [0, 1]
    assert second.collect() == [0, 1, 2]


@pytest.mark.unit
@pytest.mark.adaptors
def test_cycle_over_flattened_sequences_repeats_every_pass():
    """Each cycle pass flattens the inner sequences from their start."""
    nested = from_collection([range(0, 2), range(0, 3)])

    assert nested.flatten().cycle().take(10).collect() == [0, 1, 0, 1, 2, 0, 1, 0, 1, 2]


@pytest.mark.unit
@pytest.mark.adaptors
def test_flatten_of_repeated_sequence_terminates_when_bounded():
    """The same inner sequence yielded repeatedly is flattened afresh each time."""
    assert repeat(range(0, 2)).flatten().take(5).collect() == [0, 1, 0, 1, 0]
