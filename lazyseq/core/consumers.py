"""
lazyseq Consumers - Terminal Operations
=======================================

Terminal operations drive a sequence by calling ``advance`` until it reports
``EXHAUSTED`` (full consumers) or until their answer is known (short-circuit
consumers), and return a plain value.

Full consumers:
- ``for_each``, ``collect``, ``collect_with_size_hint``, ``partition``
- ``count``, ``last``, ``sum``, ``product``, ``fold``, ``reduce``

Short-circuit consumers:
- ``all``, ``any``, ``find``, ``position``, ``nth``

Extrema and ordering:
- ``min``, ``max``, ``min_by``, ``max_by``
- ``is_sorted_ascending``, ``is_sorted_descending``, ``is_sorted_by``

Cross-sequence comparisons (lexicographic, lockstep):
- ``cmp``, ``cmp_by``, ``partial_cmp``, ``partial_cmp_by``
- ``eq``, ``eq_by``, ``ne``, ``lt``, ``le``, ``gt``, ``ge``

Consumers that can have no result return ``None``. Callers whose items may
themselves be ``None`` should use ``advance`` and compare against
``EXHAUSTED`` instead.
"""

from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Tuple, Union

import numpy as np

from ..types import (
    Accumulator,
    Collector,
    Comparator,
    EqualityFunction,
    Observer,
    PartialComparator,
    Predicate,
    T,
    U,
)
from .contracts import check_callback
from .ordering import Ordering, reverse_order
from .sentinel import EXHAUSTED

if TYPE_CHECKING:
    from .sequence import Sequence

Other = Union["Sequence[Any]", Iterable[Any]]


def _as_sequence(other: Other) -> "Sequence[Any]":
    from ..producers import seq

    return seq(other)


class ConsumerMixin:
    """
    Mixin providing the terminal operations of a sequence.

    Every method consumes ``self`` (partially, for short-circuit consumers);
    the sequence is left positioned after the last item that was examined.
    """

    # ============================================================
    # Full consumers
    # ============================================================

    def for_each(self, func: Observer) -> None:
        """Call ``func`` on every remaining item."""
        check_callback("for_each", func, 1)
        while (item := self.advance()) is not EXHAUSTED:
            func(item)

    def collect(self, factory: Collector = list) -> Any:
        """
        Gather every remaining item into a container.

        Args:
            factory: Callable taking an iterable, e.g. ``list``, ``set``,
                ``tuple`` or ``"".join``.
        """
        check_callback("collect", factory, 1)
        return factory(self)

    def collect_with_size_hint(
        self, size_hint: int, dtype: Optional[Any] = None
    ) -> np.ndarray:
        """
        Gather every remaining item into a numpy array.

        The buffer is preallocated with ``size_hint`` slots and doubled whenever
        the sequence turns out to be longer; the result is trimmed to the number
        of items actually yielded.

        Args:
            size_hint: Expected number of items; a wrong guess only costs a copy.
            dtype: numpy dtype of the result; ``object`` when omitted.
        """
        capacity = max(int(size_hint), 1)
        buffer = np.empty(capacity, dtype=dtype if dtype is not None else object)
        length = 0
        while (item := self.advance()) is not EXHAUSTED:
            if length == capacity:
                capacity *= 2
                grown = np.empty(capacity, dtype=buffer.dtype)
                grown[:length] = buffer[:length]
                buffer = grown
            buffer[length] = item
            length += 1
        return buffer[:length].copy()

    def partition(
        self, predicate: Predicate, factory: Collector = list
    ) -> Tuple[Any, Any]:
        """
        Split the remaining items by ``predicate``.

        Returns:
            ``(rejected, accepted)``: items for which ``predicate`` was false,
            then items for which it was true, each built with ``factory``.
        """
        check_callback("partition", predicate, 1)
        check_callback("partition", factory, 1)
        rejected, accepted = [], []
        while (item := self.advance()) is not EXHAUSTED:
            (accepted if predicate(item) else rejected).append(item)
        return factory(rejected), factory(accepted)

    def count(self) -> int:
        """Number of remaining items."""
        total = 0
        while self.advance() is not EXHAUSTED:
            total += 1
        return total

    def last(self) -> Optional[T]:
        """The final item, or None for an empty sequence."""
        result = None
        while (item := self.advance()) is not EXHAUSTED:
            result = item
        return result

    def sum(self, start: Any = 0) -> Any:
        """Add every item to ``start`` (0 for an empty sequence by default)."""
        return self.fold(start, lambda total, item: total + item)

    def product(self, start: Any = 1) -> Any:
        """Multiply ``start`` by every item (1 for an empty sequence by default)."""
        return self.fold(start, lambda total, item: total * item)

    def fold(self, seed: U, func: Accumulator) -> U:
        """Reduce with an initial accumulator; returns ``seed`` when empty."""
        check_callback("fold", func, 2)
        accumulator = seed
        while (item := self.advance()) is not EXHAUSTED:
            accumulator = func(accumulator, item)
        return accumulator

    def reduce(self, func: Callable[[T, T], T]) -> Optional[T]:
        """Reduce using the first item as the seed; None when empty."""
        check_callback("reduce", func, 2)
        first = self.advance()
        if first is EXHAUSTED:
            return None
        return self.fold(first, func)

    # ============================================================
    # Short-circuit consumers
    # ============================================================

    def all(self, predicate: Predicate) -> bool:
        """True if ``predicate`` holds for every item (True when empty)."""
        check_callback("all", predicate, 1)
        while (item := self.advance()) is not EXHAUSTED:
            if not predicate(item):
                return False
        return True

    def any(self, predicate: Predicate) -> bool:
        """True if ``predicate`` holds for some item (False when empty)."""
        check_callback("any", predicate, 1)
        while (item := self.advance()) is not EXHAUSTED:
            if predicate(item):
                return True
        return False

    def find(self, predicate: Predicate) -> Optional[T]:
        """The first item satisfying ``predicate``, or None."""
        check_callback("find", predicate, 1)
        while (item := self.advance()) is not EXHAUSTED:
            if predicate(item):
                return item
        return None

    def position(self, predicate: Predicate) -> Optional[int]:
        """Index of the first item satisfying ``predicate``, or None."""
        check_callback("position", predicate, 1)
        index = 0
        while (item := self.advance()) is not EXHAUSTED:
            if predicate(item):
                return index
            index += 1
        return None

    def nth(self, index: int) -> Optional[T]:
        """
        The item at ``index`` (zero-based), advancing ``index + 1`` times.

        Returns None if the sequence is too short or ``index`` is negative.
        """
        if index < 0:
            return None
        for _ in range(index):
            if self.advance() is EXHAUSTED:
                return None
        item = self.advance()
        return None if item is EXHAUSTED else item

    # ============================================================
    # Extrema
    # ============================================================

    def min(self) -> Optional[T]:
        """Smallest item (first one on ties), or None when empty."""
        return self.min_by(Ordering.of)

    def max(self) -> Optional[T]:
        """Largest item (first one on ties), or None when empty."""
        return self.max_by(Ordering.of)

    def min_by(self, comparator: Comparator) -> Optional[T]:
        """Smallest item according to ``comparator`` (first one on ties)."""
        check_callback("min_by", comparator, 2)
        return self._extremum(comparator, Ordering.LESS)

    def max_by(self, comparator: Comparator) -> Optional[T]:
        """Largest item according to ``comparator`` (first one on ties)."""
        check_callback("max_by", comparator, 2)
        return self._extremum(comparator, Ordering.GREATER)

    def _extremum(self, comparator: Comparator, wanted: Ordering) -> Optional[T]:
        best = self.advance()
        if best is EXHAUSTED:
            return None
        while (item := self.advance()) is not EXHAUSTED:
            # Strict comparison keeps the first extremal item
            if comparator(item, best) is wanted:
                best = item
        return best

    # ============================================================
    # Ordering checks
    # ============================================================

    def is_sorted_ascending(self) -> bool:
        """True if no item is less than the one before it."""
        return self.is_sorted_by(Ordering.of)

    def is_sorted_descending(self) -> bool:
        """True if no item is greater than the one before it."""
        return self.is_sorted_by(reverse_order)

    def is_sorted_by(self, comparator: Comparator) -> bool:
        """
        True if ``comparator(previous, current)`` is never GREATER.

        Stops at the first out-of-order pair; fewer than two items is sorted.
        """
        check_callback("is_sorted_by", comparator, 2)
        previous = self.advance()
        if previous is EXHAUSTED:
            return True
        while (item := self.advance()) is not EXHAUSTED:
            if comparator(previous, item) is Ordering.GREATER:
                return False
            previous = item
        return True

    # ============================================================
    # Lexicographic comparisons
    # ============================================================

    def partial_cmp_by(
        self, other: Other, comparator: PartialComparator
    ) -> Optional[Ordering]:
        """
        Lexicographically compare with ``other`` using a partial comparator.

        Both sequences advance in lockstep. The one that runs out first is
        LESS; running out together is EQUAL; otherwise the first pair that is
        not EQUAL (including an incomparable pair, reported as None) decides.
        """
        check_callback("partial_cmp_by", comparator, 2)
        return self._compare_lockstep(other, comparator)

    def _compare_lockstep(
        self, other: Other, comparator: PartialComparator
    ) -> Optional[Ordering]:
        other = _as_sequence(other)
        while True:
            mine = self.advance()
            theirs = other.advance()
            if mine is EXHAUSTED:
                return Ordering.EQUAL if theirs is EXHAUSTED else Ordering.LESS
            if theirs is EXHAUSTED:
                return Ordering.GREATER
            result = comparator(mine, theirs)
            if result is not Ordering.EQUAL:
                return result

    def partial_cmp(self, other: Other) -> Optional[Ordering]:
        """Lexicographic comparison; None if some pair is incomparable."""
        return self._compare_lockstep(other, Ordering.partial)

    def cmp_by(self, other: Other, comparator: Comparator) -> Ordering:
        """Lexicographic comparison with a total comparator."""
        check_callback("cmp_by", comparator, 2)
        return self._compare_lockstep(other, comparator)

    def cmp(self, other: Other) -> Ordering:
        """Lexicographic comparison using ``<`` and ``>``."""
        return self._compare_lockstep(other, Ordering.of)

    def eq_by(self, other: Other, func: EqualityFunction) -> bool:
        """True if both sequences have the same length and ``func`` holds pairwise."""
        check_callback("eq_by", func, 2)
        other = _as_sequence(other)
        while True:
            mine = self.advance()
            theirs = other.advance()
            if mine is EXHAUSTED:
                return theirs is EXHAUSTED
            if theirs is EXHAUSTED:
                return False
            if not func(mine, theirs):
                return False

    def eq(self, other: Other) -> bool:
        """True if both sequences have equal length and equal items."""
        return self.eq_by(other, lambda a, b: a == b)

    def ne(self, other: Other) -> bool:
        """Negation of ``eq``."""
        return not self.eq(other)

    def lt(self, other: Other) -> bool:
        """Lexicographically less; False if the comparison is undefined."""
        result = self.partial_cmp(other)
        return result is not None and result.is_lt

    def le(self, other: Other) -> bool:
        """Lexicographically less or equal; False if undefined."""
        result = self.partial_cmp(other)
        return result is not None and result.is_le

    def gt(self, other: Other) -> bool:
        """Lexicographically greater; False if undefined."""
        result = self.partial_cmp(other)
        return result is not None and result.is_gt

    def ge(self, other: Other) -> bool:
        """Lexicographically greater or equal; False if undefined."""
        result = self.partial_cmp(other)
        return result is not None and result.is_ge
