"""
lazyseq Combining Adaptors - Chain, Zip and Flatten
===================================================

- ChainAdaptor: all of the first sequence, then all of the second
- ZipAdaptor: lockstep pairs, ending with the shorter sequence
- FlattenAdaptor: concatenates the inner sequences of a sequence of sequences

``enumerate()`` is a ZipAdaptor over ``infinite_range(0)`` and the upstream.
"""

import collections.abc
from typing import Any, Tuple

from ..core.sentinel import EXHAUSTED
from ..core.sequence import Sequence
from ..producers import seq
from .base import Adaptor


class ChainAdaptor(Sequence):
    """
    Yields every item of ``first``, then every item of ``second``.

    Switches over exactly once, when ``first`` reports exhaustion, and never
    pulls from ``first`` again. Reading from the back drains ``second`` first.
    """

    def __init__(self, first: Any, second: Any):
        self._first = seq(first)
        self._second = seq(second)
        super().__init__(self._first.item_type)
        self._first_done = False

    def _advance(self) -> Any:
        if not self._first_done:
            item = self._first.advance()
            if item is not EXHAUSTED:
                return item
            self._first_done = True
        return self._second.advance()

    @property
    def is_double_ended(self) -> bool:
        return self._first.is_double_ended and self._second.is_double_ended

    def _advance_back(self) -> Any:
        item = self._second.advance_back()
        if item is not EXHAUSTED:
            return item
        return self._first.advance_back()


class ZipAdaptor(Sequence):
    """
    Yields ``(left_item, right_item)`` pairs.

    Both sides are advanced on every step; as soon as either is exhausted the
    zip is exhausted and the other side's item for that step is dropped.
    """

    def __init__(self, left: Any, right: Any):
        self._left = seq(left)
        self._right = seq(right)
        super().__init__(Tuple[self._left.item_type, self._right.item_type])

    def _advance(self) -> Any:
        left = self._left.advance()
        right = self._right.advance()
        if left is EXHAUSTED or right is EXHAUSTED:
            return EXHAUSTED
        return (left, right)


class FlattenAdaptor(Adaptor):
    """
    Removes one level of nesting.

    Each upstream item must be a sequence or a Python iterable; the items of the
    current inner sequence are yielded before the next inner sequence is pulled.
    Restartable inner sequences are read through a clone, so the upstream item
    itself is never drained.
    """

    def __init__(self, upstream: Any):
        super().__init__(upstream, Any)
        self._inner = None

    def _open(self, outer: Any) -> Sequence:
        if isinstance(outer, Sequence):
            return outer.clone() if outer.is_restartable else outer
        if isinstance(outer, collections.abc.Iterable):
            return seq(outer)
        raise TypeError(f"flatten: item {outer!r} is not a sequence or iterable")

    def _advance(self) -> Any:
        while True:
            if self._inner is None:
                outer = self._upstream.advance()
                if outer is EXHAUSTED:
                    return EXHAUSTED
                self._inner = self._open(outer)
            item = self._inner.advance()
            if item is not EXHAUSTED:
                return item
            self._inner = None
