"""
lazyseq Bounding Adaptors - Skip-While and Take-While
=====================================================

``skip(n)`` and ``take(n)`` are the same adaptors driven by a
:class:`CallCounter`, a predicate that holds for its first ``n`` calls.
"""

import logging
from typing import Any

from ..core.contracts import check_callback
from ..core.sentinel import EXHAUSTED
from ..core.sequence import StageState
from ..types import Predicate
from .base import Adaptor


class CallCounter(StageState):
    """Predicate that is true for the first ``limit`` calls, false afterwards."""

    def __init__(self, limit: int):
        self._limit = int(limit)
        self._calls = 0

    def __call__(self, _item: Any) -> bool:
        within = self._calls < self._limit
        self._calls += 1
        return within

    @property
    def spent(self) -> bool:
        """True once every further call would return False."""
        return self._calls >= self._limit

    def __repr__(self) -> str:
        return f"CallCounter({self._calls}/{self._limit})"


class SkipWhileAdaptor(Adaptor):
    """
    Drops leading items while the predicate holds, then yields everything else.

    The first item the predicate rejects is yielded. The predicate is not
    called again after that.
    """

    def __init__(self, upstream: Any, predicate: Predicate, stage: str = "skip_while"):
        check_callback(stage, predicate, 1)
        super().__init__(upstream)
        self._predicate = predicate
        self._skipping = True

    def _advance(self) -> Any:
        if self._skipping:
            self._skipping = False
            while (item := self._upstream.advance()) is not EXHAUSTED:
                if not self._predicate(item):
                    return item
            return EXHAUSTED
        return self._upstream.advance()


class TakeWhileAdaptor(Adaptor):
    """
    Yields items while the predicate holds.

    The first rejected item is discarded and the sequence is exhausted for
    good. When driven by a spent :class:`CallCounter` no further upstream item
    is pulled.
    """

    def __init__(self, upstream: Any, predicate: Predicate, stage: str = "take_while"):
        check_callback(stage, predicate, 1)
        super().__init__(upstream)
        self._predicate = predicate
        if isinstance(predicate, CallCounter) and predicate.spent:
            logging.debug(f"{stage} with a zero limit; the sequence is empty")

    def _advance(self) -> Any:
        if isinstance(self._predicate, CallCounter) and self._predicate.spent:
            return EXHAUSTED
        item = self._upstream.advance()
        if item is EXHAUSTED or not self._predicate(item):
            return EXHAUSTED
        return item
