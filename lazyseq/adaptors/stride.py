"""
lazyseq Stride Adaptors - Step-By and Intersperse
=================================================

- StepByAdaptor: the first item, then every n-th item after it
- IntersperseAdaptor: a separator between consecutive items

step_by never reads past the item it returns. intersperse holds at most one
upstream item, pulled to decide whether a separator is due.
"""

import logging
from typing import Any, Callable

from ..core.contracts import check_callback
from ..core.sentinel import EXHAUSTED
from .base import Adaptor


class StepByAdaptor(Adaptor):
    """
    Strides through the upstream by ``step``.

    Yields the first item, then on every later call pulls ``step`` upstream
    items and returns the last one. A step of zero or less yields nothing and
    never touches the upstream.
    """

    def __init__(self, upstream: Any, step: int):
        super().__init__(upstream)
        self._step = int(step)
        self._first = True
        self._invalid = self._step <= 0
        if self._invalid:
            logging.debug(f"step_by({step}) is non-positive; the sequence is empty")

    def _advance(self) -> Any:
        if self._invalid:
            return EXHAUSTED
        if self._first:
            self._first = False
            return self._upstream.advance()
        item = EXHAUSTED
        for _ in range(self._step):
            item = self._upstream.advance()
            if item is EXHAUSTED:
                break
        return item


class SeparatorValue:
    """Separator supplier returning the same value every time."""

    def __init__(self, value: Any):
        self._value = value

    def __call__(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        return f"SeparatorValue({self._value!r})"


class IntersperseAdaptor(Adaptor):
    """
    Inserts a separator between consecutive items, never before the first or
    after the last.

    The next real item is pulled only when the caller asks for what follows
    the previous one; the separator is produced (and ``separator()`` called)
    only once that item is known to exist. ``L`` items give ``2L - 1`` outputs.
    """

    def __init__(self, upstream: Any, separator: Callable[[], Any]):
        check_callback("intersperse_with", separator, 0)
        super().__init__(upstream)
        self._separator = separator
        self._started = False
        self._stashed = EXHAUSTED

    def _advance(self) -> Any:
        if self._stashed is not EXHAUSTED:
            item, self._stashed = self._stashed, EXHAUSTED
            return item
        item = self._upstream.advance()
        if item is EXHAUSTED or not self._started:
            self._started = True
            return item
        self._stashed = item
        return self._separator()
