"""
lazyseq Peekable Adaptor - One-Item Lookahead
=============================================

A peekable sequence keeps a single lookahead slot whose state is tracked
explicitly by :class:`Lookahead`:

- UNRESOLVED: nothing has been pulled ahead
- ITEM: the slot holds the next item
- END: the upstream is known to be exhausted

``peek()`` resolves the slot at most once; repeated peeks return the identical
item without touching the upstream.
"""

from enum import Enum
from typing import Any, Callable

from ..core.contracts import check_callback
from ..core.sentinel import EXHAUSTED
from .base import Adaptor


class Lookahead(Enum):
    """State of a peekable sequence's lookahead slot."""

    UNRESOLVED = "unresolved"
    ITEM = "item"
    END = "end"


class PeekableAdaptor(Adaptor):
    """
    Yields the upstream's items unchanged and adds :meth:`peek` and
    :meth:`next_if`.
    """

    def __init__(self, upstream: Any):
        super().__init__(upstream)
        self._state = Lookahead.UNRESOLVED
        self._peeked = None

    @property
    def lookahead(self) -> Lookahead:
        """Current state of the lookahead slot."""
        return self._state

    def peek(self) -> Any:
        """
        Return the next item without consuming it, or ``EXHAUSTED``.

        The upstream is advanced only if the slot is unresolved.
        """
        if self._exhausted:
            return EXHAUSTED
        if self._state is Lookahead.UNRESOLVED:
            item = self._upstream.advance()
            if item is EXHAUSTED:
                self._state = Lookahead.END
            else:
                self._state = Lookahead.ITEM
                self._peeked = item
        return self._peeked if self._state is Lookahead.ITEM else EXHAUSTED

    def next_if(self, predicate: Callable[[Any], bool]) -> Any:
        """
        Consume and return the next item only if it satisfies ``predicate``.

        Otherwise the item stays in the lookahead slot and ``EXHAUSTED`` is
        returned.
        """
        check_callback("next_if", predicate, 1)
        item = self.peek()
        if item is EXHAUSTED or not predicate(item):
            return EXHAUSTED
        return self.advance()

    def _take_peeked(self) -> Any:
        item, self._peeked = self._peeked, None
        self._state = Lookahead.UNRESOLVED
        return item

    def _advance(self) -> Any:
        if self._state is Lookahead.ITEM:
            return self._take_peeked()
        if self._state is Lookahead.END:
            return EXHAUSTED
        return self._upstream.advance()

    @property
    def is_double_ended(self) -> bool:
        return self._upstream.is_double_ended

    def _advance_back(self) -> Any:
        if self._state is Lookahead.END:
            return EXHAUSTED
        item = self._upstream.advance_back()
        if item is not EXHAUSTED:
            return item
        # Back end met the peeked item.
        if self._state is Lookahead.ITEM:
            item = self._take_peeked()
            self._state = Lookahead.END
        return item
