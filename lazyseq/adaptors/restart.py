"""
lazyseq Cycle Adaptor - Endless Repetition by Restart
=====================================================

A cycle keeps a pristine copy of its upstream, taken when the stage is built,
and restarts from a fresh clone of it each time the current pass runs out.
"""

import logging
from typing import Any

from ..core.sentinel import EXHAUSTED
from ..errors import NotRestartableError
from .base import Adaptor


class CycleAdaptor(Adaptor):
    """
    Repeats the upstream sequence forever.

    The upstream must be restartable; pipelines rooted in a one-shot iterable
    are rejected when the stage is built. A pass that yields nothing ends the
    cycle, so an empty upstream gives an empty cycle instead of a busy loop.
    """

    def __init__(self, upstream: Any):
        super().__init__(upstream)
        if not self._upstream.is_restartable:
            logging.error(f"cycle: upstream {self._upstream!r} cannot be restarted")
            raise NotRestartableError(
                "cycle: the upstream sequence is rooted in a one-shot source "
                "and cannot be restarted"
            )
        self._original = self._upstream.clone()
        self._pass_empty = True

    def _advance(self) -> Any:
        item = self._upstream.advance()
        if item is EXHAUSTED:
            if self._pass_empty:
                logging.debug("cycle: a full pass yielded nothing; stopping")
                return EXHAUSTED
            self._upstream = self._original.clone()
            self._pass_empty = True
            item = self._upstream.advance()
        if item is not EXHAUSTED:
            self._pass_empty = False
        return item
