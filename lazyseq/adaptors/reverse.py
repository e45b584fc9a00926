"""
lazyseq Reverse Adaptor
=======================

Swaps the two ends of a double-ended sequence.
"""

import logging
from typing import Any

from ..errors import NotDoubleEndedError
from .base import Adaptor


class ReversedAdaptor(Adaptor):
    """
    Yields the upstream from back to front.

    The result is itself double-ended, so reversing twice restores the
    original order.
    """

    def __init__(self, upstream: Any):
        super().__init__(upstream)
        if not self._upstream.is_double_ended:
            logging.error(f"rev: upstream {self._upstream!r} is not double-ended")
            raise NotDoubleEndedError(
                f"rev: {type(self._upstream).__name__} cannot be traversed "
                "from the back"
            )

    def _advance(self) -> Any:
        return self._upstream.advance_back()

    @property
    def is_double_ended(self) -> bool:
        return True

    def _advance_back(self) -> Any:
        return self._upstream.advance()
