"""
lazyseq Adaptor - Base Class for Single-Upstream Stages
=======================================================

An adaptor exclusively owns the sequence it wraps. Anything that is not yet a
sequence (a list, a generator...) is adapted with ``lazyseq.seq`` on the way in.
"""

from typing import Any, Optional

from ..core.sequence import Sequence
from ..producers import seq
from ..types import U


class Adaptor(Sequence[U]):
    """
    Base class for adaptors with one upstream.

    Subclasses implement ``_advance`` in terms of ``self._upstream.advance()``.
    The item type defaults to the upstream's.
    """

    def __init__(self, upstream: Any, item_type: Optional[Any] = None):
        self._upstream = seq(upstream)
        super().__init__(
            self._upstream.item_type if item_type is None else item_type
        )
