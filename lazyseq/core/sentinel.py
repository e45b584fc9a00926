"""
lazyseq Sentinel - End-of-Sequence Marker
=========================================

``advance`` returns :data:`EXHAUSTED` when a sequence has no more items. It is
a singleton compared by identity, so any object (``None`` included) can be a
live item.
"""


class _Exhausted:
    """Sentinel returned by ``advance`` when a sequence has no more items."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "EXHAUSTED"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


EXHAUSTED = _Exhausted()
