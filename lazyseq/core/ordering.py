"""
lazyseq Ordering - Three-Way Comparison Results
===============================================

Comparators used by ``min_by``, ``max_by``, ``is_sorted_by`` and ``cmp_by``
return an :class:`Ordering` instead of a signed integer. Partial comparisons
(``partial_cmp`` and friends) return ``Optional[Ordering]``, where ``None``
means the two values are incomparable (NaN is the usual culprit).
"""

from enum import Enum
from typing import Any, Optional


class Ordering(Enum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Any, b: Any) -> "Ordering":
        """Total comparison using ``<`` and ``>``; anything else is EQUAL."""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def partial(cls, a: Any, b: Any) -> Optional["Ordering"]:
        """
        Partial comparison.

        Returns None when none of ``==``, ``<`` or ``>`` holds, e.g. when either
        side is NaN.
        """
        if a == b:
            return cls.EQUAL
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return None

    def reverse(self) -> "Ordering":
        """Swap LESS and GREATER."""
        return Ordering(-self.value)

    @property
    def is_lt(self) -> bool:
        return self is Ordering.LESS

    @property
    def is_le(self) -> bool:
        return self is not Ordering.GREATER

    @property
    def is_gt(self) -> bool:
        return self is Ordering.GREATER

    @property
    def is_ge(self) -> bool:
        return self is not Ordering.LESS

    def __repr__(self) -> str:
        return f"Ordering.{self.name}"


def reverse_order(a: Any, b: Any) -> Ordering:
    """Total comparison with the operands swapped (descending order)."""
    return Ordering.of(b, a)
