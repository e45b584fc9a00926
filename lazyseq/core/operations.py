"""
lazyseq Operations - Chained Pipeline Stages
============================================

This module provides the fluent stage-building methods available on every
sequence. Each method builds one adaptor that takes exclusive ownership of
``self`` (and of the paired sequence for ``chain``/``zip``) and returns it:

    from lazyseq import range

    squares = (
        range(0, 100)
        .filter(lambda n: n % 3 == 0)
        .map(lambda n: n * n)
        .take(5)
    )

Building a stage never pulls an item. Adaptor classes are imported inside the
methods because they themselves derive from ``Sequence``.
"""

from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Union

from ..types import OptionalTransformFunction, Predicate, Supplier, T, U

if TYPE_CHECKING:
    from .sequence import Sequence


class OperationsMixin:
    """
    Mixin providing adaptor construction.

    Upstream arguments (``other`` in ``chain``/``zip``) may be sequences or any
    Python iterable; iterables are wrapped with ``lazyseq.seq``.
    """

    # ============================================================
    # Element-wise transforms
    # ============================================================

    def map(
        self, func: Callable[[T], U], output_type: Optional[Any] = None
    ) -> "Sequence[U]":
        """Apply ``func`` to every item."""
        from ..adaptors.transform import MapAdaptor

        return MapAdaptor(self, func, output_type=output_type)

    def filter(self, predicate: Predicate) -> "Sequence[T]":
        """Keep the items for which ``predicate`` is truthy."""
        from ..adaptors.transform import FilterAdaptor

        return FilterAdaptor(self, predicate)

    def filter_map(
        self, func: OptionalTransformFunction, output_type: Optional[Any] = None
    ) -> "Sequence[U]":
        """Apply ``func`` and keep the results that are not ``None``."""
        from ..adaptors.transform import FilterMapAdaptor

        return FilterMapAdaptor(self, func, output_type=output_type)

    def inspect(self, func: Callable[[T], Any]) -> "Sequence[T]":
        """Call ``func`` on every item as it passes through, unchanged."""
        from ..adaptors.transform import InspectAdaptor

        return InspectAdaptor(self, func)

    # ============================================================
    # Combining sequences
    # ============================================================

    def chain(self, other: Union["Sequence[T]", Iterable[T]]) -> "Sequence[T]":
        """Yield every item of this sequence, then every item of ``other``."""
        from ..adaptors.combine import ChainAdaptor

        return ChainAdaptor(self, other)

    def zip(self, other: Union["Sequence[U]", Iterable[U]]) -> "Sequence[tuple]":
        """Pair items of this sequence with items of ``other``."""
        from ..adaptors.combine import ZipAdaptor

        return ZipAdaptor(self, other)

    def enumerate(self) -> "Sequence[tuple]":
        """Pair every item with its zero-based index: ``(index, item)``."""
        from ..adaptors.combine import ZipAdaptor
        from ..producers import infinite_range

        return ZipAdaptor(infinite_range(0), self)

    def flatten(self) -> "Sequence[Any]":
        """Remove one level of nesting from a sequence of sequences."""
        from ..adaptors.combine import FlattenAdaptor

        return FlattenAdaptor(self)

    # ============================================================
    # Striding and separators
    # ============================================================

    def step_by(self, step: int) -> "Sequence[T]":
        """Yield the first item, then every ``step``-th item after it."""
        from ..adaptors.stride import StepByAdaptor

        return StepByAdaptor(self, step)

    def intersperse(self, separator: T) -> "Sequence[T]":
        """Insert ``separator`` between consecutive items."""
        from ..adaptors.stride import IntersperseAdaptor, SeparatorValue

        return IntersperseAdaptor(self, SeparatorValue(separator))

    def intersperse_with(self, separator_func: Supplier) -> "Sequence[T]":
        """Insert ``separator_func()`` between consecutive items."""
        from ..adaptors.stride import IntersperseAdaptor

        return IntersperseAdaptor(self, separator_func)

    # ============================================================
    # Bounding
    # ============================================================

    def skip_while(self, predicate: Predicate) -> "Sequence[T]":
        """Drop leading items while ``predicate`` holds."""
        from ..adaptors.bounded import SkipWhileAdaptor

        return SkipWhileAdaptor(self, predicate)

    def take_while(self, predicate: Predicate) -> "Sequence[T]":
        """Yield items while ``predicate`` holds, then stop for good."""
        from ..adaptors.bounded import TakeWhileAdaptor

        return TakeWhileAdaptor(self, predicate)

    def skip(self, count: int) -> "Sequence[T]":
        """Drop the first ``count`` items."""
        from ..adaptors.bounded import CallCounter, SkipWhileAdaptor

        return SkipWhileAdaptor(self, CallCounter(count), stage="skip")

    def take(self, count: int) -> "Sequence[T]":
        """Yield at most ``count`` items."""
        from ..adaptors.bounded import CallCounter, TakeWhileAdaptor

        return TakeWhileAdaptor(self, CallCounter(count), stage="take")

    # ============================================================
    # Restart, lookahead, reversal
    # ============================================================

    def cycle(self) -> "Sequence[T]":
        """Repeat this sequence forever, restarting from its original state."""
        from ..adaptors.restart import CycleAdaptor

        return CycleAdaptor(self)

    def peekable(self) -> "Sequence[T]":
        """Wrap this sequence in one that supports ``peek()``."""
        from ..adaptors.peekable import PeekableAdaptor

        return PeekableAdaptor(self)

    def rev(self) -> "Sequence[T]":
        """Yield the items of a double-ended sequence back to front."""
        from ..adaptors.reverse import ReversedAdaptor

        return ReversedAdaptor(self)
