"""
lazyseq Transform Adaptors - Element-Wise Stages
================================================

- MapAdaptor: replaces each item with ``func(item)``
- FilterAdaptor: keeps items for which ``predicate(item)`` is truthy
- FilterMapAdaptor: ``func(item)``, dropping None results
- InspectAdaptor: calls ``func(item)`` for its side effect only

All four are double-ended whenever their upstream is.
"""

from typing import Any, Callable, Optional

from ..core.contracts import check_callback, resolve_output_type, unwrap_optional
from ..core.sentinel import EXHAUSTED
from ..types import OptionalTransformFunction, Predicate
from .base import Adaptor


class MapAdaptor(Adaptor):
    """
    Applies a transform to every upstream item.

    The item type comes from ``output_type`` if given, else from the return
    annotation of ``func``.
    """

    def __init__(
        self, upstream: Any, func: Callable, output_type: Optional[Any] = None
    ):
        check_callback("map", func, 1)
        super().__init__(upstream, resolve_output_type(func, output_type))
        self._func = func

    def _advance(self) -> Any:
        item = self._upstream.advance()
        return item if item is EXHAUSTED else self._func(item)

    @property
    def is_double_ended(self) -> bool:
        return self._upstream.is_double_ended

    def _advance_back(self) -> Any:
        item = self._upstream.advance_back()
        return item if item is EXHAUSTED else self._func(item)


class FilterAdaptor(Adaptor):
    """
    Passes through items that satisfy the predicate.

    Rejected items are drained internally, so a predicate that never holds on
    an infinite upstream never returns.
    """

    def __init__(self, upstream: Any, predicate: Predicate):
        check_callback("filter", predicate, 1)
        super().__init__(upstream)
        self._predicate = predicate

    def _advance(self) -> Any:
        while (item := self._upstream.advance()) is not EXHAUSTED:
            if self._predicate(item):
                return item
        return EXHAUSTED

    @property
    def is_double_ended(self) -> bool:
        return self._upstream.is_double_ended

    def _advance_back(self) -> Any:
        while (item := self._upstream.advance_back()) is not EXHAUSTED:
            if self._predicate(item):
                return item
        return EXHAUSTED


class FilterMapAdaptor(Adaptor):
    """Filter and map in one pass: keeps every ``func(item)`` that is not None."""

    def __init__(
        self,
        upstream: Any,
        func: OptionalTransformFunction,
        output_type: Optional[Any] = None,
    ):
        check_callback("filter_map", func, 1)
        super().__init__(
            upstream, unwrap_optional(resolve_output_type(func, output_type))
        )
        self._func = func

    def _advance(self) -> Any:
        while (item := self._upstream.advance()) is not EXHAUSTED:
            result = self._func(item)
            if result is not None:
                return result
        return EXHAUSTED

    @property
    def is_double_ended(self) -> bool:
        return self._upstream.is_double_ended

    def _advance_back(self) -> Any:
        while (item := self._upstream.advance_back()) is not EXHAUSTED:
            result = self._func(item)
            if result is not None:
                return result
        return EXHAUSTED


class InspectAdaptor(Adaptor):
    """Calls an observer on each item without altering it; handy for debugging."""

    def __init__(self, upstream: Any, func: Callable[[Any], Any]):
        check_callback("inspect", func, 1)
        super().__init__(upstream)
        self._func = func

    def _advance(self) -> Any:
        item = self._upstream.advance()
        if item is not EXHAUSTED:
            self._func(item)
        return item

    @property
    def is_double_ended(self) -> bool:
        return self._upstream.is_double_ended

    def _advance_back(self) -> Any:
        item = self._upstream.advance_back()
        if item is not EXHAUSTED:
            self._func(item)
        return item
