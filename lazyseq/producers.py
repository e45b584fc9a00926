"""
lazyseq Producers - Leaf Sequences and Their Constructors
=========================================================

Producers are sequences with no upstream. They own (or index into) the
ultimate data of a pipeline:

- CollectionSource: start/end cursor pair over an indexable collection
- IterableSource: one-shot bridge from any Python iterable
- RangeSource / CountingSource: arithmetic progressions, bounded or not
- GeneratorSource / FiniteGeneratorSource: driven by a user function
- OnceSource / OnceWithSource / RepeatSource: single or repeated values
- SuccessorsSource: each item computed from the previous one
- EmptySource: never yields

The lowercase functions at the bottom of the module are the public
constructors re-exported from ``lazyseq``. ``range`` deliberately mirrors the
builtin's name; import it qualified if that is a concern:

    import lazyseq
    lazyseq.range(0, 10).step_by(3).collect()  # [0, 3, 6, 9]

Functions that return "an optional value" (``finite_generator``,
``successors``) signal the end by returning ``None``.
"""

import collections.abc
import numbers
from typing import Any, Iterable, Optional

import numpy as np

from .core.contracts import check_callback, resolve_output_type, unwrap_optional
from .core.sentinel import EXHAUSTED
from .core.sequence import Sequence
from .errors import NotRestartableError
from .types import OptionalSupplier, Supplier, T

# ============================================================================
# COLLECTION BRIDGES
# ============================================================================


class CollectionSource(Sequence[T]):
    """
    Cursor pair over an indexable, sized collection.

    Advances by moving ``start`` toward ``end``; exhausted when they meet.
    Reading from the back moves ``end`` toward ``start``. The collection is
    borrowed, not copied.
    """

    def __init__(
        self,
        collection: collections.abc.Sequence,
        start: int = 0,
        end: Optional[int] = None,
    ):
        super().__init__()
        size = len(collection)
        self._collection = collection
        self._end = size if end is None else max(0, min(end, size))
        self._start = max(0, min(start, self._end))

    def _advance(self) -> Any:
        if self._start == self._end:
            return EXHAUSTED
        item = self._collection[self._start]
        self._start += 1
        return item

    @property
    def is_double_ended(self) -> bool:
        return True

    def _advance_back(self) -> Any:
        if self._start == self._end:
            return EXHAUSTED
        self._end -= 1
        return self._collection[self._end]


class IterableSource(Sequence[T]):
    """
    One-shot bridge from a Python iterable.

    The underlying iterator cannot be rewound, so this source (and every
    pipeline rooted in it) can be neither cloned nor cycled.
    """

    def __init__(self, iterable: Iterable[T]):
        super().__init__()
        self._iterator = iter(iterable)

    def _advance(self) -> Any:
        return next(self._iterator, EXHAUSTED)

    @property
    def is_restartable(self) -> bool:
        return False

    def clone(self) -> "IterableSource[T]":
        raise NotRestartableError(
            "a sequence built from a one-shot iterable cannot be restarted; "
            "materialize it or use from_collection() instead"
        )


# ============================================================================
# ARITHMETIC PROGRESSIONS
# ============================================================================


class RangeSource(Sequence[T]):
    """
    Bounded arithmetic progression ``(current, bound, step)``.

    The bound is checked before yielding: ``current < bound`` when exclusive,
    ``current <= bound`` when inclusive. A zero or negative step is accepted;
    it yields forever if the start is in bounds and nothing otherwise.

    Integral ranges with a positive step can also be read from the back.
    """

    def __init__(self, start: T, bound: T, step: T = 1, inclusive: bool = False):
        super().__init__(type(start))
        self._current = start
        self._bound = bound
        self._step = step
        self._inclusive = inclusive

    def _in_bounds(self, value: T) -> bool:
        return value <= self._bound if self._inclusive else value < self._bound

    def _advance(self) -> Any:
        if not self._in_bounds(self._current):
            return EXHAUSTED
        value = self._current
        self._current += self._step
        return value

    @property
    def is_double_ended(self) -> bool:
        return (
            isinstance(self._current, numbers.Integral)
            and isinstance(self._bound, numbers.Integral)
            and isinstance(self._step, numbers.Integral)
            and self._step > 0
        )

    def _advance_back(self) -> Any:
        if not self._in_bounds(self._current):
            return EXHAUSTED
        span = self._bound - self._current
        if not self._inclusive:
            span -= 1
        last = self._current + (span // self._step) * self._step
        # Everything before the value just handed out remains
        self._bound, self._inclusive = last, False
        return last


class CountingSource(Sequence[T]):
    """Unbounded arithmetic progression; yields, then increments by ``step``."""

    def __init__(self, start: T, step: T = 1):
        super().__init__(type(start))
        self._value = start
        self._step = step

    def _advance(self) -> Any:
        value = self._value
        self._value += self._step
        return value


# ============================================================================
# FUNCTION-DRIVEN GENERATORS
# ============================================================================


class GeneratorSource(Sequence[T]):
    """Yields ``func()`` forever."""

    def __init__(self, func: Supplier, stage: str = "infinite_generator"):
        check_callback(stage, func, 0)
        super().__init__(resolve_output_type(func))
        self._func = func

    def _advance(self) -> Any:
        return self._func()


class FiniteGeneratorSource(Sequence[T]):
    """
    Yields ``func()`` until it returns None.

    The first None ends the sequence for good, even if ``func`` would later
    produce values again.
    """

    def __init__(self, func: OptionalSupplier, stage: str = "finite_generator"):
        check_callback(stage, func, 0)
        super().__init__(unwrap_optional(resolve_output_type(func)))
        self._func = func

    def _advance(self) -> Any:
        value = self._func()
        return EXHAUSTED if value is None else value


class SuccessorsSource(Sequence[T]):
    """
    Yields ``seed``, then ``func(seed)``, then ``func(func(seed))``, ...

    Stops at the first None (a None seed gives an empty sequence). The
    successor of an item is computed when that item is handed out.
    """

    def __init__(self, seed: Optional[T], func):
        check_callback("successors", func, 1)
        super().__init__(type(seed) if seed is not None else Any)
        self._next = seed
        self._func = func

    def _advance(self) -> Any:
        if self._next is None:
            return EXHAUSTED
        current = self._next
        self._next = self._func(current)
        return current


# ============================================================================
# SINGLE AND REPEATED VALUES
# ============================================================================


class OnceSource(Sequence[T]):
    """Yields ``value`` exactly once."""

    def __init__(self, value: T):
        super().__init__(type(value))
        self._value = value
        self._pending = True

    def _advance(self) -> Any:
        if not self._pending:
            return EXHAUSTED
        self._pending = False
        return self._value

    @property
    def is_double_ended(self) -> bool:
        return True

    def _advance_back(self) -> Any:
        return self._advance()


class OnceWithSource(Sequence[T]):
    """Yields ``func()`` exactly once; ``func`` is called on the first pull."""

    def __init__(self, func: Supplier):
        check_callback("once_with", func, 0)
        super().__init__(resolve_output_type(func))
        self._func = func
        self._pending = True

    def _advance(self) -> Any:
        if not self._pending:
            return EXHAUSTED
        self._pending = False
        return self._func()


class RepeatSource(Sequence[T]):
    """Yields the same value forever."""

    def __init__(self, value: T):
        super().__init__(type(value))
        self._value = value

    def _advance(self) -> Any:
        return self._value


class EmptySource(Sequence[T]):
    """Never yields."""

    def __init__(self, item_type: Any = Any):
        super().__init__(item_type)

    def _advance(self) -> Any:
        return EXHAUSTED

    @property
    def is_double_ended(self) -> bool:
        return True

    def _advance_back(self) -> Any:
        return EXHAUSTED


# ============================================================================
# CONSTRUCTORS
# ============================================================================


def from_collection(collection: collections.abc.Sequence) -> CollectionSource:
    """Sequence over every item of an indexable collection (list, tuple, str...)."""
    return CollectionSource(collection)


def from_cursor_pair(
    collection: collections.abc.Sequence, start: int, end: int
) -> CollectionSource:
    """Sequence over ``collection[start:end]`` without copying it."""
    return CollectionSource(collection, start, end)


def from_iterable(iterable: Iterable[T]) -> IterableSource:
    """One-shot sequence over any Python iterable (generators, files, sets...)."""
    return IterableSource(iterable)


def seq(source: Any) -> Sequence:
    """
    Adapt ``source`` to a sequence.

    Sequences are returned unchanged, indexable sized collections (numpy
    arrays included) get a restartable cursor pair, and other iterables a
    one-shot bridge.
    """
    if isinstance(source, Sequence):
        return source
    if isinstance(source, collections.abc.Sequence):
        return CollectionSource(source)
    # ndarray is not registered as an abc.Sequence; 0-d arrays have no length
    if isinstance(source, np.ndarray) and source.ndim > 0:
        return CollectionSource(source)
    return IterableSource(source)


def range(start: T, end: T, step: T = 1) -> RangeSource:
    """``start, start + step, ...`` while below ``end``."""
    return RangeSource(start, end, step, inclusive=False)


def range_inclusive(start: T, end: T, step: T = 1) -> RangeSource:
    """``start, start + step, ...`` while at most ``end``."""
    return RangeSource(start, end, step, inclusive=True)


def infinite_range(start: T, step: T = 1) -> CountingSource:
    """``start, start + step, ...`` forever."""
    return CountingSource(start, step)


def empty(item_type: Any = Any) -> EmptySource:
    """A sequence with no items."""
    return EmptySource(item_type)


def once(value: T) -> OnceSource:
    """A sequence with exactly one item."""
    return OnceSource(value)


def once_with(func: Supplier) -> OnceWithSource:
    """A sequence with exactly one item, computed lazily by ``func``."""
    return OnceWithSource(func)


def repeat(value: T) -> RepeatSource:
    """``value`` forever."""
    return RepeatSource(value)


def infinite_generator(func: Supplier) -> GeneratorSource:
    """``func()`` forever."""
    return GeneratorSource(func)


def repeat_with(func: Supplier) -> GeneratorSource:
    """Alias of :func:`infinite_generator`."""
    return GeneratorSource(func, stage="repeat_with")


def finite_generator(func: OptionalSupplier) -> FiniteGeneratorSource:
    """``func()`` until it first returns None."""
    return FiniteGeneratorSource(func)


def from_fn(func: OptionalSupplier) -> FiniteGeneratorSource:
    """Alias of :func:`finite_generator`."""
    return FiniteGeneratorSource(func, stage="from_fn")


def successors(seed: Optional[T], func) -> SuccessorsSource:
    """``seed``, ``func(seed)``, ... until None."""
    return SuccessorsSource(seed, func)
