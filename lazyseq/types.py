"""
lazyseq Common Types - Shared Type Definitions
==============================================

Type variables and callback aliases shared by the sequence core, the
producers and the adaptors. Kept in one module to avoid circular imports
between ``lazyseq.core`` and ``lazyseq.adaptors``.
"""

from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
U = TypeVar("U")

# ============================================================================
# FORWARD REFERENCES
# ============================================================================

if TYPE_CHECKING:
    from .core.ordering import Ordering

# ============================================================================
# CALLBACK TYPES
# ============================================================================

TransformFunction = Callable[[T], U]
OptionalTransformFunction = Callable[[T], Optional[U]]
Predicate = Callable[[T], bool]
Observer = Callable[[T], Any]
Accumulator = Callable[[U, T], U]
Comparator = Callable[[T, T], "Ordering"]
PartialComparator = Callable[[T, T], Optional["Ordering"]]
EqualityFunction = Callable[[T, T], bool]

# ============================================================================
# SOURCE TYPES
# ============================================================================

Supplier = Callable[[], T]
OptionalSupplier = Callable[[], Optional[T]]
Collector = Callable[[Any], Any]
