"""
lazyseq - Lazy, Pull-Based Sequence Pipelines

Build a pipeline from a producer, chain adaptors onto it, and drive it with a
terminal consumer. Nothing is computed until a consumer (or a ``for`` loop)
pulls items through the pipeline, one at a time.
"""

from .adaptors import Lookahead
from .core import EXHAUSTED, CallbackCheckContext, Ordering, Sequence, callback_checks
from .errors import (
    CallbackContractError,
    NotDoubleEndedError,
    NotRestartableError,
    SequenceError,
)
from .producers import (
    empty,
    finite_generator,
    from_collection,
    from_cursor_pair,
    from_fn,
    from_iterable,
    infinite_generator,
    infinite_range,
    once,
    once_with,
    range,
    range_inclusive,
    repeat,
    repeat_with,
    seq,
    successors,
)

__version__ = "0.1.0"

# Export all the main classes and functions
__all__ = [
    # Producers
    "seq",
    "from_collection",
    "from_cursor_pair",
    "from_iterable",
    "range",
    "range_inclusive",
    "infinite_range",
    "empty",
    "once",
    "once_with",
    "repeat",
    "repeat_with",
    "infinite_generator",
    "finite_generator",
    "from_fn",
    "successors",
    # Types
    "Sequence",
    "EXHAUSTED",
    "Ordering",
    "Lookahead",
    # Errors
    "SequenceError",
    "CallbackContractError",
    "NotRestartableError",
    "NotDoubleEndedError",
    # Configuration
    "callback_checks",
    "CallbackCheckContext",
]
