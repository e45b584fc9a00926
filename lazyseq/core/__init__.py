"""
lazyseq Core - Pull Protocol, Consumers and Ordering
====================================================

Core building blocks shared by producers and adaptors:

- Sequence: abstract base class implementing the pull protocol
- EXHAUSTED: end-of-sequence sentinel returned by ``advance``
- StageState: base for per-traversal helper state cloned with its stage
- Ordering: three-way comparison result
- CallbackCheckContext / callback_checks: per-thread callback validation switch
"""

from .context import CallbackCheckContext, callback_checks
from .contracts import check_callback, resolve_output_type
from .ordering import Ordering, reverse_order
from .sentinel import EXHAUSTED
from .sequence import Sequence, StageState

__all__ = [
    "Sequence",
    "StageState",
    "EXHAUSTED",
    "Ordering",
    "reverse_order",
    "CallbackCheckContext",
    "callback_checks",
    "check_callback",
    "resolve_output_type",
]
