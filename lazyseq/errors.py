"""
lazyseq Errors - Construction-Time Contract Violations
======================================================

Normal pipeline operation never raises: degenerate parameters (non-positive
steps, zero counts, out-of-range indices) produce empty or trivial results.
The classes below cover the only failures the library reports itself, all of
which are detected while a pipeline is being assembled, before any item flows.

Every error also derives from ``TypeError`` so callers that already guard
misuse with ``except TypeError`` keep working.
"""


class SequenceError(Exception):
    """Base class for all errors raised by lazyseq."""

    pass


class CallbackContractError(SequenceError, TypeError):
    """Raised when a stage is built with a callback it cannot call safely."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"{stage}: {message}")


class NotRestartableError(SequenceError, TypeError):
    """Raised when a one-shot sequence is asked to restart (clone or cycle)."""

    pass


class NotDoubleEndedError(SequenceError, TypeError):
    """Raised when a sequence that cannot be read from the back is reversed."""

    pass
