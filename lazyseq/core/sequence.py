"""
lazyseq Sequence - The Pull Protocol
====================================

Every producer and adaptor in lazyseq is a :class:`Sequence`. A sequence has a
single primitive, :meth:`Sequence.advance`, which returns either the next item
or the :data:`EXHAUSTED` sentinel. Everything else (adaptors, consumers and the
Python iterator bridge) is built from repeated calls to ``advance``.

Sequence provides:
- Sticky exhaustion: once ``EXHAUSTED`` is returned it is returned forever,
  for every subclass, without calling back into ``_advance``
- Optional double-ended traversal (``advance_back``) for sources that know
  their far end
- Restart by duplication (``clone``), used by ``cycle``
- The Python iterator protocol, so ``for item in pipeline`` just works

Subclasses must implement:
- ``_advance()`` - produce the next item or ``EXHAUSTED``

Double-ended subclasses additionally override ``is_double_ended`` and
``_advance_back()``.

Items are handed out by reference. An item is only guaranteed meaningful until
the next ``advance`` on the same pipeline; callbacks receive items read-only and
must not mutate them.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator

from ..errors import NotDoubleEndedError
from ..types import T
from .consumers import ConsumerMixin
from .operations import OperationsMixin
from .sentinel import EXHAUSTED

# ============================================================================
# STATEFUL HELPERS
# ============================================================================


class StageState:
    """
    Base for helper objects that hold per-traversal state on behalf of a stage
    (counters, cached separators).

    Cloned together with the owning sequence; plain callables are shared.
    """

    def clone(self) -> "StageState":
        return copy.copy(self)


# ============================================================================
# SEQUENCE BASE CLASS
# ============================================================================


class Sequence(ABC, OperationsMixin, ConsumerMixin, Generic[T]):
    """
    Abstract base class for every producer and adaptor.

    Attributes:
        item_type: Type of the items this sequence yields, resolved once at
            construction (``typing.Any`` when unknown).
    """

    def __init__(self, item_type: Any = Any) -> None:
        self.item_type = item_type
        self._exhausted = False

    # ============================================================
    # Pull protocol
    # ============================================================

    def advance(self) -> Any:
        """Return the next item, or ``EXHAUSTED`` once the sequence is done."""
        if self._exhausted:
            return EXHAUSTED
        item = self._advance()
        if item is EXHAUSTED:
            self._exhausted = True
        return item

    @abstractmethod
    def _advance(self) -> Any:
        """Produce the next item or ``EXHAUSTED``. Called at most until exhausted."""

    @property
    def is_exhausted(self) -> bool:
        """True once ``advance`` has reported ``EXHAUSTED``."""
        return self._exhausted

    # ============================================================
    # Double-ended traversal
    # ============================================================

    @property
    def is_double_ended(self) -> bool:
        """Whether ``advance_back`` is supported."""
        return False

    def advance_back(self) -> Any:
        """
        Return the last remaining item, or ``EXHAUSTED``.

        Front and back draw from the same pool of remaining items.

        Raises:
            NotDoubleEndedError: If this sequence cannot be read from the back.
        """
        if not self.is_double_ended:
            raise NotDoubleEndedError(
                f"{type(self).__name__} cannot be traversed from the back"
            )
        if self._exhausted:
            return EXHAUSTED
        item = self._advance_back()
        if item is EXHAUSTED:
            self._exhausted = True
        return item

    def _advance_back(self) -> Any:
        raise NotDoubleEndedError(
            f"{type(self).__name__} cannot be traversed from the back"
        )

    # ============================================================
    # Restart by duplication
    # ============================================================

    def _owned(self) -> Iterator["Sequence"]:
        """Upstream sequences owned by this one."""
        for value in vars(self).values():
            if isinstance(value, Sequence):
                yield value

    @property
    def is_restartable(self) -> bool:
        """Whether ``clone`` can produce an independent copy of this sequence."""
        return all(upstream.is_restartable for upstream in self._owned())

    def clone(self) -> "Sequence[T]":
        """
        Return an independent copy of this sequence in its current state.

        Owned upstream sequences and stage state are cloned recursively;
        callables are shared by reference.

        Raises:
            NotRestartableError: If the pipeline is rooted in a one-shot source.
        """
        duplicate = copy.copy(self)
        for name, value in vars(self).items():
            if isinstance(value, (Sequence, StageState)):
                setattr(duplicate, name, value.clone())
        return duplicate

    # ============================================================
    # Python iterator bridge
    # ============================================================

    def __iter__(self) -> "Sequence[T]":
        return self

    def __next__(self) -> T:
        item = self.advance()
        if item is EXHAUSTED:
            raise StopIteration
        return item

    def __repr__(self) -> str:
        item_type = getattr(self.item_type, "__name__", self.item_type)
        return f"{type(self).__name__}(item_type={item_type})"
