"""
Shared pytest fixtures and configuration for lazyseq tests.
"""

import pytest

from lazyseq import CallbackCheckContext, Sequence, from_collection


class PullCounter(Sequence):
    """Collection-backed sequence that records how many times it was pulled."""

    def __init__(self, items):
        super().__init__()
        self._inner = from_collection(list(items))
        self.pulls = 0

    def _advance(self):
        self.pulls += 1
        return self._inner.advance()


@pytest.fixture(autouse=True)
def reset_callback_checks():
    """Reset per-thread callback validation before each test to prevent state leakage."""
    CallbackCheckContext._reset_state()


@pytest.fixture
def counted():
    """Factory for sequences that count upstream pulls."""
    return PullCounter


@pytest.fixture
def recorder():
    """A list plus a one-argument callback appending to it."""
    seen = []
    return seen, seen.append

