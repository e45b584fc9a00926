"""
lazyseq CallbackCheckContext - Per-Thread Pipeline Configuration
================================================================

Stages validate their callbacks when they are built. Validation uses
``inspect.signature`` and is cheap, but pipelines assembled in tight loops
(or from callables known to be correct) may switch it off:

    with callback_checks(False):
        pipeline = seq(rows).map(parse).filter(is_valid)

Settings are kept on a ``threading.local`` stack, so nested blocks restore the
enclosing setting on exit and other threads are never affected.
"""

import threading


class CallbackCheckContext:
    """Enables or disables construction-time callback validation in a block."""

    _local = threading.local()

    @classmethod
    def _get_stack(cls) -> list:
        if not hasattr(cls._local, "stack"):
            cls._local.stack = []
        return cls._local.stack

    @classmethod
    def is_enabled(cls) -> bool:
        """Whether stages built right now should validate their callbacks."""
        stack = cls._get_stack()
        return stack[-1] if stack else True

    def __init__(self, enabled: bool = True):
        self.enabled = bool(enabled)

    def __enter__(self):
        self._get_stack().append(self.enabled)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._get_stack().pop()

    @classmethod
    def _reset_state(cls) -> None:
        """Reset the per-thread stack for testing."""
        cls._local.__dict__.clear()


def callback_checks(enabled: bool = True) -> CallbackCheckContext:
    """Context manager toggling callback validation for stages built inside it."""
    return CallbackCheckContext(enabled)
