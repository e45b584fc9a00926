"""
lazyseq Contracts - Construction-Time Callback Validation
=========================================================

Every stage that wraps a user callback validates it once, when the stage is
built, so a wrongly shaped callback fails before any item flows instead of in
the middle of a traversal. The diagnostic always names the stage.

This module also resolves a stage's output item type from an explicit
``output_type`` or from the callback's return annotation.
"""

import inspect
import logging
import types
import typing
from typing import Any, Callable, Optional

from ..errors import CallbackContractError
from .context import CallbackCheckContext


def _callback_name(func: Any) -> str:
    return getattr(func, "__qualname__", None) or getattr(
        func, "__name__", type(func).__name__
    )


def check_callback(stage: str, func: Any, arity: int) -> None:
    """
    Validate that ``func`` can be called with ``arity`` positional arguments.

    Raises:
        CallbackContractError: If ``func`` is not callable, cannot accept
            ``arity`` positional arguments, or requires keyword-only arguments.
    """
    if not callable(func):
        logging.error(f"Rejected non-callable {func!r} for stage '{stage}'")
        raise CallbackContractError(stage, f"expected a callable, got {func!r}")

    if not CallbackCheckContext.is_enabled():
        return

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures
        return

    try:
        signature.bind(*([None] * arity))
    except TypeError:
        name = _callback_name(func)
        logging.error(
            f"Rejected callback {name}{signature} for stage '{stage}': "
            f"expected {arity} positional argument(s)"
        )
        raise CallbackContractError(
            stage,
            f"callback {name} must accept {arity} positional argument(s), "
            f"signature is {signature}",
        ) from None


def resolve_output_type(func: Callable, output_type: Optional[Any] = None) -> Any:
    """
    Determine the item type produced by a stage wrapping ``func``.

    An explicit ``output_type`` wins; otherwise the callback's return annotation
    is used; otherwise ``typing.Any``.
    """
    if output_type is not None:
        return output_type
    try:
        hints = typing.get_type_hints(func)
    except Exception:
        # Unresolvable forward references or objects without annotations
        return Any
    return hints.get("return", Any)


def unwrap_optional(annotation: Any) -> Any:
    """``Optional[X]`` -> ``X``; anything else is returned unchanged."""
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation
