"""Unit tests for construction-time callback validation and output-type inference."""

import logging
import threading
from typing import Optional

import pytest

from lazyseq import (
    CallbackCheckContext,
    CallbackContractError,
    callback_checks,
    range,
)
from lazyseq.core import check_callback, resolve_output_type


@pytest.mark.unit
@pytest.mark.core
def test_map_rejects_two_argument_callback():
    """A two-argument function given to map fails when the stage is built."""
    with pytest.raises(CallbackContractError) as error:
        range(0, 3).map(lambda a, b: a + b)

    assert error.value.stage == "map"
    assert str(error.value).startswith("map: callback")


@pytest.mark.unit
@pytest.mark.core
def test_min_by_rejects_one_argument_comparator():
    """A comparator must take two arguments."""
    with pytest.raises(CallbackContractError, match="min_by"):
        range(0, 3).min_by(lambda a: a)


@pytest.mark.unit
@pytest.mark.core
def test_keyword_only_parameters_are_rejected():
    """Callbacks requiring keyword-only arguments cannot be called positionally."""

    def scale(item, *, factor):
        return item * factor

    with pytest.raises(CallbackContractError):
        range(0, 3).map(scale)


@pytest.mark.unit
@pytest.mark.core
def test_defaults_and_varargs_are_accepted():
    """Extra parameters with defaults or *args do not break the contract."""

    def scale(item, factor=2):
        return item * factor

    def total(*items):
        return sum(items)

    assert range(0, 3).map(scale).collect() == [0, 2, 4]
    assert range(1, 4).fold(0, total) == 6


@pytest.mark.unit
@pytest.mark.core
def test_builtins_without_signature_are_accepted():
    """Callables whose signature cannot be introspected are trusted."""
    assert range(0, 3).map(str).collect() == ["0", "1", "2"]


@pytest.mark.unit
@pytest.mark.core
def test_non_callable_is_rejected_even_when_checks_are_off():
    """Passing something that is not callable always fails."""
    with callback_checks(False):
        with pytest.raises(CallbackContractError, match="expected a callable"):
            range(0, 3).filter(42)


@pytest.mark.unit
@pytest.mark.core
def test_rejection_is_logged_before_raising(caplog):
    """Contract violations are logged at error level."""
    with caplog.at_level(logging.ERROR):
        with pytest.raises(CallbackContractError):
            check_callback("fold", lambda a: a, 2)

    assert "fold" in caplog.text


@pytest.mark.unit
@pytest.mark.core
def test_callback_checks_disable_signature_validation():
    """Inside callback_checks(False) a wrongly shaped callback is accepted."""
    with callback_checks(False):
        pipeline = range(0, 3).map(lambda a, b: a)

    assert pipeline is not None
    assert CallbackCheckContext.is_enabled()


@pytest.mark.unit
@pytest.mark.core
def test_callback_checks_nest_and_restore():
    """Nested blocks restore the enclosing setting on exit."""
    with callback_checks(False):
        with callback_checks(True):
            assert CallbackCheckContext.is_enabled()
        assert not CallbackCheckContext.is_enabled()
    assert CallbackCheckContext.is_enabled()


@pytest.mark.unit
@pytest.mark.core
def test_callback_checks_are_per_thread():
    """Disabling checks in one thread does not affect another."""
    seen = []

    def worker():
        seen.append(CallbackCheckContext.is_enabled())

    with callback_checks(False):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen == [True]


@pytest.mark.unit
@pytest.mark.core
def test_output_type_from_return_annotation():
    """map infers its item type from the callback's return annotation."""

    def label(n: int) -> str:
        return f"#{n}"

    assert range(0, 3).map(label).item_type is str


@pytest.mark.unit
@pytest.mark.core
def test_explicit_output_type_wins():
    """An explicit output_type overrides the annotation."""

    def label(n: int) -> str:
        return f"#{n}"

    assert range(0, 3).map(label, output_type=bytes).item_type is bytes


@pytest.mark.unit
@pytest.mark.core
def test_filter_map_unwraps_optional_annotation():
    """filter_map yields X for a callback annotated Optional[X]."""

    def half(n: int) -> Optional[int]:
        return n // 2 if n % 2 == 0 else None

    pipeline = range(0, 5).filter_map(half)

    assert pipeline.item_type is int
    assert pipeline.collect() == [0, 1, 2]


@pytest.mark.unit
@pytest.mark.core
def test_unannotated_callback_resolves_to_any():
    """Without annotations the output type is typing.Any."""
    from typing import Any

    assert resolve_output_type(lambda n: n) is Any
