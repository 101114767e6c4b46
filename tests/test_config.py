"""Tests for the configuration and logging of the package."""

import logging
from collections.abc import Iterator

import pytest

import try_iterator as ti
from try_iterator._core import LOGGER_NAME, get_config, get_logger


@pytest.fixture
def small_repr() -> Iterator[None]:
    previous = get_config().set(max_items=2)
    yield
    get_config().set(max_items=previous.max_items)


@pytest.mark.usefixtures("small_repr")
def test_repr_is_truncated() -> None:
    """`max_items` truncates the `Seq` repr."""
    assert repr(ti.Seq(range(5))) == "Seq(0, 1, ...)"
    assert repr(ti.Seq(range(2))) == "Seq(0, 1)"


def test_set_returns_previous_config() -> None:
    """`Config.set` returns the replaced configuration."""
    before = get_config()
    previous = before.set(width=10)
    try:
        assert previous is before
        assert get_config().width == 10
        assert get_config().max_items == before.max_items
    finally:
        get_config().set(width=before.width)


def test_empty_seq_repr() -> None:
    """An empty `Seq` renders without elements."""
    assert repr(ti.Seq(())) == "Seq()"


def test_library_logger_has_null_handler() -> None:
    """The package logger is silent unless configured."""
    logger = get_logger()
    assert logger.name == LOGGER_NAME
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_short_circuit_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Stopping on a definitive element emits one debug record."""
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        ti.try_rposition([1, 2, 3], lambda x: ti.Ok(x == 2))
    assert [r.getMessage() for r in caplog.records] == ["try_rposition: stopped at index 1"]


def test_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Stopping on a failure emits one debug record."""
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        ti.try_all([1, 2, 3], lambda x: ti.Err("no") if x == 3 else ti.Ok(True))
    assert [r.getMessage() for r in caplog.records] == ["try_all: predicate failed at index 2"]


def test_exhaustion_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Running to exhaustion emits nothing."""
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        ti.try_any([1, 2, 3], lambda _: ti.Ok(False))
    assert caplog.records == []


def test_set_on_outdated_handle_keeps_earlier_changes() -> None:
    """Changes through an old `Config` apply on top of the active one."""
    base = get_config()
    base.set(max_items=3)
    try:
        base.set(width=5)
        assert get_config().max_items == 3
        assert get_config().width == 5
    finally:
        get_config().set(max_items=base.max_items, width=base.width)
