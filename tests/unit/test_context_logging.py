"""Request context and the logging filter that stamps it onto records."""

import logging

import pytest

from taskflow.shared.context import (
    clear_current_user,
    get_current_user_id,
    get_request_context,
    get_request_id,
    set_current_user,
    set_request_id,
)
from taskflow.shared.telemetry.logging import RequestContextFilter


@pytest.fixture(autouse=True)
def _reset_context():
    yield
    set_request_id(None)
    clear_current_user()


def _record() -> logging.LogRecord:
    return logging.LogRecord("taskflow.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_stamps_request_and_user() -> None:
    set_request_id("req-1")
    set_current_user("user-1", "ana@example.com")
    record = _record()
    assert RequestContextFilter().filter(record) is True
    assert (record.request_id, record.user_id) == ("req-1", "user-1")


def test_filter_defaults_outside_a_request() -> None:
    record = _record()
    RequestContextFilter().filter(record)
    assert (record.request_id, record.user_id) == ("-", "-")


def test_context_accessors() -> None:
    set_request_id("req-2")
    set_current_user("user-2")
    assert get_request_id() == "req-2"
    assert get_current_user_id() == "user-2"
    clear_current_user()
    assert get_request_context().user_id is None


def test_set_current_user_requires_id() -> None:
    with pytest.raises(ValueError):
        set_current_user("")
