import logging

import pytest

from rayfield_qt.core.callbacks import CallbackResult, invoke_callback, safe_callback


def test_ok_result_passes_arguments():
    received = []
    result = invoke_callback(lambda *args: received.extend(args), 1, "two")
    assert result.ok
    assert result == CallbackResult.Ok()
    assert received == [1, "two"]


def test_error_is_captured_not_raised():
    def boom(value):
        raise ValueError(f"bad {value}")

    result = invoke_callback(boom, 3)
    assert not result
    assert isinstance(result.exception, ValueError)
    assert result.reason == "ValueError: bad 3"


def test_missing_callback_is_failure():
    result = invoke_callback(None, True)
    assert not result.ok
    assert result.reason == "no callback"
    assert result.exception is None


def test_safe_callback_logs_errors(caplog):
    caplog.set_level(logging.WARNING, logger="rayfield_qt")

    def boom():
        raise RuntimeError("kaboom")

    assert safe_callback(boom, context="Button 'Go' callback") is False
    assert "Button 'Go' callback" in caplog.text
    assert "kaboom" in caplog.text


def test_safe_callback_missing_callback_is_silent(caplog):
    caplog.set_level(logging.WARNING, logger="rayfield_qt")
    assert safe_callback(None) is False
    assert caplog.records == []


def test_keyboard_interrupt_propagates():
    def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        invoke_callback(interrupt)
