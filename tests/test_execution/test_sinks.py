"""Tests for debug sinks."""

import io
import logging
from unittest.mock import Mock

import pytest
from rich.console import Console

from vineyard.execution.sinks import (
    CallbackSink,
    ConsoleSink,
    DebugSink,
    LoggerSink,
    as_sink,
)


def test_callback_sink_forwards_lines() -> None:
    """Test that CallbackSink calls the wrapped function."""
    received: list[str] = []
    sink = CallbackSink(received.append)
    sink.emit("first")
    sink.emit("second")
    assert received == ["first", "second"]


def test_callback_sink_rejects_non_callable() -> None:
    """Test that CallbackSink needs a callable."""
    with pytest.raises(TypeError, match="must be callable"):
        CallbackSink(42)  # type: ignore[arg-type]


def test_logger_sink_logs_at_level(caplog: pytest.LogCaptureFixture) -> None:
    """Test that LoggerSink writes to the logger at its level."""
    logger = logging.getLogger("vineyard.test.sink")
    sink = LoggerSink(logger, level=logging.WARNING)

    with caplog.at_level(logging.DEBUG, logger="vineyard.test.sink"):
        sink.emit("remapping classes")

    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].getMessage() == "remapping classes"


def test_console_sink_prints_without_markup() -> None:
    """Test that ConsoleSink prints lines verbatim."""
    buffer = io.StringIO()
    sink = ConsoleSink(Console(file=buffer, width=120, color_system=None))
    sink.emit("patched [net/minecraft/Foo]")
    assert "patched [net/minecraft/Foo]" in buffer.getvalue()


def test_sinks_satisfy_protocol() -> None:
    """Test that every bundled sink is a DebugSink."""
    sinks = [
        CallbackSink(print),
        LoggerSink(logging.getLogger(__name__)),
        ConsoleSink(Console(file=io.StringIO())),
    ]
    for sink in sinks:
        assert isinstance(sink, DebugSink)


def test_as_sink() -> None:
    """Test wrapping of callables and passthrough of sinks."""
    sink = LoggerSink(logging.getLogger(__name__))
    assert as_sink(sink) is sink
    assert isinstance(as_sink(print), CallbackSink)


def test_as_sink_prefers_emit_over_call() -> None:
    """Test that a callable object with emit is used as a sink directly."""

    class CallableSink:
        def __init__(self) -> None:
            self.lines: list[str] = []
            self.calls: list[str] = []

        def emit(self, line: str) -> None:
            self.lines.append(line)

        def __call__(self, line: str) -> None:
            self.calls.append(line)

    target = CallableSink()
    sink = as_sink(target)
    sink.emit("remapping")

    assert sink is target
    assert target.lines == ["remapping"]
    assert target.calls == []


def test_as_sink_keeps_mock_with_emit() -> None:
    """Test that lines reach emit on a mock collaborator, not emit.emit."""
    target = Mock(spec=["emit"])
    sink = as_sink(target)
    sink.emit("hello")

    assert sink is target
    target.emit.assert_called_once_with("hello")
