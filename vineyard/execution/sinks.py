"""Debug sinks that receive progress lines emitted during a remapping run.

A sink is anything with an ``emit(line)`` method. The engine may call it from
any thread it runs on, so every sink here forwards to a thread-safe target.
"""

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class DebugSink(Protocol):
    """Receives human-readable debug lines."""

    def emit(self, line: str) -> None: ...


class CallbackSink:
    """Adapts a plain ``(str) -> None`` callable to the DebugSink interface."""

    def __init__(self, callback: Callable[[str], None]):
        if not callable(callback):
            raise TypeError(f"Debug callback must be callable, got {callback!r}")
        self.callback = callback

    def emit(self, line: str) -> None:
        self.callback(line)

    def __repr__(self) -> str:
        return f"CallbackSink({self.callback!r})"


class LoggerSink:
    """Forwards debug lines to a standard library logger."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO):
        """Initialize the sink.

        Args:
            logger: Logger that receives each line
            level: Level the lines are logged at
        """
        self.logger = logger
        self.level = level

    def emit(self, line: str) -> None:
        self.logger.log(self.level, line)

    def __repr__(self) -> str:
        return f"LoggerSink({self.logger.name!r}, {logging.getLevelName(self.level)})"


class ConsoleSink:
    """Prints debug lines to a rich console."""

    def __init__(self, console: Console | None = None, style: str = "dim"):
        self.console = console or Console()
        self.style = style

    def emit(self, line: str) -> None:
        # Lines come from the engine and may contain brackets
        self.console.print(line, style=self.style, markup=False, highlight=False)


def as_sink(target: DebugSink | Callable[[str], None]) -> DebugSink:
    """Return ``target`` as a DebugSink, wrapping bare callables.

    Objects with a callable ``emit`` are used as they are, even when the
    object itself is also callable.

    Raises:
        TypeError: If target neither has ``emit`` nor is callable
    """
    if callable(getattr(target, "emit", None)):
        return target  # type: ignore[return-value]
    return CallbackSink(target)
