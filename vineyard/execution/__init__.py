"""Execution settings and engine hand-off for remapping runs."""

from .engine import DryRunEngine, RemappingEngine, run_engine
from .result import Failure, Recover, Result, Success
from .settings import ExecutionSettings, ExecutionSettingsBuilder
from .sinks import CallbackSink, ConsoleSink, DebugSink, LoggerSink

__all__ = [
    # Settings
    "ExecutionSettings",
    "ExecutionSettingsBuilder",
    # Sinks
    "DebugSink",
    "CallbackSink",
    "LoggerSink",
    "ConsoleSink",
    # Results
    "Result",
    "Success",
    "Failure",
    "Recover",
    # Engine
    "RemappingEngine",
    "DryRunEngine",
    "run_engine",
]
