"""Validated, immutable settings for a single remapping run.

Settings are only created through ``ExecutionSettingsBuilder``, which collects
optional configuration and checks the required fields when ``build`` is called.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import IllegalStateError, InvalidConfigurationError
from .sinks import DebugSink, as_sink

NO_VERSION = "no version specified"
NO_WORKING_DIRECTORY = "no working directory specified"


class ExecutionSettings(BaseModel):
    """Everything the remapping engine needs to know about one run."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    version: str = Field(description="Mapping/version target of the run")
    debug_sink: DebugSink | None = Field(
        default=None, description="Receives progress lines; None disables debug"
    )
    ignore_caches: bool = Field(
        default=False, description="Bypass every cache and recompute all outputs"
    )
    working_directory: Path = Field(
        description="Directory the engine reads inputs from and writes outputs to"
    )

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError(NO_VERSION)
        return v

    @classmethod
    def builder(cls, single_use: bool = False) -> "ExecutionSettingsBuilder":
        """Start a new builder for execution settings."""
        return ExecutionSettingsBuilder(single_use=single_use)

    @property
    def has_debug(self) -> bool:
        return self.debug_sink is not None

    def debug(self, line: str) -> None:
        """Send a line to the debug sink, if one is configured."""
        if self.debug_sink is not None:
            self.debug_sink.emit(line)


class ExecutionSettingsBuilder:
    """Accumulates options and produces ``ExecutionSettings``.

    By default a builder may be finalized any number of times and every call
    to ``build`` returns an independent snapshot. A builder created with
    ``single_use=True`` rejects every call after its first successful build
    with ``IllegalStateError``.

    Builders are not thread-safe; keep each one inside a single call.
    """

    def __init__(self, single_use: bool = False):
        self.single_use = single_use
        self.finalized = False
        self._debug_sink: DebugSink | None = None
        self._ignore_caches = False
        self._working_directory: Path | None = None

    def _check_open(self, operation: str) -> None:
        if self.single_use and self.finalized:
            raise IllegalStateError(
                f"Cannot call {operation}() on a builder that was already built"
            )

    def debug(
        self, sink: DebugSink | Callable[[str], None]
    ) -> "ExecutionSettingsBuilder":
        """Register the debug sink, replacing any previous one.

        Args:
            sink: Object with an ``emit(line)`` method, or a plain callable
        """
        self._check_open("debug")
        self._debug_sink = as_sink(sink)
        return self

    def ignore_caches(self) -> "ExecutionSettingsBuilder":
        """Make the engine bypass its caches."""
        self._check_open("ignore_caches")
        self._ignore_caches = True
        return self

    def working_directory(self, path: Path | str | None) -> "ExecutionSettingsBuilder":
        """Set the directory the run works in.

        The directory does not need to exist yet.

        Raises:
            InvalidConfigurationError: If path is None or blank
        """
        self._check_open("working_directory")
        if path is None or (isinstance(path, str) and not path.strip()):
            raise InvalidConfigurationError(NO_WORKING_DIRECTORY)
        self._working_directory = Path(path)
        return self

    def build(self, version: str | None) -> ExecutionSettings:
        """Validate the accumulated options and return immutable settings.

        A failed build leaves the builder usable.

        Args:
            version: Mapping/version target of the run

        Returns:
            A new ExecutionSettings snapshot

        Raises:
            InvalidConfigurationError: If version is missing or blank, or no
                working directory was set
            IllegalStateError: If this single-use builder was already built
        """
        self._check_open("build")
        if version is None or not str(version).strip():
            raise InvalidConfigurationError(NO_VERSION)
        if self._working_directory is None:
            raise InvalidConfigurationError(NO_WORKING_DIRECTORY)

        fields: dict[str, Any] = {
            "version": str(version),
            "debug_sink": self._debug_sink,
            "ignore_caches": self._ignore_caches,
            "working_directory": self._working_directory,
        }
        settings = ExecutionSettings(**fields)
        self.finalized = True
        return settings
