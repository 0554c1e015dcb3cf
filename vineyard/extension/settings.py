"""User-facing Vineyard configuration and its translation to execution settings."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidConfigurationError
from ..execution.settings import ExecutionSettings
from ..execution.sinks import DebugSink

logger = logging.getLogger(__name__)

ENV_PREFIX = "VINEYARD_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise InvalidConfigurationError(
        f"{name} must be one of {sorted((TRUE_VALUES | FALSE_VALUES) - {''})}, "
        f"got '{value}'"
    )


class VineyardSettings(BaseModel):
    """Mutable, partially specified configuration for a remapping run.

    Fields may be left unset while the configuration is being assembled.
    Missing required values are only reported by ``as_execution_settings``.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    version: str | None = Field(
        default=None, description="Mapping/version target, e.g. '1.20.1'"
    )
    debug: bool = Field(default=False, description="Emit debug lines during the run")
    ignore_caches: bool = Field(
        default=False, description="Bypass caches and recompute all outputs"
    )
    working_directory: Path | None = Field(
        default=None, description="Directory for inputs, outputs and caches"
    )

    @field_validator("working_directory", mode="before")
    @classmethod
    def blank_working_directory_is_unset(cls, v: Any) -> Any:
        # Path("") would silently become the current directory
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "VineyardSettings":
        """Load configuration from ``VINEYARD_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Settings with every variable that was present applied
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        version = env.get(f"{ENV_PREFIX}VERSION")
        if version and version.strip():
            values["version"] = version

        for field in ("debug", "ignore_caches"):
            name = f"{ENV_PREFIX}{field.upper()}"
            if name in env:
                values[field] = _parse_bool(name, env[name])

        working_directory = env.get(f"{ENV_PREFIX}WORKING_DIRECTORY")
        if working_directory and working_directory.strip():
            values["working_directory"] = Path(working_directory)

        return cls(**values)

    @classmethod
    def from_file(cls, path: Path | str) -> "VineyardSettings":
        """Load configuration from a JSON file.

        Raises:
            InvalidConfigurationError: If the file cannot be read, is not a JSON
                object, or contains unknown or mistyped keys
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfigurationError(
                f"Could not read config file {path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Config file {path} must contain a JSON object"
            )

        try:
            return cls(**data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidConfigurationError(
                f"Invalid config file {path}: {problems}"
            ) from e

    def merged_with(self, **overrides: Any) -> "VineyardSettings":
        """Return a copy with every override that is not None applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(updates) - set(type(self).model_fields)
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown setting(s): {', '.join(sorted(unknown))}"
            )
        return type(self).model_validate({**self.model_dump(), **updates})

    def as_execution_settings(self, sink: DebugSink) -> ExecutionSettings:
        """Translate this configuration into validated execution settings.

        Args:
            sink: Receives debug lines when ``debug`` is enabled

        Returns:
            Immutable settings for one run

        Raises:
            InvalidConfigurationError: If the working directory or version is
                missing
        """
        builder = ExecutionSettings.builder()
        if self.debug:
            builder.debug(sink)
        if self.ignore_caches:
            builder.ignore_caches()
        builder.working_directory(self.working_directory)
        settings = builder.build(self.version)
        logger.debug(f"Translated configuration into execution settings: {settings}")
        return settings
