"""Entry point for handing execution settings to a remapping engine."""

import logging
from typing import Any, Protocol

from ..errors import VineyardError
from .result import Result
from .settings import ExecutionSettings

logger = logging.getLogger(__name__)


class RemappingEngine(Protocol):
    """Anything that can run a remapping job from execution settings."""

    def execute(self, settings: ExecutionSettings) -> Result[Any, Exception]: ...


class DryRunEngine:
    """Engine that reports what a run would do without touching any files."""

    def execute(
        self, settings: ExecutionSettings
    ) -> Result[ExecutionSettings, Exception]:
        settings.debug(f"Remapping version {settings.version}")
        settings.debug(f"Working directory: {settings.working_directory}")
        if settings.ignore_caches:
            settings.debug("Caches: ignored, all outputs will be recomputed")
        else:
            settings.debug("Caches: enabled")
        settings.debug("Dry run: no artifacts were remapped")
        return Result.success(settings)


def run_engine(
    engine: RemappingEngine, settings: ExecutionSettings
) -> Result[Any, Exception]:
    """Run ``engine`` with ``settings`` and return its result.

    Exceptions raised by the engine are returned as a failure. Configuration
    errors are not the engine's fault and propagate to the caller.
    """
    logger.info(
        "Starting remap of %s in %s (ignore_caches=%s)",
        settings.version,
        settings.working_directory,
        settings.ignore_caches,
    )
    try:
        result = engine.execute(settings)
    except VineyardError:
        raise
    except Exception as e:
        logger.error(f"Remapping engine failed: {e}")
        return Result.failure(e)

    if result.is_failure:
        logger.warning("Remap of %s finished with a failure", settings.version)
    else:
        logger.info("Remap of %s finished", settings.version)
    return result
