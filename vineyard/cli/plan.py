"""Commands that resolve configuration into execution settings."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import InvalidConfigurationError
from ..execution.engine import DryRunEngine, run_engine
from ..execution.settings import ExecutionSettings
from ..execution.sinks import ConsoleSink
from ..extension.settings import VineyardSettings
from ..utils.logging_setup import setup_logging
from .options import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    IGNORE_CACHES_OPTION,
    LOG_FILE_OPTION,
    MAPPING_VERSION_OPTION,
    VERBOSE_OPTION,
    WORKING_DIRECTORY_OPTION,
)

console = Console()


def load_settings(
    config: Path | None = None,
    version: str | None = None,
    working_directory: Path | str | None = None,
    debug: bool | None = None,
    ignore_caches: bool | None = None,
) -> VineyardSettings:
    """Assemble user configuration from file, environment and flags.

    Flags override ``VINEYARD_*`` environment variables, which override the
    config file.
    """
    settings = VineyardSettings.from_file(config) if config else VineyardSettings()
    env_settings = VineyardSettings.from_env()
    settings = settings.merged_with(**env_settings.model_dump(exclude_unset=True))
    return settings.merged_with(
        version=version,
        working_directory=working_directory,
        debug=debug,
        ignore_caches=ignore_caches,
    )


def _settings_table(settings: ExecutionSettings) -> Table:
    table = Table(title="Execution Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", settings.version)
    table.add_row("Working directory", str(settings.working_directory))
    table.add_row("Ignore caches", "yes" if settings.ignore_caches else "no")
    table.add_row("Debug", "yes" if settings.has_debug else "no")
    return table


def plan(
    mapping_version: str | None = MAPPING_VERSION_OPTION,
    working_directory: str | None = WORKING_DIRECTORY_OPTION,
    debug: bool | None = DEBUG_OPTION,
    ignore_caches: bool | None = IGNORE_CACHES_OPTION,
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
) -> None:
    """Validate the run configuration and show the resulting execution plan.

    No artifacts are remapped; the plan is handed to a dry-run engine.

    Examples:

        # Plan a run from flags
        vineyard plan --mapping-version 1.20.1 --working-directory build/remap

        # Use a config file, but force cache bypass
        vineyard plan --config vineyard.json --ignore-caches
    """
    setup_logging(verbose=verbose, log_file=log_file)
    try:
        user_settings = load_settings(
            config=config,
            version=mapping_version,
            working_directory=working_directory,
            debug=debug,
            ignore_caches=ignore_caches,
        )
        settings = user_settings.as_execution_settings(ConsoleSink(console))
    except InvalidConfigurationError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    result = run_engine(DryRunEngine(), settings)
    if result.is_failure:
        console.print("[red]❌ Dry run failed[/red]")
        raise typer.Exit(1)

    console.print(_settings_table(settings))
    console.print(f"✅ Configuration valid for version {settings.version}")


def show_config(
    mapping_version: str | None = MAPPING_VERSION_OPTION,
    working_directory: str | None = WORKING_DIRECTORY_OPTION,
    debug: bool | None = DEBUG_OPTION,
    ignore_caches: bool | None = IGNORE_CACHES_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Show the merged configuration without validating it."""
    try:
        user_settings = load_settings(
            config=config,
            version=mapping_version,
            working_directory=working_directory,
            debug=debug,
            ignore_caches=ignore_caches,
        )
    except InvalidConfigurationError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Vineyard Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")
    for name, value in user_settings.model_dump().items():
        display = "[dim]not set[/dim]" if value is None else escape(str(value))
        table.add_row(name, display)
    console.print(table)
