"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

# Run configuration
MAPPING_VERSION_OPTION = typer.Option(
    None,
    "--mapping-version",
    "-v",
    help="Mapping/version target to remap (e.g. '1.20.1')",
)

WORKING_DIRECTORY_OPTION = typer.Option(
    None,
    "--working-directory",
    "-w",
    help="Directory for inputs, outputs and caches",
)

DEBUG_OPTION = typer.Option(
    None,
    "--debug/--no-debug",
    "-d/-D",
    help="Print debug lines emitted during the run",
    show_default=False,
)

IGNORE_CACHES_OPTION = typer.Option(
    None,
    "--ignore-caches/--use-caches",
    help="Bypass caches and recompute all outputs",
    show_default=False,
)

# Configuration sources
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="JSON config file (flags and VINEYARD_* env vars take precedence)",
    exists=True,
    dir_okay=False,
)

# Logging
VERBOSE_OPTION = typer.Option(
    False, "--verbose", help="Log at DEBUG level instead of INFO"
)

LOG_FILE_OPTION = typer.Option(
    None, "--log-file", help="Write a detailed log to this file"
)
