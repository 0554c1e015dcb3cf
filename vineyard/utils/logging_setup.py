"""Logging configuration for the Vineyard CLI."""

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure root logging for a CLI invocation.

    Args:
        verbose: Log at DEBUG instead of INFO
        log_file: Optional file that receives every record at DEBUG level
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    if log_file is None:
        return

    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    if any(
        isinstance(h, logging.FileHandler)
        and getattr(h, "baseFilename", "") == os.path.abspath(log_file)
        for h in root.handlers
    ):
        return

    fh = logging.FileHandler(log_file)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
