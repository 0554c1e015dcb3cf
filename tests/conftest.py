"""Test configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

ENV_VARS = (
    "VINEYARD_VERSION",
    "VINEYARD_DEBUG",
    "VINEYARD_IGNORE_CACHES",
    "VINEYARD_WORKING_DIRECTORY",
)


@pytest.fixture(autouse=True)
def clean_vineyard_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep VINEYARD_* variables from the developer's shell out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Working directory path for a run; not created on disk."""
    return tmp_path / "run1"


class RecordingSink:
    """Debug sink that remembers every line it receives."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
