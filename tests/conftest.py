"""Root test configuration for pairgate.

Every test runs with PAIRGATE_* environment variables cleared and the working
directory set to a fresh tmp_path, so a developer's own .pairgate/config.yaml
(in the repo or in ~) never leaks into config tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from pairgate.constants import ENV_CONFIG, ENV_FILTER_MODE, ENV_LIST_PATH, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear PAIRGATE_* overrides and search only the tmp working directory."""
    for name in (ENV_CONFIG, ENV_FILTER_MODE, ENV_LIST_PATH, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pairgate.config.DEFAULT_CONFIG_PATHS", [".pairgate/config.yaml"])


@pytest.fixture
def write_list(tmp_path: Path) -> Callable[..., str]:
    """Write a pair list file and return its path.

    Usage: path = write_list("a;b\\nc;d\\n")
    """

    def _write(content: str, name: str = "pairs.txt") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Reset structlog to console output at DEBUG.

    CLI tests reconfigure logging from their arguments; without this a
    WARNING-level run would hide INFO records from later capture_logs() checks.
    """
    from pairgate.utils.logger import clear_run_id, configure_logging

    configure_logging("DEBUG", json_output=False)
    clear_run_id()
