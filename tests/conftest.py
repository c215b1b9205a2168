"""Shared pytest fixtures for the moltron-frontend test suite.

Provides reusable fixtures for:
- Settings rooted in a temporary output directory
- A recording command runner that simulates npx/npm
- Mock asyncio subprocess helpers
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from moltron_frontend.config import Settings
from moltron_frontend.scaffolder import ProjectConfig


# ---------------------------------------------------------------------------
# Settings & configs
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings whose output directory is a fresh temp dir."""
    return Settings(output_dir=tmp_path)


@pytest.fixture
def project_config() -> ProjectConfig:
    """A dark brutalist project named ``acme``."""
    return ProjectConfig(name="acme", aesthetic="brutalist", theme="dark")


# ---------------------------------------------------------------------------
# Simulated external commands
# ---------------------------------------------------------------------------

class RecordingRunner:
    """Async stand-in for ``run_command`` that records every call.

    ``fail_at`` is a 1-based index into the recorded calls; that call returns
    exit code 1 with ``stderr``. ``fail_when`` fails the first call whose
    joined command contains the substring.
    """

    def __init__(
        self,
        fail_at: int | None = None,
        fail_when: str | None = None,
        stderr: str = "simulated failure",
    ) -> None:
        self.calls: list[dict[str, Any]] = []
        self.fail_at = fail_at
        self.fail_when = fail_when
        self.stderr = stderr

    async def __call__(
        self, cmd: list[str], cwd: Path | None = None, timeout: int | None = None
    ) -> tuple[int, str, str]:
        self.calls.append({"cmd": list(cmd), "cwd": cwd, "timeout": timeout})
        joined = " ".join(cmd)
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            return (1, "", self.stderr)
        if self.fail_when is not None and self.fail_when in joined:
            return (1, "", self.stderr)
        if cmd[:2] == ["node", "--version"]:
            return (0, "v20.1.0", "")
        return (0, "", "")

    @property
    def commands(self) -> list[str]:
        return [" ".join(call["cmd"]) for call in self.calls]


@pytest.fixture
def recording_runner() -> RecordingRunner:
    """A runner where every command succeeds."""
    return RecordingRunner()


@pytest.fixture
def version_probe():
    """Factory for an async probe returning a fixed ``node --version`` string."""
    def factory(version: str = "v20.1.0") -> AsyncMock:
        return AsyncMock(return_value=version)

    return factory


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def make_runner():
    """Factory for ``RecordingRunner`` instances with failure injection."""
    return RecordingRunner
