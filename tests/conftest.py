"""Shared pytest configuration and fixtures for all tests."""

import importlib
import json
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from mcpinstall.api.host.get_host_location import get_host_location
from mcpinstall.api.host.HostIdentity import HostIdentity
from mcpinstall.api.host.HostLocation import HostLocation


def pytest_configure(config):
    for marker in ("unit", "integration", "install", "mcp", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME and MCPINSTALL_HOME at temporary directories.

    Returns:
        The fake user home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("MCPINSTALL_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("APPDATA", raising=False)
    return home


@pytest.fixture
def make_host() -> Callable[..., HostLocation]:
    """Factory that creates a host's config directory and, optionally, its config file.

    Usage: ``make_host("cursor", {"mcpServers": {}})``; pass no config to
    create only the directory, or ``raw`` for arbitrary file contents.
    """

    def _make(host: str, config: dict | None = None, raw: str | None = None) -> HostLocation:
        location = get_host_location(HostIdentity(host))
        location.directory.mkdir(parents=True, exist_ok=True)
        if raw is not None:
            location.config_file.write_text(raw)
        elif config is not None:
            location.config_file.write_text(json.dumps(config, indent=2))
        return location

    return _make


# =============================================================================
# External command fakes
# =============================================================================


class FakeCommands:
    """Stand-in for PATH lookup and process execution.

    Every command in ``available`` resolves and exits 0 unless a failure was
    registered for its exact argv with ``fail()``.
    """

    def __init__(self):
        self.available = {"node", "npm", "npx", "uvx"}
        self.failures: dict[tuple[str, ...], tuple[int, str]] = {}
        self.calls: list[tuple[list[str], str | None]] = []

    def fail(self, *argv: str, returncode: int = 1, stderr: str = "error") -> None:
        self.failures[tuple(argv)] = (returncode, stderr)

    def which(self, command: str) -> str | None:
        return f"/fake/bin/{command}" if command in self.available else None

    def run(self, argv, cwd=None, **kwargs):  # noqa: ARG002
        full = (Path(argv[0]).name, *argv[1:])
        self.calls.append((list(full), cwd))
        returncode, stderr = self.failures.get(full, (0, ""))
        stdout = "1.0.0\n" if returncode == 0 else ""
        return subprocess.CompletedProcess(argv, returncode, stdout=stdout, stderr=stderr)

    def ran(self, *argv: str) -> bool:
        return any(call == list(argv) for call, _ in self.calls)


@pytest.fixture
def fake_commands(monkeypatch) -> FakeCommands:
    """Replace shutil.which and subprocess.run as seen by the command runner."""
    run_command_module = importlib.import_module("mcpinstall.api.probe.run_command")

    fake = FakeCommands()
    monkeypatch.setattr(run_command_module.shutil, "which", fake.which)
    monkeypatch.setattr(run_command_module.subprocess, "run", fake.run)
    return fake


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """Runner that drains a StageResult's progress generator."""
    return _run_cmd
