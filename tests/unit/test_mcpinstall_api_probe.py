"""Unit tests for mcpinstall.api.probe."""

import importlib
import subprocess

import pytest

from mcpinstall.api.config.RuntimeConfig import RuntimeConfig
from mcpinstall.api.probe.CommandResult import CommandResult
from mcpinstall.api.probe.package_exists import package_exists
from mcpinstall.api.probe.probe import probe
from mcpinstall.api.probe.run_command import run_command

run_command_module = importlib.import_module("mcpinstall.api.probe.run_command")


def test_run_command_not_on_path(fake_commands):
    fake_commands.available = set()

    result = run_command("node", ["--version"])

    assert result.ok is False
    assert result.returncode == 127
    assert "command not found" in result.error_text
    assert fake_commands.calls == []


def test_run_command_success(fake_commands, tmp_path):
    result = run_command("npm", ["install"], cwd=tmp_path)

    assert result.ok is True
    assert fake_commands.calls == [(["npm", "install"], str(tmp_path))]


def test_run_command_nonzero_exit(fake_commands):
    fake_commands.fail("npm", "install", returncode=2, stderr="ERR! missing script\n")

    result = run_command("npm", ["install"])

    assert result.ok is False
    assert result.returncode == 2
    assert result.error_text == "ERR! missing script"


def test_run_command_spawn_error(monkeypatch):
    monkeypatch.setattr(run_command_module.shutil, "which", lambda cmd: f"/bin/{cmd}")

    def raise_oserror(*args, **kwargs):
        raise PermissionError("permission denied")

    monkeypatch.setattr(run_command_module.subprocess, "run", raise_oserror)

    result = run_command("node", ["--version"])

    assert result.ok is False
    assert "permission denied" in result.error_text


def test_run_command_timeout(monkeypatch):
    monkeypatch.setattr(run_command_module.shutil, "which", lambda cmd: f"/bin/{cmd}")

    def time_out(argv, **kwargs):
        raise subprocess.TimeoutExpired(argv, kwargs["timeout"])

    monkeypatch.setattr(run_command_module.subprocess, "run", time_out)

    result = run_command("npm", ["install"], timeout=5)

    assert result.ok is False
    assert "timed out after 5 seconds" in result.error_text


def test_run_command_detaches_stdin(monkeypatch):
    seen = {}
    monkeypatch.setattr(run_command_module.shutil, "which", lambda cmd: f"/bin/{cmd}")

    def record(argv, **kwargs):
        seen.update(kwargs)
        return subprocess.CompletedProcess(argv, 0, stdout="", stderr="")

    monkeypatch.setattr(run_command_module.subprocess, "run", record)

    run_command("node", ["--version"])

    assert seen["stdin"] is subprocess.DEVNULL
    assert seen["check"] is False


@pytest.mark.parametrize(
    ("returncode", "stdout", "stderr", "expected"),
    [
        (1, "", "boom", "boom"),
        (1, "out only", "", "out only"),
        (3, "", "", "exit status 3"),
    ],
)
def test_command_result_error_text(returncode, stdout, stderr, expected):
    assert CommandResult(returncode, stdout, stderr).error_text == expected


def test_probe_available(fake_commands):
    assert probe("node") is True
    assert fake_commands.ran("node", "--version")


def test_probe_missing_runtime(fake_commands):
    fake_commands.available.discard("uvx")
    assert probe("uvx") is False


def test_probe_failing_runtime(fake_commands):
    fake_commands.fail("node", "--version")
    assert probe("node") is False


def test_package_exists_queries_registry(fake_commands):
    assert package_exists("@scope/tool", RuntimeConfig()) is True
    assert fake_commands.ran("npm", "view", "@scope/tool", "version")


def test_package_exists_not_found(fake_commands):
    fake_commands.fail("npm", "view", "nope", "version", stderr="npm ERR! 404")
    assert package_exists("nope", RuntimeConfig()) is False
