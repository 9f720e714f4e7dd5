"""Unit tests for the mcpinstall Typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from mcpinstall.cli import main
from mcpinstall.cli._create_app import _create_app

pytestmark = pytest.mark.cli


@pytest.fixture
def runner():
    return CliRunner()


def test_cli_install_package_json_output(runner, make_host, fake_commands):
    location = make_host("cursor", {})

    result = runner.invoke(
        _create_app(),
        ["--display", "json", "install", "package", "@scope/tool", "--host", "cursor", "--arg=-v", "--env", "A=1"],
    )

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["succeeded"] is True
    assert output["server_name"] == "tool"
    entry = json.loads(location.config_file.read_text())["mcpServers"]["tool"]
    assert entry == {"command": "npx", "args": ["@scope/tool", "-v"], "env": {"A": "1"}}


def test_cli_install_package_failure_exit_code(runner, fake_commands):
    result = runner.invoke(_create_app(), ["--display", "json", "install", "package", "tool", "--host", "claude"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["failure"] == "host_not_installed"


def test_cli_install_local_yaml_output(runner, make_host, fake_commands, tmp_path):
    directory = tmp_path / "srv"
    directory.mkdir()
    (directory / "package.json").write_text(json.dumps({"name": "srv", "bin": {"srv": "index.js"}}))
    make_host("claude", {})

    result = runner.invoke(_create_app(), ["install", "local", str(directory)])

    assert result.exit_code == 0
    assert "succeeded: true" in result.stdout


def test_cli_servers_list_and_uninstall(runner, make_host):
    location = make_host("vscode", {"mcpServers": {"a": {"command": "npx", "args": ["a"]}}})

    listed = runner.invoke(_create_app(), ["-d", "json", "servers", "list", "--host", "vscode"])
    assert listed.exit_code == 0
    assert json.loads(listed.stdout)["count"] == 1

    removed = runner.invoke(_create_app(), ["servers", "uninstall", "a", "--host", "vscode"])
    assert removed.exit_code == 0
    assert json.loads(location.config_file.read_text())["mcpServers"] == {}


def test_cli_hosts(runner):
    result = runner.invoke(_create_app(), ["-d", "json", "hosts"])

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)["hosts"]) == 3


def test_cli_rejects_bad_display(runner):
    result = runner.invoke(_create_app(), ["--display", "xml", "hosts"])
    assert result.exit_code == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("mcpinstall ")
