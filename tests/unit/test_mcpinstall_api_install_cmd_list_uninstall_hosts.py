"""Unit tests for cmd_list, cmd_uninstall and cmd_hosts."""

import json

from mcpinstall.api.install.cmd_hosts import cmd_hosts
from mcpinstall.api.install.cmd_list import cmd_list
from mcpinstall.api.install.cmd_uninstall import cmd_uninstall

CONFIG = {
    "other": 1,
    "mcpServers": {
        "fetch": {"command": "uvx", "args": ["mcp-server-fetch"]},
        "fs": {"command": "npx", "args": ["@modelcontextprotocol/server-filesystem", "/tmp"]},
    },
}


def test_cmd_list(run_cmd, make_host):
    make_host("cursor", CONFIG)

    result = run_cmd(cmd_list, host="cursor")

    assert result.success is True
    assert result.output["count"] == 2
    assert [s["name"] for s in result.output["servers"]] == ["fetch", "fs"]
    assert result.output["servers"][1]["command"] == "npx"
    assert "fetch, fs" in result.result


def test_cmd_list_without_servers_key(run_cmd, make_host):
    make_host("cursor", {"other": 1})

    result = run_cmd(cmd_list, host="cursor")

    assert result.success is True
    assert result.output["count"] == 0


def test_cmd_list_non_utf8_config(run_cmd, make_host):
    location = make_host("cursor")
    location.config_file.write_bytes(b'{"mcpServers": {}, "x": "\xff\xfe"}')

    result = run_cmd(cmd_list, host="cursor")

    assert result.success is False
    assert result.output["failure"] == "config_parse_error"
    assert "not valid UTF-8" in result.result


def test_cmd_list_host_not_installed(run_cmd):
    result = run_cmd(cmd_list, host="vscode")

    assert result.success is False
    assert "not installed" in result.result


def test_cmd_uninstall(run_cmd, make_host):
    location = make_host("cursor", CONFIG)

    result = run_cmd(cmd_uninstall, name="fetch", host="cursor")

    assert result.success is True
    assert "Restart Cursor" in result.result
    data = json.loads(location.config_file.read_text())
    assert list(data["mcpServers"]) == ["fs"]
    assert data["other"] == 1


def test_cmd_uninstall_unknown_server(run_cmd, make_host):
    make_host("cursor", CONFIG)

    result = run_cmd(cmd_uninstall, name="ghost", host="cursor")

    assert result.success is False
    assert result.output["failure"] == "server_not_found"


def test_cmd_hosts(run_cmd, make_host):
    make_host("cursor", {})

    result = run_cmd(cmd_hosts)

    assert result.success is True
    hosts = {h["host"]: h for h in result.output["hosts"]}
    assert set(hosts) == {"claude", "cursor", "vscode"}
    assert hosts["cursor"]["installed"] is True
    assert hosts["cursor"]["config_exists"] is True
    assert hosts["claude"]["installed"] is False
    assert result.result == "1 of 3 host(s) installed"
