"""Unit tests for mcpinstall.api.config.InstallerConfig."""

import json

import pytest

from mcpinstall.api.config.InstallerConfig import InstallerConfig
from mcpinstall.api.host.HostIdentity import HostIdentity


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "state" / "config.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def test_get_config_path_uses_env(tmp_path):
    assert InstallerConfig.get_config_path() == (tmp_path / "state").resolve() / "config.json"


def test_load_missing_file_gives_defaults():
    config = InstallerConfig.load()

    assert config.default_host is HostIdentity.CLAUDE
    assert config.runtimes.npx == "npx"
    assert config.runtimes.uvx == "uvx"
    assert config.runtimes.command_timeout is None
    assert config.log.level == "INFO"


def test_load_partial_file(settings_file):
    settings_file.write_text(json.dumps({"default_host": "cursor", "runtimes": {"command_timeout": 120}, "log": {"level": "debug"}}))

    config = InstallerConfig.load()

    assert config.default_host is HostIdentity.CURSOR
    assert config.runtimes.command_timeout == 120
    assert config.runtimes.node == "node"
    assert config.log.level == "DEBUG"


def test_load_invalid_json(settings_file):
    settings_file.write_text("{")
    with pytest.raises(ValueError, match="Invalid JSON in config file"):
        InstallerConfig.load()


def test_load_not_an_object(settings_file):
    settings_file.write_text("[]")
    with pytest.raises(ValueError, match="must contain a JSON object"):
        InstallerConfig.load()


@pytest.mark.parametrize(
    ("raw", "field"),
    [
        ({"unknown": 1}, "unknown"),
        ({"default_host": "emacs"}, "default_host"),
        ({"log": {"level": "LOUD"}}, "log.level"),
        ({"runtimes": {"command_timeout": 0}}, "runtimes.command_timeout"),
    ],
)
def test_load_validation_errors(settings_file, raw, field):
    settings_file.write_text(json.dumps(raw))
    with pytest.raises(ValueError, match=f"Configuration validation error: {field}"):
        InstallerConfig.load()
