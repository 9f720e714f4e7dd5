"""Validated argument models for each MCP tool."""

from pydantic import BaseModel, ConfigDict, Field

from mcpinstall.api.host.HostIdentity import HostIdentity

_ARGS_DESCRIPTION = "Extra arguments passed to the server when the host launches it"
_ENV_DESCRIPTION = "Environment variables for the server, each formatted as KEY=VALUE"


class InstallRepoInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, description="npm or PyPI package name, e.g. @scope/server-name")
    host: HostIdentity = Field(description="Host application to register the server with")
    args: list[str] | None = Field(default=None, description=_ARGS_DESCRIPTION)
    env: list[str] | None = Field(default=None, description=_ENV_DESCRIPTION)


class InstallLocalInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(min_length=1, description="Absolute path to a local package directory")
    host: HostIdentity | None = Field(default=None, description="Host application (default: claude)")
    args: list[str] | None = Field(default=None, description=_ARGS_DESCRIPTION)
    env: list[str] | None = Field(default=None, description=_ENV_DESCRIPTION)


class ListServersInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    host: HostIdentity = Field(description="Host application whose servers to list")


class UninstallInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, description="Server name under mcpServers")
    host: HostIdentity = Field(description="Host application to remove the server from")
