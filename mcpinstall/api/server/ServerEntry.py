"""Launch descriptor a host uses to start one MCP server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServerEntry(BaseModel):
    """One ``mcpServers`` value: command, args and optional env."""

    model_config = ConfigDict(extra="forbid")

    command: str = Field(min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] | None = None

    def to_json(self) -> dict[str, Any]:
        """Host-config form; ``env`` is left out entirely when there is none."""
        data: dict[str, Any] = {"command": self.command, "args": list(self.args)}
        if self.env:
            data["env"] = dict(self.env)
        return data
