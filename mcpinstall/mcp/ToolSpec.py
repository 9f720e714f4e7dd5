"""A dispatchable MCP tool."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from mcpinstall.api.pipeline.InstallationOutcome import InstallationOutcome


@dataclass(frozen=True)
class ToolSpec:
    """Tool name, description, input schema model and typed handler."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], InstallationOutcome]

    def to_listing(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(),
        }
