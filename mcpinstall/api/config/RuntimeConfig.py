"""External runtime commands used during installation."""

from pydantic import BaseModel, ConfigDict, Field


class RuntimeConfig(BaseModel):
    """Names of the external commands the installer invokes."""

    model_config = ConfigDict(extra="forbid")

    node: str = Field(default="node", description="General-purpose Node.js runtime")
    npm: str = Field(default="npm", description="Registry query and local install command")
    npx: str = Field(default="npx", description="Registry-backed package runner")
    uvx: str = Field(default="uvx", description="Alternate runtime package runner")
    node_install_url: str = Field(default="https://nodejs.org", description="Where to get Node.js")
    uv_install_url: str = Field(default="https://docs.astral.sh/uv", description="Where to get uv")
    command_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds before an external command is abandoned (None waits forever)",
    )
