"""Supported host applications."""

from enum import Enum


class HostIdentity(str, Enum):
    """Host application that loads MCP servers from its own config file."""

    CLAUDE = "claude"
    CURSOR = "cursor"
    VSCODE = "vscode"

    @property
    def display_name(self) -> str:
        return {"claude": "Claude Desktop", "cursor": "Cursor", "vscode": "VS Code"}[self.value]

    @classmethod
    def parse(cls, value: "str | HostIdentity") -> "HostIdentity":
        """Parse a host name, rejecting anything outside the supported set.

        Raises:
            ValueError: If the name is not a supported host
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(h.value for h in cls)
            raise ValueError(f"Unknown host '{value}'. Supported hosts: {supported}") from None
