"""MCP server for mcpinstall - dispatches tools/call to the fixed tool table."""

import json
import sys
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from mcpinstall.utils.get_package_version import get_package_version
from mcpinstall.utils.logger import get_logger

from .tools import TOOLS
from .ToolSpec import ToolSpec

logger = get_logger("mcp.server")

DEFAULT_PROTOCOL_VERSION = "2024-11-05"


class MCPServer:
    """Simple JSON-RPC server for MCP tools."""

    def __init__(
        self,
        *,
        input_stream: Any | None = None,
        output_stream: Any | None = None,
        tools: Mapping[str, ToolSpec] | None = None,
    ):
        self._input = input_stream or sys.stdin
        self._output = output_stream or sys.stdout
        self._lsp_mode = False
        self.tools = tools if tools is not None else TOOLS

    def read_message(self) -> dict[str, Any] | None:
        """Read and decode a single JSON-RPC message from the input stream.

        Returns None at EOF.
        """
        while True:
            line = self._input.readline()
            if not line:
                return None
            # Skip blank lines (common after framed LSP payloads).
            if not line.strip():
                continue
            try:
                if line.strip().lower().startswith("content-length"):
                    length = int(line.split(":", 1)[1].strip())
                    while True:
                        sep = self._input.readline()
                        if not sep.strip():
                            break
                    self._lsp_mode = True
                    return json.loads(self._input.read(length))
                return json.loads(line)
            except (ValueError, IndexError) as e:
                logger.warning("Discarding unreadable message: %s", e)
                self.write_message({"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": f"Parse error: {e}"}})

    def write_message(self, message: dict[str, Any]) -> None:
        """Write a JSON-RPC response to the output stream."""
        payload = json.dumps(message)
        if self._lsp_mode:
            encoded = payload.encode("utf-8")
            self._output.write(f"Content-Length: {len(encoded)}\r\n\r\n{payload}")
        else:
            self._output.write(payload)
            self._output.write("\n")
        self._output.flush()

    def call_tool(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Validate arguments and run a tool, returning an MCP tool result.

        Install failures are tool results with ``isError`` set, never exceptions.

        Raises:
            KeyError: If the tool is not in the table
        """
        spec = self.tools[tool_name]
        try:
            params = spec.input_model.model_validate(arguments or {})
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(x) for x in err.get('loc', ())) or 'arguments'}: {err.get('msg')}" for err in e.errors()
            )
            logger.warning("Invalid arguments for %s: %s", tool_name, details)
            return {"content": [{"type": "text", "text": f"Invalid arguments for {tool_name}: {details}"}], "isError": True}

        logger.info("Calling %s", tool_name)
        outcome = spec.handler(params)
        logger.info("%s %s: %s", tool_name, "succeeded" if outcome.succeeded else "failed", outcome.message)
        return {"content": [{"type": "text", "text": outcome.message}], "isError": not outcome.succeeded}

    def handle_request(self, message: dict[str, Any]) -> None:
        """Handle a single JSON-RPC request."""
        request_id, method, params = message.get("id"), message.get("method"), message.get("params") or {}
        if request_id is None:
            # Notifications (e.g. notifications/initialized) get no response.
            return

        if method == "initialize":
            self.write_message(
                {
                    "jsonrpc": "2.0",
                    "id": request_id,
                    "result": {
                        "protocolVersion": params.get("protocolVersion", DEFAULT_PROTOCOL_VERSION),
                        "capabilities": {"tools": {}},
                        "serverInfo": {"name": "mcpinstall", "version": get_package_version()},
                    },
                }
            )
        elif method == "ping":
            self.write_message({"jsonrpc": "2.0", "id": request_id, "result": {}})
        elif method == "tools/list":
            self.write_message(
                {
                    "jsonrpc": "2.0",
                    "id": request_id,
                    "result": {"tools": [spec.to_listing() for spec in self.tools.values()]},
                }
            )
        elif method == "tools/call":
            tool_name, arguments = params.get("name"), params.get("arguments") or {}
            if tool_name not in self.tools:
                self.write_message(
                    {"jsonrpc": "2.0", "id": request_id, "error": {"code": -32601, "message": f"Tool not found: {tool_name}"}}
                )
                return
            try:
                result = self.call_tool(tool_name, arguments)
            except Exception as e:
                logger.exception("Tool %s raised", tool_name)
                result = {"content": [{"type": "text", "text": f"Tool execution failed: {e}"}], "isError": True}
            self.write_message({"jsonrpc": "2.0", "id": request_id, "result": result})
        else:
            self.write_message(
                {"jsonrpc": "2.0", "id": request_id, "error": {"code": -32601, "message": f"Method not found: {method}"}}
            )

    def run(self) -> None:
        """Run the request loop until EOF."""
        logger.info("MCP server started with tools: %s", ", ".join(self.tools))
        while True:
            message = self.read_message()
            if message is None:
                break
            if not isinstance(message, dict):
                self.write_message({"jsonrpc": "2.0", "id": None, "error": {"code": -32600, "message": "Invalid Request"}})
                continue
            self.handle_request(message)
        logger.info("MCP server input closed, exiting")


if __name__ == "__main__":
    from .main import main

    main()
