"""Expose the WordPress tools over the Model Context Protocol."""

import asyncio
import json
import logging
import os
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import CallToolRequest, CallToolResult, ErrorData, ServerResult, TextContent, Tool as MCPTool

from .. import __version__
from ..client import WordPressClient
from ..config import ENV_LOG_LEVEL, WordPressSettings
from ..dispatcher import Dispatcher
from ..exceptions import WordPressToolError
from ..logger import get_logger, setup_logging
from ..tools import ToolCallRequest, ToolRegistry, default_registry

logger = get_logger(__name__)

__all__ = ["WordPressMCPServer", "main"]

SERVER_NAME = "wordpress-server"


class WordPressMCPServer:
    """MCP front-end advertising the tool catalog and handing calls to the dispatcher."""

    def __init__(
        self,
        client: Optional[WordPressClient] = None,
        registry: Optional[ToolRegistry] = None,
        settings_provider: Callable[[], WordPressSettings] = WordPressSettings.from_env,
    ):
        """Initializes the server and registers the MCP request handlers.

        Args:
            client: HTTP client for the WordPress API. A default client is created if omitted.
            registry: Tool catalog. Defaults to the built-in WordPress tools.
            settings_provider: Source of the default credentials, consulted on every call.
        """
        self.registry = registry or default_registry()
        self.client = client or WordPressClient()
        self.dispatcher = Dispatcher(self.client, registry=self.registry, settings_provider=settings_provider)
        self.server: Server = Server(SERVER_NAME, version=__version__)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        # Registered directly: the call_tool decorator turns every exception into an
        # error result, while McpError must reach the session as a JSON-RPC error.
        self.server.request_handlers[CallToolRequest] = self._handle_call_tool

    async def _handle_call_tool(self, request: CallToolRequest) -> ServerResult:
        content = await self.call_tool(request.params.name, request.params.arguments)
        return ServerResult(CallToolResult(content=list(content), isError=False))

    async def list_tools(self) -> List[MCPTool]:
        """Returns the tool catalog in MCP form."""
        return [
            MCPTool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in self.registry.list_tools()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Executes a tool and wraps its JSON result as text content.

        Args:
            name: The tool name.
            arguments: The raw arguments sent by the client.

        Returns:
            A single text block with the pretty-printed JSON result.

        Raises:
            McpError: With the error code matching the failure category.
        """
        try:
            result = await self.dispatcher.dispatch(ToolCallRequest(name=name, arguments=arguments or {}))
        except WordPressToolError as e:
            raise McpError(ErrorData(code=e.code, message=e.message)) from None

        return [TextContent(type="text", text=json.dumps(result, indent=2, ensure_ascii=False))]

    async def run(self) -> None:
        """Serves MCP requests over stdin/stdout until the client disconnects."""
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("WordPress MCP server running on stdio")
                await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
        finally:
            await self.client.aclose()


def main() -> None:
    """Console entry point: load ``.env``, configure logging and serve over stdio."""
    load_dotenv()
    level = getattr(logging, os.getenv(ENV_LOG_LEVEL, "INFO").upper(), logging.INFO)
    setup_logging(level=level if isinstance(level, int) else logging.INFO)

    settings = WordPressSettings.from_env()
    server = WordPressMCPServer(client=WordPressClient(timeout=settings.timeout))
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("WordPress MCP server stopped.")
