"""WordPress MCP server - exposes WordPress post management as MCP tools."""

__version__ = "1.0.0"

from .config import WordPressSettings
from .credentials import CredentialOverrides, Credentials, resolve_credentials
from .exceptions import (
    WordPressToolError,
    ToolRegistrationError,
    UnknownToolError,
    InvalidArgumentsError,
    MissingCredentialsError,
    RemoteAPIError,
    TransportError,
    InternalToolError,
)
from .logger import get_logger, setup_logging
from .tools import ToolCallRequest, ToolDefinition, ToolName, ToolRegistry, default_registry
from .client import OutboundRequest, WordPressClient, build_request
from .dispatcher import Dispatcher

__all__ = [
    "__version__",
    "WordPressSettings",
    "CredentialOverrides",
    "Credentials",
    "resolve_credentials",
    "WordPressToolError",
    "ToolRegistrationError",
    "UnknownToolError",
    "InvalidArgumentsError",
    "MissingCredentialsError",
    "RemoteAPIError",
    "TransportError",
    "InternalToolError",
    "get_logger",
    "setup_logging",
    "ToolCallRequest",
    "ToolDefinition",
    "ToolName",
    "ToolRegistry",
    "default_registry",
    "OutboundRequest",
    "WordPressClient",
    "build_request",
    "Dispatcher",
]
