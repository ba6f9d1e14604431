"""
Custom exception classes for the WordPress MCP server.

This module defines the hierarchy of exceptions raised while dispatching a tool
call: catalog lookup, argument validation, credential resolution and the
outbound WordPress REST API request. Each exception carries a stable category
and the JSON-RPC error code the MCP front-end reports it with.
"""

from typing import List, Optional

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND


class WordPressToolError(Exception):
    """Base exception for all tool-related errors."""

    category: str = "InternalError"
    code: int = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ToolRegistrationError(WordPressToolError):
    """Raised when a tool definition cannot be added to the registry."""

    pass


class UnknownToolError(WordPressToolError):
    """Raised when a requested tool is not found in the registry."""

    category = "UnknownTool"
    code = METHOD_NOT_FOUND


class InvalidArgumentsError(WordPressToolError):
    """Raised when tool arguments are missing or have the wrong type.

    Attributes:
        fields: Names of the offending arguments, as the caller spelled them.
    """

    category = "InvalidArguments"
    code = INVALID_PARAMS

    def __init__(self, message: str, fields: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class MissingCredentialsError(WordPressToolError):
    """Raised when site URL, username or password cannot be resolved."""

    category = "MissingCredentials"
    code = INVALID_PARAMS

    def __init__(self, message: str, missing: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class RemoteAPIError(WordPressToolError):
    """Raised when the WordPress API answered with a failure."""

    category = "RemoteAPIError"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(WordPressToolError):
    """Raised when the WordPress API could not be reached at all."""

    category = "TransportError"


class InternalToolError(WordPressToolError):
    """Raised when a tool fails for a reason outside the categories above."""

    pass
