"""Export the exception hierarchy used across validation, dispatch and transport paths."""

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

__all__ = [
    "WordPressToolError",
    "ToolRegistrationError",
    "UnknownToolError",
    "InvalidArgumentsError",
    "MissingCredentialsError",
    "RemoteAPIError",
    "TransportError",
    "InternalToolError",
]
