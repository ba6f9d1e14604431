"""Tool-related data models."""

from .models import ToolName, ArgumentType, ArgumentSpec, ToolDefinition, ToolCallRequest
from .arguments import CreatePostArgs, GetPostsArgs, UpdatePostArgs

__all__ = [
    "ToolName",
    "ArgumentType",
    "ArgumentSpec",
    "ToolDefinition",
    "ToolCallRequest",
    "CreatePostArgs",
    "GetPostsArgs",
    "UpdatePostArgs",
]
