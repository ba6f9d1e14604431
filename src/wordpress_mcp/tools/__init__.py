from .models import (
    ToolName,
    ArgumentType,
    ArgumentSpec,
    ToolDefinition,
    ToolCallRequest,
    CreatePostArgs,
    GetPostsArgs,
    UpdatePostArgs,
)
from .registry import ToolRegistry, default_registry
from .schema import ArgumentSchemaFactory

__all__ = [
    "ToolName",
    "ArgumentType",
    "ArgumentSpec",
    "ToolDefinition",
    "ToolCallRequest",
    "CreatePostArgs",
    "GetPostsArgs",
    "UpdatePostArgs",
    "ToolRegistry",
    "default_registry",
    "ArgumentSchemaFactory",
]
