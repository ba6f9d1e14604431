"""The static catalog of WordPress tools."""

from ..models import CreatePostArgs, GetPostsArgs, ToolName, UpdatePostArgs
from .base import ToolRegistry


def default_registry() -> ToolRegistry:
    """Builds the registry of every tool the server exposes."""
    registry = ToolRegistry()
    registry.register(ToolName.CREATE_POST.value, "Create a new WordPress post", CreatePostArgs)
    registry.register(ToolName.GET_POSTS.value, "Get WordPress posts", GetPostsArgs)
    registry.register(ToolName.UPDATE_POST.value, "Update an existing WordPress post", UpdatePostArgs)
    return registry
