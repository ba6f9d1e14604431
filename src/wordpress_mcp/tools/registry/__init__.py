from .base import ToolRegistry
from .catalog import default_registry

__all__ = ["ToolRegistry", "default_registry"]
