from enum import Enum
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict


class ToolName(str, Enum):
    """The closed set of tools this server exposes."""

    CREATE_POST = "create_post"
    GET_POSTS = "get_posts"
    UPDATE_POST = "update_post"


class ArgumentType(str, Enum):
    """JSON schema types a tool argument may have."""

    STRING = "string"
    NUMBER = "number"


class ArgumentSpec(BaseModel):
    """
    Describes one argument a tool accepts.

    Attributes:
        type: The JSON type of the argument.
        required: Whether the caller must supply the argument.
        default: Value used when the argument is omitted, if any.
        description: Human-readable description shown to MCP clients.
    """

    model_config = ConfigDict(frozen=True)

    type: ArgumentType
    required: bool = False
    default: Optional[Any] = None
    description: str

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type.value, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


class ToolDefinition(BaseModel):
    """
    Represents the definition of a tool exposed over MCP.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        arguments: Argument name (as the caller spells it) mapped to its spec.
        args_model: Pydantic model used for validating and coercing arguments.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    arguments: Dict[str, ArgumentSpec]
    args_model: Type[BaseModel]

    @property
    def input_schema(self) -> Dict[str, Any]:
        """The JSON schema object advertised as the tool's ``inputSchema``."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {name: spec.to_json_schema() for name, spec in self.arguments.items()},
        }
        required = [name for name, spec in self.arguments.items() if spec.required]
        if required:
            schema["required"] = required
        return schema


class ToolCallRequest(BaseModel):
    """A single tool invocation as received from an MCP client."""

    name: str
    arguments: Dict[str, Any] = {}
