"""Tool registry holding the catalog of tools exposed over MCP."""

from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from ..models import ToolDefinition
from ..schema import ArgumentSchemaFactory
from ...exceptions import InvalidArgumentsError, ToolRegistrationError, UnknownToolError
from ...logger import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    A central registry to manage and access the available tools.

    The registry is filled once at startup and only read afterwards, so it can be
    shared between concurrent tool calls.
    """

    def __init__(self) -> None:
        """Initialize the ToolRegistry."""
        self.tools: Dict[str, ToolDefinition] = {}

    def register(
        self,
        name_or_tool: str | ToolDefinition,
        description: Optional[str] = None,
        args_model: Optional[Type[BaseModel]] = None,
    ) -> ToolDefinition:
        """
        Register a new tool.

        A tool is registered either from a ready `ToolDefinition` or from its name,
        description and arguments model, in which case the argument schema is
        derived from the model.

        Args:
            name_or_tool: Either a `ToolDefinition` object or the name of the tool.
            description: What the tool does. Required if `name_or_tool` is a string.
            args_model: Model validating the tool's arguments. Required if `name_or_tool` is a string.

        Returns:
            The registered definition.

        Raises:
            ToolRegistrationError: If arguments are missing, the schema does not match
                the model, or the tool already exists.
        """
        if isinstance(name_or_tool, ToolDefinition):
            tool = name_or_tool
            self._assert_schema_matches_model(tool)
        else:
            if description is None or args_model is None:
                raise ToolRegistrationError("If passing name as string, description and args_model are required.")
            tool = ToolDefinition(
                name=name_or_tool,
                description=description,
                arguments=ArgumentSchemaFactory.build(args_model, name_or_tool),
                args_model=args_model,
            )

        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[tool.name] = tool
        logger.debug("Registered tool '%s'.", tool.name)
        return tool

    def get(self, tool_name: str) -> ToolDefinition:
        """Look up a tool by name.

        Raises:
            UnknownToolError: If the tool does not exist in the registry.
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            raise UnknownToolError(f"Unknown method: {tool_name}")
        return tool

    def list_tools(self) -> List[ToolDefinition]:
        """Returns all tool definitions in registration order."""
        return list(self.tools.values())

    def validate(self, tool_name: str, arguments: Optional[Mapping[str, Any]]) -> BaseModel:
        """Validate a raw argument bag against a tool's arguments model.

        Args:
            tool_name: Name of the tool being called.
            arguments: The arguments as sent by the caller. ``None`` means no arguments.

        Returns:
            The validated arguments model instance.

        Raises:
            UnknownToolError: If the tool does not exist.
            InvalidArgumentsError: If required arguments are missing or have the wrong type.
        """
        tool = self.get(tool_name)
        try:
            return tool.args_model.model_validate(dict(arguments or {}))
        except ValidationError as e:
            raise self._to_invalid_arguments(tool_name, e) from e

    @staticmethod
    def _to_invalid_arguments(tool_name: str, error: ValidationError) -> InvalidArgumentsError:
        missing: List[str] = []
        invalid: List[str] = []
        reasons: List[str] = []
        for detail in error.errors():
            field = ".".join(str(part) for part in detail["loc"]) or "arguments"
            if detail["type"] == "missing" or detail.get("input", ...) is None:
                missing.append(field)
            else:
                invalid.append(field)
                reasons.append(f"{field} ({detail['msg']})")

        if missing:
            msg = f"Missing required argument(s) for '{tool_name}': {', '.join(missing)}"
        else:
            msg = f"Invalid argument(s) for '{tool_name}': {', '.join(reasons)}"
        logger.warning(msg)
        return InvalidArgumentsError(msg, fields=missing or invalid)

    @staticmethod
    def _assert_schema_matches_model(tool: ToolDefinition) -> None:
        expected = {field.alias or name for name, field in tool.args_model.model_fields.items()}
        if set(tool.arguments) != expected:
            msg = (
                f"Tool '{tool.name}' advertises arguments {sorted(tool.arguments)} "
                f"but validates {sorted(expected)}."
            )
            logger.error(msg)
            raise ToolRegistrationError(msg)
