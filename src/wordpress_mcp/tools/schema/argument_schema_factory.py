from typing import Any, Dict, Type, Union, get_args, get_origin

from pydantic import BaseModel, SecretStr
from pydantic.fields import FieldInfo

from ...exceptions import ToolRegistrationError
from ...logger import get_logger
from ..models import ArgumentSpec, ArgumentType

logger = get_logger(__name__)

_TYPE_MAP: Dict[Any, ArgumentType] = {
    str: ArgumentType.STRING,
    SecretStr: ArgumentType.STRING,
    int: ArgumentType.NUMBER,
    float: ArgumentType.NUMBER,
}


class ArgumentSchemaFactory:
    """Derives the advertised argument schema of a tool from its pydantic arguments model."""

    @classmethod
    def build(cls, args_model: Type[BaseModel], tool_name: str) -> Dict[str, ArgumentSpec]:
        """Creates the argument specs for every field of ``args_model``.

        Args:
            args_model: The model the tool's arguments are validated with.
            tool_name: The name of the tool for error reporting.

        Returns:
            Argument name, as callers spell it (the field alias), mapped to its spec.

        Raises:
            ToolRegistrationError: If a field has no description or an unsupported type.
        """
        specs: Dict[str, ArgumentSpec] = {}
        for field_name, field in args_model.model_fields.items():
            arg_name = field.alias or field_name
            specs[arg_name] = cls._build_spec(field, arg_name, tool_name)
        return specs

    @classmethod
    def _build_spec(cls, field: FieldInfo, arg_name: str, tool_name: str) -> ArgumentSpec:
        if not field.description:
            msg = f"Argument '{arg_name}' in tool '{tool_name}' is missing a description."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        required = field.is_required()
        return ArgumentSpec(
            type=cls._json_type(field.annotation, arg_name, tool_name),
            required=required,
            default=None if required else field.default,
            description=field.description,
        )

    @staticmethod
    def _json_type(annotation: Any, arg_name: str, tool_name: str) -> ArgumentType:
        # Optional[X] is advertised as X; omission is expressed through "required".
        if get_origin(annotation) is Union:
            members = [a for a in get_args(annotation) if a is not type(None)]
            if len(members) == 1:
                annotation = members[0]

        if annotation in _TYPE_MAP:
            return _TYPE_MAP[annotation]

        msg = f"Argument '{arg_name}' in tool '{tool_name}' has unsupported type {annotation!r}."
        logger.error(msg)
        raise ToolRegistrationError(msg)
