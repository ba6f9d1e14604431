"""Tool argument schema generation."""

from .argument_schema_factory import ArgumentSchemaFactory

__all__ = ["ArgumentSchemaFactory"]
