"""Outbound side: request construction and the HTTP transport."""

from .request_builder import OutboundRequest, build_request
from .transport import WordPressClient

__all__ = ["OutboundRequest", "build_request", "WordPressClient"]
