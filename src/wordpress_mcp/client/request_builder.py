"""Translate validated tool arguments into WordPress REST API requests."""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import UnknownToolError
from ..tools.models import CreatePostArgs, GetPostsArgs, ToolName, UpdatePostArgs


class OutboundRequest(BaseModel):
    """
    One HTTP request against the ``wp/v2`` namespace.

    Attributes:
        method: HTTP method.
        path: Path relative to the API root, e.g. ``/posts/5``.
        query: Query string parameters.
        body: JSON body, or ``None`` for requests without one.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST"]
    path: str
    query: Dict[str, Any] = Field(default_factory=dict)
    body: Dict[str, Any] | None = None


def build_request(tool: ToolName, args: BaseModel) -> OutboundRequest:
    """Build the outbound request for a tool call.

    Connection overrides carried by ``args`` never end up in the request; they
    only feed credential resolution.

    Args:
        tool: The tool being called.
        args: The validated arguments model of that tool.

    Returns:
        A new request for this single call.

    Raises:
        UnknownToolError: If no request shape is defined for ``tool``.
    """
    if tool is ToolName.CREATE_POST and isinstance(args, CreatePostArgs):
        return OutboundRequest(
            method="POST",
            path="/posts",
            body={"title": args.title, "content": args.content, "status": args.status},
        )
    if tool is ToolName.GET_POSTS and isinstance(args, GetPostsArgs):
        return OutboundRequest(method="GET", path="/posts", query={"per_page": args.per_page, "page": args.page})
    if tool is ToolName.UPDATE_POST and isinstance(args, UpdatePostArgs):
        # Omitted fields stay untouched on the server; an empty string would clear them.
        return OutboundRequest(method="POST", path=f"/posts/{args.post_id}", body=args.changes())

    raise UnknownToolError(f"No request defined for tool '{tool.value}' with {type(args).__name__}")
