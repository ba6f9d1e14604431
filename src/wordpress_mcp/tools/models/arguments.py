"""Validated argument models, one per tool.

Every model inherits the connection overrides from ``CredentialOverrides`` so a
caller may point any single call at a different site or user.
"""

from typing import Annotated, Any, Dict, Optional

from pydantic import Field, ValidationInfo, field_validator

from ...credentials import CredentialOverrides


class _ToolArgs(CredentialOverrides):
    """Base class for tool arguments."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null on an optional argument is the same as leaving it out.
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.default
        return value


class CreatePostArgs(_ToolArgs):
    """Arguments of ``create_post``."""

    title: Annotated[str, Field(min_length=1, description="Post title")]
    content: Annotated[str, Field(min_length=1, description="Post content")]
    status: Annotated[str, Field(description="Post status (draft, publish, etc.)")] = "draft"


class GetPostsArgs(_ToolArgs):
    """Arguments of ``get_posts``."""

    per_page: Annotated[int, Field(alias="perPage", ge=1, description="Number of posts per page")] = 10
    page: Annotated[int, Field(ge=1, description="Page number")] = 1

    @field_validator("per_page", "page", mode="before")
    @classmethod
    def _zero_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Paging values of 0 fall back to the defaults, like omitted ones.
        if value == 0 and not isinstance(value, bool) and info.field_name is not None:
            return cls.model_fields[info.field_name].default
        return value


class UpdatePostArgs(_ToolArgs):
    """Arguments of ``update_post``.

    ``title``, ``content`` and ``status`` stay ``None`` unless the caller sent
    them; ``changes()`` reports only what was actually supplied.
    """

    post_id: Annotated[int, Field(alias="postId", gt=0, description="Post ID to update")]
    title: Annotated[Optional[str], Field(description="New post title")] = None
    content: Annotated[Optional[str], Field(description="New post content")] = None
    status: Annotated[Optional[str], Field(description="New post status (draft, publish, etc.)")] = None

    def changes(self) -> Dict[str, str]:
        """Returns the post fields the caller supplied, empty strings included."""
        changed: Dict[str, str] = {}
        for name in ("title", "content", "status"):
            value = getattr(self, name)
            if name in self.model_fields_set and value is not None:
                changed[name] = value
        return changed
