"""Credential models shared by tool arguments and the resolver."""

import base64
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

API_PREFIX = "/wp-json/wp/v2"


class CredentialOverrides(BaseModel):
    """
    Per-call connection overrides accepted by every tool.

    Attributes:
        site_url: Overrides ``WORDPRESS_SITE_URL`` for this call.
        username: Overrides ``WORDPRESS_USERNAME`` for this call.
        password: Overrides ``WORDPRESS_PASSWORD`` for this call.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    site_url: Annotated[
        Optional[str],
        Field(alias="siteUrl", description="WordPress site URL (overrides WORDPRESS_SITE_URL env var)"),
    ] = None
    username: Annotated[
        Optional[str], Field(description="WordPress username (overrides WORDPRESS_USERNAME env var)")
    ] = None
    password: Annotated[
        Optional[SecretStr], Field(description="WordPress password (overrides WORDPRESS_PASSWORD env var)")
    ] = None


class Credentials(BaseModel):
    """
    The resolved endpoint/identity/secret triple for one outbound call.

    Attributes:
        endpoint: Base URL of the WordPress site.
        identity: Username used for HTTP Basic authentication.
        secret: Password used for HTTP Basic authentication.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str
    identity: str
    secret: SecretStr

    @property
    def api_base(self) -> str:
        """Root URL of the WordPress REST API (``wp/v2`` namespace)."""
        return f"{self.endpoint.rstrip('/')}{API_PREFIX}"

    def authorization_header(self) -> str:
        """Builds the HTTP Basic ``Authorization`` header value."""
        token = base64.b64encode(f"{self.identity}:{self.secret.get_secret_value()}".encode("utf-8")).decode("ascii")
        return f"Basic {token}"
