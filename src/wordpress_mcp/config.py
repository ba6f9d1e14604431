"""Process-wide configuration for the WordPress MCP server."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .logger import get_logger

logger = get_logger(__name__)

ENV_SITE_URL = "WORDPRESS_SITE_URL"
ENV_USERNAME = "WORDPRESS_USERNAME"
ENV_PASSWORD = "WORDPRESS_PASSWORD"
ENV_TIMEOUT = "WORDPRESS_TIMEOUT"
ENV_LOG_LEVEL = "WORDPRESS_MCP_LOG_LEVEL"

DEFAULT_TIMEOUT = 30.0


class WordPressSettings(BaseModel):
    """
    Default connection settings used when a tool call does not override them.

    Attributes:
        site_url: Base URL of the WordPress site (without the ``/wp-json`` suffix).
        username: WordPress user the calls are made as.
        password: Password or application password for ``username``.
        timeout: Timeout in seconds for a single call to the WordPress API.
    """

    model_config = ConfigDict(frozen=True)

    site_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WordPressSettings":
        """Build settings from environment variables.

        Empty variables are treated as unset.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            The settings found in the environment.

        Raises:
            ValueError: If ``WORDPRESS_TIMEOUT`` is not a positive number.
        """
        env = os.environ if environ is None else environ

        def read(key: str) -> Optional[str]:
            value = env.get(key)
            return value if value else None

        password = read(ENV_PASSWORD)
        raw_timeout = read(ENV_TIMEOUT)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds, got '{raw_timeout}'.") from e
            if timeout <= 0:
                raise ValueError(f"{ENV_TIMEOUT} must be positive, got '{raw_timeout}'.")

        settings = cls(
            site_url=read(ENV_SITE_URL),
            username=read(ENV_USERNAME),
            password=SecretStr(password) if password is not None else None,
            timeout=timeout,
        )
        logger.debug(
            "Loaded settings from environment (site_url=%s, username set=%s, password set=%s).",
            settings.site_url,
            settings.username is not None,
            settings.password is not None,
        )
        return settings
