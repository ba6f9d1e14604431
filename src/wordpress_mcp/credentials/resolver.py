"""Merge per-call credential overrides over the configured defaults."""

from typing import Optional

from pydantic import SecretStr

from ..config import WordPressSettings
from ..exceptions import MissingCredentialsError
from ..logger import get_logger
from .models import CredentialOverrides, Credentials

logger = get_logger(__name__)


def _pick(override: Optional[str], default: Optional[str]) -> Optional[str]:
    # An empty override falls back to the default, same as an absent one.
    if override:
        return override
    if default:
        return default
    return None


def _secret_value(secret: Optional[SecretStr]) -> Optional[str]:
    return secret.get_secret_value() if secret is not None else None


def resolve_credentials(overrides: CredentialOverrides, settings: WordPressSettings) -> Credentials:
    """Resolve the credentials for a single tool call.

    Each of site URL, username and password is taken from the call if it was
    supplied and non-empty, otherwise from ``settings``.

    Args:
        overrides: Connection fields supplied with the tool call.
        settings: Process-wide defaults.

    Returns:
        The effective credentials.

    Raises:
        MissingCredentialsError: If any of the three values is still unset.
    """
    endpoint = _pick(overrides.site_url, settings.site_url)
    identity = _pick(overrides.username, settings.username)
    secret = _pick(_secret_value(overrides.password), _secret_value(settings.password))

    missing = [
        name
        for name, value in (("siteUrl", endpoint), ("username", identity), ("password", secret))
        if value is None
    ]
    if missing:
        msg = (
            "WordPress credentials not provided in environment variables or request parameters "
            f"(missing: {', '.join(missing)})"
        )
        logger.warning(msg)
        raise MissingCredentialsError(msg, missing=missing)

    # mypy: the checks above guarantee all three are set
    assert endpoint is not None and identity is not None and secret is not None
    return Credentials(endpoint=endpoint, identity=identity, secret=SecretStr(secret))
