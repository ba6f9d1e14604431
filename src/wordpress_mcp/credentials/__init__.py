"""Credential models and resolution."""

from .models import CredentialOverrides, Credentials, API_PREFIX
from .resolver import resolve_credentials

__all__ = ["CredentialOverrides", "Credentials", "API_PREFIX", "resolve_credentials"]
