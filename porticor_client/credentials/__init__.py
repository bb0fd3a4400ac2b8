"""Temporary credential caching."""

from .cache import CredentialCache

__all__ = [
    "CredentialCache",
]
