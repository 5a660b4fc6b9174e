"""Provider configuration."""

from .settings import OAuth2Settings

__all__ = ["OAuth2Settings"]
