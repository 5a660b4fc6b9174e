"""OAuth2 client exceptions."""

from .auth import (
    OAuthError,
    ConfigurationError,
    StateMismatchError,
    AuthorizationError,
    AccessDeniedError,
    UnexpectedResponseError,
    InvalidResponseFormatError,
    NetworkError,
    NetworkTimeoutError,
    ProfileError,
    SpecifiedProfileError,
    UnspecifiedProfileError,
    ProfileNetworkError,
)

__all__ = [
    "OAuthError",
    "ConfigurationError",
    "StateMismatchError",
    "AuthorizationError",
    "AccessDeniedError",
    "UnexpectedResponseError",
    "InvalidResponseFormatError",
    "NetworkError",
    "NetworkTimeoutError",
    "ProfileError",
    "SpecifiedProfileError",
    "UnspecifiedProfileError",
    "ProfileNetworkError",
]
