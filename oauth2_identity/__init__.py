"""
OAuth2 Identity - OAuth2 client flow with pluggable provider bindings

This package runs the OAuth2 authorization code flow against identity
providers such as Facebook, Google and GitHub, and normalizes each
provider's profile into one canonical Identity.

Quick Start:
    from oauth2_identity import HttpxLayer, MemoryCacheLayer, OAuth2Provider

    facebook = OAuth2Provider.from_env("facebook", MemoryCacheLayer(), HttpxLayer())

    # 1. send the user to the provider
    url = await facebook.build_redirect_url(session_id)

    # 2. on the callback
    token_info = await facebook.exchange_code(session_id, code, state)
    identity = await facebook.build_identity(token_info)
"""

__version__ = "1.0.0"
__author__ = "OAuth2 Identity Contributors"
__license__ = "MIT"

# Core exports
from .core.auth import AuthMethod, Identity, IdentityID, Profile, TokenInfo
from .core.cache import CacheLayer, MemoryCacheLayer, RedisCacheLayer
from .core.http import HTTPLayer, HTTPResponse, HttpxLayer
from .core.provider import FlowResult, FlowState, OAuth2Provider

# Provider bindings
from .providers import (
    FacebookBinding,
    GitHubBinding,
    GoogleBinding,
    ProviderBinding,
    get_binding,
    register_binding,
)

# Exceptions
from .exceptions.auth import (
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

# Configuration
from .config.settings import OAuth2Settings

__all__ = [
    # Core
    "AuthMethod",
    "Identity",
    "IdentityID",
    "Profile",
    "TokenInfo",
    "CacheLayer",
    "MemoryCacheLayer",
    "RedisCacheLayer",
    "HTTPLayer",
    "HTTPResponse",
    "HttpxLayer",
    "FlowResult",
    "FlowState",
    "OAuth2Provider",

    # Providers
    "ProviderBinding",
    "FacebookBinding",
    "GitHubBinding",
    "GoogleBinding",
    "get_binding",
    "register_binding",

    # Exceptions
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

    # Config
    "OAuth2Settings",
]
