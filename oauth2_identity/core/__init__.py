"""Core OAuth2 client functionality."""

from .auth import AuthMethod, Identity, IdentityID, Profile, TokenInfo
from .http import HTTPLayer, HTTPResponse, HttpxLayer
from .cache import CacheLayer, MemoryCacheLayer, RedisCacheLayer
from .provider import FlowResult, FlowState, OAuth2Provider

__all__ = [
    "AuthMethod",
    "Identity",
    "IdentityID",
    "Profile",
    "TokenInfo",
    "HTTPLayer",
    "HTTPResponse",
    "HttpxLayer",
    "CacheLayer",
    "MemoryCacheLayer",
    "RedisCacheLayer",
    "FlowResult",
    "FlowState",
    "OAuth2Provider",
]
