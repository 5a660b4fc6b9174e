"""Token and identity classes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class AuthMethod(str, Enum):
    """How an identity was authenticated.

    The OAuth2 flow only produces ``OAUTH2``. The other members let applications
    tag identities from their own login schemes with the same type.
    """

    OAUTH1 = "oauth1"
    OAUTH2 = "oauth2"
    OPENID = "openid"
    USERNAME_PASSWORD = "username_password"


@dataclass(frozen=True)
class TokenInfo:
    """Access credential obtained by exchanging an authorization code."""

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None

    def __post_init__(self):
        if not self.access_token:
            raise ValueError("access_token must not be empty")

    def __repr__(self) -> str:
        return (
            f"TokenInfo(access_token='***', token_type={self.token_type!r}, "
            f"expires_in={self.expires_in!r}, "
            f"refresh_token={'***' if self.refresh_token else None})"
        )


@dataclass(frozen=True)
class IdentityID:
    """Identifies a user within one provider's namespace."""

    provider_user_id: str
    provider_id: str

    def __post_init__(self):
        if not self.provider_user_id:
            raise ValueError("provider_user_id must not be empty")

    def __str__(self) -> str:
        return f"{self.provider_id}:{self.provider_user_id}"


@dataclass(frozen=True)
class Profile:
    """Provider-agnostic profile fields extracted by a binding."""

    provider_user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Identity:
    """Canonical identity produced by a successful authentication flow."""

    identity_id: IdentityID
    auth_info: TokenInfo
    auth_method: AuthMethod = AuthMethod.OAUTH2
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_profile(cls, provider_id: str, profile: Profile, auth_info: TokenInfo) -> "Identity":
        return cls(
            identity_id=IdentityID(profile.provider_user_id, provider_id),
            auth_info=auth_info,
            auth_method=AuthMethod.OAUTH2,
            first_name=profile.first_name,
            last_name=profile.last_name,
            full_name=profile.full_name,
            email=profile.email,
            avatar_url=profile.avatar_url,
            extra=dict(profile.extra),
        )

    @property
    def provider_id(self) -> str:
        return self.identity_id.provider_id

    def __str__(self) -> str:
        name = self.full_name or self.identity_id.provider_user_id
        if self.email:
            return f"{name} <{self.email}> ({self.provider_id})"
        return f"{name} ({self.provider_id})"
