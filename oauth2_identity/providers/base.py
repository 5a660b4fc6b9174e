"""Base provider binding interface."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.auth import Profile, TokenInfo
from ..exceptions.auth import InvalidResponseFormatError


class ProviderBinding(ABC):
    """Provider-specific constants and parsing for the generic OAuth2 flow.

    Subclasses set the endpoint constants and implement ``parse_profile``.
    The default ``parse_token_response`` handles the standard JSON token
    response; providers that deviate from it override it.
    """

    id: str = ""
    authorization_url: str = ""
    access_token_url: str = ""
    profile_url: str = ""
    default_scope: str = ""
    supports_pkce: bool = False
    authorization_params: Mapping[str, str] = {}
    token_request_headers: Mapping[str, str] = {}

    @property
    def name(self) -> str:
        """Provider name (e.g., 'facebook', 'github')."""
        return self.id

    def default_settings(self) -> Dict[str, str]:
        """Well-known endpoint values used when settings leave them out."""
        return {
            "authorization_url": self.authorization_url,
            "access_token_url": self.access_token_url,
            "scope": self.default_scope,
        }

    def parse_token_response(self, body: str) -> TokenInfo:
        """Parse a JSON access token response."""
        try:
            data = json.loads(body)
        except ValueError as e:
            raise InvalidResponseFormatError(self.id) from e

        if not isinstance(data, dict) or not data.get("access_token"):
            raise InvalidResponseFormatError(self.id)

        try:
            return TokenInfo(
                access_token=str(data["access_token"]),
                token_type=data.get("token_type"),
                expires_in=_optional_int(data.get("expires_in")),
                refresh_token=data.get("refresh_token"),
            )
        except (TypeError, ValueError) as e:
            raise InvalidResponseFormatError(self.id) from e

    def profile_request(self, token_info: TokenInfo) -> Tuple[str, Dict[str, str]]:
        """Return the profile URL and headers for ``token_info``."""
        headers = {
            "Authorization": f"Bearer {token_info.access_token}",
            "Accept": "application/json",
        }
        return self.profile_url, headers

    @abstractmethod
    def parse_profile(self, data: Any) -> Profile:
        """Map a decoded profile response to a ``Profile``.

        Raises ``SpecifiedProfileError`` when the provider reports an error.
        Malformed input raises ``KeyError``, ``TypeError`` or ``ValueError``.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


def require_user_id(data: Mapping[str, Any], field: str = "id") -> str:
    """Return ``data[field]`` as a string, rejecting missing, null and blank ids."""
    user_id = data[field]
    if user_id is None or isinstance(user_id, bool) or not str(user_id).strip():
        raise ValueError(f"Profile {field!r} is empty")
    return str(user_id)


def require_str(data: Mapping[str, Any], field: str) -> str:
    """Return ``data[field]``, which must be a string."""
    value = data[field]
    if not isinstance(value, str):
        raise TypeError(f"Expected {field!r} to be a string, got {type(value).__name__}")
    return value


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)
