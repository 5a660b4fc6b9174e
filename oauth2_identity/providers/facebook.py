"""Facebook OAuth2 provider binding."""

import re
import urllib.parse
from typing import Any, Dict, Optional, Tuple

from .base import ProviderBinding, require_str, require_user_id
from ..core.auth import Profile, TokenInfo
from ..exceptions.auth import InvalidResponseFormatError, SpecifiedProfileError


ACCESS_TOKEN = "access_token"
EXPIRES = "expires"

_TOKEN_DELIMITERS = re.compile(r"[&=]")


class FacebookBinding(ProviderBinding):
    """Facebook Graph API binding.

    Facebook does not follow the OAuth2 token response format: the token
    endpoint answers with ``access_token=...&expires=...`` as plain text.
    """

    id = "facebook"
    authorization_url = "https://graph.facebook.com/oauth/authorize"
    access_token_url = "https://graph.facebook.com/oauth/access_token"
    profile_url = (
        "https://graph.facebook.com/me?fields=name,first_name,last_name,picture,email"
        "&return_ssl_resources=1&access_token={token}"
    )
    default_scope = "email"

    def parse_token_response(self, body: str) -> TokenInfo:
        """Parse ``access_token=<token>[&expires=<seconds>]``.

        Anything else is rejected instead of producing a partial token.
        """
        parts = _TOKEN_DELIMITERS.split(body)

        if len(parts) == 4 and parts[0] == ACCESS_TOKEN and parts[2] == EXPIRES and parts[1]:
            try:
                expires_in = int(parts[3])
            except ValueError as e:
                raise InvalidResponseFormatError(self.id) from e
            return TokenInfo(access_token=parts[1], expires_in=expires_in)

        if len(parts) == 2 and parts[0] == ACCESS_TOKEN and parts[1]:
            return TokenInfo(access_token=parts[1])

        raise InvalidResponseFormatError(self.id)

    def profile_request(self, token_info: TokenInfo) -> Tuple[str, Dict[str, str]]:
        token = urllib.parse.quote(token_info.access_token, safe="")
        return self.profile_url.format(token=token), {}

    def parse_profile(self, data: Any) -> Profile:
        error = data.get("error")
        if isinstance(error, dict):
            raise SpecifiedProfileError(
                self.id,
                error_type=require_str(error, "type"),
                error_message=require_str(error, "message"),
            )

        return Profile(
            provider_user_id=require_user_id(data),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            full_name=data.get("name"),
            email=data.get("email"),
            avatar_url=_picture_url(data),
        )


def _picture_url(data: Dict[str, Any]) -> Optional[str]:
    picture = data.get("picture")
    if not isinstance(picture, dict):
        return None
    picture_data = picture.get("data")
    if not isinstance(picture_data, dict):
        return None
    return picture_data.get("url")
