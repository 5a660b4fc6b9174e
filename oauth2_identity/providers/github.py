"""GitHub OAuth2 provider binding."""

from typing import Any

from .base import ProviderBinding, require_str, require_user_id
from ..core.auth import Profile
from ..exceptions.auth import SpecifiedProfileError


class GitHubBinding(ProviderBinding):
    """GitHub OAuth binding.

    GitHub reports grant errors as 200 responses carrying an ``error`` field
    and no ``access_token``; the JSON token parser rejects those.
    """

    id = "github"
    authorization_url = "https://github.com/login/oauth/authorize"
    access_token_url = "https://github.com/login/oauth/access_token"
    profile_url = "https://api.github.com/user"
    default_scope = "user:email"
    token_request_headers = {"Accept": "application/json"}

    def parse_profile(self, data: Any) -> Profile:
        if "id" not in data and "message" in data:
            raise SpecifiedProfileError(
                self.id,
                error_type="api_error",
                error_message=require_str(data, "message"),
            )

        extra = {}
        if data.get("login"):
            extra["login"] = data["login"]

        return Profile(
            provider_user_id=require_user_id(data),
            full_name=data.get("name"),
            email=data.get("email"),
            avatar_url=data.get("avatar_url"),
            extra=extra,
        )
