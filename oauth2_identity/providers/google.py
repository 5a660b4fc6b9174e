"""Google OAuth2 provider binding."""

from typing import Any

from .base import ProviderBinding, require_str, require_user_id
from ..core.auth import Profile
from ..exceptions.auth import SpecifiedProfileError


class GoogleBinding(ProviderBinding):
    """Google OAuth 2.0 binding."""

    id = "google"
    authorization_url = "https://accounts.google.com/o/oauth2/v2/auth"
    access_token_url = "https://oauth2.googleapis.com/token"
    profile_url = "https://www.googleapis.com/oauth2/v2/userinfo"
    default_scope = "openid email profile"
    supports_pkce = True
    authorization_params = {
        "access_type": "offline",
        "prompt": "consent",
    }

    def parse_profile(self, data: Any) -> Profile:
        error = data.get("error")
        if isinstance(error, dict):
            error_type = error.get("status") or error.get("code")
            if error_type is None:
                raise KeyError("status")
            raise SpecifiedProfileError(
                self.id,
                error_type=str(error_type),
                error_message=require_str(error, "message"),
            )

        extra = {}
        if "verified_email" in data:
            extra["verified_email"] = data["verified_email"]

        return Profile(
            provider_user_id=require_user_id(data),
            first_name=data.get("given_name"),
            last_name=data.get("family_name"),
            full_name=data.get("name"),
            email=data.get("email"),
            avatar_url=data.get("picture"),
            extra=extra,
        )
