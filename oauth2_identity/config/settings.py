"""OAuth2 provider settings."""

import os
from dataclasses import dataclass, field, fields
from typing import Dict, Mapping, Optional

from ..exceptions.auth import ConfigurationError


DEFAULT_STATE_TTL = 600

REQUIRED_SETTINGS = (
    "authorization_url",
    "access_token_url",
    "redirect_url",
    "client_id",
    "client_secret",
)


@dataclass(frozen=True)
class OAuth2Settings:
    """Endpoints and client credentials for one OAuth2 provider."""

    authorization_url: str
    access_token_url: str
    redirect_url: str
    client_id: str
    client_secret: str
    scope: str = ""
    state_ttl: int = DEFAULT_STATE_TTL
    authorization_params: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(
        cls,
        prefix: str = "OAUTH2_",
        defaults: Optional[Mapping[str, str]] = None,
    ) -> "OAuth2Settings":
        """Create settings from environment variables.

        Each field is read from ``<prefix><FIELD NAME>`` (for example
        ``FACEBOOK_CLIENT_ID``). Values missing from the environment fall back
        to ``defaults``, which bindings use for their well-known endpoints.
        """
        defaults = dict(defaults or {})
        config_data: Dict[str, object] = {}

        for setting in fields(cls):
            if setting.name == "authorization_params":
                continue
            value = os.getenv(f"{prefix}{setting.name.upper()}")
            if value is None:
                value = defaults.get(setting.name)
            if value is None:
                continue
            if setting.name == "state_ttl":
                try:
                    config_data[setting.name] = int(value)
                except ValueError as e:
                    raise ConfigurationError(
                        f"{prefix}STATE_TTL must be an integer, got {value!r}",
                        missing_config="state_ttl",
                    ) from e
            else:
                config_data[setting.name] = value

        for name in REQUIRED_SETTINGS:
            config_data.setdefault(name, "")

        settings = cls(**config_data)
        settings.validate()
        return settings

    def validate(self) -> None:
        """Validate settings, raising ``ConfigurationError`` on the first problem."""
        for name in REQUIRED_SETTINGS:
            value = getattr(self, name)
            if not value or not str(value).strip():
                raise ConfigurationError(f"{name} is required", missing_config=name)

        if self.state_ttl <= 0:
            raise ConfigurationError("state_ttl must be positive", missing_config="state_ttl")
