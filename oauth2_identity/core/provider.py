"""Generic OAuth2 client flow."""

import logging
import urllib.parse
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

from ..config.settings import OAuth2Settings
from ..core.auth import Identity, TokenInfo
from ..core.cache import CacheLayer
from ..core.http import HTTPLayer
from ..exceptions.auth import (
    AccessDeniedError,
    AuthorizationError,
    NetworkError,
    ProfileNetworkError,
    SpecifiedProfileError,
    StateMismatchError,
    UnexpectedResponseError,
    UnspecifiedProfileError,
)
from ..providers import get_binding
from ..providers.base import ProviderBinding
from ..utils.crypto import generate_pkce_pair, generate_state_token, states_match

logger = logging.getLogger(__name__)

STATE_KEY_PREFIX = "oauth2_state"
VERIFIER_KEY_PREFIX = "oauth2_verifier"

RESERVED_AUTHORIZATION_PARAMS = (
    "client_id",
    "redirect_uri",
    "response_type",
    "scope",
    "state",
    "code_challenge",
    "code_challenge_method",
)


class FlowState(str, Enum):
    """Where ``authenticate`` left the authorization attempt.

    Failures are not a state: they surface as ``OAuthError`` subclasses.
    """

    AWAITING_CALLBACK = "awaiting_callback"
    PROFILE_FETCHED = "profile_fetched"


@dataclass(frozen=True)
class FlowResult:
    """Outcome of ``OAuth2Provider.authenticate``."""

    state: FlowState
    redirect_url: Optional[str] = None
    identity: Optional[Identity] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_url is not None


class OAuth2Provider:
    """Drives the OAuth2 authorization code flow for one provider binding.

    The binding supplies provider constants and parsing; state validation,
    the HTTP calls and error classification live here. ``cache`` and ``http``
    are the only collaborators, so one instance can serve concurrent flows.
    """

    def __init__(
        self,
        settings: OAuth2Settings,
        binding: ProviderBinding,
        cache: CacheLayer,
        http: HTTPLayer,
    ):
        self.settings = settings
        self.binding = binding
        self.cache = cache
        self.http = http

    @classmethod
    def from_env(
        cls,
        binding: Union[ProviderBinding, str],
        cache: CacheLayer,
        http: HTTPLayer,
        prefix: Optional[str] = None,
    ) -> "OAuth2Provider":
        """Create a provider from ``<PREFIX>CLIENT_ID`` style environment variables.

        ``prefix`` defaults to the upper-cased provider id, e.g. ``FACEBOOK_``.
        Endpoints not set in the environment come from the binding.
        """
        if isinstance(binding, str):
            binding = get_binding(binding)
        prefix = prefix if prefix is not None else f"{binding.id.upper()}_"
        settings = OAuth2Settings.from_env(prefix, defaults=binding.default_settings())
        return cls(settings, binding, cache, http)

    @property
    def id(self) -> str:
        return self.binding.id

    def _state_key(self, session_id: str) -> str:
        return f"{STATE_KEY_PREFIX}:{self.id}:{session_id}"

    def _verifier_key(self, session_id: str) -> str:
        return f"{VERIFIER_KEY_PREFIX}:{self.id}:{session_id}"

    async def build_redirect_url(self, session_id: str) -> str:
        """Store a fresh state value for ``session_id`` and return the authorize URL."""
        self.settings.validate()

        state = generate_state_token()
        params = dict(self.binding.authorization_params)
        params.update(self.settings.authorization_params)
        # Protocol parameters always win over extra authorization params.
        for reserved in RESERVED_AUTHORIZATION_PARAMS:
            params.pop(reserved, None)
        params.update(
            {
                "client_id": self.settings.client_id,
                "redirect_uri": self.settings.redirect_url,
                "response_type": "code",
            }
        )
        if self.settings.scope.strip():
            params["scope"] = self.settings.scope
        params["state"] = state

        await self.cache.set(self._state_key(session_id), state, self.settings.state_ttl)

        if self.binding.supports_pkce:
            code_verifier, code_challenge = generate_pkce_pair()
            await self.cache.set(
                self._verifier_key(session_id), code_verifier, self.settings.state_ttl
            )
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"

        separator = "&" if "?" in self.settings.authorization_url else "?"
        logger.debug(f"[{self.id}] Built authorization redirect")
        return f"{self.settings.authorization_url}{separator}{urllib.parse.urlencode(params)}"

    async def exchange_code(self, session_id: str, code: str, state: Optional[str]) -> TokenInfo:
        """Validate the callback ``state`` and exchange ``code`` for an access token."""
        expected = await self.cache.pop(self._state_key(session_id))
        if expected is None or not state or not states_match(expected, state):
            logger.warning(f"[{self.id}] Rejected callback with missing or mismatched state")
            raise StateMismatchError(self.id)

        data = {
            "code": code,
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "redirect_uri": self.settings.redirect_url,
            "grant_type": "authorization_code",
        }
        if self.binding.supports_pkce:
            code_verifier = await self.cache.pop(self._verifier_key(session_id))
            if code_verifier is None:
                logger.warning(f"[{self.id}] No PKCE code verifier cached for callback")
                raise StateMismatchError(self.id)
            data["code_verifier"] = code_verifier

        response = await self.http.post(
            self.settings.access_token_url,
            data=data,
            headers=self.binding.token_request_headers,
        )
        if not response.ok:
            logger.warning(f"[{self.id}] Token endpoint returned status {response.status}")
            raise UnexpectedResponseError(self.id, response.status, response.body)

        token_info = self.binding.parse_token_response(response.body)
        logger.debug(f"[{self.id}] Exchanged authorization code for access token")
        return token_info

    async def build_identity(self, token_info: TokenInfo) -> Identity:
        """Fetch the profile for ``token_info`` and normalize it into an ``Identity``."""
        url, headers = self.binding.profile_request(token_info)
        try:
            response = await self.http.get(url, headers=headers)
        except NetworkError as e:
            raise ProfileNetworkError(self.id, e) from e

        try:
            data = response.json()
            if not isinstance(data, dict):
                raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
            profile = self.binding.parse_profile(data)
            identity = Identity.from_profile(self.id, profile, token_info)
        except SpecifiedProfileError as e:
            logger.warning(f"[{self.id}] Provider reported profile error: {e.error_type}")
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                f"[{self.id}] Could not build identity from profile response "
                f"(status {response.status}): {type(e).__name__}"
            )
            raise UnspecifiedProfileError(self.id, e) from e

        logger.debug(f"[{self.id}] Built identity {identity.identity_id}")
        return identity

    async def authenticate(self, session_id: str, params: Mapping[str, str]) -> FlowResult:
        """Handle one step of the flow from callback-style query ``params``.

        Without a ``code`` this starts the flow and returns a redirect; with
        one it completes the flow and returns the identity.
        """
        error = params.get("error")
        if error:
            description = params.get("error_description")
            await self.cache.delete(self._state_key(session_id))
            await self.cache.delete(self._verifier_key(session_id))
            if error == "access_denied":
                raise AccessDeniedError(self.id, description)
            raise AuthorizationError(self.id, error, description)

        code = params.get("code")
        if not code:
            redirect_url = await self.build_redirect_url(session_id)
            return FlowResult(state=FlowState.AWAITING_CALLBACK, redirect_url=redirect_url)

        token_info = await self.exchange_code(session_id, code, params.get("state"))
        identity = await self.build_identity(token_info)
        return FlowResult(state=FlowState.PROFILE_FETCHED, identity=identity)

    def __repr__(self) -> str:
        return f"OAuth2Provider(id={self.id!r})"
