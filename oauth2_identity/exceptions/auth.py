"""OAuth2 client exceptions."""

from typing import Optional


INVALID_RESPONSE_FORMAT = "[{provider}] Invalid response format for accessToken"
UNEXPECTED_RESPONSE = "[{provider}] Got unexpected response `{body}`; status code: {status}"
UNSPECIFIED_PROFILE_ERROR = "[{provider}] Error retrieving profile information"
SPECIFIED_PROFILE_ERROR = (
    "[{provider}] Error retrieving profile information. "
    "Error type: {error_type}, message: {error_message}"
)
AUTHORIZATION_ERROR = "[{provider}] Authorization server returned error: {error}"
ACCESS_DENIED = "[{provider}] User denied access"
STATE_MISMATCH = "[{provider}] State mismatch for authorization callback"


class OAuthError(Exception):
    """Base exception for OAuth errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(OAuthError):
    """Raised when provider configuration is invalid."""

    def __init__(self, message: str, missing_config: Optional[str] = None):
        super().__init__(message, "configuration_error")
        self.missing_config = missing_config


class StateMismatchError(OAuthError):
    """Raised when the callback state does not match the cached one."""

    def __init__(self, provider: str):
        super().__init__(STATE_MISMATCH.format(provider=provider), "state_mismatch")
        self.provider = provider


class AuthorizationError(OAuthError):
    """Raised when the authorization server redirects back with an error."""

    def __init__(
        self,
        provider: str,
        error: str,
        description: Optional[str] = None,
        *,
        message: Optional[str] = None,
        error_code: str = "authorization_error",
    ):
        super().__init__(
            message or AUTHORIZATION_ERROR.format(provider=provider, error=error), error_code
        )
        self.provider = provider
        self.error = error
        self.description = description


class AccessDeniedError(AuthorizationError):
    """Raised when the user declined the authorization request."""

    def __init__(self, provider: str, description: Optional[str] = None):
        super().__init__(
            provider,
            "access_denied",
            description,
            message=ACCESS_DENIED.format(provider=provider),
            error_code="access_denied",
        )


class UnexpectedResponseError(OAuthError):
    """Raised when the token endpoint answers with a non-success status."""

    def __init__(self, provider: str, status: int, body: str):
        super().__init__(
            UNEXPECTED_RESPONSE.format(provider=provider, body=body, status=status),
            "unexpected_response",
        )
        self.provider = provider
        self.status = status
        self.body = body


class InvalidResponseFormatError(OAuthError):
    """Raised when the access token response cannot be parsed."""

    def __init__(self, provider: str):
        super().__init__(
            INVALID_RESPONSE_FORMAT.format(provider=provider), "invalid_response_format"
        )
        self.provider = provider


class NetworkError(OAuthError):
    """Raised when the HTTP layer fails at the transport level."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = "network_error",
        *,
        timeout: bool = False,
    ):
        super().__init__(message, error_code)
        self.timeout = timeout


class NetworkTimeoutError(NetworkError):
    """Raised when the HTTP layer gives up waiting for the provider."""

    def __init__(self, message: str):
        super().__init__(message, "network_timeout", timeout=True)


class ProfileError(OAuthError):
    """Base class for profile retrieval failures."""

    def __init__(self, message: str, provider: str):
        super().__init__(message, "profile_error")
        self.provider = provider


class SpecifiedProfileError(ProfileError):
    """Raised when the provider itself reports a profile error."""

    def __init__(self, provider: str, error_type: str, error_message: str):
        super().__init__(
            SPECIFIED_PROFILE_ERROR.format(
                provider=provider, error_type=error_type, error_message=error_message
            ),
            provider,
        )
        self.error_type = error_type
        self.error_message = error_message


class UnspecifiedProfileError(ProfileError):
    """Raised for any other profile failure; the underlying error is kept in ``cause``."""

    def __init__(self, provider: str, cause: Optional[BaseException] = None):
        super().__init__(UNSPECIFIED_PROFILE_ERROR.format(provider=provider), provider)
        self.cause = cause


class ProfileNetworkError(UnspecifiedProfileError, NetworkError):
    """Transport failure while fetching the profile.

    Catchable both as an unspecified profile error and as a network error, so
    timeouts stay distinguishable from malformed profiles.
    """

    def __init__(self, provider: str, cause: NetworkError):
        UnspecifiedProfileError.__init__(self, provider, cause)
        self.timeout = cause.timeout
