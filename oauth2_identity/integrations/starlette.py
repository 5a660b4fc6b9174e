"""Starlette integration for the OAuth2 flow."""

import logging
from typing import Union

from starlette.requests import Request
from starlette.responses import RedirectResponse

from ..core.auth import Identity
from ..core.provider import OAuth2Provider

logger = logging.getLogger(__name__)


async def authenticate_request(
    provider: OAuth2Provider,
    request: Request,
    session_id: str,
) -> Union[RedirectResponse, Identity]:
    """Run one step of the flow for an incoming request.

    Returns a redirect to the provider when the request starts the flow, or
    the authenticated ``Identity`` when it is the provider's callback. Flow
    errors propagate as ``OAuthError`` subclasses; mapping them to HTTP
    responses is left to the application.

    Usage:
        async def login(request):
            result = await authenticate_request(facebook, request, request.session["id"])
            if isinstance(result, RedirectResponse):
                return result
            ...
    """
    result = await provider.authenticate(session_id, request.query_params)
    if result.is_redirect:
        logger.debug(f"[{provider.id}] Redirecting {request.url.path} to provider")
        return RedirectResponse(url=result.redirect_url, status_code=302)
    return result.identity
