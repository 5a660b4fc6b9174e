"""HTTP layer used by the OAuth2 flow."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from ..exceptions.auth import NetworkError, NetworkTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class HTTPResponse:
    """Status, raw body and headers of a provider response."""

    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON, raising ``ValueError`` if it is not JSON."""
        return json.loads(self.body)


class HTTPLayer(ABC):
    """Minimal HTTP capability: one GET and one form POST."""

    @abstractmethod
    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> HTTPResponse:
        """Send a GET request."""
        pass

    @abstractmethod
    async def post(
        self,
        url: str,
        data: Mapping[str, str],
        headers: Optional[Mapping[str, str]] = None,
    ) -> HTTPResponse:
        """Send a form-encoded POST request."""
        pass


class HttpxLayer(HTTPLayer):
    """HTTP layer backed by ``httpx.AsyncClient``.

    Pass ``client`` to share an existing client (its lifecycle then stays with
    the caller); otherwise one is created and closed by ``aclose``.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> HTTPResponse:
        return await self._send("GET", url, headers=dict(headers or {}))

    async def post(
        self,
        url: str,
        data: Mapping[str, str],
        headers: Optional[Mapping[str, str]] = None,
    ) -> HTTPResponse:
        return await self._send("POST", url, data=dict(data), headers=dict(headers or {}))

    async def _send(
        self,
        method: str,
        url: str,
        data: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPResponse:
        try:
            response = await self._client.request(method, url, data=data, headers=headers)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} request to {_host(url)} timed out")
            raise NetworkTimeoutError(f"Request to {_host(url)} timed out: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"{method} request to {_host(url)} failed: {type(e).__name__}")
            raise NetworkError(f"Request to {_host(url)} failed: {e}") from e

        logger.debug(f"{method} {_host(url)} -> {response.status_code}")
        return HTTPResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


def _host(url: str) -> str:
    # Query strings can carry access tokens, keep them out of logs.
    return httpx.URL(url).host
