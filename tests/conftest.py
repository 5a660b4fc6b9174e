import urllib.parse
from typing import Callable, List

import httpx
import pytest

from oauth2_identity import HttpxLayer, MemoryCacheLayer, OAuth2Provider, OAuth2Settings
from oauth2_identity.providers import FacebookBinding


FACEBOOK_TOKEN_URL = "https://graph.facebook.com/oauth/access_token"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def make_http(handler: Callable[[httpx.Request], httpx.Response]):
    transport = RecordingTransport(handler)
    return HttpxLayer(client=httpx.AsyncClient(transport=transport)), transport


def form_data(request: httpx.Request) -> dict:
    parsed = urllib.parse.parse_qs(request.content.decode())
    return {key: values[0] for key, values in parsed.items()}


def query_params(url: str) -> dict:
    parsed = urllib.parse.parse_qs(urllib.parse.urlsplit(url).query)
    return {key: values[0] for key, values in parsed.items()}


@pytest.fixture
def cache():
    return MemoryCacheLayer()


@pytest.fixture
def facebook_settings():
    return OAuth2Settings(
        authorization_url="https://graph.facebook.com/oauth/authorize",
        access_token_url=FACEBOOK_TOKEN_URL,
        redirect_url="https://app.example.com/auth/facebook",
        client_id="my-client-id",
        client_secret="my-client-secret",
        scope="email",
    )


@pytest.fixture
def facebook_profile():
    return {
        "id": "134405962728980",
        "name": "Apollonia Vanova",
        "first_name": "Apollonia",
        "last_name": "Vanova",
        "email": "apollonia.vanova@watchmen.com",
        "picture": {
            "data": {
                "url": "https://fbcdn-profile-a.akamaihd.net/hprofile-ak-ash2/t5/1119_s.jpg",
                "is_silhouette": False,
            }
        },
    }


@pytest.fixture
def make_facebook(cache, facebook_settings):
    """Build a Facebook provider whose HTTP traffic goes to ``handler``."""

    def factory(handler):
        http, transport = make_http(handler)
        provider = OAuth2Provider(facebook_settings, FacebookBinding(), cache, http)
        return provider, transport

    return factory
