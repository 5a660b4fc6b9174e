import pytest

from oauth2_identity import ConfigurationError, OAuth2Settings


ENV = {
    "FB_AUTHORIZATION_URL": "https://graph.facebook.com/oauth/authorize",
    "FB_ACCESS_TOKEN_URL": "https://graph.facebook.com/oauth/access_token",
    "FB_REDIRECT_URL": "https://app.example.com/auth/facebook",
    "FB_CLIENT_ID": "client",
    "FB_CLIENT_SECRET": "secret",
}


@pytest.fixture
def env(monkeypatch):
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)
    return monkeypatch


def test_from_env(env):
    env.setenv("FB_SCOPE", "email,public_profile")
    env.setenv("FB_STATE_TTL", "120")

    settings = OAuth2Settings.from_env("FB_")

    assert settings.client_id == "client"
    assert settings.redirect_url == "https://app.example.com/auth/facebook"
    assert settings.scope == "email,public_profile"
    assert settings.state_ttl == 120


def test_environment_wins_over_defaults(env):
    settings = OAuth2Settings.from_env(
        "FB_", defaults={"access_token_url": "https://default/token", "scope": "email"}
    )

    assert settings.access_token_url == "https://graph.facebook.com/oauth/access_token"
    assert settings.scope == "email"


def test_missing_credential(env):
    env.delenv("FB_CLIENT_SECRET")

    with pytest.raises(ConfigurationError) as exc_info:
        OAuth2Settings.from_env("FB_")

    assert exc_info.value.missing_config == "client_secret"
    assert exc_info.value.error_code == "configuration_error"


def test_state_ttl_must_be_integer(env):
    env.setenv("FB_STATE_TTL", "ten minutes")

    with pytest.raises(ConfigurationError) as exc_info:
        OAuth2Settings.from_env("FB_")

    assert exc_info.value.missing_config == "state_ttl"


def test_state_ttl_must_be_positive():
    settings = OAuth2Settings(
        authorization_url="https://a",
        access_token_url="https://t",
        redirect_url="https://r",
        client_id="client",
        client_secret="secret",
        state_ttl=0,
    )

    with pytest.raises(ConfigurationError, match="state_ttl"):
        settings.validate()


def test_settings_are_immutable(env):
    settings = OAuth2Settings.from_env("FB_")

    with pytest.raises(AttributeError):
        settings.client_id = "other"
