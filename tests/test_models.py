import pytest

from oauth2_identity import AuthMethod, Identity, IdentityID, Profile, TokenInfo


def test_token_info_requires_access_token():
    with pytest.raises(ValueError):
        TokenInfo(access_token="")


def test_token_info_repr_hides_secrets():
    info = TokenInfo(access_token="EAAG-secret", refresh_token="refresh-secret", expires_in=60)

    assert "secret" not in repr(info)
    assert "expires_in=60" in repr(info)


def test_identity_id_requires_user_id():
    with pytest.raises(ValueError):
        IdentityID("", "facebook")


def test_identity_from_profile():
    token_info = TokenInfo(access_token="XYZ")
    profile = Profile(
        provider_user_id="42",
        full_name="Apollonia Vanova",
        email="apollonia.vanova@watchmen.com",
        extra={"login": "apollonia"},
    )

    identity = Identity.from_profile("github", profile, token_info)

    assert identity.identity_id == IdentityID("42", "github")
    assert identity.provider_id == "github"
    assert identity.auth_method is AuthMethod.OAUTH2
    assert identity.auth_info == token_info
    assert identity.extra == {"login": "apollonia"}
    assert identity.first_name is None
    assert str(identity) == "Apollonia Vanova <apollonia.vanova@watchmen.com> (github)"


def test_identity_str_without_name_or_email():
    identity = Identity.from_profile(
        "facebook", Profile(provider_user_id="42"), TokenInfo(access_token="XYZ")
    )

    assert str(identity) == "42 (facebook)"
    assert str(identity.identity_id) == "facebook:42"
