"""Cryptographic utilities."""

import secrets
from typing import Tuple

from authlib.common.security import generate_token
from authlib.oauth2.rfc7636 import create_s256_code_challenge


PKCE_VERIFIER_LENGTH = 64


def generate_state_token(length: int = 32) -> str:
    """Generate a secure state token for OAuth flows.

    Args:
        length: Number of random bytes (default: 32)

    Returns:
        URL-safe random string
    """
    return secrets.token_urlsafe(length)


def generate_pkce_pair(length: int = PKCE_VERIFIER_LENGTH) -> Tuple[str, str]:
    """Generate a PKCE code verifier and its S256 code challenge.

    Args:
        length: Verifier length, 43 to 128 characters per RFC 7636

    Returns:
        Tuple of (code_verifier, code_challenge)
    """
    if not 43 <= length <= 128:
        raise ValueError("PKCE code verifier length must be between 43 and 128")
    code_verifier = generate_token(length)
    return code_verifier, create_s256_code_challenge(code_verifier)


def states_match(expected: str, actual: str) -> bool:
    """Compare two state values in constant time."""
    return secrets.compare_digest(expected.encode("utf-8"), actual.encode("utf-8"))
