"""Utility functions for OAuth2 identity flows."""

from .crypto import generate_pkce_pair, generate_state_token, states_match

__all__ = ["generate_pkce_pair", "generate_state_token", "states_match"]
