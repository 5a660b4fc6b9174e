"""OAuth2 provider bindings."""

from typing import Dict, Type

from .base import ProviderBinding
from .facebook import FacebookBinding
from .github import GitHubBinding
from .google import GoogleBinding
from ..exceptions.auth import ConfigurationError

_BINDINGS: Dict[str, Type[ProviderBinding]] = {
    FacebookBinding.id: FacebookBinding,
    GitHubBinding.id: GitHubBinding,
    GoogleBinding.id: GoogleBinding,
}


def register_binding(binding_class: Type[ProviderBinding]) -> Type[ProviderBinding]:
    """Register a custom binding class under its ``id``; usable as a decorator."""
    if not binding_class.id:
        raise ConfigurationError(f"{binding_class.__name__} has no provider id")
    _BINDINGS[binding_class.id] = binding_class
    return binding_class


def get_binding(name: str) -> ProviderBinding:
    """Return a binding instance for the provider called ``name``."""
    try:
        binding_class = _BINDINGS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown provider: {name}. Available: {', '.join(sorted(_BINDINGS))}"
        ) from None
    return binding_class()


__all__ = [
    "ProviderBinding",
    "FacebookBinding",
    "GitHubBinding",
    "GoogleBinding",
    "get_binding",
    "register_binding",
]
