# src/tool_adapter/registry.py

"""Static table of provider adapters.

Adding a provider means writing one adapter module and adding one entry
to `_ADAPTERS`. Nothing else changes.
"""

import logging

from .adapters import (
    anthropic_adapter,
    gemini_adapter,
    mistral_adapter,
    openai_adapter,
)
from .errors import UnknownProviderError
from .types import Adapter, Provider

logger = logging.getLogger(__name__)

# Canonical order; error messages and get_providers() follow it.
_ADAPTERS: dict[str, Adapter] = {
    "openai": openai_adapter,
    "anthropic": anthropic_adapter,
    "gemini": gemini_adapter,
    "mistral": mistral_adapter,
}


def get_adapter(provider: Provider | str) -> Adapter:
    """Resolve a provider identifier to its adapter.

    Raises:
        UnknownProviderError: If no adapter is registered for `provider`.
    """
    try:
        return _ADAPTERS[provider]
    except KeyError:
        logger.error("Unknown provider: %s", provider)
        raise UnknownProviderError(provider, tuple(_ADAPTERS)) from None


def get_providers() -> list[str]:
    """Return all supported provider identifiers."""
    return list(_ADAPTERS)
