# src/llm/client_factory.py - v3
"""Factory: instantiate LLM client from provider name."""

from __future__ import annotations

import importlib
import logging

from fraudshield.config.settings import Settings
from fraudshield.llm.base_client import BaseLLMClient

logger = logging.getLogger(__name__)

# Registry of provider name -> adapter class path (lazy import).
_PROVIDER_REGISTRY: dict[str, str] = {
    "google": "fraudshield.llm.adapters.google_adapter.GoogleAdapter",
    "openai": "fraudshield.llm.adapters.openai_adapter.OpenAIAdapter",
}

_PROVIDER_ALIASES: dict[str, str] = {"gemini": "google"}


class UnsupportedProviderError(ValueError):
    """Raised when a provider is not registered."""


def create_llm_client(
    provider: str,
    model: str | None = None,
    settings: Settings | None = None,
    **kwargs: object,
) -> BaseLLMClient:
    """Instantiate the correct adapter from provider name.

    Args:
        provider: Provider identifier (google/gemini, openai).
        model: Model name. Defaults to the model configured in settings.
        settings: Application settings (for API keys, models and timeout).
        **kwargs: Additional provider-specific arguments.

    Returns:
        Configured BaseLLMClient instance.

    Raises:
        UnsupportedProviderError: If provider is not registered.
    """
    provider = _PROVIDER_ALIASES.get(provider.lower(), provider.lower())
    if provider not in _PROVIDER_REGISTRY:
        raise UnsupportedProviderError(
            f"Unsupported LLM provider: {provider!r}. "
            f"Available: {', '.join(available_providers())}"
        )

    adapter_cls = _import_class(_PROVIDER_REGISTRY[provider])

    init_kwargs = dict(kwargs)
    if model:
        init_kwargs["model"] = model

    if settings is not None:
        init_kwargs.setdefault("timeout_s", settings.provider_timeout_s)
        if provider == "google":
            init_kwargs.setdefault("api_key", settings.google_api_key)
            init_kwargs.setdefault("model", settings.google_model)
        elif provider == "openai":
            init_kwargs.setdefault("api_key", settings.openai_api_key)
            init_kwargs.setdefault("model", settings.openai_model)

    logger.debug(
        "Creating LLM client: provider=%s, model=%s",
        provider, init_kwargs.get("model", "<default>"),
    )
    return adapter_cls(**init_kwargs)


def available_providers() -> list[str]:
    """Registered remote provider names."""
    return sorted(_PROVIDER_REGISTRY)


def _import_class(class_path: str) -> type:
    """Dynamically import a class from its fully qualified path."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
