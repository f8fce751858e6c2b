from __future__ import annotations

import os

from metatag_ai import config

from .base import LLMClient, LLMConfig, ProviderSpec
from .errors import LLMError
from .openai_client import OpenAILLM


def _build_openai(model: str) -> LLMClient:
    return OpenAILLM(
        LLMConfig(
            provider="openai",
            model=model,
            api_key_env=config.OPENAI_API_KEY_ENV,
            timeout_s=config.LLM_TIMEOUT_S,
        )
    )


def default_providers() -> dict[str, ProviderSpec]:
    """Chat-capable providers known to this package.

    Providers:
    - openai

    Extend by adding new provider clients and mapping here.
    """

    return {
        "openai": ProviderSpec(
            name="openai",
            label="OpenAI",
            builder=_build_openai,
            models=tuple(config.OPENAI_MODELS),
            is_configured=lambda: bool(os.getenv(config.OPENAI_API_KEY_ENV)),
        ),
    }


def build_llm(*, provider: str, model: str) -> LLMClient:
    """Factory for provider clients."""

    p = provider.lower().strip()
    spec = default_providers().get(p)
    if spec is None:
        raise LLMError(f"Unknown LLM provider: {provider}")
    return spec.builder(model)
