"""LLM provider abstractions.

Design goals:
- Keep provider-specific SDKs isolated.
- Provide a small, stable interface for "prompt in, short text out" chat calls.
- Describe every provider with a ProviderSpec so callers can list and resolve them.
"""

from .base import LLMClient, LLMConfig, ProviderSpec
from .errors import LLMError, ProviderError
from .factory import build_llm, default_providers
from .types import LLMMessage, LLMResult

__all__ = [
    "LLMClient",
    "LLMConfig",
    "LLMError",
    "LLMMessage",
    "LLMResult",
    "ProviderError",
    "ProviderSpec",
    "build_llm",
    "default_providers",
]
