from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from .types import LLMMessage, LLMResult


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    model: str
    api_key_env: str
    timeout_s: float = 60.0


class LLMClient(Protocol):
    """Small interface for "prompt -> short text" chat tasks."""

    def chat(self, *, messages: list[LLMMessage]) -> LLMResult:
        raise NotImplementedError


@dataclass(frozen=True)
class ProviderSpec:
    """A chat-capable provider the gateway can resolve.

    ``builder`` receives a model id and returns a ready client; it may raise
    ``LLMError`` (missing credentials, SDK not installed).
    """

    name: str
    label: str
    builder: Callable[[str], LLMClient]
    models: tuple[str, ...] = field(default_factory=tuple)
    is_configured: Callable[[], bool] = lambda: True
