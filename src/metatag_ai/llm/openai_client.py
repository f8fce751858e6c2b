from __future__ import annotations

import os
from typing import Any

from metatag_ai import logger as logger_mod

from .base import LLMClient, LLMConfig
from .errors import LLMError, ProviderError
from .types import LLMMessage, LLMResult

log = logger_mod.get_logger()


class OpenAILLM(LLMClient):
    """OpenAI chat completions wrapper.

    The SDK is imported lazily so the package works without the ``llm`` extra
    until an OpenAI provider is actually selected.
    """

    def __init__(self, config: LLMConfig):
        self._cfg = config
        api_key = os.getenv(config.api_key_env)
        if not api_key:
            raise LLMError(f"Missing env var {config.api_key_env} for OpenAI API key")

        try:
            from openai import OpenAI, OpenAIError  # type: ignore
        except Exception as e:  # noqa: BLE001
            raise LLMError(
                "openai SDK not installed. Add dependency 'openai' or install metatag-ai-generate with the llm extra."
            ) from e

        self._client = OpenAI(api_key=api_key)
        self._sdk_error = OpenAIError

    @property
    def model(self) -> str:
        return self._cfg.model

    def _extract_output_text(self, resp: Any) -> str:
        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderError("Unable to extract text from OpenAI response") from e
        return (content or "").strip()

    def chat(self, *, messages: list[LLMMessage]) -> LLMResult:
        log.debug(
            "OpenAI chat request model=%s messages=%d", self._cfg.model, len(messages)
        )
        try:
            resp = self._client.chat.completions.create(
                model=self._cfg.model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                timeout=self._cfg.timeout_s,
            )
        except self._sdk_error as e:
            raise ProviderError(str(e)) from e

        text = self._extract_output_text(resp)
        return LLMResult(provider=self._cfg.provider, model=self._cfg.model, text=text)
