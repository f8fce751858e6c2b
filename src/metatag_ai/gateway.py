from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from metatag_ai import config
from metatag_ai import logger as logger_mod
from metatag_ai.llm import (
    LLMClient,
    LLMError,
    LLMMessage,
    ProviderSpec,
    default_providers,
)
from metatag_ai.settings import GenerationSettings

log = logger_mod.get_logger()


@dataclass(frozen=True)
class ProviderConfig:
    """Provider/model pair selected in settings.

    ``provider_id`` is None exactly when no default provider is selected.
    """

    provider_id: Optional[str]
    model_id: str = ""


def parse_provider_option(option: str) -> ProviderConfig:
    """Split a ``"<provider>__<model>"`` option into its parts."""
    option = (option or "").strip()
    if not option:
        return ProviderConfig(provider_id=None, model_id="")
    provider_id, _, model_id = option.partition(config.PROVIDER_OPTION_SEP)
    return ProviderConfig(provider_id=provider_id.strip(), model_id=model_id.strip())


class AiProviderGateway:
    """Resolve the configured chat provider and run chat calls through it."""

    def __init__(self, providers: Optional[Mapping[str, ProviderSpec]] = None) -> None:
        self._providers = dict(providers) if providers is not None else default_providers()

    def _configured_specs(self) -> list[ProviderSpec]:
        specs = []
        for spec in self._providers.values():
            try:
                if spec.is_configured():
                    specs.append(spec)
            except Exception as e:  # noqa: BLE001
                log.warning(f"Provider {spec.name} configuration check failed: {e}")
        return specs

    def has_chat_providers(self) -> bool:
        return bool(self._configured_specs())

    def provider_options(self) -> dict[str, str]:
        """Option value -> label for every configured provider/model pair."""
        options: dict[str, str] = {}
        for spec in self._configured_specs():
            for model in spec.models:
                option = f"{spec.name}{config.PROVIDER_OPTION_SEP}{model}"
                options[option] = f"{spec.label} - {model}"
        return options

    def get_configured_provider(self, settings: GenerationSettings) -> ProviderConfig:
        cfg = parse_provider_option(settings.provider_option)
        if cfg.provider_id is None or cfg.model_id:
            return cfg

        spec = self._providers.get(cfg.provider_id)
        if spec is not None and spec.models:
            return ProviderConfig(provider_id=cfg.provider_id, model_id=spec.models[0])
        return cfg

    def load_provider(self, provider_config: ProviderConfig) -> Optional[LLMClient]:
        """Build the client for ``provider_config`` or return None if unavailable."""
        if provider_config.provider_id is None:
            return None

        spec = self._providers.get(provider_config.provider_id)
        if spec is None:
            log.warning(f"Unknown AI provider: {provider_config.provider_id}")
            return None
        if not provider_config.model_id:
            log.warning(f"No model selected for provider {spec.name}")
            return None

        try:
            return spec.builder(provider_config.model_id)
        except LLMError as e:
            log.warning(f"AI provider {spec.name} could not be loaded: {e}")
            return None

    def chat(
        self,
        client: LLMClient,
        user_prompt: str,
        system_prompt: str = "",
        model_id: str = "",
    ) -> str:
        messages: list[LLMMessage] = []
        if system_prompt:
            messages.append(LLMMessage(role="system", content=system_prompt))
        messages.append(LLMMessage(role="user", content=user_prompt))

        log.info(f"Sending chat request (model={model_id or 'default'})")
        result = client.chat(messages=messages)
        return result.text
