from __future__ import annotations

from typing import Optional

from metatag_ai import logger as logger_mod
from metatag_ai.content import ContentExtractor, Renderable
from metatag_ai.errors import (
    ConfigurationError,
    ContentError,
    EmptyResponseError,
    MetaGenerationError,
    ResolutionError,
    UnexpectedError,
)
from metatag_ai.gateway import AiProviderGateway
from metatag_ai.llm import ProviderError
from metatag_ai.settings import GenerationSettings, SettingsSource, settings_from_env

from .postprocess import post_process
from .prompts import build_prompts
from .result import Failure, GenerationResult, Success

log = logger_mod.get_logger()


class MetaDescriptionGenerator:
    """Generate an SEO meta description for a content item.

    Every call re-reads settings and re-invokes the provider, so calling
    ``generate`` again for the same item is how "regenerate" works.

    Data contract:
    - never raises; every failure comes back as ``Failure`` with a
      user-facing message
    - ``Success.description`` is at most 200 characters
    """

    def __init__(
        self,
        *,
        gateway: AiProviderGateway,
        extractor: ContentExtractor,
        settings_source: SettingsSource = settings_from_env,
    ) -> None:
        self._gateway = gateway
        self._extractor = extractor
        self._settings_source = settings_source

    @classmethod
    def from_env(
        cls, *, settings_source: Optional[SettingsSource] = None
    ) -> "MetaDescriptionGenerator":
        return cls(
            gateway=AiProviderGateway(),
            extractor=ContentExtractor(),
            settings_source=settings_source or settings_from_env,
        )

    def settings(self) -> GenerationSettings:
        return self._settings_source()

    def generate(self, item: Renderable) -> GenerationResult:
        try:
            return Success(self._generate(item))
        except ProviderError as e:
            log.error(f"AI request error: {e}")
            return Failure(f"AI request failed: {e}")
        except MetaGenerationError as e:
            log.info(f"Meta description not generated for item {item.id}: {e}")
            return Failure(str(e))
        except Exception as e:  # noqa: BLE001
            log.error(
                f"Unexpected error during meta description generation: {e}",
                exc_info=True,
            )
            return Failure(str(UnexpectedError()))

    def _generate(self, item: Renderable) -> str:
        settings = self.settings()

        if not settings.enabled:
            raise ConfigurationError("AI meta description generation is disabled.")

        if not self._gateway.has_chat_providers():
            raise ConfigurationError("No AI provider configured for chat.")

        provider_config = self._gateway.get_configured_provider(settings)
        if provider_config.provider_id is None:
            raise ConfigurationError("No default AI provider configured.")

        client = self._gateway.load_provider(provider_config)
        if client is None:
            raise ResolutionError()

        text = self._extractor.extract_text(item)
        if not text:
            raise ContentError()

        prompts = build_prompts(settings.effective_persona, text)
        log.info(
            f"Generating meta description for item {item.id} "
            f"({len(text)} chars of content, provider={provider_config.provider_id})"
        )
        raw = self._gateway.chat(
            client, prompts.user, prompts.system, provider_config.model_id
        )

        description = post_process(raw)
        if not description:
            raise EmptyResponseError()

        log.info(f"Generated meta description ({len(description)} chars)")
        return description
