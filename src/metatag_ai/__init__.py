"""AI generated SEO meta descriptions for content items.

    from metatag_ai import ContentItem, MetaDescriptionGenerator

    gen = MetaDescriptionGenerator.from_env()
    result = gen.generate(ContentItem(id="1", bundle="article", title="...", body="<p>...</p>"))
    if result.ok:
        print(result.description)
"""

from .content import ContentExtractor, ContentItem
from .gateway import AiProviderGateway, ProviderConfig
from .generate import (
    Failure,
    GenerateRequestHandler,
    GenerationResult,
    MetaDescriptionGenerator,
    Success,
    post_process,
)
from .settings import GenerationSettings, StaticSettingsSource

__all__ = [
    "AiProviderGateway",
    "ContentExtractor",
    "ContentItem",
    "Failure",
    "GenerateRequestHandler",
    "GenerationResult",
    "GenerationSettings",
    "MetaDescriptionGenerator",
    "ProviderConfig",
    "StaticSettingsSource",
    "Success",
    "post_process",
]
