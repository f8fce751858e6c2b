from typing import Optional

import pytest

from metatag_ai.content import ContentExtractor, ContentItem
from metatag_ai.gateway import AiProviderGateway
from metatag_ai.generate import MetaDescriptionGenerator
from metatag_ai.llm import LLMError, LLMMessage, LLMResult, ProviderSpec
from metatag_ai.settings import StaticSettingsSource


class FakeLLM:
    """Chat client stub: returns queued answers or raises a queued error."""

    def __init__(self, model: str, answers=None, error: Optional[Exception] = None):
        self.model = model
        self.answers = list(answers or ["A fine description."])
        self.error = error
        self.calls: list[list[LLMMessage]] = []

    def chat(self, *, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        text = self.answers.pop(0) if len(self.answers) > 1 else self.answers[0]
        return LLMResult(provider="fake", model=self.model, text=text)


class FakeProvider:
    """Provider registry entry that hands out one shared FakeLLM."""

    def __init__(self, *, configured: bool = True, loadable: bool = True, **llm_kwargs):
        self.configured = configured
        self.loadable = loadable
        self.llm_kwargs = llm_kwargs
        self.client: Optional[FakeLLM] = None

    def build(self, model: str) -> FakeLLM:
        if not self.loadable:
            raise LLMError("Missing env var FAKE_API_KEY")
        if self.client is None:
            self.client = FakeLLM(model, **self.llm_kwargs)
        return self.client

    def spec(self) -> ProviderSpec:
        return ProviderSpec(
            name="fake",
            label="Fake",
            builder=self.build,
            models=("fake-small", "fake-large"),
            is_configured=lambda: self.configured,
        )


@pytest.fixture
def settings_store():
    return {
        "enabled": True,
        "default_provider": "fake__fake-small",
        "persona": "",
        "enabled_bundles": [],
    }


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def make_provider():
    """Fixture: factory for FakeProvider with custom behavior."""
    return FakeProvider


@pytest.fixture
def article():
    return ContentItem(
        id="42",
        bundle="article",
        title="Test Article",
        body="<p>This is <strong>test content</strong> with HTML tags.</p>",
    )


@pytest.fixture
def make_generator(settings_store):
    def _factory(provider: Optional[FakeProvider] = None, renderer=None):
        providers = {"fake": provider.spec()} if provider is not None else {}
        return MetaDescriptionGenerator(
            gateway=AiProviderGateway(providers),
            extractor=ContentExtractor(renderer),
            settings_source=StaticSettingsSource(settings_store),
        )

    return _factory
