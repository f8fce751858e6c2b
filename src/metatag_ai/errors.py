"""Errors raised inside the generation pipeline.

Each error carries the user-facing message; the generator turns them into
``Failure`` results so none of them ever reach the host process.
"""

from metatag_ai.llm.errors import LLMError, ProviderError


class MetaGenerationError(RuntimeError):
    """Base error for metatag_ai."""

    default_message = "Meta description generation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(MetaGenerationError):
    """Feature disabled or no usable provider configured."""


class SettingsError(ConfigurationError):
    """Stored settings failed schema validation."""

    default_message = "AI meta description settings are invalid."


class ResolutionError(MetaGenerationError):
    default_message = "Configured AI provider is not available."


class ContentError(MetaGenerationError):
    default_message = "No content available to generate description from."


class ExtractionError(MetaGenerationError):
    """The render collaborator failed."""

    default_message = "Unable to extract content from this item."


class EmptyResponseError(MetaGenerationError):
    default_message = "AI returned an empty response."


class UnexpectedError(MetaGenerationError):
    """Catch-all. The underlying detail is logged, never shown."""

    default_message = "An unexpected error occurred."


__all__ = [
    "ConfigurationError",
    "ContentError",
    "EmptyResponseError",
    "ExtractionError",
    "LLMError",
    "MetaGenerationError",
    "ProviderError",
    "ResolutionError",
    "SettingsError",
    "UnexpectedError",
]
