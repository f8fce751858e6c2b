class LLMError(RuntimeError):
    pass


class ProviderError(LLMError):
    """Raised when the upstream chat request fails or returns nothing readable."""
