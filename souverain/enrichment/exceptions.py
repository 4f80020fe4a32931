class EnrichmentError(Exception):
    """Raised when content enrichment fails."""


class EnrichmentValidationError(EnrichmentError):
    """Raised when the generator's JSON does not match the expected shape."""


class EnrichmentNetworkError(EnrichmentError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
