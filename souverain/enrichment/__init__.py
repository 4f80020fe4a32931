from souverain.enrichment.base import BaseEnricher
from souverain.enrichment.enricher import Enricher
from souverain.enrichment.exceptions import (
    EnrichmentError,
    EnrichmentNetworkError,
    EnrichmentValidationError,
)
from souverain.enrichment.factory import EnricherFactory

__all__ = [
    "BaseEnricher",
    "Enricher",
    "EnricherFactory",
    "EnrichmentError",
    "EnrichmentNetworkError",
    "EnrichmentValidationError",
]
