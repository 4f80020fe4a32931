from abc import ABC, abstractmethod
from typing import Any


class BaseEnricher(ABC):
    """Contract for all enrichment adapters."""

    @abstractmethod
    def enrich(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Turn an anonymized form payload into enriched portfolio content.

        Args:
            payload: Anonymized, JSON-compatible form data. Placeholders such
                as PERSON_001 must be passed through untouched.

        Returns:
            Validated wire JSON (camelCase keys), still anonymized.

        Raises:
            EnrichmentError: on any failure. The caller owns the fallback.
        """
