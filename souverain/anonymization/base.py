from abc import ABC, abstractmethod
from typing import Any

from souverain.anonymization.models import AnonymizationResult, ObjectAnonymizationResult


class BaseAnonymizer(ABC):
    """Contract for all anonymization adapters."""

    @abstractmethod
    def anonymize(self, text: str, scope_id: str | None = None) -> AnonymizationResult:
        """Replace sensitive spans in text with type-tagged placeholders.

        Args:
            text: Arbitrary UTF-8 text.
            scope_id: Opaque caller identifier, used for logging only.

        Returns:
            AnonymizationResult with anonymized text, mapping and stats.

        Raises:
            AnonymizationError: on any failure.
        """

    @abstractmethod
    def anonymize_object(
        self,
        obj: Any,
        scope_id: str | None = None,
    ) -> ObjectAnonymizationResult:
        """Anonymize a JSON-compatible value through its serialized form.

        Raises:
            AnonymizationError: on any failure.
        """
