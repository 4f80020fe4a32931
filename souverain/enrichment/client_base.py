from abc import ABC, abstractmethod


class BaseEnrichmentClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the provider's reply as plain text.

        Raises:
            EnrichmentNetworkError: on transport or provider API failure.
            EnrichmentError: when the provider returns no usable content.
        """
