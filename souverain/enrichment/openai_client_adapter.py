import httpx
import openai

from souverain.enrichment.client_base import BaseEnrichmentClient
from souverain.enrichment.exceptions import EnrichmentError, EnrichmentNetworkError


class OpenAIClientAdapter(BaseEnrichmentClient):
    """Enrichment client for any OpenAI-compatible chat endpoint (Groq, OpenRouter, Ollama...)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        schema_name: str = "enriched_portfolio",
    ) -> None:
        # One attempt only: a failed call goes straight to the fallback copy.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._schema_name = schema_name

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
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format=self._response_format(json_schema),
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise EnrichmentNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise EnrichmentNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise EnrichmentError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "length":
            raise EnrichmentError(f"AI response truncated at max_tokens={max_tokens}")
        if not choice.message.content:
            raise EnrichmentError("AI returned empty response")
        return choice.message.content

    def _response_format(self, json_schema: dict[str, object]) -> dict[str, object]:
        return {
            "type": "json_schema",
            "json_schema": {"name": self._schema_name, "strict": True, "schema": json_schema},
        }
