from typing import Any, ClassVar

from souverain.config.settings import Settings
from souverain.enrichment.base import BaseEnricher
from souverain.enrichment.enricher import Enricher
from souverain.enrichment.example_client_adapter import ExampleClientAdapter
from souverain.enrichment.openai_client_adapter import OpenAIClientAdapter


class EnricherFactory:
    """Creates the configured enrichment adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEnricher:
        """Create a configured enricher from application settings.

        Raises:
            ValueError: on an unknown provider or missing custom base URL.
        """
        provider = settings.enrichment_provider.strip().lower()
        if provider == "example":
            return Enricher(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                max_tokens=settings.enrichment_max_tokens,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, "api_key", settings) or "",
            timeout_seconds=cls._provider_setting(provider, "timeout_seconds", settings) or 30,
            base_url=base_url,
        )
        return Enricher(
            client=client,
            model=cls._provider_setting(provider, "model_name", settings) or "",
            temperature=settings.enrichment_temperature,
            max_tokens=settings.enrichment_max_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.enrichment_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "enrichment_openai_compatible_base_url is required for "
                    "enrichment_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown enrichment provider '{provider}'. Choose from: {supported}")

    @staticmethod
    def _provider_setting(provider: str, name: str, settings: Settings) -> Any:
        return getattr(settings, f"enrichment_{provider}_{name}")
