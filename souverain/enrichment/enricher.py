"""AI-powered portfolio copywriter working on anonymized form data only."""

import json
import re
from pathlib import Path
from typing import Any

from souverain.enrichment.base import BaseEnricher
from souverain.enrichment.client_base import BaseEnrichmentClient
from souverain.enrichment.exceptions import EnrichmentError
from souverain.enrichment.prompt_loader import (
    load_json_schema,
    load_prompt_template,
    load_system_prompt,
)
from souverain.enrichment.validator import validate_and_build
from souverain.logging.logger import Log

# Opening or closing markdown code fence, with an optional language tag.
_FENCE_RE = re.compile(r"^```[a-zA-Z]*[ \t]*\n?|\n?```$")


class Enricher(BaseEnricher):
    """Turns an anonymized form payload into portfolio copy using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseEnrichmentClient,
        model: str,
        temperature: float = 0.4,
        max_tokens: int = 4000,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        try:
            self._json_schema_dict = json.loads(schema_str)
        except json.JSONDecodeError as exc:
            raise EnrichmentError(f"Invalid JSON schema file: {exc}") from exc

    @property
    def temperature(self) -> float:
        return self._temperature

    def enrich(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Single provider call; no retry. Returns validated, still-anonymized JSON."""
        prompt = self._build_prompt(payload)
        Log.debug(f"Enrichment prompt: {len(prompt)} chars")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response: {len(raw_response)} chars")

        parsed = self._parse_json(raw_response)
        content = validate_and_build(parsed)

        Log.info(
            "Enrichment complete",
            services=len(content.services),
            projects=len(content.projects),
            testimonials=len(content.testimonials),
        )
        return parsed

    def _build_prompt(self, payload: dict[str, Any]) -> str:
        return self._prompt_template.format(
            form_json=json.dumps(payload, ensure_ascii=False, indent=2),
            json_schema=self._json_schema,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, Any]:
        cleaned = _FENCE_RE.sub("", raw.strip()).strip()
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise EnrichmentError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise EnrichmentError("JSON response must be an object")
        return parsed
