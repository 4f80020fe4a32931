"""Offline enrichment client.

Returns fixed, placeholder-bearing content without any network call. Useful
for local development, tests, and as a reference for new provider adapters:
implement BaseEnrichmentClient and register the provider in EnricherFactory.
"""

import json
from typing import ClassVar

from souverain.enrichment.client_base import BaseEnrichmentClient


class ExampleClientAdapter(BaseEnrichmentClient):
    """Adapter that always answers with the same valid enrichment JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "heroTitle": "PERSON_001",
        "heroSubtitle": "Accompagnement sur mesure, de l'idée à la mise en ligne.",
        "heroEyebrow": "Freelance",
        "heroCta": "Me contacter",
        "aboutText": "PERSON_001 accompagne ses clients depuis CITY_001.",
        "valueProp": "Des livrables clairs, des délais tenus.",
        "services": [],
        "projects": [],
        "testimonials": [],
    }

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
        _ = model, temperature, max_tokens, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)
