"""Reversible, regex-driven anonymizer.

Processing flow for one call:
1. Create a fresh sequence-counter context (never reused across calls).
2. Run every detection rule over the full text, independently.
3. Mint one placeholder per detected occurrence and record the mapping.
4. Substitute original values with placeholders, longest value first,
   case-insensitively and delimited by non-word boundaries.
5. Return anonymized text, mapping and per-category counts.

Duplicate values: when a literal value was detected more than once, every
occurrence is replaced by the placeholder minted first for that exact
value. Later entries for the same value stay in the mapping (harmless on
restore) but never appear in the anonymized text.

Case variants: a case-insensitive match whose exact text was not detected
mints a fresh placeholder of the same category, so it restores in its own
casing.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from souverain.anonymization.base import BaseAnonymizer
from souverain.anonymization.detectors import DEFAULT_RULES, DetectionRule
from souverain.anonymization.exceptions import AnonymizationError
from souverain.anonymization.json_values import iter_strings, map_strings, to_plain_json
from souverain.anonymization.models import (
    AnonymizationResult,
    DetectedSpan,
    ObjectAnonymizationResult,
)
from souverain.anonymization.token_mapper import SequenceCounters, TokenMapper
from souverain.logging.logger import Log


class _Substitution:
    """Longest-first, case-insensitive replacement of mapped values."""

    def __init__(self, mapper: TokenMapper) -> None:
        self._mapper = mapper
        entries = mapper.entries
        self._first_placeholder: dict[str, str] = {}
        for entry in entries:
            self._first_placeholder.setdefault(entry.original_value, entry.placeholder)

        # sorted() is stable: equal lengths keep minting order.
        ordered = sorted(entries, key=lambda e: len(e.original_value), reverse=True)
        self._rules: list[tuple[re.Pattern[str], str]] = [
            (
                re.compile(
                    rf"(?<!\w){re.escape(entry.original_value)}(?!\w)",
                    re.IGNORECASE,
                ),
                entry.category,
            )
            for entry in ordered
            if entry.original_value.strip()
        ]

    def apply(self, text: str) -> str:
        result = text
        for pattern, category in self._rules:
            result = pattern.sub(lambda m, cat=category: self._placeholder(m, cat), result)
        return result

    def _placeholder(self, match: re.Match[str], category: str) -> str:
        value = match.group(0)
        placeholder = self._first_placeholder.get(value)
        if placeholder is None:
            span = DetectedSpan(category, value, match.start(), match.end())
            placeholder = self._mapper.map_span(span).placeholder
            self._first_placeholder[value] = placeholder
        return placeholder


class Anonymizer(BaseAnonymizer):
    """Deterministic anonymizer over a set of declarative detection rules."""

    def __init__(self, rules: Sequence[DetectionRule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(rule.category for rule in self._rules)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(self, text: str, scope_id: str | None = None) -> AnonymizationResult:
        """Replace detected entities in *text* with placeholders."""
        try:
            return self._run(text, scope_id)
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Anonymization failed: {exc}") from exc

    def anonymize_object(
        self,
        obj: Any,
        scope_id: str | None = None,
    ) -> ObjectAnonymizationResult:
        """Anonymize every string (keys included) of a JSON-compatible value.

        The value is serialized and re-parsed first so only plain JSON types
        remain. All strings share one counter context and one mapping, so a
        placeholder is unique across the whole object.
        """
        try:
            return self._run_object(obj, scope_id)
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Object anonymization failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _run(self, text: str, scope_id: str | None) -> AnonymizationResult:
        mapper = TokenMapper(SequenceCounters())
        if not text:
            return AnonymizationResult(anonymized_text=text)

        mapper.map_spans(self._detect(text))
        if not mapper.entries:
            Log.debug("No entities detected", scope=scope_id)
            return AnonymizationResult(anonymized_text=text)

        anonymized = _Substitution(mapper).apply(text)
        stats = mapper.stats_by_category()
        Log.info(f"Anonymized {len(mapper.entries)} entities", scope=scope_id, **stats)
        return AnonymizationResult(
            anonymized_text=anonymized,
            mapping=mapper.entries,
            stats_by_category=stats,
        )

    def _run_object(self, obj: Any, scope_id: str | None) -> ObjectAnonymizationResult:
        plain = to_plain_json(obj)

        mapper = TokenMapper(SequenceCounters())
        for text in iter_strings(plain):
            mapper.map_spans(self._detect(text))

        if not mapper.entries:
            Log.debug("No entities detected in object", scope=scope_id)
            return ObjectAnonymizationResult(anonymized_object=plain)

        substitution = _Substitution(mapper)
        anonymized = map_strings(plain, substitution.apply)
        stats = mapper.stats_by_category()
        Log.info(f"Anonymized {len(mapper.entries)} entities in object", scope=scope_id, **stats)
        return ObjectAnonymizationResult(
            anonymized_object=anonymized,
            mapping=mapper.entries,
            stats_by_category=stats,
        )

    def _detect(self, text: str) -> list[DetectedSpan]:
        spans: list[DetectedSpan] = []
        for rule in self._rules:
            spans.extend(rule.detect(text))
        return spans

