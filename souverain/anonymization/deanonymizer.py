"""Inverse pass: placeholders back to original values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from souverain.anonymization.json_values import map_strings, to_plain_json
from souverain.anonymization.models import MappingEntry
from souverain.logging.logger import Log

EntityMapping = Iterable[MappingEntry] | Mapping[str, str]


class Deanonymizer:
    """Restores original values using the mapping of one anonymize call.

    The mapping is always passed in explicitly; nothing is looked up from
    shared state.
    """

    def restore(self, text: str, mapping: EntityMapping) -> str:
        """Replace every known placeholder in *text*, longest key first.

        Text without known placeholders is returned unchanged.
        """
        pairs = _as_pairs(mapping)
        if not text or not pairs:
            return text
        result = text
        for placeholder, original in sorted(pairs.items(), key=lambda p: len(p[0]), reverse=True):
            result = re.sub(
                rf"\b{re.escape(placeholder)}\b",
                lambda _m, value=original: value,
                result,
            )
        return result

    def restore_object(self, obj: Any, mapping: EntityMapping) -> Any:
        """Restore every string (keys included) of a JSON-compatible value.

        Raises:
            AnonymizationError: if *obj* is not JSON-compatible.
        """
        plain = to_plain_json(obj)
        pairs = _as_pairs(mapping)
        restored = map_strings(plain, lambda text: self.restore(text, pairs))
        Log.debug(f"Restored object using {len(pairs)} mapping entries")
        return restored


def _as_pairs(mapping: EntityMapping) -> dict[str, str]:
    if isinstance(mapping, Mapping):
        return {str(k): str(v) for k, v in mapping.items()}
    return {entry.placeholder: entry.original_value for entry in mapping}
