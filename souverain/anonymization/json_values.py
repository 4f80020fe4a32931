import json
from collections.abc import Callable
from typing import Any

from souverain.anonymization.exceptions import AnonymizationError


def to_plain_json(obj: Any) -> Any:
    """Serialize and re-parse *obj* so only plain JSON types remain.

    Raises:
        AnonymizationError: if *obj* is not JSON-compatible.
    """
    try:
        return json.loads(json.dumps(obj, ensure_ascii=False))
    except (TypeError, ValueError) as exc:
        raise AnonymizationError(f"Value is not JSON-compatible: {exc}") from exc


def iter_strings(value: Any) -> list[str]:
    """Collect every string of a parsed JSON value (keys included) in document order."""
    found: list[str] = []
    if isinstance(value, str):
        found.append(value)
    elif isinstance(value, dict):
        for key, item in value.items():
            found.append(key)
            found.extend(iter_strings(item))
    elif isinstance(value, list):
        for item in value:
            found.extend(iter_strings(item))
    return found


def map_strings(value: Any, transform: Callable[[str], str]) -> Any:
    """Rebuild a parsed JSON value with *transform* applied to every string."""
    if isinstance(value, str):
        return transform(value)
    if isinstance(value, dict):
        return {transform(key): map_strings(item, transform) for key, item in value.items()}
    if isinstance(value, list):
        return [map_strings(item, transform) for item in value]
    return value
