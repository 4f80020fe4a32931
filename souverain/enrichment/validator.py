"""Validates the generator's parsed JSON and builds EnrichedContent."""

from typing import Any

from souverain.enrichment.exceptions import EnrichmentValidationError
from souverain.enrichment.models import EnrichedContent, Project, Service, Testimonial

_MAX_ITEMS = 50
_TEXT_FIELDS = ("heroSubtitle", "heroEyebrow", "heroCta", "aboutText", "valueProp")


def validate_and_build(data: dict[str, Any]) -> EnrichedContent:
    """Validate enrichment JSON (camelCase wire keys) and build EnrichedContent.

    Optional text fields may be missing or null. List fields may be missing
    but must be lists when present.

    Raises:
        EnrichmentValidationError: on any validation failure.
    """
    if not isinstance(data, dict):
        raise EnrichmentValidationError("Enrichment payload must be an object")
    hero_title = data.get("heroTitle")
    if not hero_title or not isinstance(hero_title, str):
        raise EnrichmentValidationError("'heroTitle' must be a non-empty string")
    texts = {name: _optional_text(data, name) for name in _TEXT_FIELDS}
    return EnrichedContent(
        hero_title=hero_title,
        hero_subtitle=texts["heroSubtitle"],
        hero_eyebrow=texts["heroEyebrow"],
        hero_cta=texts["heroCta"],
        about_text=texts["aboutText"],
        value_prop=texts["valueProp"],
        services=[_build_service(item, i) for i, item in enumerate(_list(data, "services"))],
        projects=[_build_project(item, i) for i, item in enumerate(_list(data, "projects"))],
        testimonials=[
            _build_testimonial(item, i) for i, item in enumerate(_list(data, "testimonials"))
        ],
    )


def _optional_text(raw: dict[str, Any], name: str, where: str = "") -> str:
    value = raw.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise EnrichmentValidationError(f"'{where}{name}' must be a string or null")
    return value


def _list(data: dict[str, Any], name: str) -> list[Any]:
    raw = data.get(name)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise EnrichmentValidationError(f"'{name}' must be a list")
    if len(raw) > _MAX_ITEMS:
        raise EnrichmentValidationError(f"Too many {name}: {len(raw)} (max {_MAX_ITEMS})")
    return raw


def _require_object(raw: Any, where: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise EnrichmentValidationError(f"'{where}' must be an object")
    return raw


def _require_text(raw: dict[str, Any], name: str, where: str) -> str:
    value = raw.get(name)
    if not value or not isinstance(value, str):
        raise EnrichmentValidationError(f"'{where}{name}' must be a non-empty string")
    return value


def _build_service(raw: Any, index: int) -> Service:
    where = f"services[{index}]."
    item = _require_object(raw, where.rstrip("."))
    return Service(
        title=_require_text(item, "title", where),
        description=_optional_text(item, "description", where),
    )


def _build_project(raw: Any, index: int) -> Project:
    where = f"projects[{index}]."
    item = _require_object(raw, where.rstrip("."))
    highlights = item.get("highlights")
    if highlights is None:
        highlights = []
    if not isinstance(highlights, list) or not all(isinstance(h, str) for h in highlights):
        raise EnrichmentValidationError(f"'{where}highlights' must be a list of strings")
    return Project(
        title=_require_text(item, "title", where),
        description=_optional_text(item, "description", where),
        category=_optional_text(item, "category", where),
        highlights=list(highlights),
    )


def _build_testimonial(raw: Any, index: int) -> Testimonial:
    where = f"testimonials[{index}]."
    item = _require_object(raw, where.rstrip("."))
    return Testimonial(
        text=_require_text(item, "text", where),
        author=_require_text(item, "author", where),
        role=_optional_text(item, "role", where),
    )
