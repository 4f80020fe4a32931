"""Builds PortfolioForm from the UI's camelCase JSON and back into the enrichment payload."""

from collections.abc import Mapping
from typing import Any

from souverain.enrichment.models import Testimonial
from souverain.portfolio.exceptions import PortfolioInputError
from souverain.portfolio.models import PortfolioForm, ProjectInput, SocialLink, SourceDocument

_MAX_DOCUMENT_CHARS = 3000


def build_form(raw: Mapping[str, Any]) -> PortfolioForm:
    """Validate raw form JSON and build a PortfolioForm.

    Raises:
        PortfolioInputError: when ``name`` or ``email`` is missing, or a
            field has the wrong shape.
    """
    if not isinstance(raw, Mapping):
        raise PortfolioInputError("Form must be a JSON object")
    name = _text(raw, "name").strip()
    email = _text(raw, "email").strip()
    if not name:
        raise PortfolioInputError("'name' is required")
    if not email:
        raise PortfolioInputError("'email' is required")

    services = _items(raw, "services")
    if not all(isinstance(s, str) for s in services):
        raise PortfolioInputError("'services' must be a list of strings")

    return PortfolioForm(
        name=name,
        email=email,
        profile_type=_text(raw, "profileType") or "freelance",
        tagline=_text(raw, "tagline"),
        services=[s.strip() for s in services if s.strip()],
        value_prop=_text(raw, "valueProp"),
        phone=_text(raw, "phone"),
        address=_text(raw, "address"),
        opening_hours=_text(raw, "openingHours"),
        social_links=[
            SocialLink(
                platform=_text(item, "platform"),
                url=_text(item, "url"),
                label=_text(item, "label"),
            )
            for item in _objects(raw, "socialLinks")
            if _text(item, "url")
        ],
        social_is_main=bool(raw.get("socialIsMain", False)),
        projects=[
            ProjectInput(
                title=_text(item, "title"),
                description=_text(item, "description"),
                image=_text(item, "image"),
                category=_text(item, "category"),
                link=_text(item, "link"),
            )
            for item in _objects(raw, "projects")
            if _text(item, "title")
        ],
        testimonials=[
            Testimonial(
                text=_text(item, "text"),
                author=_text(item, "author"),
                role=_text(item, "role"),
            )
            for item in _objects(raw, "testimonials")
            if _text(item, "text")
        ],
        about_image=_text(raw, "aboutImage"),
        linkedin_data=_text(raw, "linkedInData"),
        notion_data=_text(raw, "notionData"),
        documents=[
            SourceDocument(
                filename=_text(item, "filename"),
                content=_text(item, "content"),
                project=_text(item, "project"),
            )
            for item in _objects(raw, "documents")
            if _text(item, "content")
        ],
    )


def enrichment_payload(form: PortfolioForm) -> dict[str, Any]:
    """The subset of the form the copywriter needs, in wire (camelCase) form.

    Contact details, images and links are left out: they are re-injected
    after enrichment and never need to leave the process.
    """
    return {
        "name": form.name,
        "profileType": form.profile_type,
        "tagline": form.tagline,
        "services": list(form.services),
        "valueProp": form.value_prop,
        "projects": [
            {
                "title": project.title,
                "description": project.description,
                "category": project.category,
                "documents": [
                    doc.content[:_MAX_DOCUMENT_CHARS]
                    for doc in form.documents
                    if doc.project and doc.project == project.title
                ],
            }
            for project in form.projects
        ],
        "testimonials": [
            {"text": t.text, "author": t.author, "role": t.role} for t in form.testimonials
        ],
        "linkedInData": form.linkedin_data,
        "notionData": form.notion_data,
        "documents": [
            {"filename": doc.filename, "content": doc.content[:_MAX_DOCUMENT_CHARS]}
            for doc in form.documents
            if not doc.project
        ],
    }


def _text(raw: Mapping[str, Any], name: str) -> str:
    value = raw.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PortfolioInputError(f"'{name}' must be a string")
    return value


def _items(raw: Mapping[str, Any], name: str) -> list[Any]:
    value = raw.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise PortfolioInputError(f"'{name}' must be a list")
    return value


def _objects(raw: Mapping[str, Any], name: str) -> list[Mapping[str, Any]]:
    items = _items(raw, name)
    if not all(isinstance(item, Mapping) for item in items):
        raise PortfolioInputError(f"'{name}' must be a list of objects")
    return items
