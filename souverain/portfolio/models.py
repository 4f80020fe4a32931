from dataclasses import dataclass, field

from souverain.enrichment.models import EnrichedContent, Testimonial


@dataclass(frozen=True)
class SocialLink:
    platform: str
    url: str
    label: str = ""


@dataclass(frozen=True)
class ProjectInput:
    title: str
    description: str = ""
    image: str = ""
    category: str = ""
    link: str = ""


@dataclass(frozen=True)
class SourceDocument:
    """Text extracted from an uploaded document, optionally tied to a project title."""

    filename: str
    content: str
    project: str = ""


@dataclass(frozen=True)
class PortfolioForm:
    """What the user submitted. Contains real, non-anonymized values."""

    name: str
    email: str
    profile_type: str = "freelance"
    tagline: str = ""
    services: list[str] = field(default_factory=list)
    value_prop: str = ""
    phone: str = ""
    address: str = ""
    opening_hours: str = ""
    social_links: list[SocialLink] = field(default_factory=list)
    social_is_main: bool = False
    projects: list[ProjectInput] = field(default_factory=list)
    testimonials: list[Testimonial] = field(default_factory=list)
    about_image: str = ""
    linkedin_data: str = ""
    notion_data: str = ""
    documents: list[SourceDocument] = field(default_factory=list)


@dataclass(frozen=True)
class Portfolio:
    """Restored copy plus the fields re-injected from the form, ready to render."""

    content: EnrichedContent
    email: str
    tagline: str = ""
    phone: str = ""
    address: str = ""
    opening_hours: str = ""
    social_links: list[SocialLink] = field(default_factory=list)
    social_is_main: bool = False
    about_image: str = ""


@dataclass(frozen=True)
class GenerationResult:
    html: str
    enrichment_source: str  # "ai" or "fallback"
    anonymized_entities: int
    stats_by_category: dict[str, int] = field(default_factory=dict)
    error: str | None = None
