from dataclasses import dataclass, field


@dataclass(frozen=True)
class Service:
    title: str
    description: str = ""


@dataclass(frozen=True)
class Project:
    title: str
    description: str = ""
    category: str = ""
    highlights: list[str] = field(default_factory=list)
    image: str = ""
    link: str = ""


@dataclass(frozen=True)
class Testimonial:
    text: str
    author: str
    role: str = ""


@dataclass(frozen=True)
class EnrichedContent:
    """Marketing copy for one portfolio, as produced by the generator or the fallback."""

    hero_title: str
    hero_subtitle: str = ""
    hero_eyebrow: str = ""
    hero_cta: str = ""
    about_text: str = ""
    value_prop: str = ""
    services: list[Service] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    testimonials: list[Testimonial] = field(default_factory=list)
