"""Flattens a Portfolio into the marker names templates use.

Several markers are aliases of the same value (``NAME``/``HERO_TITLE``,
``EMAIL``/``CONTACT_EMAIL``...) so older templates keep rendering.
"""

from typing import Any

from souverain.portfolio.fallback import DEFAULT_CTA
from souverain.portfolio.models import Portfolio

_HIGHLIGHT_SEPARATOR = " · "


def to_template_data(portfolio: Portfolio) -> dict[str, Any]:
    content = portfolio.content
    return {
        "HERO_TITLE": content.hero_title,
        "NAME": content.hero_title,
        "HERO_SUBTITLE": content.hero_subtitle,
        "TAGLINE": content.hero_subtitle,
        "META_DESCRIPTION": portfolio.tagline or content.hero_subtitle,
        "HERO_EYEBROW": content.hero_eyebrow,
        "HERO_CTA_TEXT": content.hero_cta or DEFAULT_CTA,
        "ABOUT_TEXT": content.about_text,
        "ABOUT_IMAGE": portfolio.about_image,
        "VALUE_PROP": content.value_prop,
        "CONTACT_EMAIL": portfolio.email,
        "EMAIL": portfolio.email,
        "CONTACT_PHONE": portfolio.phone,
        "PHONE": portfolio.phone,
        "CONTACT_ADDRESS": portfolio.address,
        "ADDRESS": portfolio.address,
        "OPENING_HOURS": portfolio.opening_hours,
        "services": [
            {
                "SERVICE_TITLE": service.title,
                "SERVICE_DESC": service.description,
                "SERVICE_DESCRIPTION": service.description,
            }
            for service in content.services
        ],
        "projects": [
            {
                "PROJECT_TITLE": project.title,
                "PROJECT_DESC": project.description,
                "PROJECT_DESCRIPTION": project.description,
                "PROJECT_IMAGE": project.image,
                "PROJECT_CATEGORY": project.category,
                "PROJECT_LINK": project.link or "#",
                "PROJECT_HIGHLIGHTS": _HIGHLIGHT_SEPARATOR.join(project.highlights),
            }
            for project in content.projects
        ],
        "testimonials": [
            {
                "TESTIMONIAL_TEXT": testimonial.text,
                "TESTIMONIAL_AUTHOR": testimonial.author,
                "TESTIMONIAL_ROLE": testimonial.role,
            }
            for testimonial in content.testimonials
        ],
        "socialLinks": [
            {
                "SOCIAL_PLATFORM": link.platform,
                "SOCIAL_URL": link.url,
                "SOCIAL_LABEL": link.label or link.platform[:1].upper() + link.platform[1:],
            }
            for link in portfolio.social_links
        ],
    }
