from souverain.enrichment.models import EnrichedContent, Project, Service
from souverain.portfolio.models import PortfolioForm

DEFAULT_CTA = "Me contacter"


def fallback_content(form: PortfolioForm) -> EnrichedContent:
    """Deterministic copy built from the form alone, used when enrichment fails."""
    return EnrichedContent(
        hero_title=form.name,
        hero_subtitle=form.tagline,
        hero_eyebrow="Freelance" if form.profile_type == "freelance" else "",
        hero_cta=DEFAULT_CTA,
        about_text=form.value_prop or form.tagline,
        value_prop=form.value_prop,
        services=[Service(title=title) for title in form.services],
        projects=[
            Project(
                title=project.title,
                description=project.description,
                category=project.category,
            )
            for project in form.projects
        ],
        testimonials=list(form.testimonials),
    )
