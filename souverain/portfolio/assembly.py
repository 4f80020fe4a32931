from dataclasses import replace

from souverain.enrichment.models import EnrichedContent
from souverain.portfolio.models import Portfolio, PortfolioForm


def assemble(content: EnrichedContent, form: PortfolioForm) -> Portfolio:
    """Merge restored copy with the form fields the copywriter never sees.

    The hero title is always the submitted name. Project images and links
    are matched by position. Submitted testimonials are kept when the copy
    has none.
    """
    projects = [
        replace(
            project,
            image=form.projects[i].image if i < len(form.projects) else project.image,
            link=form.projects[i].link if i < len(form.projects) else project.link,
        )
        for i, project in enumerate(content.projects)
    ]
    testimonials = content.testimonials or list(form.testimonials)
    merged = replace(
        content,
        hero_title=form.name,
        projects=projects,
        testimonials=testimonials,
    )
    return Portfolio(
        content=merged,
        email=form.email,
        tagline=form.tagline,
        phone=form.phone,
        address=form.address,
        opening_hours=form.opening_hours,
        social_links=list(form.social_links),
        social_is_main=form.social_is_main,
        about_image=form.about_image,
    )
