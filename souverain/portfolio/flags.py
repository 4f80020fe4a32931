from souverain.portfolio.models import Portfolio


def compute_flags(portfolio: Portfolio) -> dict[str, bool]:
    """Boolean conditions driving the template's IF zones."""
    content = portfolio.content
    return {
        "showPracticalInfo": bool(portfolio.address or portfolio.opening_hours),
        "showSocialShowcase": portfolio.social_is_main,
        "showServices": bool(content.services),
        "showProjects": bool(content.projects),
        "showTestimonials": bool(content.testimonials),
        "showSocialLinks": bool(portfolio.social_links),
        "hasPhone": bool(portfolio.phone),
        "hasAddress": bool(portfolio.address),
        "hasOpeningHours": bool(portfolio.opening_hours),
        "hasValueProp": bool(content.value_prop),
        "hasAboutImage": bool(portfolio.about_image),
    }
