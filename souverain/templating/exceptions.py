class TemplateError(Exception):
    """Base exception for template handling."""


class TemplateLoadError(TemplateError):
    """Raised when a template is missing, unreadable or empty."""
