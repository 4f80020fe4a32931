class PortfolioError(Exception):
    """Base exception for all portfolio generation errors."""


class PortfolioInputError(PortfolioError):
    """Raised when the submitted form is missing required fields or is malformed."""
