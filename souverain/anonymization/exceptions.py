class AnonymizationError(Exception):
    """Raised when anonymization or restoration fails."""
