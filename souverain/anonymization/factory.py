from souverain.anonymization.anonymizer import Anonymizer
from souverain.anonymization.base import BaseAnonymizer
from souverain.anonymization.detectors import rules_for
from souverain.config.settings import Settings


class AnonymizerFactory:
    """Creates the configured anonymizer adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseAnonymizer:
        """Create an anonymizer restricted to the configured categories.

        Raises:
            ValueError: on an unknown category name.
        """
        categories = settings.anonymization_categories.split(",")
        return Anonymizer(rules=rules_for(categories))
