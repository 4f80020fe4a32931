from souverain.anonymization.anonymizer import Anonymizer
from souverain.anonymization.base import BaseAnonymizer
from souverain.anonymization.deanonymizer import Deanonymizer
from souverain.anonymization.factory import AnonymizerFactory

__all__ = ["Anonymizer", "AnonymizerFactory", "BaseAnonymizer", "Deanonymizer"]
