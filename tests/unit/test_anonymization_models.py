import dataclasses

import pytest

from souverain.anonymization.models import (
    AnonymizationResult,
    DetectedSpan,
    MappingEntry,
    ObjectAnonymizationResult,
)


class TestDetectedSpan:
    def test_is_frozen(self) -> None:
        span = DetectedSpan("CITY", "Lyon", 0, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            span.matched_text = "Nice"  # type: ignore[misc]


class TestAnonymizationResult:
    def test_defaults(self) -> None:
        result = AnonymizationResult(anonymized_text="texte")
        assert result.mapping == ()
        assert result.stats_by_category == {}
        assert result.entity_map == {}

    def test_entity_map(self) -> None:
        result = AnonymizationResult(
            anonymized_text="CITY_001",
            mapping=(MappingEntry("CITY_001", "Lyon", "CITY"),),
            stats_by_category={"CITY": 1},
        )
        assert result.entity_map == {"CITY_001": "Lyon"}


class TestObjectAnonymizationResult:
    def test_entity_map(self) -> None:
        result = ObjectAnonymizationResult(
            anonymized_object={"a": "EMAIL_001"},
            mapping=(MappingEntry("EMAIL_001", "a@b.fr", "EMAIL"),),
        )
        assert result.entity_map == {"EMAIL_001": "a@b.fr"}
