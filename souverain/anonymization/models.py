from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DetectedSpan:
    """A match produced by a single detection rule."""

    category: str  # e.g. "PERSON", "EMAIL"
    matched_text: str
    start_offset: int
    end_offset: int  # exclusive


@dataclass(frozen=True)
class MappingEntry:
    """Single placeholder -> original value record."""

    placeholder: str  # e.g. "PERSON_001"
    original_value: str
    category: str


@dataclass(frozen=True)
class AnonymizationResult:
    """Output of one anonymize call.

    The mapping is the only channel through which original values can be
    recovered; it is handed explicitly to the deanonymizer.
    """

    anonymized_text: str
    mapping: tuple[MappingEntry, ...] = ()
    stats_by_category: dict[str, int] = field(default_factory=dict)

    @property
    def entity_map(self) -> dict[str, str]:
        """Plain ``{placeholder: original}`` view for collaborators."""
        return {entry.placeholder: entry.original_value for entry in self.mapping}


@dataclass(frozen=True)
class ObjectAnonymizationResult:
    """Output of the object-level anonymize variant."""

    anonymized_object: Any
    mapping: tuple[MappingEntry, ...] = ()
    stats_by_category: dict[str, int] = field(default_factory=dict)

    @property
    def entity_map(self) -> dict[str, str]:
        return {entry.placeholder: entry.original_value for entry in self.mapping}
