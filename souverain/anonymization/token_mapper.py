from dataclasses import dataclass, field

from souverain.anonymization.models import DetectedSpan, MappingEntry


@dataclass
class SequenceCounters:
    """Per-call ``category -> last issued sequence`` record.

    Created fresh for every anonymize call and threaded through explicitly;
    never shared between calls.
    """

    last: dict[str, int] = field(default_factory=dict)

    def next(self, category: str) -> int:
        value = self.last.get(category, 0) + 1
        self.last[category] = value
        return value


class TokenMapper:
    """Mints ``{CATEGORY}_{sequence:03d}`` placeholders, one per occurrence.

    The same literal value detected twice gets two placeholders that both
    record it; see the anonymizer for how duplicates are substituted.
    """

    def __init__(self, counters: SequenceCounters | None = None) -> None:
        self._counters = counters if counters is not None else SequenceCounters()
        self._entries: list[MappingEntry] = []

    def map_span(self, span: DetectedSpan) -> MappingEntry:
        """Mint a placeholder for *span* and record it."""
        sequence = self._counters.next(span.category)
        entry = MappingEntry(
            placeholder=f"{span.category}_{sequence:03d}",
            original_value=span.matched_text,
            category=span.category,
        )
        self._entries.append(entry)
        return entry

    def map_spans(self, spans: list[DetectedSpan]) -> list[MappingEntry]:
        return [self.map_span(span) for span in spans]

    @property
    def entries(self) -> tuple[MappingEntry, ...]:
        return tuple(self._entries)

    def stats_by_category(self) -> dict[str, int]:
        stats: dict[str, int] = {}
        for entry in self._entries:
            stats[entry.category] = stats.get(entry.category, 0) + 1
        return stats
