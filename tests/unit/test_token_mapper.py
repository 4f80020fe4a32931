from souverain.anonymization.models import DetectedSpan
from souverain.anonymization.token_mapper import SequenceCounters, TokenMapper


def _span(category: str, text: str) -> DetectedSpan:
    return DetectedSpan(category=category, matched_text=text, start_offset=0, end_offset=len(text))


class TestSequenceCounters:
    def test_starts_at_one_per_category(self) -> None:
        counters = SequenceCounters()
        assert counters.next("PERSON") == 1
        assert counters.next("PERSON") == 2
        assert counters.next("EMAIL") == 1

    def test_instances_are_independent(self) -> None:
        first = SequenceCounters()
        first.next("PERSON")
        assert SequenceCounters().next("PERSON") == 1


class TestTokenMapper:
    def test_zero_padded_placeholder(self) -> None:
        entry = TokenMapper().map_span(_span("PERSON", "Jean Dupont"))
        assert entry.placeholder == "PERSON_001"
        assert entry.original_value == "Jean Dupont"
        assert entry.category == "PERSON"

    def test_one_placeholder_per_occurrence(self) -> None:
        mapper = TokenMapper()
        entries = mapper.map_spans([_span("PERSON", "Jean Dupont"), _span("PERSON", "Jean Dupont")])
        assert [e.placeholder for e in entries] == ["PERSON_001", "PERSON_002"]
        assert all(e.original_value == "Jean Dupont" for e in entries)

    def test_sequences_are_per_category(self) -> None:
        mapper = TokenMapper()
        mapper.map_spans([_span("PERSON", "A B"), _span("EMAIL", "a@b.fr"), _span("PERSON", "C D")])
        assert [e.placeholder for e in mapper.entries] == ["PERSON_001", "EMAIL_001", "PERSON_002"]

    def test_sequence_beyond_padding_width(self) -> None:
        mapper = TokenMapper(SequenceCounters(last={"CITY": 999}))
        assert mapper.map_span(_span("CITY", "Lyon")).placeholder == "CITY_1000"

    def test_stats_by_category(self) -> None:
        mapper = TokenMapper()
        mapper.map_spans([_span("PERSON", "A B"), _span("CITY", "Lyon"), _span("PERSON", "C D")])
        assert mapper.stats_by_category() == {"PERSON": 2, "CITY": 1}

    def test_entries_is_a_snapshot(self) -> None:
        mapper = TokenMapper()
        snapshot = mapper.entries
        mapper.map_span(_span("CITY", "Lyon"))
        assert snapshot == ()
        assert len(mapper.entries) == 1
