"""Tests for the single-category detection rules."""

import pytest

from souverain.anonymization.detectors import (
    DEFAULT_RULES,
    CityRule,
    DetectionRule,
    EmailRule,
    OrganizationRule,
    PersonNameRule,
    PhoneRule,
    rules_for,
)


def _texts(rule: DetectionRule, text: str) -> list[str]:
    return [span.matched_text for span in rule.detect(text)]


class TestEmailRule:
    def test_detects_email(self) -> None:
        assert _texts(EmailRule(), "Écrire à jean.dupont@example.com.") == [
            "jean.dupont@example.com"
        ]

    def test_reports_offsets(self) -> None:
        text = "mail: a.b@c.fr"
        span = EmailRule().detect(text)[0]
        assert text[span.start_offset:span.end_offset] == "a.b@c.fr"
        assert span.category == "EMAIL"

    def test_no_match_without_tld(self) -> None:
        assert _texts(EmailRule(), "contact@localhost") == []

    def test_accented_local_part_is_kept_whole(self) -> None:
        assert _texts(EmailRule(), "Écrivez à josé.martin@example.com") == [
            "josé.martin@example.com"
        ]

    def test_address_is_word_delimited(self) -> None:
        assert _texts(EmailRule(), "id_a@b.fr") == ["id_a@b.fr"]
        assert _texts(EmailRule(), "jean@example.com_old") == []


class TestPhoneRule:
    @pytest.mark.parametrize(
        "phone",
        ["06 12 34 56 78", "06.12.34.56.78", "06-12-34-56-78", "0612345678", "+33 6 12 34 56 78"],
    )
    def test_detects_french_formats(self, phone: str) -> None:
        assert _texts(PhoneRule(), f"Tel : {phone}.") == [phone]

    def test_ignores_digits_inside_longer_number(self) -> None:
        assert _texts(PhoneRule(), "SIRET 123061234567890") == []

    @pytest.mark.parametrize("text", ["ref_0612345678", "Tel0612345678", "0612345678abc"])
    def test_ignores_numbers_glued_to_a_word(self, text: str) -> None:
        assert _texts(PhoneRule(), text) == []


class TestPersonNameRule:
    def test_detects_two_capitalized_words(self) -> None:
        assert _texts(PersonNameRule(), "Bonjour Marie Curie, merci.") == ["Marie Curie"]

    def test_splits_run_at_excluded_word(self) -> None:
        assert _texts(PersonNameRule(), "Contactez Jean Dupont demain") == ["Jean Dupont"]

    def test_keeps_hyphenated_first_name(self) -> None:
        assert _texts(PersonNameRule(), "avec Marie-Claire Dubois") == ["Marie-Claire Dubois"]

    def test_single_capitalized_word_is_not_a_name(self) -> None:
        assert _texts(PersonNameRule(), "Jean est là") == []

    def test_skips_known_city(self) -> None:
        assert _texts(PersonNameRule(), "né à Saint-Étienne") == []

    def test_leaves_legal_form_runs_to_organization_rule(self) -> None:
        assert _texts(PersonNameRule(), "chez Dupont Consulting SARL") == []

    def test_custom_exclusions(self) -> None:
        rule = PersonNameRule(exclusions={"Agence"})
        assert _texts(rule, "Agence Martin Durand") == ["Martin Durand"]


class TestOrganizationRule:
    def test_detects_legal_form_suffix(self) -> None:
        assert _texts(OrganizationRule(), "chez Dupont Consulting SARL à Paris") == [
            "Dupont Consulting SARL"
        ]

    def test_detects_independent_form(self) -> None:
        assert _texts(OrganizationRule(), "Studio Lumière Freelance") == [
            "Studio Lumière Freelance"
        ]

    def test_requires_capitalized_name(self) -> None:
        assert _texts(OrganizationRule(), "une SARL familiale") == []


class TestCityRule:
    def test_matches_case_insensitively(self) -> None:
        assert _texts(CityRule(), "de paris à LYON") == ["paris", "LYON"]

    def test_prefers_longest_name(self) -> None:
        assert _texts(CityRule(), "Basé à Clermont-Ferrand") == ["Clermont-Ferrand"]

    def test_ignores_city_inside_word(self) -> None:
        assert _texts(CityRule(), "Parisien et Nicea") == []


class TestRulesFor:
    def test_default_order(self) -> None:
        assert [rule.category for rule in DEFAULT_RULES] == [
            "EMAIL", "PHONE", "PERSON", "COMPANY", "CITY",
        ]

    def test_selects_subset_in_default_order(self) -> None:
        rules = rules_for(["city", " email "])
        assert [rule.category for rule in rules] == ["EMAIL", "CITY"]

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown anonymization categories"):
            rules_for(["EMAIL", "IBAN"])

    def test_rules_are_pure(self, sample_sentence: str) -> None:
        for rule in DEFAULT_RULES:
            assert rule.detect(sample_sentence) == rule.detect(sample_sentence)
