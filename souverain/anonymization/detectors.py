"""Heuristic entity detection rules.

Each rule owns one category and scans the full text on its own. Rules are
pure: the same text always yields the same spans, regardless of which other
rules ran before. Overlaps between categories are resolved later by the
anonymizer's substitution order, never here.

Detection is regex-based. Residual false positives and misses are an
accepted precision/recall trade-off.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from souverain.anonymization.models import DetectedSpan

_UPPER = "A-ZÀ-ÖØ-Þ"
_LOWER = "a-zß-öø-ÿ"

# A capitalized word: one uppercase letter, then lowercase letters only.
# Words glued to a lowercase hyphenated tail ("Auto-entrepreneur") are not names.
_CAPITALIZED = rf"[{_UPPER}][{_LOWER}]+(?!\w)(?!-[{_LOWER}])"

LEGAL_FORMS: tuple[str, ...] = ("SASU", "SARL", "EURL", "SAS", "SCI", "SA")
INDEPENDENT_FORMS: tuple[str, ...] = ("Auto-entrepreneur", "Freelance")

COMMON_CITIES: tuple[str, ...] = (
    "Paris", "Lyon", "Marseille", "Toulouse", "Bordeaux", "Lille", "Nice", "Nantes",
    "Strasbourg", "Montpellier", "Rennes", "Grenoble", "Dijon", "Angers",
    "Saint-Étienne", "Le Havre", "Toulon", "Clermont-Ferrand", "Aix-en-Provence",
    "Brest",
)

NAME_EXCLUSIONS: frozenset[str] = frozenset({
    "Bonjour", "Bonsoir", "Salut", "Merci", "Cordialement", "Bien", "Cher", "Chère",
    "Madame", "Monsieur", "Mademoiselle", "Contactez", "Contact", "Appelez",
    "Écrivez", "Chez", "Objet", "France", "Paris", "Freelance",
    "Le", "La", "Les", "Un", "Une", "Je", "Nous", "Vous", "Il", "Elle",
})


class DetectionRule(ABC):
    """Contract for a single-category detector."""

    category: ClassVar[str]

    @abstractmethod
    def detect(self, text: str) -> list[DetectedSpan]:
        """Return every span of *text* matching this rule, in text order."""


class RegexRule(DetectionRule):
    """Rule backed by one compiled pattern; every match is a candidate."""

    pattern: ClassVar[re.Pattern[str]]

    def detect(self, text: str) -> list[DetectedSpan]:
        return [
            DetectedSpan(self.category, m.group(0), m.start(), m.end())
            for m in self.pattern.finditer(text)
        ]


class EmailRule(RegexRule):
    category = "EMAIL"
    pattern = re.compile(
        r"(?<![\w.%+\-])[\w.%+\-]+@[\w\-]+(?:\.[\w\-]+)*\.[^\W\d_]{2,}(?!\w)"
    )


class PhoneRule(RegexRule):
    """French national/international numbers, plus a loose ``+CC`` form."""

    category = "PHONE"
    pattern = re.compile(
        r"(?<![\w+])"
        r"(?:"
        r"(?:(?:\+|00)33[ .\-]?|0)[1-9](?:[ .\-]?\d{2}){4}"
        r"|\+\d{1,3}[ .\-]?\d{1,4}[ .\-]?\d{1,4}[ .\-]?\d{1,9}"
        r")"
        r"(?!\w)"
    )


class OrganizationRule(RegexRule):
    """Capitalized words immediately followed by a legal-form suffix."""

    category = "COMPANY"
    pattern = re.compile(
        rf"(?<!\w)(?:{_CAPITALIZED}[ \t]+)+"
        rf"(?:{'|'.join(LEGAL_FORMS + INDEPENDENT_FORMS)})"
        r"(?!\w)"
    )


class CityRule(RegexRule):
    """Case-insensitive lookup in a fixed, closed list of city names."""

    category = "CITY"
    pattern = re.compile(
        r"(?<!\w)(?:"
        + "|".join(re.escape(c) for c in sorted(COMMON_CITIES, key=len, reverse=True))
        + r")(?![\w-])",
        re.IGNORECASE,
    )


class PersonNameRule(DetectionRule):
    """Two or more consecutive capitalized words, space- or hyphen-joined.

    A run is split at excluded words; each remaining piece of at least two
    words is a candidate unless it is a known city or is directly followed
    by a legal-form suffix (those belong to the organization rule).
    """

    category = "PERSON"

    _WORD_RE: ClassVar[re.Pattern[str]] = re.compile(_CAPITALIZED)
    _RUN_RE: ClassVar[re.Pattern[str]] = re.compile(
        rf"(?<!\w){_CAPITALIZED}(?:(?:[ \t]+|-){_CAPITALIZED})*"
    )
    _LEGAL_SUFFIX_RE: ClassVar[re.Pattern[str]] = re.compile(
        rf"(?:[ \t]+|-)(?:{'|'.join(LEGAL_FORMS + INDEPENDENT_FORMS)})(?!\w)"
    )
    _CITY_NAMES: ClassVar[frozenset[str]] = frozenset(c.casefold() for c in COMMON_CITIES)

    def __init__(self, exclusions: Iterable[str] = NAME_EXCLUSIONS) -> None:
        self._exclusions = frozenset(exclusions)

    def detect(self, text: str) -> list[DetectedSpan]:
        spans: list[DetectedSpan] = []
        for run in self._RUN_RE.finditer(text):
            for start, end in self._segments(run):
                candidate = text[start:end]
                if candidate.casefold() in self._CITY_NAMES:
                    continue
                if self._LEGAL_SUFFIX_RE.match(text, end):
                    continue
                spans.append(DetectedSpan(self.category, candidate, start, end))
        return spans

    def _segments(self, run: re.Match[str]) -> list[tuple[int, int]]:
        """Split a run at excluded words; keep pieces of two or more words."""
        segments: list[tuple[int, int]] = []
        current: list[re.Match[str]] = []
        for word in self._WORD_RE.finditer(run.string, run.start(), run.end()):
            if word.group(0) in self._exclusions:
                if len(current) >= 2:
                    segments.append((current[0].start(), current[-1].end()))
                current = []
                continue
            current.append(word)
        if len(current) >= 2:
            segments.append((current[0].start(), current[-1].end()))
        return segments


DEFAULT_RULES: tuple[DetectionRule, ...] = (
    EmailRule(),
    PhoneRule(),
    PersonNameRule(),
    OrganizationRule(),
    CityRule(),
)


def rules_for(categories: Iterable[str]) -> tuple[DetectionRule, ...]:
    """Select default rules by category name, keeping the default order.

    Raises:
        ValueError: if a category has no rule.
    """
    wanted = {c.strip().upper() for c in categories if c.strip()}
    known = {rule.category for rule in DEFAULT_RULES}
    unknown = wanted - known
    if unknown:
        raise ValueError(
            f"Unknown anonymization categories {sorted(unknown)}. Choose from: {sorted(known)}"
        )
    return tuple(rule for rule in DEFAULT_RULES if rule.category in wanted)
