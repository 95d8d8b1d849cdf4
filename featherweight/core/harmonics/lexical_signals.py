"""Lexical signal extraction: keyword and number scans over a single text.

Every function here is deterministic and keeps no state between calls. The
only time-dependent input is the recent-history window of
``score_chakra_balance``, which takes an explicit ``now``.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional

from featherweight.core.harmonics import tables
from featherweight.libs.schemas.harmonics import CHAKRA_AXES, ArchetypalTheme, ChakraBalance, NumberPattern
from featherweight.libs.schemas.history import JournalEntry, UserHistory, ensure_utc

LOGGER = logging.getLogger(__name__)

_DIGIT_RUN = re.compile(r"\d+")
# Below CPython's smallest allowed int/str conversion limit (640 digits).
_DIGIT_CHUNK = 600

CHAKRA_TREND_WINDOW_DAYS = 30
CHAKRA_TREND_MAX_ENTRIES = 10


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _hits(lowered: str, keywords: Iterable[str]) -> int:
    return sum(1 for keyword in keywords if keyword in lowered)


def utc_now(now: dt.datetime | None = None) -> dt.datetime:
    if now is None:
        return dt.datetime.now(dt.timezone.utc)
    return ensure_utc(now)


def extract_digit_runs(text: str) -> List[str]:
    """Maximal digit runs with leading zeros stripped, so equal numbers compare equal."""

    return [run.lstrip("0") or "0" for run in _DIGIT_RUN.findall(text or "")]


def digits_to_int(digits: str) -> int:
    """Convert a digit string of any length without the interpreter's str-to-int limit."""

    if len(digits) <= _DIGIT_CHUNK:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def extract_numbers(text: str) -> List[int]:
    """Every maximal digit run in ``text``, left to right, duplicates kept."""

    return [digits_to_int(run) for run in extract_digit_runs(text)]


def count_number_occurrences(number: int, text: str) -> int:
    return sum(1 for value in extract_numbers(text) if value == number)


def identify_manifestation_areas(context: str) -> List[str]:
    lowered = (context or "").lower()
    areas = [label for label, keywords in tables.MANIFESTATION_AREAS if _hits(lowered, keywords)]
    return areas or [tables.DEFAULT_MANIFESTATION_AREA]


def score_sacred_number(
    number: int,
    context_text: str = "",
    history: Optional[UserHistory] = None,
) -> Optional[NumberPattern]:
    """
    Score ``number`` against the sacred-number table.

    Returns ``None`` for numbers outside the table. Spiritual context adds 0.1,
    and more than two occurrences across the user's history add 0.15.
    """
    sacred = tables.SACRED_NUMBERS.get(number)
    if sacred is None:
        return None

    level = sacred.frequency
    if _hits((context_text or "").lower(), tables.SPIRITUAL_CONTEXT_KEYWORDS):
        level += 0.1
    if history is not None and count_number_occurrences(number, history.user_content()) > 2:
        level += 0.15

    level = _clamp(level)
    return NumberPattern(
        number=number,
        frequency=level,
        spiritual_significance=sacred.significance,
        manifestation_areas=identify_manifestation_areas(context_text),
        synchronicity_level=level,
    )


def _chakra_trend_scores(content: str) -> Dict[str, float]:
    lowered = (content or "").lower()
    return {
        chakra: 0.1 if _hits(lowered, keywords) else 0.0
        for chakra, keywords in tables.CHAKRA_TREND_KEYWORDS.items()
    }


def recent_journal_entries(
    history: UserHistory,
    days: int,
    limit: int | None = None,
    now: dt.datetime | None = None,
) -> List[JournalEntry]:
    """Entries newer than ``days`` ago, oldest first, keeping the last ``limit``."""

    cutoff = utc_now(now) - dt.timedelta(days=days)
    entries = sorted(
        (entry for entry in history.journal_entries if entry.timestamp > cutoff),
        key=lambda entry: entry.timestamp,
    )
    if limit is not None:
        entries = entries[-limit:]
    return entries


def chakra_trends(entries: List[JournalEntry]) -> Dict[str, float]:
    """Average secondary-keyword score per chakra across ``entries``."""

    if not entries:
        return {}
    totals: Counter[str] = Counter()
    for entry in entries:
        totals.update(_chakra_trend_scores(entry.content))
    return {chakra: totals[chakra] / len(entries) for chakra in tables.CHAKRA_TREND_KEYWORDS}


def score_chakra_balance(
    text: str,
    history: Optional[UserHistory] = None,
    *,
    now: dt.datetime | None = None,
) -> ChakraBalance:
    """
    Seven-axis chakra profile of ``text``.

    Each axis starts at 0.5, gains 0.1 per keyword and loses 0.15 per issue,
    clamped to [0, 1]. With a history, the average trend of up to ten journal
    entries from the last 30 days is blended in at 10% weight.
    """
    lowered = (text or "").lower()
    axes: Dict[str, float] = {}
    for chakra, data in tables.CHAKRA_KEYWORDS.items():
        score = 0.5 + 0.1 * _hits(lowered, data.keywords) - 0.15 * _hits(lowered, data.issues)
        axes[chakra] = _clamp(score)

    if history is not None:
        recent = recent_journal_entries(
            history, CHAKRA_TREND_WINDOW_DAYS, limit=CHAKRA_TREND_MAX_ENTRIES, now=now
        )
        trends = chakra_trends(recent)
        for chakra in CHAKRA_AXES:
            axes[chakra] = _clamp(axes[chakra] + trends.get(chakra, 0.0) * 0.1)
        LOGGER.debug("chakra trend blended", extra={"recent_entries": len(recent)})

    return ChakraBalance.from_axes(axes)


def archetypal_relevance(text: str, archetype: str) -> float:
    keywords = tables.ARCHETYPE_KEYWORDS.get(archetype, ())
    return _clamp(0.2 * _hits((text or "").lower(), keywords))


def detect_archetypes(text: str) -> List[ArchetypalTheme]:
    """Top three archetypes whose relevance exceeds 0.3, strongest first."""

    themes: List[ArchetypalTheme] = []
    for archetype in tables.ARCHETYPES:
        relevance = archetypal_relevance(text, archetype)
        if relevance <= 0.3:
            continue
        themes.append(
            ArchetypalTheme(
                archetype=archetype,
                relevance=relevance,
                manifestation=f"{archetype} energy manifesting through current life experiences",
                guidance=tables.ARCHETYPE_GUIDANCE.get(archetype, tables.DEFAULT_ARCHETYPE_GUIDANCE),
                integration=f"Integrate {archetype} qualities through conscious awareness and practice",
            )
        )
    themes.sort(key=lambda theme: theme.relevance, reverse=True)
    return themes[:3]


def score_vibrational_frequency(text: str) -> float:
    """Word-level scan around the 432 baseline, kept within [200, 800]."""

    frequency = tables.VIBRATIONAL_BASE
    for word in (text or "").lower().split():
        if _hits(word, tables.VIBRATIONAL_SPIRITUAL):
            frequency += 20
        if _hits(word, tables.VIBRATIONAL_EXPANSIVE):
            frequency += 15
        if _hits(word, tables.VIBRATIONAL_CONTRACTIVE):
            frequency -= 10
    return float(_clamp(frequency, 200, 800))


def score_emotional_frequency(text: str) -> float:
    lowered = (text or "").lower()
    matched = [freq for emotion, freq in tables.EMOTIONAL_FREQUENCIES.items() if emotion in lowered]
    if not matched:
        return float(tables.VIBRATIONAL_BASE)
    # The neutral baseline counts as one extra sample.
    return (tables.VIBRATIONAL_BASE + sum(matched)) / (len(matched) + 1)


def score_consciousness_level(text: str) -> float:
    """3.0 plus 0.5 per indicator keyword found, capped at 6.0."""

    lowered = (text or "").lower()
    level = 3.0
    for keywords in tables.CONSCIOUSNESS_INDICATORS.values():
        level += 0.5 * _hits(lowered, keywords)
    return min(6.0, level)


def score_quantum_coherence(text: str) -> float:
    lowered = (text or "").lower()
    coherence = 0.5
    coherence += 0.08 * _hits(lowered, tables.COHERENCE_KEYWORDS)
    coherence -= 0.1 * _hits(lowered, tables.INCOHERENCE_KEYWORDS)
    return _clamp(coherence)


__all__ = [
    "archetypal_relevance",
    "chakra_trends",
    "count_number_occurrences",
    "detect_archetypes",
    "digits_to_int",
    "extract_digit_runs",
    "extract_numbers",
    "identify_manifestation_areas",
    "recent_journal_entries",
    "score_chakra_balance",
    "score_consciousness_level",
    "score_emotional_frequency",
    "score_quantum_coherence",
    "score_sacred_number",
    "score_vibrational_frequency",
    "utc_now",
]
