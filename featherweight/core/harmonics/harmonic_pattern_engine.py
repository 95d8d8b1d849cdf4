"""Harmonic pattern engine: recurring numbers, karmic themes, synchronicities
and cycles across a user's whole history.

Builds on the single-text scans in ``lexical_signals``. Nothing here is
persisted; every call returns fresh records.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence

from featherweight.core.harmonics import tables
from featherweight.core.harmonics.lexical_signals import (
    extract_digit_runs,
    extract_numbers,
    recent_journal_entries,
    score_chakra_balance,
    score_sacred_number,
    utc_now,
)
from featherweight.libs.schemas.harmonics import (
    HarmonicReport,
    KarmicTheme,
    NumberPattern,
    SynchronicityPattern,
    TemporalPattern,
)
from featherweight.libs.schemas.history import Conversation, LifeEvent, UserHistory

LOGGER = logging.getLogger(__name__)

_SECONDS_PER_DAY = 24 * 60 * 60

KARMIC_RECENT_DAYS = 90
TRANSCENDENCE_RECENT_DAYS = 60
TRANSCENDENCE_MAX_ENTRIES = 5
EXPANSION_MIN_ENTRIES = 5
EXPANSION_JUMP = 0.5
PRACTICE_MIN_LOGS = 3
PRACTICE_CYCLE_DAYS = 30
LESSON_MIN_OCCURRENCES = 3
SYNCHRONICITY_MIN_EVENTS = 3


def _days_between(earlier: dt.datetime, later: dt.datetime) -> float:
    return (later - earlier).total_seconds() / _SECONDS_PER_DAY


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _gaps_in_days(timestamps: Sequence[dt.datetime]) -> List[float]:
    ordered = sorted(timestamps)
    return [_days_between(a, b) for a, b in zip(ordered, ordered[1:])]


# ---------------------------------------------------------------------------
# Sacred numbers
# ---------------------------------------------------------------------------


def historical_number_patterns(history: UserHistory) -> List[NumberPattern]:
    """Sacred numbers written three or more times across the user's history."""

    content = history.user_content()
    counts = Counter(extract_numbers(content))
    patterns: List[NumberPattern] = []
    for number in sorted(counts):
        count = counts[number]
        if count < 3:
            continue
        pattern = score_sacred_number(number, content)
        if pattern is None:
            continue
        boosted = min(1.0, pattern.frequency + count * 0.05)
        patterns.append(pattern.model_copy(update={"frequency": boosted}))
    return patterns


def analyze_sacred_numbers(text: str, history: Optional[UserHistory] = None) -> List[NumberPattern]:
    """Sacred numbers in ``text`` plus recurring ones from history, by synchronicity level."""

    patterns: List[NumberPattern] = []
    for number in extract_numbers(text):
        pattern = score_sacred_number(number, text, history)
        if pattern is not None:
            patterns.append(pattern)

    if history is not None:
        patterns.extend(historical_number_patterns(history))

    patterns.sort(key=lambda p: p.synchronicity_level, reverse=True)
    LOGGER.debug("sacred numbers analyzed", extra={"pattern_count": len(patterns)})
    return patterns


# ---------------------------------------------------------------------------
# Karmic themes
# ---------------------------------------------------------------------------


def _manifested_indicators(content: str, indicators: Sequence[str]) -> List[str]:
    lowered = content.lower()
    return [indicator for indicator in indicators if indicator in lowered]


def karmic_integration_level(
    indicators: Sequence[str],
    history: UserHistory,
    *,
    now: dt.datetime | None = None,
) -> float:
    """1 minus the share of manifested indicators seen again in the last 90 days."""

    if not indicators:
        return 1.0
    recent = [entry.content.lower() for entry in recent_journal_entries(history, KARMIC_RECENT_DAYS, now=now)]
    recurring = [ind for ind in indicators if any(ind in content for content in recent)]
    return max(0.0, 1 - len(recurring) / len(indicators))


def transcendence_indicators(
    theme: str,
    history: UserHistory,
    *,
    now: dt.datetime | None = None,
) -> List[str]:
    pattern = tables.KARMIC_PATTERNS.get(theme)
    if pattern is None:
        return []
    recent = recent_journal_entries(
        history, TRANSCENDENCE_RECENT_DAYS, limit=TRANSCENDENCE_MAX_ENTRIES, now=now
    )
    found: List[str] = []
    for entry in recent:
        lowered = entry.content.lower()
        found.extend(f"Recent expression of {kw}" for kw in pattern.transcendence if kw in lowered)
    return found


def identify_karmic_themes(
    history: UserHistory,
    *,
    now: dt.datetime | None = None,
) -> List[KarmicTheme]:
    """Karmic themes present anywhere in the user's writing, least integrated first."""

    content = history.user_content()
    themes: List[KarmicTheme] = []
    for theme, pattern in tables.KARMIC_PATTERNS.items():
        indicators = _manifested_indicators(content, pattern.indicators)
        if not indicators:
            continue
        themes.append(
            KarmicTheme(
                theme=theme,
                integration_level=karmic_integration_level(indicators, history, now=now),
                manifestation_patterns=[f"Pattern involving {ind}" for ind in indicators],
                healing_opportunities=list(pattern.lessons),
                transcendence_indicators=transcendence_indicators(theme, history, now=now),
            )
        )
    themes.sort(key=lambda t: t.integration_level)
    LOGGER.debug("karmic themes identified", extra={"theme_count": len(themes)})
    return themes


# ---------------------------------------------------------------------------
# Synchronicities
# ---------------------------------------------------------------------------


def _date_synchronicities(events: Sequence[LifeEvent]) -> List[SynchronicityPattern]:
    patterns: List[SynchronicityPattern] = []
    for event in events:
        day = event.timestamp.day
        month = event.timestamp.month
        if day in tables.MASTER_DATE_NUMBERS or month in tables.MASTER_DATE_NUMBERS:
            patterns.append(
                SynchronicityPattern(
                    pattern="Master Number Date Synchronicity",
                    frequency=0.8,
                    meaningful_coincidences=[f"Event occurred on {month}/{day}"],
                    spiritual_significance="Divine timing and spiritual significance",
                    guidance_message="Pay attention to the spiritual lessons in this timing",
                )
            )
    return patterns


def _numerical_synchronicities(events: Sequence[LifeEvent]) -> List[SynchronicityPattern]:
    # Digit strings, so arbitrarily long numbers can be named in the output.
    counts: Counter[str] = Counter()
    for event in events:
        counts.update(extract_digit_runs(event.description))
    patterns: List[SynchronicityPattern] = []
    for number in sorted(counts, key=lambda digits: (len(digits), digits)):
        count = counts[number]
        if count < 3:
            continue
        patterns.append(
            SynchronicityPattern(
                pattern=f"Repeating Number {number}",
                frequency=count / len(events),
                meaningful_coincidences=[f"Number {number} appears {count} times"],
                spiritual_significance="Numerical guidance and divine communication",
                guidance_message=f"The universe is communicating through the number {number}",
            )
        )
    return patterns


def _thematic_synchronicities(
    events: Sequence[LifeEvent],
    conversations: Sequence[Conversation],
) -> List[SynchronicityPattern]:
    counts: Counter[str] = Counter()
    for event in events:
        counts.update(event.spiritual_lessons)
    for conversation in conversations:
        for message in conversation.messages:
            counts.update(message.spiritual_insights)

    contexts = len(events) + len(conversations)
    patterns: List[SynchronicityPattern] = []
    for theme, count in counts.items():
        if count < 3:
            continue
        patterns.append(
            SynchronicityPattern(
                pattern=f"Recurring Theme: {theme}",
                frequency=count / contexts,
                meaningful_coincidences=[f"Theme appears {count} times across different contexts"],
                spiritual_significance="Recurring spiritual lesson or growth opportunity",
                guidance_message=f"The universe is emphasizing the importance of {theme}",
            )
        )
    return patterns


def _archetypal_synchronicities(events: Sequence[LifeEvent]) -> List[SynchronicityPattern]:
    counts: Counter[str] = Counter()
    for event in events:
        counts.update(event.archetypal_themes)
    patterns: List[SynchronicityPattern] = []
    for archetype, count in counts.items():
        if count < 2:
            continue
        patterns.append(
            SynchronicityPattern(
                pattern=f"Archetypal Pattern: {archetype}",
                frequency=count / len(events),
                meaningful_coincidences=[f"{archetype} archetype appears {count} times"],
                spiritual_significance="Archetypal activation and soul development",
                guidance_message=f"You are embodying the {archetype} archetype in your journey",
            )
        )
    return patterns


def detect_synchronicities(
    events: Sequence[LifeEvent],
    conversations: Optional[Sequence[Conversation]] = None,
) -> List[SynchronicityPattern]:
    """Date, number, theme and archetype coincidences, most frequent first."""

    conversations = conversations or []
    patterns: List[SynchronicityPattern] = []
    patterns.extend(_date_synchronicities(events))
    patterns.extend(_numerical_synchronicities(events))
    patterns.extend(_thematic_synchronicities(events, conversations))
    patterns.extend(_archetypal_synchronicities(events))
    patterns.sort(key=lambda p: p.frequency, reverse=True)
    LOGGER.debug(
        "synchronicities detected",
        extra={"event_count": len(events), "pattern_count": len(patterns)},
    )
    return patterns


# ---------------------------------------------------------------------------
# Temporal cycles
# ---------------------------------------------------------------------------


def _consciousness_expansion_cycles(history: UserHistory, now: dt.datetime) -> List[TemporalPattern]:
    readings = sorted(
        (entry.timestamp, entry.consciousness_level)
        for entry in history.journal_entries
        if entry.consciousness_level is not None
    )
    if len(readings) < EXPANSION_MIN_ENTRIES:
        return []

    jumps = [
        _days_between(prev_ts, ts)
        for (prev_ts, prev_level), (ts, level) in zip(readings, readings[1:])
        if level > prev_level + EXPANSION_JUMP
    ]
    if not jumps:
        return []

    cycle = _average(jumps)
    return [
        TemporalPattern(
            pattern="Consciousness Expansion Cycle",
            # Cycles per ten entries.
            frequency=len(jumps) / (len(readings) / 10),
            manifestation_cycle=cycle,
            spiritual_significance="Regular periods of spiritual growth and integration",
            next_occurrence=now + dt.timedelta(days=cycle),
        )
    ]


def _practice_cycles(history: UserHistory, now: dt.datetime) -> List[TemporalPattern]:
    scores: Dict[str, List[float]] = {}
    for practice in history.spiritual_practices:
        scores.setdefault(practice.practice, []).append(practice.effectiveness)

    patterns: List[TemporalPattern] = []
    for name, effectiveness in scores.items():
        if len(effectiveness) < PRACTICE_MIN_LOGS:
            continue
        patterns.append(
            TemporalPattern(
                pattern=f"{name} Practice Cycle",
                # Logs are assumed to be tracked monthly.
                frequency=len(effectiveness) / PRACTICE_CYCLE_DAYS,
                manifestation_cycle=PRACTICE_CYCLE_DAYS,
                spiritual_significance=f"Regular practice of {name} for spiritual development",
                next_occurrence=now + dt.timedelta(days=PRACTICE_CYCLE_DAYS),
            )
        )
    return patterns


def _life_lesson_cycles(history: UserHistory) -> List[TemporalPattern]:
    occurrences: Dict[str, List[dt.datetime]] = {}
    for event in history.life_events:
        for lesson in event.spiritual_lessons:
            occurrences.setdefault(lesson, []).append(event.timestamp)

    patterns: List[TemporalPattern] = []
    for lesson, stamps in occurrences.items():
        if len(stamps) < LESSON_MIN_OCCURRENCES:
            continue
        cycle = _average(_gaps_in_days(stamps))
        patterns.append(
            TemporalPattern(
                pattern=f"Life Lesson: {lesson}",
                frequency=len(stamps) / 365,
                manifestation_cycle=cycle,
                spiritual_significance=f"Recurring opportunity to learn {lesson}",
                next_occurrence=max(stamps) + dt.timedelta(days=cycle),
            )
        )
    return patterns


def _synchronicity_wave_cycles(history: UserHistory) -> List[TemporalPattern]:
    if len(history.synchronicities) < SYNCHRONICITY_MIN_EVENTS:
        return []
    stamps = [sync.timestamp for sync in history.synchronicities]
    cycle = _average(_gaps_in_days(stamps))
    return [
        TemporalPattern(
            pattern="Synchronicity Wave Cycle",
            frequency=len(stamps) / 365,
            manifestation_cycle=cycle,
            spiritual_significance="Regular waves of meaningful coincidences and divine guidance",
            next_occurrence=max(stamps) + dt.timedelta(days=cycle),
        )
    ]


def identify_temporal_patterns(
    history: UserHistory,
    *,
    now: dt.datetime | None = None,
) -> List[TemporalPattern]:
    """Expansion, practice, life-lesson and synchronicity cycles, most frequent first."""

    current = utc_now(now)
    patterns: List[TemporalPattern] = []
    patterns.extend(_consciousness_expansion_cycles(history, current))
    patterns.extend(_practice_cycles(history, current))
    patterns.extend(_life_lesson_cycles(history))
    patterns.extend(_synchronicity_wave_cycles(history))
    patterns.sort(key=lambda p: p.frequency, reverse=True)
    LOGGER.debug("temporal patterns identified", extra={"pattern_count": len(patterns)})
    return patterns


def compose_harmonic_report(
    history: UserHistory,
    text: str = "",
    *,
    now: dt.datetime | None = None,
) -> HarmonicReport:
    """Run every history-level analysis for one user."""

    current = utc_now(now)
    return HarmonicReport(
        user_id=history.user_id,
        generated_at=current,
        sacred_numbers=analyze_sacred_numbers(text, history),
        chakra_balance=score_chakra_balance(text, history, now=current),
        karmic_themes=identify_karmic_themes(history, now=current),
        synchronicities=detect_synchronicities(history.life_events, history.conversations),
        temporal_patterns=identify_temporal_patterns(history, now=current),
    )


__all__ = [
    "analyze_sacred_numbers",
    "compose_harmonic_report",
    "detect_synchronicities",
    "historical_number_patterns",
    "identify_karmic_themes",
    "identify_temporal_patterns",
    "karmic_integration_level",
    "transcendence_indicators",
]
