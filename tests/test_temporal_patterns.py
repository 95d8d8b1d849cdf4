import datetime as dt

import pytest

from featherweight.core.harmonics.harmonic_pattern_engine import identify_temporal_patterns
from featherweight.libs.schemas.history import SpiritualPractice, SynchronicityEvent, UserHistory

BASE = dt.datetime(2025, 1, 1, 9, 0, tzinfo=dt.timezone.utc)


def _lesson_events(make_event, offsets, lesson="Patience"):
    return [
        make_event(f"event {i}", BASE + dt.timedelta(days=offset), [lesson])
        for i, offset in enumerate(offsets)
    ]


def _expansion_entries(make_entry):
    levels = [3.0, 3.8, 3.9, 4.6, 4.7]
    return [
        make_entry("reflection", days_ago=28 - 7 * i, consciousness_level=level)
        for i, level in enumerate(levels)
    ]


def test_life_lesson_cycle(make_event, now):
    history = UserHistory(life_events=_lesson_events(make_event, [0, 10, 22, 36]))
    patterns = identify_temporal_patterns(history, now=now)
    assert len(patterns) == 1
    lesson = patterns[0]
    assert lesson.pattern == "Life Lesson: Patience"
    assert lesson.manifestation_cycle == pytest.approx(12)
    assert lesson.frequency == pytest.approx(4 / 365)
    assert lesson.next_occurrence == BASE + dt.timedelta(days=48)


def test_life_lesson_cycle_accepts_unsorted_events(make_event, now):
    history = UserHistory(life_events=_lesson_events(make_event, [22, 0, 36, 10]))
    lesson = identify_temporal_patterns(history, now=now)[0]
    assert lesson.manifestation_cycle == pytest.approx(12)
    assert lesson.next_occurrence == BASE + dt.timedelta(days=48)


def test_life_lesson_needs_three_occurrences(make_event, now):
    history = UserHistory(life_events=_lesson_events(make_event, [0, 10]))
    assert identify_temporal_patterns(history, now=now) == []


def test_consciousness_expansion_cycle(make_entry, journal_history, now):
    history = journal_history(*_expansion_entries(make_entry))
    patterns = identify_temporal_patterns(history, now=now)
    assert [p.pattern for p in patterns] == ["Consciousness Expansion Cycle"]
    cycle = patterns[0]
    assert cycle.manifestation_cycle == pytest.approx(7)
    assert cycle.frequency == pytest.approx(4.0)
    assert cycle.next_occurrence == now + dt.timedelta(days=7)


def test_consciousness_expansion_skips_unscored_entries(make_entry, journal_history, now):
    entries = _expansion_entries(make_entry)[:4] + [make_entry("no reading")]
    assert identify_temporal_patterns(journal_history(*entries), now=now) == []


def test_practice_cycle(now):
    history = UserHistory(
        spiritual_practices=[
            SpiritualPractice(practice="Meditation", effectiveness=0.6),
            SpiritualPractice(practice="Meditation", effectiveness=0.7),
            SpiritualPractice(practice="Meditation", effectiveness=0.8),
            SpiritualPractice(practice="Yoga", effectiveness=0.9),
        ]
    )
    patterns = identify_temporal_patterns(history, now=now)
    assert len(patterns) == 1
    practice = patterns[0]
    assert practice.pattern == "Meditation Practice Cycle"
    assert practice.frequency == pytest.approx(0.1)
    assert practice.manifestation_cycle == 30
    assert practice.next_occurrence == now + dt.timedelta(days=30)


def test_synchronicity_wave_cycle(now):
    history = UserHistory(
        synchronicities=[
            SynchronicityEvent(description=f"sign {i}", timestamp=BASE + dt.timedelta(days=5 * i))
            for i in range(3)
        ]
    )
    patterns = identify_temporal_patterns(history, now=now)
    assert [p.pattern for p in patterns] == ["Synchronicity Wave Cycle"]
    assert patterns[0].manifestation_cycle == pytest.approx(5)
    assert patterns[0].frequency == pytest.approx(3 / 365)
    assert patterns[0].next_occurrence == BASE + dt.timedelta(days=15)


def test_combined_patterns_sorted_by_frequency(make_entry, make_event, now):
    history = UserHistory(
        journal_entries=_expansion_entries(make_entry),
        life_events=_lesson_events(make_event, [0, 10, 22, 36]),
        spiritual_practices=[SpiritualPractice(practice="Breathwork") for _ in range(3)],
        synchronicities=[
            SynchronicityEvent(timestamp=BASE + dt.timedelta(days=5 * i)) for i in range(3)
        ],
    )
    patterns = identify_temporal_patterns(history, now=now)
    assert [p.pattern for p in patterns] == [
        "Consciousness Expansion Cycle",
        "Breathwork Practice Cycle",
        "Life Lesson: Patience",
        "Synchronicity Wave Cycle",
    ]


def test_empty_history_has_no_cycles(now):
    assert identify_temporal_patterns(UserHistory(), now=now) == []
