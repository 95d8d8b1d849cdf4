import logging
import math

import pytest

from featherweight.core.harmonics import lexical_signals as ls
from featherweight.core.harmonics import quantum_perception_engine as qpe
from featherweight.libs.schemas.history import UserHistory


def test_golden_ratio_rhythm():
    # 17 and 10 characters: a ratio of 1.7.
    patterns = qpe.detect_harmonic_patterns("Breathe in slowly. Let it go.")
    assert len(patterns) == 1
    pattern = patterns[0]
    assert pattern.frequency == 528
    assert pattern.amplitude == 0.8
    assert pattern.phase == 0.0
    assert pattern.manifestation_cycle == 21


def test_no_rhythm_without_two_sentences():
    assert qpe.detect_harmonic_patterns("") == []
    assert qpe.detect_harmonic_patterns("Just one sentence here.") == []
    assert qpe.detect_harmonic_patterns("Same size. Same size.") == []


def test_phase_grows_with_position():
    text = "Tiny. Breathe in slowly. Let it go."
    patterns = qpe.detect_harmonic_patterns(text)
    assert [p.phase for p in patterns] == [pytest.approx(1 / 3 * 2 * math.pi)]


def test_spiritual_openness():
    assert qpe.score_spiritual_openness("") == 0.5
    assert qpe.score_spiritual_openness("I am open and curious") == pytest.approx(0.7)
    assert qpe.score_spiritual_openness("skeptical, full of doubt") == pytest.approx(0.2)
    assert qpe.score_spiritual_openness("skeptical doubt impossible ridiculous nonsense") == 0.0


def test_expansion_potential():
    assert qpe.score_expansion_potential("growth and learning") == pytest.approx(0.66)
    assert qpe.score_expansion_potential("growth and learning", UserHistory()) == pytest.approx(0.66)
    engaged = UserHistory(spiritual_practices=[{"practice": "Meditation"}])
    assert qpe.score_expansion_potential("growth and learning", engaged) == pytest.approx(0.76)


def test_merkaba_activation():
    assert qpe.score_merkaba_activation("") == 0.0
    assert qpe.score_merkaba_activation("light and energy") == pytest.approx(0.2)
    everything = "light energy spinning ascending transcending dimensional cosmic universal infinite eternal"
    assert qpe.score_merkaba_activation(everything) == pytest.approx(1.0)


def test_probability_fields_in_table_order():
    fields = qpe.identify_probability_fields("I dream of a future relationship")
    assert fields == [
        "Future manifestation potential",
        "Creative manifestation field",
        "Relationship probability matrix",
    ]
    assert qpe.identify_probability_fields("") == []


def test_quantum_field_combines_scans():
    text = "I feel love and wisdom. My vision of the future is clear and aligned."
    field = qpe.analyze_quantum_field(text)
    assert field.vibrational_frequency == ls.score_vibrational_frequency(text)
    assert field.consciousness_level == ls.score_consciousness_level(text)
    assert field.quantum_coherence == ls.score_quantum_coherence(text)
    assert field.archetypal_resonance == ls.detect_archetypes(text)
    assert field.harmonic_patterns == qpe.detect_harmonic_patterns(text)
    assert field.probability_fields == qpe.identify_probability_fields(text)


def test_energetic_state_combines_scans(make_entry, journal_history, now):
    text = "Open to divine light, growing with love"
    history = journal_history(make_entry("I feel love and divine support", days_ago=2))
    state = qpe.detect_energetic_state(text, history, now=now)
    assert state.emotional_frequency == ls.score_emotional_frequency(text)
    assert state.spiritual_openness == qpe.score_spiritual_openness(text)
    assert state.energetic_balance == ls.score_chakra_balance(text, history, now=now)
    assert state.expansion_potential == qpe.score_expansion_potential(text, history)
    assert state.merkaba_activation == qpe.score_merkaba_activation(text)


def test_quantum_field_logs_counts_only(caplog):
    caplog.set_level(logging.DEBUG, logger=qpe.__name__)
    qpe.analyze_quantum_field("Breathe in slowly. Let it go.")
    record = caplog.records[-1]
    assert record.getMessage() == "quantum field analyzed"
    assert record.harmonic_patterns == 1
    assert "Breathe" not in record.getMessage()
