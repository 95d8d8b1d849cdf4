"""Harmonic pattern analysis over journal and conversation text."""

from .harmonic_pattern_engine import (
    analyze_sacred_numbers,
    compose_harmonic_report,
    detect_synchronicities,
    identify_karmic_themes,
    identify_temporal_patterns,
)
from .lexical_signals import (
    detect_archetypes,
    extract_numbers,
    score_chakra_balance,
    score_consciousness_level,
    score_emotional_frequency,
    score_quantum_coherence,
    score_sacred_number,
    score_vibrational_frequency,
)
from .quantum_perception_engine import analyze_quantum_field, detect_energetic_state

__all__ = [
    "analyze_quantum_field",
    "analyze_sacred_numbers",
    "compose_harmonic_report",
    "detect_archetypes",
    "detect_energetic_state",
    "detect_synchronicities",
    "extract_numbers",
    "identify_karmic_themes",
    "identify_temporal_patterns",
    "score_chakra_balance",
    "score_consciousness_level",
    "score_emotional_frequency",
    "score_quantum_coherence",
    "score_sacred_number",
    "score_vibrational_frequency",
]
