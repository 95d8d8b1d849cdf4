"""Quantum perception engine: rhythm, openness and field composites over a single text."""

from __future__ import annotations

import datetime as dt
import logging
import math
import re
from typing import Iterable, List, Optional

from featherweight.core.harmonics import tables
from featherweight.core.harmonics.lexical_signals import (
    detect_archetypes,
    score_chakra_balance,
    score_consciousness_level,
    score_emotional_frequency,
    score_quantum_coherence,
    score_vibrational_frequency,
)
from featherweight.libs.schemas.harmonics import EnergeticState, HarmonicPattern, QuantumFieldAnalysis
from featherweight.libs.schemas.history import UserHistory

LOGGER = logging.getLogger(__name__)

GOLDEN_RATIO = 1.618
GOLDEN_RATIO_TOLERANCE = 0.2

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def _keyword_score(text: str, keywords: Iterable[str], weight: float) -> float:
    lowered = (text or "").lower()
    return sum(1 for keyword in keywords if keyword in lowered) * weight


def detect_harmonic_patterns(text: str) -> List[HarmonicPattern]:
    """Golden-ratio rhythm between adjacent sentence lengths."""

    sentences = [s for s in _SENTENCE_SPLIT.split(text or "") if s.strip()]
    if len(sentences) < 2:
        return []

    mean_length = sum(len(s) for s in sentences) / len(sentences)
    rhythm = [len(s) / mean_length for s in sentences]
    patterns: List[HarmonicPattern] = []
    for i, (current, following) in enumerate(zip(rhythm, rhythm[1:])):
        if abs(current / following - GOLDEN_RATIO) < GOLDEN_RATIO_TOLERANCE:
            patterns.append(
                HarmonicPattern(
                    frequency=528,
                    amplitude=0.8,
                    phase=i / len(rhythm) * 2 * math.pi,
                    spiritual_meaning="Divine harmony in expression",
                    manifestation_cycle=21,
                )
            )
    return patterns


def score_spiritual_openness(text: str) -> float:
    score = 0.5
    score += _keyword_score(text, tables.OPENNESS_KEYWORDS, 0.1)
    score -= _keyword_score(text, tables.RESISTANCE_KEYWORDS, 0.15)
    return max(0.0, min(1.0, score))


def score_expansion_potential(text: str, history: Optional[UserHistory] = None) -> float:
    potential = 0.5 + _keyword_score(text, tables.EXPANSION_KEYWORDS, 0.08)
    # Any engagement history earns a flat bonus.
    if history is not None and not history.is_empty():
        potential += 0.1
    return min(1.0, potential)


def score_merkaba_activation(text: str) -> float:
    return min(1.0, _keyword_score(text, tables.MERKABA_KEYWORDS, 0.1))


def identify_probability_fields(text: str) -> List[str]:
    lowered = (text or "").lower()
    return [
        field
        for field, keywords in tables.PROBABILITY_FIELDS
        if any(keyword in lowered for keyword in keywords)
    ]


def analyze_quantum_field(text: str) -> QuantumFieldAnalysis:
    field = QuantumFieldAnalysis(
        vibrational_frequency=score_vibrational_frequency(text),
        harmonic_patterns=detect_harmonic_patterns(text),
        archetypal_resonance=detect_archetypes(text),
        consciousness_level=score_consciousness_level(text),
        quantum_coherence=score_quantum_coherence(text),
        probability_fields=identify_probability_fields(text),
    )
    LOGGER.debug(
        "quantum field analyzed",
        extra={
            "harmonic_patterns": len(field.harmonic_patterns),
            "archetypes": len(field.archetypal_resonance),
        },
    )
    return field


def detect_energetic_state(
    text: str,
    history: Optional[UserHistory] = None,
    *,
    now: dt.datetime | None = None,
) -> EnergeticState:
    return EnergeticState(
        consciousness_level=score_consciousness_level(text),
        emotional_frequency=score_emotional_frequency(text),
        spiritual_openness=score_spiritual_openness(text),
        energetic_balance=score_chakra_balance(text, history, now=now),
        expansion_potential=score_expansion_potential(text, history),
        quantum_coherence=score_quantum_coherence(text),
        merkaba_activation=score_merkaba_activation(text),
    )


__all__ = [
    "analyze_quantum_field",
    "detect_energetic_state",
    "detect_harmonic_patterns",
    "identify_probability_fields",
    "score_expansion_potential",
    "score_merkaba_activation",
    "score_spiritual_openness",
]
