"""Result records produced by the harmonic analyzers."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HarmonicRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NumberPattern(HarmonicRecord):
    number: int
    frequency: float
    spiritual_significance: str
    manifestation_areas: List[str] = Field(default_factory=list)
    # Mirrors ``frequency`` at construction; historical boosts only touch ``frequency``.
    synchronicity_level: float


CHAKRA_AXES = ("root", "sacral", "solar_plexus", "heart", "throat", "third_eye", "crown")


class ChakraBalance(HarmonicRecord):
    root: float = 0.5
    sacral: float = 0.5
    solar_plexus: float = 0.5
    heart: float = 0.5
    throat: float = 0.5
    third_eye: float = 0.5
    crown: float = 0.5
    overall: float = 0.5

    @classmethod
    def from_axes(cls, axes: Dict[str, float]) -> "ChakraBalance":
        """Build a balance whose ``overall`` is the mean of the seven axes."""

        values = [axes.get(name, 0.5) for name in CHAKRA_AXES]
        return cls(**dict(zip(CHAKRA_AXES, values)), overall=sum(values) / len(values))

    def axes(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in CHAKRA_AXES}


class ArchetypalTheme(HarmonicRecord):
    archetype: str
    relevance: float
    manifestation: str
    guidance: str
    integration: str


class KarmicTheme(HarmonicRecord):
    theme: str
    # 1 minus the share of indicators seen again in the last 90 days:
    # 0 = still recurring, 1 = not seen recently.
    integration_level: float
    manifestation_patterns: List[str] = Field(default_factory=list)
    healing_opportunities: List[str] = Field(default_factory=list)
    transcendence_indicators: List[str] = Field(default_factory=list)


class SynchronicityPattern(HarmonicRecord):
    pattern: str
    frequency: float
    meaningful_coincidences: List[str] = Field(default_factory=list)
    spiritual_significance: str
    guidance_message: str


class TemporalPattern(HarmonicRecord):
    pattern: str
    frequency: float
    manifestation_cycle: float
    spiritual_significance: str
    next_occurrence: datetime


class HarmonicPattern(HarmonicRecord):
    frequency: float
    amplitude: float
    phase: float
    spiritual_meaning: str
    manifestation_cycle: float


class QuantumFieldAnalysis(HarmonicRecord):
    vibrational_frequency: float
    harmonic_patterns: List[HarmonicPattern] = Field(default_factory=list)
    archetypal_resonance: List[ArchetypalTheme] = Field(default_factory=list)
    consciousness_level: float
    quantum_coherence: float
    probability_fields: List[str] = Field(default_factory=list)


class EnergeticState(HarmonicRecord):
    consciousness_level: float
    emotional_frequency: float
    spiritual_openness: float
    energetic_balance: ChakraBalance
    expansion_potential: float
    quantum_coherence: float
    merkaba_activation: float


class HarmonicReport(HarmonicRecord):
    """Everything the aggregator derives for one user in a single pass."""

    user_id: str = ""
    generated_at: datetime
    sacred_numbers: List[NumberPattern] = Field(default_factory=list)
    chakra_balance: ChakraBalance = Field(default_factory=ChakraBalance)
    karmic_themes: List[KarmicTheme] = Field(default_factory=list)
    synchronicities: List[SynchronicityPattern] = Field(default_factory=list)
    temporal_patterns: List[TemporalPattern] = Field(default_factory=list)


__all__ = [
    "ArchetypalTheme",
    "CHAKRA_AXES",
    "ChakraBalance",
    "EnergeticState",
    "HarmonicPattern",
    "HarmonicRecord",
    "HarmonicReport",
    "KarmicTheme",
    "NumberPattern",
    "QuantumFieldAnalysis",
    "SynchronicityPattern",
    "TemporalPattern",
]
