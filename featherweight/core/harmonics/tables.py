"""Fixed lookup tables for the harmonic analyzers.

Every keyword check against these tables is a case-insensitive substring
test, so short keywords also fire inside longer words ("heart" in
"heartbreak"). Keywords are stored lowercase.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class SacredNumber(NamedTuple):
    significance: str
    frequency: float


SACRED_NUMBERS: Mapping[int, SacredNumber] = MappingProxyType(
    {
        3: SacredNumber("Trinity, creativity, communication", 0.7),
        7: SacredNumber("Spiritual awakening, mysticism, inner wisdom", 0.8),
        11: SacredNumber("Master number, intuition, spiritual insight", 0.9),
        22: SacredNumber("Master builder, manifestation, spiritual mission", 0.9),
        33: SacredNumber("Master teacher, compassion, healing", 0.95),
        108: SacredNumber("Sacred number in many traditions, completion", 0.85),
        144: SacredNumber("Spiritual completion, ascension", 0.8),
        432: SacredNumber("Healing frequency, cosmic harmony", 0.75),
        528: SacredNumber("Love frequency, DNA repair", 0.8),
        777: SacredNumber("Divine perfection, spiritual alignment", 0.9),
        888: SacredNumber("Abundance, infinite possibilities", 0.85),
        999: SacredNumber("Completion, spiritual mastery", 0.9),
        1111: SacredNumber("Awakening, portal, new beginnings", 0.95),
    }
)

SPIRITUAL_CONTEXT_KEYWORDS: Tuple[str, ...] = ("spiritual", "divine", "sacred", "awakening", "consciousness")

# Label order is the output order of identify_manifestation_areas.
MANIFESTATION_AREAS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Relationships", ("relationship", "love")),
    ("Career", ("career", "work")),
    ("Spiritual Development", ("spiritual", "growth")),
    ("Health & Healing", ("health", "healing")),
    ("Creativity", ("creative", "art")),
)
DEFAULT_MANIFESTATION_AREA = "General Life Path"


class ChakraKeywords(NamedTuple):
    keywords: Tuple[str, ...]
    issues: Tuple[str, ...]


# Issue entries that read as phrases ("closed heart", "control issues") are
# matched as phrases, so a chakra's own positive words never also count
# against it.
CHAKRA_KEYWORDS: Mapping[str, ChakraKeywords] = MappingProxyType(
    {
        "root": ChakraKeywords(
            keywords=("security", "secure", "stability", "grounded", "survival", "basic", "foundation", "earth", "red"),
            issues=("insecurity", "unstable", "ungrounded", "survival", "fear", "disconnected"),
        ),
        "sacral": ChakraKeywords(
            keywords=("creativity", "sexuality", "emotion", "pleasure", "flow", "orange", "water", "sensual"),
            issues=("blocked", "rigid", "emotionally numb", "creative block", "sexual issues"),
        ),
        "solar_plexus": ChakraKeywords(
            keywords=("power", "confidence", "control", "will", "personal", "yellow", "fire", "strength"),
            issues=("powerless", "weak", "victim", "control issues", "low confidence", "manipulation"),
        ),
        "heart": ChakraKeywords(
            keywords=("love", "compassion", "connection", "relationship", "caring", "green", "air", "forgiveness"),
            issues=("heartbreak", "closed heart", "resentment", "anger", "isolation", "bitter"),
        ),
        "throat": ChakraKeywords(
            keywords=("communication", "expression", "truth", "voice", "speak", "blue", "sound", "authentic"),
            issues=("silent", "suppressed", "lies", "communication problems", "throat issues"),
        ),
        "third_eye": ChakraKeywords(
            keywords=("intuition", "insight", "vision", "psychic", "inner", "indigo", "light", "clarity"),
            issues=("confused", "unclear", "blind", "intuition blocked", "mental fog"),
        ),
        "crown": ChakraKeywords(
            keywords=("spiritual", "divine", "consciousness", "enlightenment", "transcendent", "violet", "cosmic", "unity"),
            issues=("disconnected", "spiritual crisis", "meaningless", "lost", "purpose"),
        ),
    }
)

# Secondary set used for the recent-history trend; any hit scores 0.1 once.
CHAKRA_TREND_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "root": ("stable", "grounded"),
        "sacral": ("creative", "flow"),
        "solar_plexus": ("confident", "power"),
        "heart": ("love", "heart"),
        "throat": ("express", "communicate"),
        "third_eye": ("intuition", "insight"),
        "crown": ("spiritual", "divine"),
    }
)

ARCHETYPES: Tuple[str, ...] = (
    "The Hero", "The Sage", "The Innocent", "The Explorer", "The Rebel",
    "The Magician", "The Lover", "The Caregiver", "The Creator", "The Ruler",
    "The Jester", "The Everyman", "The Mother", "The Father", "The Child",
    "The Warrior", "The Healer", "The Teacher", "The Mystic", "The Shaman",
)

# Only the first ten archetypes carry keywords; the rest never score.
ARCHETYPE_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "The Hero": ("journey", "quest", "challenge", "overcome", "victory", "courage"),
        "The Sage": ("wisdom", "knowledge", "understanding", "truth", "insight", "learning"),
        "The Innocent": ("pure", "simple", "trust", "faith", "hope", "optimism"),
        "The Explorer": ("adventure", "discover", "explore", "freedom", "independence", "journey"),
        "The Rebel": ("change", "revolution", "break", "different", "rebel", "transform"),
        "The Magician": ("create", "manifest", "transform", "magic", "power", "vision"),
        "The Lover": ("love", "passion", "relationship", "connection", "intimacy", "beauty"),
        "The Caregiver": ("care", "help", "nurture", "support", "protect", "service"),
        "The Creator": ("create", "art", "imagination", "express", "build", "design"),
        "The Ruler": ("control", "lead", "authority", "responsibility", "order", "structure"),
    }
)

ARCHETYPE_GUIDANCE: Mapping[str, str] = MappingProxyType(
    {
        "The Hero": "Embrace your courage and face challenges with determination",
        "The Sage": "Seek wisdom and share your knowledge with others",
        "The Innocent": "Maintain your faith and trust in the goodness of life",
        "The Explorer": "Follow your curiosity and embrace new experiences",
        "The Rebel": "Challenge the status quo and create positive change",
        "The Magician": "Use your power to manifest your highest vision",
        "The Lover": "Open your heart and create meaningful connections",
        "The Caregiver": "Nurture others while caring for yourself",
        "The Creator": "Express your unique gifts and create beauty",
        "The Ruler": "Lead with wisdom and create positive structure",
    }
)
DEFAULT_ARCHETYPE_GUIDANCE = "Embrace your archetypal energy"

VIBRATIONAL_BASE = 432
VIBRATIONAL_SPIRITUAL: Tuple[str, ...] = (
    "love", "peace", "harmony", "divine", "sacred", "soul", "spirit",
    "consciousness", "awakening", "enlightenment",
)
VIBRATIONAL_EXPANSIVE: Tuple[str, ...] = (
    "growth", "expansion", "evolution", "transformation", "transcendence", "ascension",
)
VIBRATIONAL_CONTRACTIVE: Tuple[str, ...] = (
    "fear", "anxiety", "worry", "doubt", "confusion", "struggle", "pain",
)

EMOTIONAL_FREQUENCIES: Mapping[str, int] = MappingProxyType(
    {
        "joy": 540, "love": 528, "peace": 528, "gratitude": 540,
        "excitement": 500, "hope": 480, "optimism": 480,
        "neutral": 432, "calm": 432,
        "worry": 380, "fear": 360, "anger": 340, "sadness": 320,
    }
)

CONSCIOUSNESS_INDICATORS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "unity": ("oneness", "unity", "connection", "interconnected", "wholeness"),
        "transcendence": ("transcend", "beyond", "higher", "elevated", "ascend"),
        "presence": ("present", "now", "moment", "awareness", "mindful"),
        "love": ("love", "compassion", "kindness", "heart", "caring"),
        "wisdom": ("wisdom", "understanding", "insight", "clarity", "truth"),
    }
)

COHERENCE_KEYWORDS: Tuple[str, ...] = (
    "aligned", "harmony", "balance", "coherent", "synchronized",
    "flow", "unity", "integrated", "whole", "complete",
)
INCOHERENCE_KEYWORDS: Tuple[str, ...] = (
    "scattered", "confused", "chaotic", "fragmented", "disconnected",
    "conflicted", "torn", "divided", "unstable", "turbulent",
)

OPENNESS_KEYWORDS: Tuple[str, ...] = (
    "open", "curious", "exploring", "seeking", "wondering",
    "spiritual", "divine", "sacred", "mystical", "transcendent",
)
RESISTANCE_KEYWORDS: Tuple[str, ...] = ("skeptical", "doubt", "impossible", "ridiculous", "nonsense")

EXPANSION_KEYWORDS: Tuple[str, ...] = (
    "growth", "learning", "expanding", "evolving", "transforming",
    "awakening", "discovering", "exploring", "developing", "ascending",
)

MERKABA_KEYWORDS: Tuple[str, ...] = (
    "light", "energy", "spinning", "ascending", "transcending",
    "dimensional", "cosmic", "universal", "infinite", "eternal",
)

PROBABILITY_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Future manifestation potential", ("future", "tomorrow", "will")),
    ("Creative manifestation field", ("dream", "vision", "imagine")),
    ("Relationship probability matrix", ("relationship", "love", "connection")),
    ("Life purpose alignment field", ("career", "work", "purpose")),
)


class KarmicPattern(NamedTuple):
    indicators: Tuple[str, ...]
    lessons: Tuple[str, ...]
    transcendence: Tuple[str, ...]


KARMIC_PATTERNS: Mapping[str, KarmicPattern] = MappingProxyType(
    {
        "Self-Worth": KarmicPattern(
            indicators=("worth", "value", "deserve", "enough", "confidence", "self-esteem"),
            lessons=("Learning to value yourself", "Recognizing your inherent worth", "Building healthy self-esteem"),
            transcendence=("confident", "worthy", "valuable", "self-love", "appreciate"),
        ),
        "Boundaries": KarmicPattern(
            indicators=("boundaries", "no", "overwhelmed", "people-pleasing", "saying no"),
            lessons=("Setting healthy boundaries", "Learning to say no", "Protecting your energy"),
            transcendence=("boundaries", "saying no", "protecting", "healthy limits"),
        ),
        "Trust": KarmicPattern(
            indicators=("trust", "betrayal", "faith", "doubt", "suspicious", "paranoid"),
            lessons=("Learning to trust again", "Developing discernment", "Healing trust wounds"),
            transcendence=("trusting", "faith", "discernment", "wise choices"),
        ),
        "Power": KarmicPattern(
            indicators=("power", "control", "manipulation", "victim", "powerless", "authority"),
            lessons=("Reclaiming personal power", "Using power responsibly", "Healing victim consciousness"),
            transcendence=("empowered", "strong", "capable", "sovereign"),
        ),
        "Love": KarmicPattern(
            indicators=("love", "relationship", "heartbreak", "abandonment", "rejection", "intimacy"),
            lessons=("Learning unconditional love", "Healing relationship patterns", "Opening to love"),
            transcendence=("loving", "open heart", "compassionate", "connected"),
        ),
        "Forgiveness": KarmicPattern(
            indicators=("forgiveness", "resentment", "anger", "grudge", "bitter", "hurt"),
            lessons=("Learning to forgive", "Releasing resentment", "Healing emotional wounds"),
            transcendence=("forgiven", "released", "peace", "letting go"),
        ),
    }
)

MASTER_DATE_NUMBERS = frozenset({11, 22, 33})


__all__ = [
    "ARCHETYPES",
    "ARCHETYPE_GUIDANCE",
    "ARCHETYPE_KEYWORDS",
    "CHAKRA_KEYWORDS",
    "CHAKRA_TREND_KEYWORDS",
    "COHERENCE_KEYWORDS",
    "CONSCIOUSNESS_INDICATORS",
    "ChakraKeywords",
    "DEFAULT_ARCHETYPE_GUIDANCE",
    "DEFAULT_MANIFESTATION_AREA",
    "EMOTIONAL_FREQUENCIES",
    "EXPANSION_KEYWORDS",
    "INCOHERENCE_KEYWORDS",
    "KARMIC_PATTERNS",
    "KarmicPattern",
    "MANIFESTATION_AREAS",
    "MASTER_DATE_NUMBERS",
    "MERKABA_KEYWORDS",
    "OPENNESS_KEYWORDS",
    "PROBABILITY_FIELDS",
    "RESISTANCE_KEYWORDS",
    "SACRED_NUMBERS",
    "SPIRITUAL_CONTEXT_KEYWORDS",
    "SacredNumber",
    "VIBRATIONAL_BASE",
    "VIBRATIONAL_CONTRACTIVE",
    "VIBRATIONAL_EXPANSIVE",
    "VIBRATIONAL_SPIRITUAL",
]
