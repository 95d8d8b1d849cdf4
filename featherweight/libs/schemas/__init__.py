"""Pydantic models and schema utilities."""

from .harmonics import (
    ArchetypalTheme,
    ChakraBalance,
    EnergeticState,
    HarmonicPattern,
    HarmonicReport,
    KarmicTheme,
    NumberPattern,
    QuantumFieldAnalysis,
    SynchronicityPattern,
    TemporalPattern,
)
from .history import (
    Conversation,
    JournalEntry,
    LifeEvent,
    Message,
    SpiritualPractice,
    SynchronicityEvent,
    UserHistory,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "ArchetypalTheme",
    "ChakraBalance",
    "Conversation",
    "EnergeticState",
    "HarmonicPattern",
    "HarmonicReport",
    "JournalEntry",
    "KarmicTheme",
    "LifeEvent",
    "Message",
    "NumberPattern",
    "QuantumFieldAnalysis",
    "SpiritualPractice",
    "SynchronicityEvent",
    "SynchronicityPattern",
    "TemporalPattern",
    "UserHistory",
    "get_settings",
]
