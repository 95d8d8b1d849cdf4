"""User history records supplied by the journal and conversation stores."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so window comparisons never mix kinds."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class HistoryRecord(BaseModel):
    """Immutable base for history records; accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("timestamp", check_fields=False)
    @classmethod
    def normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value is not None else None


class JournalEntry(HistoryRecord):
    id: str = ""
    content: str = ""
    timestamp: datetime
    # Upstream annotations are passed through unvalidated.
    emotional_tone: float | None = None
    spiritual_themes: List[str] = Field(default_factory=list)
    consciousness_level: float | None = None


class Message(HistoryRecord):
    content: str = ""
    timestamp: datetime | None = None
    sender: Literal["user", "flappy"] = "user"
    spiritual_insights: List[str] = Field(default_factory=list)


class Conversation(HistoryRecord):
    id: str = ""
    messages: List[Message] = Field(default_factory=list)
    timestamp: datetime | None = None
    platform: Literal["web", "email", "sms"] = "web"
    spiritual_depth: float = 0.0


class LifeEvent(HistoryRecord):
    description: str = ""
    timestamp: datetime
    significance: float = 0.5
    spiritual_lessons: List[str] = Field(default_factory=list)
    archetypal_themes: List[str] = Field(default_factory=list)


class SpiritualPractice(HistoryRecord):
    practice: str
    frequency: str = ""
    duration: float = 0.0
    effectiveness: float = 0.0
    insights: List[str] = Field(default_factory=list)


class SynchronicityEvent(HistoryRecord):
    description: str = ""
    timestamp: datetime
    meaningfulness: float = 0.5
    spiritual_message: str = ""
    numerical_patterns: List[int] = Field(default_factory=list)


class UserHistory(HistoryRecord):
    """Everything a user has written or logged, in any order."""

    user_id: str = ""
    journal_entries: List[JournalEntry] = Field(default_factory=list)
    conversations: List[Conversation] = Field(default_factory=list)
    life_events: List[LifeEvent] = Field(default_factory=list)
    spiritual_practices: List[SpiritualPractice] = Field(default_factory=list)
    synchronicities: List[SynchronicityEvent] = Field(default_factory=list)

    def user_content(self) -> str:
        """Journal text, then user-sent messages, then life-event descriptions."""

        parts: List[str] = [entry.content for entry in self.journal_entries]
        for conversation in self.conversations:
            parts.extend(msg.content for msg in conversation.messages if msg.sender == "user")
        parts.extend(event.description for event in self.life_events)
        return " ".join(parts)

    def record_count(self) -> int:
        messages = sum(len(conv.messages) for conv in self.conversations)
        return (
            len(self.journal_entries)
            + len(self.conversations)
            + messages
            + len(self.life_events)
            + len(self.spiritual_practices)
            + len(self.synchronicities)
        )

    def is_empty(self) -> bool:
        return self.record_count() == 0


__all__ = [
    "Conversation",
    "HistoryRecord",
    "JournalEntry",
    "LifeEvent",
    "Message",
    "SpiritualPractice",
    "SynchronicityEvent",
    "UserHistory",
    "ensure_utc",
]
