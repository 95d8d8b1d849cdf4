from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from featherweight.libs.schemas.history import Conversation, LifeEvent, UserHistory


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextRequest(_Request):
    text: str = ""


class TextHistoryRequest(_Request):
    text: str = ""
    history: UserHistory | None = None


class ReportRequest(_Request):
    text: str = ""
    history: UserHistory


class SynchronicityRequest(_Request):
    events: List[LifeEvent] = Field(default_factory=list)
    conversations: List[Conversation] | None = None

    def record_count(self) -> int:
        messages = sum(len(conv.messages) for conv in self.conversations or [])
        return len(self.events) + len(self.conversations or []) + messages


__all__ = ["ReportRequest", "SynchronicityRequest", "TextHistoryRequest", "TextRequest"]
