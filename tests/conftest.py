import datetime as dt

import pytest

from featherweight.libs.schemas.history import JournalEntry, LifeEvent, UserHistory

NOW = dt.datetime(2025, 6, 18, 12, 0, 0, tzinfo=dt.timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_entry(now):
    counter = {"n": 0}

    def _make(content, days_ago=0, **kwargs):
        counter["n"] += 1
        return JournalEntry(
            id=str(counter["n"]),
            content=content,
            timestamp=now - dt.timedelta(days=days_ago),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_event():
    def _make(description, timestamp, lessons=None, archetypes=None):
        return LifeEvent(
            description=description,
            timestamp=timestamp,
            spiritual_lessons=lessons or [],
            archetypal_themes=archetypes or [],
        )

    return _make


@pytest.fixture
def journal_history():
    def _make(*entries, **kwargs):
        return UserHistory(user_id="test-user", journal_entries=list(entries), **kwargs)

    return _make
