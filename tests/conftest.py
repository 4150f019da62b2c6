# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - make_entry      → factory: make_entry(name="Lecture", ...) -> MeetingEntry
# - lecture         → MeetingEntry named "CS2103 Lecture"
# - tutorial        → MeetingEntry named "CS2103 Tutorial"
# - seminar         → MeetingEntry named "CS2101 Seminar" (other module)
# - collection      → MeetingCollection [lecture, tutorial]
# - app_config      → AppConfig writing to a tmp_path data file
# - sample_document → persisted document with two records
#
# ==============================================

import pytest

from linkytime.config import AppConfig, StorageConfig
from linkytime.model import (
    IsRecurring,
    MeetingCollection,
    MeetingDateTime,
    MeetingDuration,
    MeetingEntry,
    MeetingName,
    MeetingUrl,
    ModuleCode,
    Tag,
)


@pytest.fixture
def make_entry():
    """Build a MeetingEntry from raw strings, with sensible defaults."""
    def _make(
        name="CS2103 Lecture",
        url="https://nus-sg.zoom.us/j/111111",
        date_time="25-12-2021 1400",
        duration="2",
        module="CS2103",
        is_recurring="Y",
        tags=("Lecture",),
    ):
        return MeetingEntry(
            name=MeetingName(name),
            url=MeetingUrl(url),
            date_time=MeetingDateTime(date_time),
            duration=MeetingDuration(duration),
            module=ModuleCode(module),
            is_recurring=IsRecurring(is_recurring),
            tags=frozenset(Tag(tag) for tag in tags),
        )
    return _make


@pytest.fixture
def lecture(make_entry):
    return make_entry()


@pytest.fixture
def tutorial(make_entry):
    return make_entry(
        name="CS2103 Tutorial",
        url="https://nus-sg.zoom.us/j/222222",
        date_time="27-12-2021 1000",
        duration="1",
        is_recurring="N",
        tags=("Tutorial", "Online"),
    )


@pytest.fixture
def seminar(make_entry):
    return make_entry(
        name="CS2101 Seminar",
        url="http://localhost:8080/seminar",
        date_time="01-01-2022 0900",
        duration="1.5",
        module="CS2101",
        tags=(),
    )


@pytest.fixture
def collection(lecture, tutorial):
    return MeetingCollection([lecture, tutorial])


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(
        storage=StorageConfig(backend="json", data_file=str(tmp_path / "data" / "linkytime.json")),
        open_links_in_browser=False,
    )


@pytest.fixture
def sample_document():
    return {
        "meetingEntries": [
            {
                "name": "CS2103 Lecture",
                "url": "https://nus-sg.zoom.us/j/111111",
                "dateTime": "25-12-2021 1400",
                "duration": "2",
                "module": "CS2103",
                "isRecurring": "Y",
                "tags": ["Lecture"],
            },
            {
                "name": "CS2103 Tutorial",
                "url": "https://nus-sg.zoom.us/j/222222",
                "dateTime": "27-12-2021 1000",
                "duration": "1",
                "module": "CS2103",
                "isRecurring": "N",
                "tags": ["Online", "Tutorial"],
            },
        ]
    }
