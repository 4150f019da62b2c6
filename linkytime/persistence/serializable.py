# ==============================================
# Serializable LinkyTime
# ==============================================
#
# PURPOSE:
#   Convert between a MeetingCollection and the plain document
#   that is written to disk (or MongoDB):
#
#     {
#       "meetingEntries": [
#         {
#           "name": "CS2103 Lecture",
#           "url": "https://nus-sg.zoom.us/j/123456",
#           "dateTime": "25-12-2021 1400",
#           "duration": "2",
#           "module": "CS2103",
#           "isRecurring": "Y",
#           "tags": ["Lecture"]
#         }
#       ]
#     }
#
# CLASSES:
# --------
# - AdaptedMeetingEntry    → one record <-> one MeetingEntry
# - SerializableLinkyTime  → the whole document <-> MeetingCollection
#
# LOADING RULES:
# --------------
#   - First missing / wrongly typed / invalid field → IllegalValueError
#   - A tag listed twice in one record → IllegalValueError
#   - First duplicate record → DuplicateRecordError
#   - Either way nothing is returned: there is no partial load
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, List

from linkytime.exceptions import DuplicateRecordError, IllegalValueError, ValidationError
from linkytime.model.collection import MeetingCollection
from linkytime.model.fields import (
    IsRecurring,
    MeetingDateTime,
    MeetingDuration,
    MeetingName,
    MeetingUrl,
    ModuleCode,
    Tag,
)
from linkytime.model.meeting_entry import MeetingEntry

MISSING_FIELD_MESSAGE_FORMAT = "Meeting entry's {} field is missing!"
MESSAGE_DUPLICATE_MEETING_ENTRY = "Meeting entries list contains duplicate meeting entry(s)."
MESSAGE_DUPLICATE_TAGS = "Meeting entry's tags field contains the same tag more than once"

# record key -> (field value type, MeetingEntry attribute)
RECORD_FIELDS = (
    ("name", MeetingName, "name"),
    ("url", MeetingUrl, "url"),
    ("dateTime", MeetingDateTime, "date_time"),
    ("duration", MeetingDuration, "duration"),
    ("module", ModuleCode, "module"),
    ("isRecurring", IsRecurring, "is_recurring"),
)


@dataclass
class AdaptedMeetingEntry:
    """String-only form of a MeetingEntry."""
    name: str
    url: str
    dateTime: str
    duration: str
    module: str
    isRecurring: str
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_model(cls, entry: MeetingEntry) -> "AdaptedMeetingEntry":
        return cls(
            name=str(entry.name),
            url=str(entry.url),
            dateTime=str(entry.date_time),
            duration=str(entry.duration),
            module=str(entry.module),
            isRecurring=str(entry.is_recurring),
            tags=[str(tag) for tag in entry.sorted_tags()],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "name": self.name,
            "url": self.url,
            "dateTime": self.dateTime,
            "duration": self.duration,
            "module": self.module,
            "isRecurring": self.isRecurring,
            "tags": list(self.tags),
        }

    @staticmethod
    def validate_record(data: Any) -> "AdaptedMeetingEntry":
        """
        Check the structure of one stored record.

        Args:
            data: One element of meetingEntries

        Returns:
            AdaptedMeetingEntry holding the record's strings

        Raises:
            IllegalValueError: If the record is not an object, a key is
                               missing, a value has the wrong type, or a
                               tag is listed twice
        """
        if not isinstance(data, dict):
            raise IllegalValueError("Meeting entry records must be JSON objects")

        values = {}
        for key, _, _ in RECORD_FIELDS:
            value = data.get(key)
            if value is None:
                raise IllegalValueError(MISSING_FIELD_MESSAGE_FORMAT.format(key))
            if not isinstance(value, str):
                raise IllegalValueError(f"Meeting entry's {key} field must be a string")
            values[key] = value

        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise IllegalValueError("Meeting entry's tags field must be a list of strings")
        if len({tag.strip() for tag in tags}) != len(tags):
            # Saved documents never repeat a tag
            raise IllegalValueError(MESSAGE_DUPLICATE_TAGS)

        return AdaptedMeetingEntry(tags=list(tags), **values)

    def to_model_type(self) -> MeetingEntry:
        """
        Convert this record into a MeetingEntry.

        Raises:
            IllegalValueError: If any value violates its field constraint
        """
        resolved = {}
        try:
            for key, field_type, attribute in RECORD_FIELDS:
                resolved[attribute] = field_type(getattr(self, key))
            resolved["tags"] = frozenset(Tag(tag) for tag in self.tags)
        except ValidationError as e:
            raise IllegalValueError(str(e))
        return MeetingEntry(**resolved)


class SerializableLinkyTime:
    """The whole persisted document."""

    def __init__(self, meeting_entries: List[AdaptedMeetingEntry]):
        self.meeting_entries = list(meeting_entries)

    @classmethod
    def from_model(cls, collection: MeetingCollection) -> "SerializableLinkyTime":
        """
        Snapshot a collection in its current order.

        Later changes to collection do not affect the snapshot.
        """
        return cls([AdaptedMeetingEntry.from_model(entry) for entry in collection.entries])

    def to_dict(self) -> Dict[str, Any]:
        return {"meetingEntries": [record.to_dict() for record in self.meeting_entries]}

    @classmethod
    def from_dict(cls, data: Any) -> "SerializableLinkyTime":
        """
        Read the document structure.

        Raises:
            IllegalValueError: If the root or any record is malformed
        """
        if not isinstance(data, dict):
            raise IllegalValueError("LinkyTime data must be a JSON object")
        records = data.get("meetingEntries")
        if not isinstance(records, list):
            raise IllegalValueError("meetingEntries must be a list")
        return cls([AdaptedMeetingEntry.validate_record(record) for record in records])

    def to_model_type(self) -> MeetingCollection:
        """
        Build a fresh MeetingCollection from the records.

        Raises:
            IllegalValueError: If a record holds an invalid value
            DuplicateRecordError: If two records describe the same meeting
        """
        collection = MeetingCollection()
        for record in self.meeting_entries:
            entry = record.to_model_type()
            if collection.has(entry):
                raise DuplicateRecordError(MESSAGE_DUPLICATE_MEETING_ENTRY)
            collection.add(entry)
        return collection


def collection_to_dict(collection: MeetingCollection) -> Dict[str, Any]:
    """Convenience: MeetingCollection -> persisted document."""
    return SerializableLinkyTime.from_model(collection).to_dict()


def collection_from_dict(data: Any) -> MeetingCollection:
    """Convenience: persisted document -> MeetingCollection."""
    return SerializableLinkyTime.from_dict(data).to_model_type()
