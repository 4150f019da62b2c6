# ==============================================
# Tests for the Serialization Adapter
# ==============================================

import copy
import re

import pytest

from linkytime.exceptions import DuplicateRecordError, IllegalValueError
from linkytime.model import MeetingCollection
from linkytime.persistence.serializable import (
    MESSAGE_DUPLICATE_MEETING_ENTRY,
    MESSAGE_DUPLICATE_TAGS,
    AdaptedMeetingEntry,
    SerializableLinkyTime,
    collection_from_dict,
    collection_to_dict,
)


class TestSaving:
    def test_document_shape(self, collection, sample_document):
        assert collection_to_dict(collection) == sample_document

    def test_tags_written_sorted(self, make_entry):
        record = AdaptedMeetingEntry.from_model(make_entry(tags=("Zeta", "Alpha", "Mid")))
        assert record.tags == ["Alpha", "Mid", "Zeta"]

    def test_empty_collection(self):
        assert collection_to_dict(MeetingCollection()) == {"meetingEntries": []}

    def test_snapshot_is_independent(self, collection, seminar):
        snapshot = SerializableLinkyTime.from_model(collection)
        collection.add(seminar)
        assert len(snapshot.meeting_entries) == 2


class TestLoading:
    def test_round_trip(self, collection, seminar):
        collection.add(seminar)
        loaded = collection_from_dict(collection_to_dict(collection))
        assert loaded.entries == collection.entries

    def test_loads_sample(self, sample_document, lecture, tutorial):
        assert collection_from_dict(sample_document).entries == (lecture, tutorial)

    def test_duplicate_records(self, sample_document):
        sample_document["meetingEntries"].append(copy.deepcopy(sample_document["meetingEntries"][0]))
        with pytest.raises(DuplicateRecordError, match=re.escape(MESSAGE_DUPLICATE_MEETING_ENTRY)):
            collection_from_dict(sample_document)

    def test_records_equal_after_canonicalisation_are_duplicates(self, sample_document):
        twin = copy.deepcopy(sample_document["meetingEntries"][0])
        twin["module"] = "cs2103"
        twin["isRecurring"] = "yes"
        sample_document["meetingEntries"].append(twin)
        with pytest.raises(DuplicateRecordError):
            collection_from_dict(sample_document)

    @pytest.mark.parametrize("key", ["name", "url", "dateTime", "duration", "module", "isRecurring"])
    def test_missing_field(self, sample_document, key):
        del sample_document["meetingEntries"][1][key]
        with pytest.raises(IllegalValueError, match=f"Meeting entry's {key} field is missing!"):
            collection_from_dict(sample_document)

    def test_invalid_value(self, sample_document):
        sample_document["meetingEntries"][0]["url"] = "not a url"
        with pytest.raises(IllegalValueError, match="URLs should start with"):
            collection_from_dict(sample_document)

    def test_non_string_value(self, sample_document):
        sample_document["meetingEntries"][0]["duration"] = 2
        with pytest.raises(IllegalValueError, match="must be a string"):
            collection_from_dict(sample_document)

    @pytest.mark.parametrize("tags", ["Lecture", [1], None])
    def test_bad_tags(self, sample_document, tags):
        sample_document["meetingEntries"][0]["tags"] = tags
        with pytest.raises(IllegalValueError):
            collection_from_dict(sample_document)

    def test_repeated_tag_rejected(self, sample_document):
        sample_document["meetingEntries"][0]["tags"] = ["Lab", "Lab"]
        with pytest.raises(IllegalValueError, match=re.escape(MESSAGE_DUPLICATE_TAGS)):
            collection_from_dict(sample_document)

    def test_tags_differing_in_case_are_distinct(self, sample_document):
        sample_document["meetingEntries"][0]["tags"] = ["Lab", "lab"]
        assert len(collection_from_dict(sample_document).entries[0].tags) == 2

    def test_missing_tags_means_no_tags(self, sample_document):
        del sample_document["meetingEntries"][0]["tags"]
        assert collection_from_dict(sample_document).entries[0].tags == frozenset()

    @pytest.mark.parametrize("document", [
        [],
        "meetingEntries",
        {},
        {"meetingEntries": {}},
        {"meetingEntries": ["record"]},
    ])
    def test_malformed_document(self, document):
        with pytest.raises(IllegalValueError):
            collection_from_dict(document)
