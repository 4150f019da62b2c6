# ==============================================
# Tests for LogicManager
# ==============================================
#
# End-to-end: raw input text -> parser -> command -> collection
# -> JSON file, using the app_config fixture (tmp_path data file).
# ==============================================

import json
from dataclasses import replace
from pathlib import Path

import pytest

from linkytime.exceptions import CommandError, DuplicateRecordError, UnknownCommandError
from linkytime.logic import LogicManager
from linkytime.model import MeetingName

ADD_LECTURE = (
    "add n/CS2103 Lecture u/https://nus-sg.zoom.us/j/111111 "
    "d/25-12-2021 1400 dur/2 m/CS2103 r/Y t/Lecture"
)
ADD_TUTORIAL = (
    "add n/CS2103 Tutorial u/https://nus-sg.zoom.us/j/222222 "
    "d/27-12-2021 1000 dur/1 m/CS2103 r/N t/Tutorial t/Online"
)


@pytest.fixture
def logic(app_config):
    manager = LogicManager(app_config)
    manager.execute(ADD_LECTURE)
    manager.execute(ADD_TUTORIAL)
    return manager


def data_file(config):
    return Path(config.storage.data_file)


class TestStartup:
    def test_starts_empty_without_data_file(self, app_config):
        manager = LogicManager(app_config)
        assert len(manager.collection) == 0
        assert not data_file(app_config).exists()

    def test_corrupt_data_file_is_fatal(self, app_config, sample_document):
        sample_document["meetingEntries"].append(sample_document["meetingEntries"][0])
        path = data_file(app_config)
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps(sample_document), encoding="utf-8")

        with pytest.raises(DuplicateRecordError):
            LogicManager(app_config)


class TestExecute:
    def test_edit_example(self, logic, lecture):
        result = logic.execute("edit 2 n/Seminar")
        entries = logic.get_filtered_entries()
        assert entries[0] == lecture
        assert entries[1].name == MeetingName("Seminar")
        assert result.feedback.startswith("Edited meeting: Seminar")

    def test_edit_without_fields(self, logic, lecture, tutorial):
        with pytest.raises(CommandError):
            logic.execute("edit 2")
        assert logic.collection.entries == (lecture, tutorial)

    @pytest.mark.parametrize("text", ["delete 0", "delete 3"])
    def test_delete_out_of_range(self, logic, text):
        with pytest.raises(CommandError):
            logic.execute(text)
        assert len(logic.collection) == 2

    @pytest.mark.parametrize("text", ["deletemod 0", "deletemod 2"])
    def test_deletemod_out_of_range(self, logic, text):
        with pytest.raises(CommandError, match="module index"):
            logic.execute(text)
        assert len(logic.collection) == 2

    def test_unknown_command(self, logic):
        with pytest.raises(UnknownCommandError):
            logic.execute("launch 1")

    def test_find_then_delete_uses_view(self, logic, lecture):
        logic.execute("find tutorial")
        logic.execute("delete 1")
        assert logic.collection.entries == (lecture,)

    def test_modules(self, logic):
        logic.execute("add n/Seminar u/http://localhost/s d/01-01-2022 0900 dur/1 m/cs2101 r/n")
        assert [str(m) for m in logic.get_filtered_modules()] == ["CS2103", "CS2101"]

        logic.execute("findmod 2101")
        assert [str(m) for m in logic.get_filtered_modules()] == ["CS2101"]


class TestPersistence:
    def test_no_write_without_autosave(self, logic, app_config):
        assert not data_file(app_config).exists()

    def test_autosave_after_mutation(self, app_config):
        config = replace(app_config, storage=replace(app_config.storage, autosave=True))
        manager = LogicManager(config)
        manager.execute(ADD_LECTURE)

        document = json.loads(data_file(config).read_text(encoding="utf-8"))
        assert [record["name"] for record in document["meetingEntries"]] == ["CS2103 Lecture"]

    def test_autosave_after_deletemod(self, app_config):
        config = replace(app_config, storage=replace(app_config.storage, autosave=True))
        manager = LogicManager(config)
        manager.execute(ADD_LECTURE)
        manager.execute(ADD_TUTORIAL)
        manager.execute("deletemod 1")

        document = json.loads(data_file(config).read_text(encoding="utf-8"))
        assert document == {"meetingEntries": []}

    def test_autosave_skips_queries(self, app_config):
        config = replace(app_config, storage=replace(app_config.storage, autosave=True))
        manager = LogicManager(config)
        manager.execute("list")
        assert not data_file(config).exists()

    def test_close_saves(self, logic, app_config, sample_document):
        logic.close()
        document = json.loads(data_file(app_config).read_text(encoding="utf-8"))
        assert document == sample_document

    def test_restored_in_next_session(self, app_config, lecture, tutorial):
        with LogicManager(app_config) as first:
            first.execute(ADD_TUTORIAL)
            first.execute(ADD_LECTURE)

        second = LogicManager(app_config)
        assert second.collection.entries == (tutorial, lecture)
