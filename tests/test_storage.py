# ==============================================
# Tests for Storage Transports
# ==============================================
#
# JsonStorage runs against tmp_path. MongoStorage runs against a
# MagicMock standing in for pymongo.MongoClient.
# ==============================================

import json
from unittest.mock import MagicMock

import pytest
from pymongo.errors import ConnectionFailure, PyMongoError

from linkytime.config import AppConfig, MongoConfig, StorageConfig
from linkytime.exceptions import DuplicateRecordError, PersistenceError
from linkytime.model import MeetingCollection
from linkytime.persistence import JsonStorage, MongoStorage, create_storage
from linkytime.persistence import mongo_storage
from linkytime.persistence.mongo_storage import DOCUMENT_ID


class TestJsonStorage:
    def test_read_missing_file(self, tmp_path):
        storage = JsonStorage(str(tmp_path / "missing.json"))
        assert not storage.exists()
        assert storage.read() is None

    def test_save_creates_directories(self, tmp_path, collection, sample_document):
        data_file = tmp_path / "nested" / "dir" / "linkytime.json"
        JsonStorage(str(data_file)).save(collection)
        assert json.loads(data_file.read_text(encoding="utf-8")) == sample_document

    def test_save_then_read(self, tmp_path, collection, seminar):
        collection.add(seminar)
        storage = JsonStorage(str(tmp_path / "linkytime.json"))
        storage.save(collection)
        assert storage.read().entries == collection.entries

    def test_invalid_json(self, tmp_path):
        data_file = tmp_path / "linkytime.json"
        data_file.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError, match="Could not read"):
            JsonStorage(str(data_file)).read()

    def test_duplicate_records_fail_whole_load(self, tmp_path, sample_document):
        sample_document["meetingEntries"].append(sample_document["meetingEntries"][0])
        data_file = tmp_path / "linkytime.json"
        data_file.write_text(json.dumps(sample_document), encoding="utf-8")
        with pytest.raises(DuplicateRecordError):
            JsonStorage(str(data_file)).read()


@pytest.fixture
def mongo():
    """MongoStorage wired to a mocked client; returns (storage, documents)."""
    storage = MongoStorage("localhost", 27017, "linkytime", "meetings")
    storage.client = MagicMock()
    documents = storage.client.__getitem__.return_value.__getitem__.return_value
    return storage, documents


class TestMongoStorage:
    def test_not_connected(self):
        storage = MongoStorage("localhost", 27017, "linkytime", "meetings")
        with pytest.raises(PersistenceError, match="Not connected"):
            storage.read()

    def test_read_nothing_saved(self, mongo):
        storage, documents = mongo
        documents.find_one.return_value = None
        assert storage.read() is None
        documents.find_one.assert_called_once_with({"_id": DOCUMENT_ID})

    def test_read(self, mongo, sample_document, lecture, tutorial):
        storage, documents = mongo
        documents.find_one.return_value = dict(sample_document, _id=DOCUMENT_ID)
        assert storage.read().entries == (lecture, tutorial)

    def test_save_replaces_single_document(self, mongo, collection, sample_document):
        storage, documents = mongo
        storage.save(collection)
        documents.replace_one.assert_called_once_with(
            {"_id": DOCUMENT_ID}, sample_document, upsert=True
        )

    def test_write_failure(self, mongo):
        storage, documents = mongo
        documents.replace_one.side_effect = PyMongoError("boom")
        with pytest.raises(PersistenceError, match="MongoDB write failed"):
            storage.save(MeetingCollection())

    def test_exists(self, mongo):
        storage, documents = mongo
        documents.count_documents.return_value = 1
        assert storage.exists()

    def test_connect_failure(self, monkeypatch):
        client = MagicMock()
        client.admin.command.side_effect = ConnectionFailure("unreachable")
        monkeypatch.setattr(mongo_storage, "PyMongoClient", MagicMock(return_value=client))

        storage = MongoStorage("db.example.com", 27017, "linkytime", "meetings")
        with pytest.raises(PersistenceError, match="Could not connect"):
            storage.connect()
        assert storage.client is None

    def test_context_manager(self, monkeypatch):
        client = MagicMock()
        factory = MagicMock(return_value=client)
        monkeypatch.setattr(mongo_storage, "PyMongoClient", factory)

        with MongoStorage("localhost", 27017, "linkytime", "meetings", user="u", password="p") as storage:
            assert storage.client is client

        factory.assert_called_once_with("mongodb://u:p@localhost:27017/linkytime")
        client.close.assert_called_once()
        assert storage.client is None


class TestCreateStorage:
    def test_json(self, app_config):
        storage = create_storage(app_config)
        assert isinstance(storage, JsonStorage)
        assert str(storage.data_file) == app_config.storage.data_file

    def test_mongo(self, monkeypatch):
        monkeypatch.setattr(mongo_storage, "PyMongoClient", MagicMock(return_value=MagicMock()))
        config = AppConfig(
            storage=StorageConfig(backend="mongo"),
            mongo=MongoConfig(collection="custom"),
        )
        storage = create_storage(config)
        assert isinstance(storage, MongoStorage)
        assert storage.collection == "custom"
        assert storage.client is not None

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_storage(AppConfig(storage=StorageConfig(backend="sqlite")))
