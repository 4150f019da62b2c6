# ==============================================
# TOPIC 4: PERSISTENCE (Meetings across restarts)
# ==============================================
#
# This package handles saving and loading the meeting
# collection so that it survives process restarts.
#
# Modules:
# --------
# - serializable.py   → MeetingCollection <-> plain document
# - json_storage.py   → Document in a local JSON file (default)
# - mongo_storage.py  → Document in MongoDB
#
# ==============================================

from typing import Union

from linkytime.config import AppConfig
from .serializable import AdaptedMeetingEntry, SerializableLinkyTime
from .json_storage import JsonStorage
from .mongo_storage import MongoStorage

Storage = Union[JsonStorage, MongoStorage]


def create_storage(config: AppConfig) -> Storage:
    """
    Build the storage selected by config.storage.backend.

    MongoStorage is returned connected.

    Raises:
        ValueError: If the backend is not "json" or "mongo"
    """
    backend = config.storage.backend
    if backend == "json":
        return JsonStorage(config.storage.data_file)
    if backend == "mongo":
        storage = MongoStorage(
            host=config.mongo.host,
            port=config.mongo.port,
            database=config.mongo.database,
            collection=config.mongo.collection,
            user=config.mongo.user,
            password=config.mongo.password
        )
        storage.connect()
        return storage
    raise ValueError(f"Unsupported storage backend '{backend}'")


__all__ = [
    "AdaptedMeetingEntry",
    "SerializableLinkyTime",
    "JsonStorage",
    "MongoStorage",
    "Storage",
    "create_storage",
]
