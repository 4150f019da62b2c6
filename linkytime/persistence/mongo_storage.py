# ==============================================
# MongoStorage
# ==============================================
#
# PURPOSE:
#   Keep the LinkyTime document in MongoDB instead of a local
#   file. The whole document (meetingEntries array included) is
#   one MongoDB document with a fixed _id, so collection order
#   is preserved exactly.
#
# CLASS: MongoStorage
# -------------------
#   Stateful — holds connection to MongoDB.
#
#   Constructor:
#   ------------
#   - __init__(host, port, database, collection, user=None, password=None)
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() -> None
#   - disconnect() -> None
#   - exists() -> bool
#   - read() -> MeetingCollection | None
#   - save(collection: MeetingCollection) -> None
#       Replace the stored document (upsert).
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoStorage(...) as storage:` usage.
#
# ==============================================

from typing import Optional

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import ConnectionFailure, OperationFailure, PyMongoError

from linkytime.exceptions import PersistenceError
from linkytime.model.collection import MeetingCollection
from linkytime.persistence.serializable import collection_from_dict, collection_to_dict

DOCUMENT_ID = "linkytime"


class MongoStorage:
    def __init__(self, host, port, database, collection, user=None, password=None):
        # Store connection params. Don't connect yet.
        self.host = host
        self.port = port
        self.database = database
        self.collection = collection
        self.user = user
        self.password = password
        self.client = None  # Will hold the actual MongoDB client connection

    def connect(self):
        # Establish connection to MongoDB.
        if self.client:
            return
        try:
            if self.user and self.password:
                uri = f"mongodb://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"
            else:
                uri = f"mongodb://{self.host}:{self.port}/{self.database}"
            self.client = PyMongoClient(uri)
            # Test connection
            self.client.admin.command('ping')
            print("Connected to MongoDB successfully.")
        except ConnectionFailure as e:
            self.client = None
            raise PersistenceError(f"Could not connect to MongoDB: {e}")
        except OperationFailure as e:
            self.client = None
            raise PersistenceError(f"Authentication failed: {e}")

    def disconnect(self):
        # Close connection.
        if self.client:
            self.client.close()
            print("Disconnected from MongoDB.")
            self.client = None

    def _documents(self):
        if not self.client:
            raise PersistenceError("Not connected to MongoDB.")
        return self.client[self.database][self.collection]

    def exists(self) -> bool:
        return self._documents().count_documents({"_id": DOCUMENT_ID}, limit=1) > 0

    def read(self) -> Optional[MeetingCollection]:
        """
        Load the collection from MongoDB.

        Returns:
            The loaded MeetingCollection, or None if nothing was saved yet

        Raises:
            PersistenceError: If MongoDB fails or the stored document is invalid
        """
        try:
            document = self._documents().find_one({"_id": DOCUMENT_ID})
        except PyMongoError as e:
            raise PersistenceError(f"MongoDB read failed: {e}")

        if document is None:
            print(f"No LinkyTime document found in '{self.collection}'")
            return None

        document.pop("_id", None)
        collection = collection_from_dict(document)
        print(f"Loaded {len(collection)} meeting entries from '{self.collection}'")
        return collection

    def save(self, collection: MeetingCollection) -> None:
        """
        Save the collection to MongoDB, replacing what was there.

        Raises:
            PersistenceError: If MongoDB rejects the write
        """
        document = collection_to_dict(collection)
        try:
            self._documents().replace_one({"_id": DOCUMENT_ID}, document, upsert=True)
        except PyMongoError as e:
            raise PersistenceError(f"MongoDB write failed: {e}")
        print(f"Saved {len(collection)} meeting entries to '{self.collection}'")

    def __enter__(self):
        # For `with MongoStorage(...) as storage:` usage.
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
        return False
