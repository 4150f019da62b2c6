# ==============================================
# JsonStorage
# ==============================================
#
# PURPOSE:
#   Persist the meeting collection to a JSON file so that it
#   survives restarts.
#
# CLASS: JsonStorage
# ------------------
#   Stateful — holds the path of the data file.
#
#   Constructor:
#   ------------
#   - __init__(data_file: str = "data/linkytime.json")
#       Don't touch the disk yet.
#
#   Methods:
#   --------
#   - exists() -> bool
#       Is there a data file from a previous session?
#
#   - read() -> MeetingCollection | None
#       None if no file. PersistenceError if the file is not JSON
#       or fails validation (see serializable.py).
#
#   - save(collection: MeetingCollection) -> None
#       Create the parent directory if needed, write pretty JSON.
#
# ==============================================

import json
from pathlib import Path
from typing import Optional

from linkytime.exceptions import PersistenceError
from linkytime.model.collection import MeetingCollection
from linkytime.persistence.serializable import collection_from_dict, collection_to_dict


class JsonStorage:
    """Reads and writes the LinkyTime document as a JSON file."""

    def __init__(self, data_file: str = "data/linkytime.json"):
        """
        Initialize the storage.

        Args:
            data_file: Path of the JSON data file
        """
        self.data_file = Path(data_file)

    def exists(self) -> bool:
        return self.data_file.exists()

    def read(self) -> Optional[MeetingCollection]:
        """
        Load the collection from disk.

        Returns:
            The loaded MeetingCollection, or None if the file doesn't exist

        Raises:
            PersistenceError: If the file is unreadable or its content is invalid
        """
        if not self.data_file.exists():
            print(f"No data file found at {self.data_file}")
            return None

        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Could not read {self.data_file}: {e}")

        collection = collection_from_dict(data)
        print(f"Loaded {len(collection)} meeting entries from {self.data_file}")
        return collection

    def save(self, collection: MeetingCollection) -> None:
        """
        Save the collection to disk.

        Args:
            collection: Collection to write, in its current order

        Raises:
            PersistenceError: If the file cannot be written
        """
        document = collection_to_dict(collection)
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.data_file, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2)
        except OSError as e:
            raise PersistenceError(f"Could not write {self.data_file}: {e}")

        print(f"Saved {len(collection)} meeting entries to {self.data_file}")

