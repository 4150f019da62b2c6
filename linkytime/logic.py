# ==============================================
# LogicManager — Session Orchestrator
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties all 4 topics together into
#   one session. The CLI talks to this class only.
#
# HOW IT CONNECTS THE 4 TOPICS:
#
#   raw input
#       │
#       ▼
#   TOPIC 3: PARSER       LinkyTimeParser.parse_command()
#       │ command
#       ▼
#   TOPIC 2: COMMANDS     command.execute(collection)
#       │ mutates
#       ▼
#   TOPIC 1: MODEL        MeetingCollection (+ filtered views)
#       │ on exit / autosave
#       ▼
#   TOPIC 4: PERSISTENCE  JsonStorage / MongoStorage .save()
#
# CLASS: LogicManager
# -------------------
#
#   Constructor:
#   ------------
#   - __init__(config: AppConfig | None = None, storage=None)
#       1. Load config (from .env or passed in)
#       2. Build storage (or use the one passed in)
#       3. Load the collection from storage, or start empty
#          (a PersistenceError here is fatal and propagates)
#
#   Public Methods:
#   ---------------
#   - execute(command_text: str) -> CommandResult
#   - get_filtered_entries() -> list[MeetingEntry]
#   - get_filtered_modules() -> list[ModuleCode]
#   - save() -> None
#   - close() -> None
#
# ==============================================

from typing import List, Optional

from linkytime.commands import MUTATING_COMMANDS, CommandResult
from linkytime.config import AppConfig, get_config
from linkytime.model.collection import MeetingCollection
from linkytime.model.fields import ModuleCode
from linkytime.model.meeting_entry import MeetingEntry
from linkytime.parser.linkytime_parser import LinkyTimeParser
from linkytime.persistence import MongoStorage, Storage, create_storage


class LogicManager:
    """Runs one LinkyTime session: parse, execute, persist."""

    def __init__(self, config: Optional[AppConfig] = None, storage: Optional[Storage] = None):
        """
        Initialize the session.

        Args:
            config: Application configuration. If None, loads from environment.
            storage: Storage to use. If None, built from config.

        Raises:
            PersistenceError: If the stored document cannot be loaded
        """
        self._config = config or get_config()
        self._storage = storage if storage is not None else create_storage(self._config)
        self._parser = LinkyTimeParser()
        self._autosave = self._config.storage.autosave
        self._collection = self._load_previous_state()

    @property
    def collection(self) -> MeetingCollection:
        return self._collection

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute one line of user input.

        Args:
            command_text: Raw input line

        Returns:
            CommandResult of the executed command

        Raises:
            ParseError: If the input cannot be parsed
            CommandError: If the command cannot be carried out
            PersistenceError: If autosave fails
        """
        command = self._parser.parse_command(command_text)
        result = command.execute(self._collection)

        if self._autosave and isinstance(command, MUTATING_COMMANDS):
            self.save()

        return result

    def get_filtered_entries(self) -> List[MeetingEntry]:
        return self._collection.filtered_view()

    def get_filtered_modules(self) -> List[ModuleCode]:
        return self._collection.filtered_modules()

    def save(self) -> None:
        """Write the collection to storage."""
        self._storage.save(self._collection)

    def close(self) -> None:
        """
        Save the collection and release the storage connection.
        """
        try:
            self.save()
            print("✓ LinkyTime data saved")
        finally:
            if isinstance(self._storage, MongoStorage):
                self._storage.disconnect()

    def _load_previous_state(self) -> MeetingCollection:
        collection = self._storage.read()
        if collection is None:
            print("✓ No previous data found, starting with an empty LinkyTime")
            return MeetingCollection()

        print(f"✓ Restored {len(collection)} meeting entries")
        return collection

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False  # Don't suppress exceptions
