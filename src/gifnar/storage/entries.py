"""Entry list persistence against a single key-value slot."""

import logging

from pydantic import ValidationError

from gifnar.exceptions import DeserializationError, StorageUnavailableError
from gifnar.models.entry import EntryList, entry_list_adapter
from gifnar.storage.backends import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "gifnar_volunteer_log_v1"


def decode_entries(raw: bytes | str) -> EntryList:
    """Parse serialized entry list data.

    Raises:
        DeserializationError: If raw is not a valid entry list.
    """
    try:
        return entry_list_adapter.validate_json(raw)
    except (ValidationError, ValueError) as e:
        raise DeserializationError(f"Invalid entry list data: {e}") from e


def encode_entries(entries: EntryList, indent: int | None = None) -> bytes:
    return entry_list_adapter.dump_json(entries, indent=indent)


class EntryStore:
    """Loads and saves the whole entry list under one fixed key.

    Storage failures never reach the caller: a failed load yields an empty
    list and a failed save is dropped, leaving the in-memory list as the
    only copy for the rest of the session.
    """

    def __init__(self, backend: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key

    def load(self) -> EntryList:
        """Load entries in stored order. Returns empty list if not found."""
        try:
            raw = self.backend.get_item(self.key)
            if raw is None:
                return []
            return decode_entries(raw)
        except (StorageUnavailableError, DeserializationError) as e:
            logger.warning("Failed to load entries from slot %s: %s", self.key, e)
            return []

    def save(self, entries: EntryList) -> None:
        """Overwrite the slot with the full entry list."""
        try:
            self.backend.set_item(self.key, encode_entries(entries))
        except StorageUnavailableError as e:
            logger.warning("Failed to save entries to slot %s: %s", self.key, e)
