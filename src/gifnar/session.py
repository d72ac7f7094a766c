"""In-memory volunteer log driven by a front end."""

import logging
from collections.abc import Callable

from gifnar.entries import build_entry, prepend_entry, sort_newest_first, total_hours
from gifnar.exceptions import ValidationError
from gifnar.export import CSV_EXPORT_FILENAME, JSON_EXPORT_FILENAME, to_structured, to_tabular
from gifnar.models.entry import Entry, EntryList
from gifnar.storage.entries import EntryStore

logger = logging.getLogger(__name__)

CLEAR_ALL_PROMPT = "Clear ALL saved entries on this device?"

# Callback signatures
AlertCallback = Callable[[str], None]  # (message)
ConfirmCallback = Callable[[str], bool]  # (message) -> yes/no
DownloadCallback = Callable[[str, str], None]  # (filename, text)


def _noop_alert(message: str) -> None:
    """Default alert callback - drops the message."""


def _deny_confirm(message: str) -> bool:
    """Default confirm callback - always answers no."""
    return False


def _noop_download(filename: str, text: str) -> None:
    """Default download callback - raises to indicate no handler."""
    raise NotImplementedError("Download callback not provided")


class VolunteerLog:
    """The entry list for one device plus the operations a UI can trigger.

    The list is loaded and sorted once at construction. Every mutation
    builds a new list, saves it through the store, then adopts it.
    """

    def __init__(
        self,
        store: EntryStore,
        on_alert: AlertCallback = _noop_alert,
        on_confirm: ConfirmCallback = _deny_confirm,
        on_download: DownloadCallback = _noop_download,
    ) -> None:
        self.store = store
        self.on_alert = on_alert
        self.on_confirm = on_confirm
        self.on_download = on_download
        self._entries: EntryList = sort_newest_first(store.load())
        logger.debug("Loaded %d entries", len(self._entries))

    @property
    def entries(self) -> EntryList:
        return list(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def total_hours(self) -> float:
        return total_hours(self._entries)

    def _commit(self, entries: EntryList) -> None:
        self.store.save(entries)
        self._entries = entries

    def add(
        self,
        date: str,
        org: str,
        hours_raw: str,
        tasks: str = "",
        reflection: str = "",
        tags: str = "",
    ) -> Entry | None:
        """Validate input and prepend a new entry.

        Returns:
            The new entry, or None if validation failed. Failures are
            reported through the alert callback and nothing is saved.
        """
        try:
            entry = build_entry(date, org, hours_raw, tasks, reflection, tags)
        except ValidationError as e:
            logger.debug("Rejected entry: %s", e)
            self.on_alert(str(e))
            return None

        self._commit(prepend_entry(self._entries, entry))
        logger.info("Logged %s hours at %s", entry.hours, entry.org)
        return entry

    def clear_all(self) -> bool:
        """Remove every entry once the user confirms.

        Returns:
            True if the list was cleared.
        """
        if not self.on_confirm(CLEAR_ALL_PROMPT):
            return False
        self._commit([])
        logger.info("Cleared all entries")
        return True

    def export_json(self) -> None:
        self.on_download(JSON_EXPORT_FILENAME, to_structured(self._entries))

    def export_csv(self) -> None:
        self.on_download(CSV_EXPORT_FILENAME, to_tabular(self._entries))
