"""Structured (JSON) and tabular (CSV) export of the entry list."""

import csv
import io

from gifnar.models.entry import EntryList
from gifnar.storage.entries import decode_entries, encode_entries

JSON_EXPORT_FILENAME = "gifnar-volunteer-log.json"
CSV_EXPORT_FILENAME = "gifnar-volunteer-log.csv"

CSV_HEADER = ["date", "organization", "hours", "tasks", "reflection", "tags", "created_at"]


def to_structured(entries: EntryList) -> str:
    """Render entries as pretty-printed JSON preserving every field."""
    return encode_entries(entries, indent=2).decode("utf-8")


def from_structured(text: str) -> EntryList:
    """Parse the output of to_structured back into entries.

    Raises:
        DeserializationError: If text is not a valid entry list.
    """
    return decode_entries(text)


def to_tabular(entries: EntryList) -> str:
    """Render entries as CSV, one header row plus one row per entry.

    Text fields are always quoted with interior quotes doubled; hours is the
    only unquoted column.
    """
    out = io.StringIO()
    out.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for e in entries:
        writer.writerow([e.date, e.org, e.hours, e.tasks, e.reflection, e.tags, e.created_at])
    return out.getvalue()
