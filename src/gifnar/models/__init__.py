"""Pydantic models for gifnar."""

from gifnar.models.entry import Entry, EntryList, entry_list_adapter

__all__ = [
    "Entry",
    "EntryList",
    "entry_list_adapter",
]
