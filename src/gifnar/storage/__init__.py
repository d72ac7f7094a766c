"""Storage utilities for the persistent entry list."""

from gifnar.storage.backends import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from gifnar.storage.entries import STORAGE_KEY, EntryStore, decode_entries, encode_entries

__all__ = [
    "STORAGE_KEY",
    "EntryStore",
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "decode_entries",
    "encode_entries",
]
