"""Pydantic models for logged volunteering sessions."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, TypeAdapter

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def _new_id() -> str:
    """Return a fresh opaque entry id."""
    return uuid.uuid4().hex


def _now_stamp() -> str:
    """Return the current local time as a sortable, human-readable stamp."""
    return datetime.now().strftime(CREATED_AT_FORMAT)


class Entry(BaseModel):
    """One logged volunteering session."""

    id: str = Field(default_factory=_new_id)
    date: str = Field(min_length=1, description="Session date, YYYY-MM-DD")
    org: str = Field(min_length=1, description="Organization volunteered for")
    hours: float = Field(gt=0, allow_inf_nan=False)
    tasks: str = ""
    reflection: str = ""
    tags: str = Field(default="", description="Comma-separated free text")
    created_at: str = Field(default_factory=_now_stamp)


EntryList = list[Entry]

entry_list_adapter: TypeAdapter[EntryList] = TypeAdapter(EntryList)
