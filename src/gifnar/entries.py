"""Entry construction and list operations."""

import math

from gifnar.exceptions import MissingRequiredError, NonPositiveHoursError
from gifnar.models.entry import Entry, EntryList


def parse_hours(hours_raw: str) -> float:
    """Parse an hours value leniently.

    Anything that is not a finite number becomes 0.0, so it is rejected by
    the positivity check rather than reported as a separate parse error.
    """
    try:
        hours = float(hours_raw.strip())
    except ValueError:
        return 0.0
    if not math.isfinite(hours):
        return 0.0
    return hours


def build_entry(
    date: str,
    org: str,
    hours_raw: str,
    tasks: str = "",
    reflection: str = "",
    tags: str = "",
) -> Entry:
    """Validate form input and construct a new entry.

    Args:
        date: Session date, expected as YYYY-MM-DD.
        org: Organization name.
        hours_raw: Hours as typed by the user.
        tasks: Tasks or role, optional.
        reflection: Free-text reflection, optional.
        tags: Comma-separated tags, optional.

    Returns:
        A fully populated Entry with a fresh id and created_at stamp.

    Raises:
        MissingRequiredError: If date or org is empty after trimming.
        NonPositiveHoursError: If hours is not a number greater than 0.
    """
    date = date.strip()
    org = org.strip()
    if not date or not org:
        raise MissingRequiredError()

    hours = parse_hours(hours_raw)
    if hours <= 0:
        raise NonPositiveHoursError(hours)

    return Entry(
        date=date,
        org=org,
        hours=hours,
        tasks=tasks.strip(),
        reflection=reflection.strip(),
        tags=tags.strip(),
    )


def sort_newest_first(entries: EntryList) -> EntryList:
    """Return entries ordered by created_at, newest first.

    The sort is stable, so entries sharing a stamp keep their stored order.
    """
    return sorted(entries, key=lambda e: e.created_at, reverse=True)


def prepend_entry(entries: EntryList, entry: Entry) -> EntryList:
    """Return a new list with entry at the front."""
    return [entry, *entries]


def split_tags(tags: str) -> list[str]:
    """Split comma-separated tags, dropping blanks."""
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def total_hours(entries: EntryList) -> float:
    return sum(e.hours for e in entries)
