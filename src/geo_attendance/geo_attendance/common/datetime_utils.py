from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT, TIMESTAMP_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_timestamp(value: str) -> datetime:
    """Parse YYYY-MM-DD HH:MM:SS string into datetime."""
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def to_date_key(value: date | datetime | str) -> str:
    """Normalize a date, datetime or date/timestamp string to YYYY-MM-DD.

    Timestamp strings keep only their date portion; "2024-1-1" becomes
    "2024-01-01" the same way calendar loading normalizes it. Strings that are
    not dates come back stripped and unchanged, so they match nothing.
    """
    if isinstance(value, datetime):
        return value.date().strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)

    text = str(value).strip()
    head = text.split()[0] if text else text
    try:
        return parse_iso_date(head).strftime(DATE_FORMAT)
    except ValueError:
        return text


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().replace(microsecond=0)
