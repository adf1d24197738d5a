"""Helpers for rendering and parsing the timestamps and rates stored in rate files."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

__all__ = [
    "CSV_TIMESTAMP_FORMAT",
    "ISO_TIMESTAMP_FORMAT",
    "format_csv_timestamp",
    "format_iso_timestamp",
    "format_ticks_timestamp",
    "format_rate",
    "parse_rate",
    "parse_timestamp",
    "truncate_to_seconds",
]

# `{year}` is filled in zero padded; `%Y` is not padded below year 1000 on glibc.
CSV_TIMESTAMP_FORMAT = "%m/%d/{year} %H:%M:%S"
ISO_TIMESTAMP_FORMAT = "{year}-%m-%dT%H:%M:%S"

_ISO_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[Tt ](?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,7}))?)?)?$"
)
_US_PATTERN = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})"
    r"(?: (?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,7}))?)?)?$"
)


def truncate_to_seconds(value: datetime) -> datetime:
    """Drop the sub-second part so every file format can carry the timestamp."""

    return value.replace(microsecond=0)


def _render(value: datetime, layout: str) -> str:
    return value.strftime(layout.format(year=f"{value.year:04d}"))


def _fraction_suffix(value: datetime) -> str:
    if not value.microsecond:
        return ""
    return "." + f"{value.microsecond:06d}".rstrip("0")


def format_csv_timestamp(value: datetime) -> str:
    """Render ``MM/DD/YYYY HH:MM:SS`` (24h) with a fraction only when one exists."""

    return _render(value, CSV_TIMESTAMP_FORMAT) + _fraction_suffix(value)


def format_iso_timestamp(value: datetime) -> str:
    """Render an ISO-8601 local date-time without offset, e.g. ``2023-05-01T00:00:00``."""

    return _render(value, ISO_TIMESTAMP_FORMAT) + _fraction_suffix(value)


def format_ticks_timestamp(value: datetime) -> str:
    """Render an ISO-8601 date-time with a fixed seven digit (100ns tick) fraction."""

    return f"{_render(value, ISO_TIMESTAMP_FORMAT)}.{value.microsecond:06d}0"


def parse_timestamp(value: str | date) -> datetime:
    """Parse any timestamp representation written by the rate file codecs.

    Accepted inputs are ISO dates (``2023-05-01``), ISO date-times with a ``T``
    or space separator and up to seven fractional digits, and the CSV layout
    ``MM/DD/YYYY HH:MM:SS``. Timezone offsets are rejected because rate
    timestamps are always local.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = value.strip()
    match = _ISO_PATTERN.match(text) or _US_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Unrecognised timestamp: {value!r}")
    parts = match.groupdict()
    fraction = (parts["fraction"] or "")[:6].ljust(6, "0")
    return datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts["hour"] or 0),
        int(parts["minute"] or 0),
        int(parts["second"] or 0),
        int(fraction),
    )


def parse_rate(value: object) -> Decimal:
    """Convert ``value`` into a finite :class:`Decimal` without touching floats."""

    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Rates must not be {type(value).__name__} values")
    if isinstance(value, Decimal):
        rate = value
    elif isinstance(value, int):
        rate = Decimal(value)
    elif isinstance(value, str):
        try:
            rate = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid rate: {value!r}") from exc
    else:
        raise TypeError(f"Unsupported rate type: {type(value).__name__}")
    if not rate.is_finite():
        raise ValueError(f"Rate must be a finite number, got {value!r}")
    return rate


def format_rate(value: Decimal) -> str:
    """Render a rate in positional notation keeping its own precision."""

    return format(value, "f")
