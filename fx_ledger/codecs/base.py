"""Codec capability shared by every rate file format."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Protocol, Sequence

from fx_ledger.errors import MalformedInputError
from fx_ledger.models import FIELD_NAMES, CurrencyRate
from fx_ledger.utils.timestamps import parse_rate, parse_timestamp

__all__ = [
    "Codec",
    "coerce_currency",
    "coerce_id",
    "coerce_rate",
    "coerce_timestamp",
    "record_from_mapping",
]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Codec(Protocol):
    """Contract for turning rate records into text and back.

    Implementations are pure: they never touch the filesystem and raise
    :class:`~fx_ledger.errors.MalformedInputError` for text that does not
    follow their format's schema.
    """

    name: str
    extension: str

    def decode(self, text: str) -> list[CurrencyRate]:
        ...  # pragma: no cover - protocol definition

    def encode(self, records: Sequence[CurrencyRate]) -> str:
        ...  # pragma: no cover - protocol definition


def coerce_id(value: object, *, position: int) -> int:
    if isinstance(value, bool):
        raise MalformedInputError(f"Record {position}: Id must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            try:
                return int(text)
            except ValueError as exc:
                # Digit strings beyond the interpreter's conversion limit.
                raise MalformedInputError(f"Record {position}: Id is out of range") from exc
    raise MalformedInputError(f"Record {position}: Id must be an integer, got {value!r}")


def coerce_rate(value: object, *, position: int) -> Decimal:
    try:
        return parse_rate(value)
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"Record {position}: {exc}") from exc


def coerce_timestamp(value: object, *, position: int) -> datetime:
    if not isinstance(value, (str, date)):
        raise MalformedInputError(
            f"Record {position}: UpdateDate must be a date-time, got {value!r}"
        )
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise MalformedInputError(f"Record {position}: {exc}") from exc


def coerce_currency(value: object, *, position: int) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedInputError(f"Record {position}: Currency must be text, got {value!r}")
    return value


def record_from_mapping(raw: Mapping[str, object], *, position: int) -> CurrencyRate:
    """Build a record from a decoded mapping, matching keys case-insensitively."""

    fields = {str(key).lower(): value for key, value in raw.items()}
    missing = [name for name in FIELD_NAMES if name.lower() not in fields]
    if missing:
        raise MalformedInputError(f"Record {position}: missing {', '.join(missing)}")
    return CurrencyRate(
        id=coerce_id(fields["id"], position=position),
        currency=coerce_currency(fields["currency"], position=position),
        rate=coerce_rate(fields["rate"], position=position),
        update_date=coerce_timestamp(fields["updatedate"], position=position),
    )
