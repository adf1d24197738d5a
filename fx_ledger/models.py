"""Data models shared across codecs and the rate book."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from fx_ledger.utils.timestamps import parse_rate, truncate_to_seconds

__all__ = ["CurrencyRate", "FIELD_NAMES"]

# Column/key/element names in the order every format writes them.
FIELD_NAMES: tuple[str, ...] = ("Id", "Currency", "Rate", "UpdateDate")


@dataclass(slots=True)
class CurrencyRate:
    """Representation of a single currency rate entry."""

    id: int
    currency: str
    rate: Decimal
    update_date: datetime

    @classmethod
    def create(cls, id: int, currency: str, rate: Decimal | int | str) -> "CurrencyRate":
        """Build a record stamped with the current local time."""

        return cls(
            id=id,
            currency=currency,
            rate=parse_rate(rate),
            update_date=truncate_to_seconds(datetime.now()),
        )

    def touch(self) -> None:
        """Re-stamp ``update_date`` after the record was edited."""

        self.update_date = truncate_to_seconds(datetime.now())
