"""Session-owned collection of currency rates."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Callable, Iterable

from fx_ledger.codecs import FileFormat
from fx_ledger.models import CurrencyRate
from fx_ledger.storage import RateStorage
from fx_ledger.utils.timestamps import format_rate, parse_rate

__all__ = ["RateBook", "SORT_FIELDS"]

SORT_FIELDS: dict[str, Callable[[CurrencyRate], object]] = {
    "id": lambda record: record.id,
    "currency": lambda record: record.currency,
    "rate": lambda record: record.rate,
    "updatedate": lambda record: record.update_date,
}


class RateBook:
    """Mutable list of :class:`CurrencyRate` entries owned by one console session."""

    def __init__(
        self,
        records: Iterable[CurrencyRate] | None = None,
        *,
        storage: RateStorage | None = None,
    ) -> None:
        self._records: list[CurrencyRate] = list(records or [])
        self.storage = storage or RateStorage()

    @property
    def records(self) -> list[CurrencyRate]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def load(self, path: str | Path, token: str | FileFormat) -> int:
        """Replace the records with the content of ``path``; keep them on failure."""

        self._records = self.storage.load(path, token)
        return len(self._records)

    def save(self, path: str | Path, token: str | FileFormat) -> Path:
        return self.storage.save(self._records, path, token)

    def find(self, rate_id: int) -> CurrencyRate | None:
        return next((record for record in self._records if record.id == rate_id), None)

    def add(self, rate_id: int, currency: str, rate: Decimal | int | str) -> CurrencyRate:
        record = CurrencyRate.create(rate_id, currency, rate)
        self._records.append(record)
        return record

    def remove(self, rate_id: int) -> bool:
        record = self.find(rate_id)
        if record is None:
            return False
        self._records.remove(record)
        return True

    def update(
        self, rate_id: int, currency: str, rate: Decimal | int | str
    ) -> CurrencyRate | None:
        """Edit the first record with ``rate_id`` and re-stamp its update date."""

        record = self.find(rate_id)
        if record is None:
            return None
        new_rate = parse_rate(rate)
        record.currency = currency
        record.rate = new_rate
        record.touch()
        return record

    def sort_by(self, field: str) -> bool:
        """Stable sort by ``Id``, ``Currency``, ``Rate`` or ``UpdateDate``.

        Unknown field names leave the order untouched and return ``False``.
        """

        key = SORT_FIELDS.get(field.strip().lower())
        if key is None:
            return False
        self._records.sort(key=key)  # type: ignore[arg-type]
        return True

    def search(self, term: str) -> list[CurrencyRate]:
        """Records whose currency, rate text or ``YYYY-MM-DD`` date contains ``term``."""

        return [
            record
            for record in self._records
            if term in record.currency
            or term in format_rate(record.rate)
            or term in record.update_date.date().isoformat()
        ]
