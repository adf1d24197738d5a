"""CSV codec for currency rate files."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from fx_ledger.codecs.base import coerce_id, coerce_rate, coerce_timestamp
from fx_ledger.errors import MalformedInputError
from fx_ledger.models import FIELD_NAMES, CurrencyRate
from fx_ledger.utils.timestamps import format_csv_timestamp, format_rate

__all__ = ["CSVCodec", "CSV_HEADER"]

CSV_HEADER = FIELD_NAMES


class CSVCodec:
    """Comma separated rows under an ``Id,Currency,Rate,UpdateDate`` header."""

    name = "csv"
    extension = ".csv"

    def __init__(self, *, line_terminator: str = "\r\n") -> None:
        self.line_terminator = line_terminator

    def encode(self, records: Sequence[CurrencyRate]) -> str:
        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer, lineterminator=self.line_terminator)
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow(
                [
                    str(record.id),
                    record.currency,
                    format_rate(record.rate),
                    format_csv_timestamp(record.update_date),
                ]
            )
        return buffer.getvalue()

    def decode(self, text: str) -> list[CurrencyRate]:
        reader = csv.reader(io.StringIO(text, newline=""))
        try:
            header = next(reader, None)
            if not header:
                raise MalformedInputError("CSV file does not contain a header row")
            columns = self._column_positions(header)
            width = len(header)
            records: list[CurrencyRate] = []
            for row in reader:
                if not row:
                    continue
                position = len(records) + 1
                if len(row) != width:
                    raise MalformedInputError(
                        f"Row {position} has {len(row)} fields, expected {width}"
                    )
                records.append(
                    CurrencyRate(
                        id=coerce_id(row[columns["Id"]], position=position),
                        currency=row[columns["Currency"]],
                        rate=coerce_rate(row[columns["Rate"]], position=position),
                        update_date=coerce_timestamp(row[columns["UpdateDate"]], position=position),
                    )
                )
        except csv.Error as exc:
            raise MalformedInputError(f"Invalid CSV content: {exc}") from exc
        return records

    @staticmethod
    def _column_positions(header: list[str]) -> dict[str, int]:
        normalized = [field.strip() for field in header]
        missing = [name for name in CSV_HEADER if name not in normalized]
        if missing:
            raise MalformedInputError(f"CSV header is missing column(s): {', '.join(missing)}")
        return {name: normalized.index(name) for name in CSV_HEADER}
