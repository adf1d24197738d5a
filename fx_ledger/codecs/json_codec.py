"""JSON codec for currency rate files."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Sequence

from fx_ledger.codecs.base import record_from_mapping
from fx_ledger.errors import MalformedInputError
from fx_ledger.models import CurrencyRate
from fx_ledger.utils.timestamps import format_iso_timestamp, format_rate

__all__ = ["JSONCodec"]


class JSONCodec:
    """Indented array of ``{"Id", "Currency", "Rate", "UpdateDate"}`` objects.

    ``json.dumps`` cannot emit :class:`Decimal` as a bare number, so objects are
    laid out here while strings still go through ``json.dumps`` for escaping.
    """

    name = "json"
    extension = ".json"

    def __init__(self, *, indent: int = 2, newline: str = "\n") -> None:
        self.indent = indent
        self.newline = newline

    def encode(self, records: Sequence[CurrencyRate]) -> str:
        if not records:
            return "[]"
        outer = " " * self.indent
        inner = outer * 2
        objects: list[str] = []
        for record in records:
            members = [
                f'"Id": {record.id}',
                f'"Currency": {json.dumps(record.currency, ensure_ascii=False)}',
                f'"Rate": {format_rate(record.rate)}',
                f'"UpdateDate": {json.dumps(format_iso_timestamp(record.update_date))}',
            ]
            body = ("," + self.newline).join(inner + member for member in members)
            objects.append(f"{outer}{{{self.newline}{body}{self.newline}{outer}}}")
        return f"[{self.newline}" + ("," + self.newline).join(objects) + f"{self.newline}]"

    def decode(self, text: str) -> list[CurrencyRate]:
        try:
            payload = json.loads(text, parse_float=Decimal)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise MalformedInputError(f"Invalid JSON content: {exc}") from exc
        if not isinstance(payload, list):
            raise MalformedInputError("JSON payload must be an array of rate objects")
        records: list[CurrencyRate] = []
        for position, item in enumerate(payload, start=1):
            if not isinstance(item, dict):
                raise MalformedInputError(f"Record {position}: expected an object, got {item!r}")
            records.append(record_from_mapping(item, position=position))
        return records
