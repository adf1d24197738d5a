"""YAML codec for currency rate files."""

from __future__ import annotations

from typing import Any, Sequence

import yaml

from fx_ledger.codecs.base import record_from_mapping
from fx_ledger.errors import MalformedInputError
from fx_ledger.models import CurrencyRate
from fx_ledger.utils.timestamps import format_rate, format_ticks_timestamp

__all__ = ["YAMLCodec"]


class _PlainScalar(str):
    """Text emitted unquoted under whatever tag YAML would resolve it to."""


class _RateDumper(yaml.SafeDumper):
    pass


def _represent_plain(dumper: yaml.SafeDumper, value: _PlainScalar) -> yaml.ScalarNode:
    tag = dumper.resolve(yaml.ScalarNode, str(value), (True, False))
    return dumper.represent_scalar(tag, str(value))


_RateDumper.add_representer(_PlainScalar, _represent_plain)


class YAMLCodec:
    """Block sequence of ``Id``/``Currency``/``Rate``/``UpdateDate`` mappings."""

    name = "yaml"
    extension = ".yaml"

    def encode(self, records: Sequence[CurrencyRate]) -> str:
        documents: list[dict[str, Any]] = [
            {
                "Id": record.id,
                "Currency": record.currency,
                "Rate": _PlainScalar(format_rate(record.rate)),
                "UpdateDate": _PlainScalar(format_ticks_timestamp(record.update_date)),
            }
            for record in records
        ]
        return yaml.dump(
            documents,
            Dumper=_RateDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=4096,
        )

    def decode(self, text: str) -> list[CurrencyRate]:
        # BaseLoader keeps every scalar as text so rates never pass through float.
        try:
            payload = yaml.load(text, Loader=yaml.BaseLoader)
        except (yaml.YAMLError, RecursionError) as exc:
            raise MalformedInputError(f"Invalid YAML content: {exc}") from exc
        if not isinstance(payload, list):
            raise MalformedInputError("YAML document must be a sequence of rate mappings")
        records: list[CurrencyRate] = []
        for position, item in enumerate(payload, start=1):
            if not isinstance(item, dict):
                raise MalformedInputError(f"Record {position}: expected a mapping, got {item!r}")
            records.append(record_from_mapping(item, position=position))
        return records
