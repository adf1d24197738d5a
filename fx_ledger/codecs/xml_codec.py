"""XML codec for currency rate files."""

from __future__ import annotations

from typing import Sequence

from lxml import etree

from fx_ledger.codecs.base import coerce_id, coerce_rate, coerce_timestamp
from fx_ledger.errors import MalformedInputError
from fx_ledger.models import FIELD_NAMES, CurrencyRate
from fx_ledger.utils.timestamps import format_iso_timestamp, format_rate

__all__ = ["XMLCodec", "ROOT_TAG", "RECORD_TAG"]

ROOT_TAG = "ArrayOfCurrencyRate"
RECORD_TAG = "CurrencyRate"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
# Declared on the root for compatibility with existing rate files; never used by elements.
ROOT_TEMPLATE = (
    f'<{ROOT_TAG} xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema"/>'
)


class XMLCodec:
    """``ArrayOfCurrencyRate`` document with one ``CurrencyRate`` element per record."""

    name = "xml"
    extension = ".xml"

    def encode(self, records: Sequence[CurrencyRate]) -> str:
        # Parsed from text so the namespace declarations keep their order.
        root = etree.fromstring(ROOT_TEMPLATE)
        for record in records:
            element = etree.SubElement(root, RECORD_TAG)
            values = (
                str(record.id),
                record.currency,
                format_rate(record.rate),
                format_iso_timestamp(record.update_date),
            )
            for tag, value in zip(FIELD_NAMES, values):
                try:
                    etree.SubElement(element, tag).text = value
                except ValueError as exc:
                    raise MalformedInputError(
                        f"Record {record.id}: {tag} is not XML compatible"
                    ) from exc
        body = etree.tostring(root, encoding="unicode", pretty_print=True)
        return f"{XML_DECLARATION}\n{body.rstrip()}"

    def decode(self, text: str) -> list[CurrencyRate]:
        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
        )
        try:
            root = etree.fromstring(text.encode("utf-8"), parser=parser)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise MalformedInputError(f"Invalid XML content: {exc}") from exc
        if root.tag != ROOT_TAG:
            raise MalformedInputError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")
        records: list[CurrencyRate] = []
        for position, element in enumerate(root, start=1):
            if element.tag != RECORD_TAG:
                raise MalformedInputError(
                    f"Record {position}: expected <{RECORD_TAG}>, found <{element.tag}>"
                )
            fields = self._read_fields(element, position)
            records.append(
                CurrencyRate(
                    id=coerce_id(fields["Id"], position=position),
                    currency=fields["Currency"],
                    rate=coerce_rate(fields["Rate"], position=position),
                    update_date=coerce_timestamp(fields["UpdateDate"], position=position),
                )
            )
        return records

    @staticmethod
    def _read_fields(element: etree._Element, position: int) -> dict[str, str]:
        fields: dict[str, str] = {}
        for child in element:
            if child.tag not in FIELD_NAMES:
                raise MalformedInputError(f"Record {position}: unexpected element <{child.tag}>")
            if child.tag in fields:
                raise MalformedInputError(f"Record {position}: duplicate element <{child.tag}>")
            if len(child):
                raise MalformedInputError(f"Record {position}: <{child.tag}> must hold text only")
            fields[child.tag] = child.text or ""
        missing = [name for name in FIELD_NAMES if name not in fields]
        if missing:
            raise MalformedInputError(f"Record {position}: missing {', '.join(missing)}")
        return fields
