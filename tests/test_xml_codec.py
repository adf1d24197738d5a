from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from fx_ledger.codecs.xml_codec import XMLCodec
from fx_ledger.errors import MalformedInputError
from fx_ledger.models import CurrencyRate

EXPECTED_XML = """<?xml version="1.0" encoding="utf-8"?>
<ArrayOfCurrencyRate xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <CurrencyRate>
    <Id>1</Id>
    <Currency>USD</Currency>
    <Rate>1.1</Rate>
    <UpdateDate>2023-05-01T00:00:00</UpdateDate>
  </CurrencyRate>
  <CurrencyRate>
    <Id>2</Id>
    <Currency>EUR</Currency>
    <Rate>0.9</Rate>
    <UpdateDate>2023-05-02T00:00:00</UpdateDate>
  </CurrencyRate>
</ArrayOfCurrencyRate>"""

COMPACT_XML = (
    '<?xml version="1.0" encoding="utf-8"?><ArrayOfCurrencyRate '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">'
    "<CurrencyRate><Id>1</Id><Currency>USD</Currency><Rate>1.1</Rate>"
    "<UpdateDate>2023-05-01T00:00:00</UpdateDate></CurrencyRate>"
    "<CurrencyRate><Id>2</Id><Currency>EUR</Currency><Rate>0.9</Rate>"
    "<UpdateDate>2023-05-02T00:00:00</UpdateDate></CurrencyRate></ArrayOfCurrencyRate>"
)


def _sample_rates() -> list[CurrencyRate]:
    return [
        CurrencyRate(id=1, currency="USD", rate=Decimal("1.1"), update_date=datetime(2023, 5, 1)),
        CurrencyRate(id=2, currency="EUR", rate=Decimal("0.9"), update_date=datetime(2023, 5, 2)),
    ]


def test_encode_matches_document_layout() -> None:
    assert XMLCodec().encode(_sample_rates()) == EXPECTED_XML


def test_encode_empty_collection_keeps_root() -> None:
    text = XMLCodec().encode([])

    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<ArrayOfCurrencyRate ')
    assert text.endswith("/>")
    assert XMLCodec().decode(text) == []


def test_decode_compact_document() -> None:
    assert XMLCodec().decode(COMPACT_XML) == _sample_rates()


def test_decode_ignores_comments_and_field_order() -> None:
    text = (
        "<ArrayOfCurrencyRate><!-- exported -->"
        "<CurrencyRate><Rate>1.1</Rate><UpdateDate>2023-05-01</UpdateDate>"
        "<Currency>USD</Currency><Id>1</Id></CurrencyRate></ArrayOfCurrencyRate>"
    )

    assert XMLCodec().decode(text) == _sample_rates()[:1]


def test_special_characters_round_trip() -> None:
    records = [CurrencyRate(3, "A&B <C>", Decimal("0.0100"), datetime(2023, 1, 2, 3, 4, 5))]

    text = XMLCodec().encode(records)

    assert "<Currency>A&amp;B &lt;C&gt;</Currency>" in text
    assert XMLCodec().decode(text) == records


def test_empty_currency_round_trip() -> None:
    records = [CurrencyRate(3, "", Decimal("1"), datetime(2023, 1, 2))]

    assert XMLCodec().decode(XMLCodec().encode(records)) == records


@pytest.mark.parametrize(
    "payload",
    [
        "This is not valid XML data",
        "",
        "<Rates><CurrencyRate/></Rates>",
        "<ArrayOfCurrencyRate><Rate>1.1</Rate></ArrayOfCurrencyRate>",
        "<ArrayOfCurrencyRate><CurrencyRate><Id>1</Id></CurrencyRate></ArrayOfCurrencyRate>",
        (
            "<ArrayOfCurrencyRate><CurrencyRate><Id>1</Id><Id>2</Id><Currency>USD</Currency>"
            "<Rate>1.1</Rate><UpdateDate>2023-05-01</UpdateDate></CurrencyRate></ArrayOfCurrencyRate>"
        ),
        (
            "<ArrayOfCurrencyRate><CurrencyRate><Id>1</Id><Currency>USD</Currency><Rate>1.1</Rate>"
            "<UpdateDate>2023-05-01</UpdateDate><Note>x</Note></CurrencyRate></ArrayOfCurrencyRate>"
        ),
        (
            "<ArrayOfCurrencyRate><CurrencyRate><Id>1</Id><Currency>USD</Currency><Rate>one</Rate>"
            "<UpdateDate>2023-05-01</UpdateDate></CurrencyRate></ArrayOfCurrencyRate>"
        ),
        (
            "<ArrayOfCurrencyRate><CurrencyRate><Id>1</Id><Currency><Code>USD</Code></Currency>"
            "<Rate>1.1</Rate><UpdateDate>2023-05-01</UpdateDate></CurrencyRate></ArrayOfCurrencyRate>"
        ),
    ],
)
def test_decode_rejects_documents_with_another_shape(payload: str) -> None:
    with pytest.raises(MalformedInputError):
        XMLCodec().decode(payload)


def test_encode_rejects_text_xml_cannot_hold() -> None:
    record = CurrencyRate(1, "bad\x00char", Decimal("1"), datetime(2023, 1, 1))

    with pytest.raises(MalformedInputError):
        XMLCodec().encode([record])
