from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from fx_ledger.utils.timestamps import (
    format_csv_timestamp,
    format_iso_timestamp,
    format_rate,
    format_ticks_timestamp,
    parse_rate,
    parse_timestamp,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2023-05-01", datetime(2023, 5, 1)),
        ("2023-05-01T00:00:00", datetime(2023, 5, 1)),
        ("2023-05-01 13:45:10", datetime(2023, 5, 1, 13, 45, 10)),
        ("2023-05-01T00:00:00.0000000", datetime(2023, 5, 1)),
        ("2023-05-01T10:11:12.1234567", datetime(2023, 5, 1, 10, 11, 12, 123456)),
        ("05/01/2023 00:00:00", datetime(2023, 5, 1)),
        ("12/31/2023 23:59:59", datetime(2023, 12, 31, 23, 59, 59)),
        ("5/2/2023", datetime(2023, 5, 2)),
    ],
)
def test_parse_timestamp_accepts_codec_layouts(raw: str, expected: datetime) -> None:
    assert parse_timestamp(raw) == expected


def test_parse_timestamp_passes_dates_through() -> None:
    assert parse_timestamp(date(2023, 5, 1)) == datetime(2023, 5, 1)
    stamp = datetime(2023, 5, 1, 8, 0)
    assert parse_timestamp(stamp) is stamp


@pytest.mark.parametrize(
    "raw",
    ["", "yesterday", "2023-05-01T00:00:00+02:00", "2023-13-01", "31/12/2023 00:00:00x"],
)
def test_parse_timestamp_rejects_unknown_values(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_timestamp(raw)


def test_timestamp_formatters() -> None:
    midnight = datetime(2023, 5, 1)
    precise = datetime(2023, 5, 1, 10, 11, 12, 120000)

    assert format_csv_timestamp(midnight) == "05/01/2023 00:00:00"
    assert format_iso_timestamp(midnight) == "2023-05-01T00:00:00"
    assert format_ticks_timestamp(midnight) == "2023-05-01T00:00:00.0000000"
    assert format_csv_timestamp(precise) == "05/01/2023 10:11:12.12"
    assert format_iso_timestamp(precise) == "2023-05-01T10:11:12.12"
    assert format_ticks_timestamp(precise) == "2023-05-01T10:11:12.1200000"


def test_timestamp_formatters_pad_early_years() -> None:
    early = datetime(999, 5, 1, 7, 8, 9)

    assert format_csv_timestamp(early) == "05/01/0999 07:08:09"
    assert format_iso_timestamp(early) == "0999-05-01T07:08:09"
    assert format_ticks_timestamp(datetime(5, 1, 2)) == "0005-01-02T00:00:00.0000000"
    assert parse_timestamp(format_iso_timestamp(early)) == early


@pytest.mark.parametrize(
    "raw, text",
    [("1.1", "1.1"), ("1.10", "1.10"), (" 0.9 ", "0.9"), (Decimal("1E+2"), "100"), (7, "7")],
)
def test_parse_and_format_rate_keep_precision(raw: object, text: str) -> None:
    assert format_rate(parse_rate(raw)) == text


@pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity", ""])
def test_parse_rate_rejects_invalid_text(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_rate(raw)


@pytest.mark.parametrize("raw", [1.1, True, None])
def test_parse_rate_rejects_non_decimal_types(raw: object) -> None:
    with pytest.raises(TypeError):
        parse_rate(raw)
