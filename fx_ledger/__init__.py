"""Public interface for the fx_ledger package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Sequence

from fx_ledger.codecs import Codec, FileFormat, resolve, supported_formats
from fx_ledger.errors import (
    ErrorKind,
    IoFailureError,
    MalformedInputError,
    NotFoundError,
    RateFileError,
    UnsupportedFormatError,
)
from fx_ledger.journal import ErrorJournal, FileErrorJournal, NullErrorJournal
from fx_ledger.models import CurrencyRate
from fx_ledger.rate_book import RateBook
from fx_ledger.storage import RateStorage

__all__ = [
    "__version__",
    "Codec",
    "CurrencyRate",
    "ErrorJournal",
    "ErrorKind",
    "FileErrorJournal",
    "FileFormat",
    "IoFailureError",
    "MalformedInputError",
    "NotFoundError",
    "NullErrorJournal",
    "RateBook",
    "RateFileError",
    "RateStorage",
    "UnsupportedFormatError",
    "load_rates",
    "resolve",
    "save_rates",
    "supported_formats",
]

try:
    __version__ = importlib_metadata.version("fx-ledger")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def load_rates(
    path: str | Path, token: str | FileFormat, *, journal: ErrorJournal | None = None
) -> list[CurrencyRate]:
    """Read ``path`` with the codec registered for ``token``."""

    return RateStorage(journal).load(path, token)


def save_rates(
    records: Sequence[CurrencyRate],
    path: str | Path,
    token: str | FileFormat,
    *,
    journal: ErrorJournal | None = None,
) -> Path:
    """Write ``records`` to ``path`` with the codec registered for ``token``."""

    return RateStorage(journal).save(records, path, token)
