"""Rate file codecs and the registry that resolves them from user supplied tokens."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final

from fx_ledger.codecs.base import Codec
from fx_ledger.codecs.csv_codec import CSVCodec
from fx_ledger.codecs.json_codec import JSONCodec
from fx_ledger.codecs.xml_codec import XMLCodec
from fx_ledger.codecs.yaml_codec import YAMLCodec
from fx_ledger.errors import UnsupportedFormatError
from fx_ledger.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "Codec",
    "CSVCodec",
    "FileFormat",
    "JSONCodec",
    "XMLCodec",
    "YAMLCodec",
    "resolve",
    "supported_formats",
]


_ALIASES: Final[dict[str, str]] = {"yml": "yaml"}


class FileFormat(str, Enum):
    """Supported rate file formats."""

    CSV = "csv"
    JSON = "json"
    XML = "xml"
    YAML = "yaml"

    @classmethod
    def from_token(cls, token: str) -> "FileFormat":
        """Normalise a user supplied format name (``CSV``, ``json`` ...)."""

        normalized = (token or "").strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedFormatError(
            f"Unsupported file format {token!r}. Supported values are "
            f"{', '.join(member.value for member in cls)}."
        )

    @classmethod
    def from_path(cls, path: str | Path) -> "FileFormat":
        """Guess the format from a file suffix."""

        return cls.from_token(Path(path).suffix.lstrip("."))


_CODECS: Final[dict[FileFormat, Codec]] = {
    FileFormat.CSV: CSVCodec(),
    FileFormat.JSON: JSONCodec(),
    FileFormat.XML: XMLCodec(),
    FileFormat.YAML: YAMLCodec(),
}


def resolve(token: str | FileFormat) -> Codec:
    """Return the codec registered for ``token`` (case-insensitive)."""

    file_format = token if isinstance(token, FileFormat) else FileFormat.from_token(token)
    LOGGER.debug("Resolved format %r to %s", token, type(_CODECS[file_format]).__name__)
    return _CODECS[file_format]


def supported_formats() -> tuple[str, ...]:
    return tuple(member.value for member in FileFormat)
