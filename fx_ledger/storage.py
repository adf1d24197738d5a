"""Read and write currency rate files through the codec registry."""

from __future__ import annotations

from pathlib import Path
from typing import Final, Sequence

from fx_ledger.codecs import FileFormat, resolve
from fx_ledger.errors import IoFailureError, MalformedInputError, NotFoundError, RateFileError
from fx_ledger.journal import ErrorJournal, NullErrorJournal
from fx_ledger.models import CurrencyRate
from fx_ledger.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["FILE_ENCODING", "RateStorage"]

FILE_ENCODING: Final[str] = "utf-8"


class RateStorage:
    """Gateway combining file I/O with the codec resolved for a format token.

    Every failure is written to the injected journal and then re-raised
    unchanged, so callers branch on :class:`~fx_ledger.errors.ErrorKind`.
    """

    def __init__(self, journal: ErrorJournal | None = None) -> None:
        self.journal: ErrorJournal = journal or NullErrorJournal()

    def load(self, path: str | Path, token: str | FileFormat) -> list[CurrencyRate]:
        """Return every record stored in ``path``; nothing is returned on partial failure."""

        file_path = Path(path)
        try:
            codec = resolve(token)
            text = self._read_text(file_path)
            try:
                records = codec.decode(text)
            except MalformedInputError as exc:
                exc.path = file_path
                raise
        except RateFileError as exc:
            self._record(exc, f"load {file_path} as {token}")
            raise
        LOGGER.info("Loaded %d rate(s) from %s", len(records), file_path)
        return records

    def save(
        self, records: Sequence[CurrencyRate], path: str | Path, token: str | FileFormat
    ) -> Path:
        """Encode ``records`` and write them to ``path``, replacing any previous content."""

        file_path = Path(path)
        try:
            codec = resolve(token)
            text = codec.encode(records)
            self._write_text(file_path, text)
        except RateFileError as exc:
            self._record(exc, f"save {len(records)} rate(s) to {file_path} as {token}")
            raise
        LOGGER.info("Saved %d rate(s) to %s", len(records), file_path)
        return file_path

    @staticmethod
    def _read_text(path: Path) -> str:
        try:
            # newline="" keeps CRLF terminators intact for the CSV reader.
            with path.open("r", encoding=f"{FILE_ENCODING}-sig", newline="") as handle:
                return handle.read()
        except FileNotFoundError as exc:
            raise NotFoundError("File not found", path=path) from exc
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"File is not valid {FILE_ENCODING} text", path=path) from exc
        except OSError as exc:
            raise IoFailureError(f"Could not read file: {exc.strerror or exc}", path=path) from exc

    @staticmethod
    def _write_text(path: Path, text: str) -> None:
        try:
            with path.open("w", encoding=FILE_ENCODING, newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise IoFailureError(f"Could not write file: {exc.strerror or exc}", path=path) from exc

    def _record(self, exc: RateFileError, context: str) -> None:
        try:
            self.journal.record(exc, context=context)
        except Exception:  # noqa: BLE001
            LOGGER.warning("Could not write failure to the error journal", exc_info=True)
