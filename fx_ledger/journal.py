"""Append-only diagnostic journal for rate file failures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Protocol

from fx_ledger.errors import RateFileError

__all__ = [
    "DEFAULT_ERROR_LOG_PATH",
    "ErrorJournal",
    "FileErrorJournal",
    "NullErrorJournal",
]

DEFAULT_ERROR_LOG_PATH: Final[Path] = Path("error_log.txt")


class ErrorJournal(Protocol):
    """Collaborator that keeps a record of every surfaced failure."""

    def record(self, exc: BaseException, *, context: str | None = None) -> None:
        ...  # pragma: no cover - protocol definition


class NullErrorJournal:
    """Journal that discards entries."""

    def record(self, exc: BaseException, *, context: str | None = None) -> None:
        return None


class FileErrorJournal:
    """Write one timestamped entry (message, context, traceback) per failure.

    Entries go through a :class:`logging.Logger` owned by the journal and kept
    out of the logging registry, so it never reaches the console handlers
    configured by :func:`fx_ledger.utils.logger.get_logger`.
    The file is opened lazily and always in append mode.
    """

    def __init__(self, path: str | Path = DEFAULT_ERROR_LOG_PATH) -> None:
        self.path = Path(path)
        self._handler = logging.FileHandler(self.path, mode="a", encoding="utf-8", delay=True)
        self._handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(message)s"))
        self._logger = logging.Logger("fx_ledger.journal", level=logging.ERROR)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    def record(self, exc: BaseException, *, context: str | None = None) -> None:
        kind = exc.kind.value if isinstance(exc, RateFileError) else type(exc).__name__
        message = f"{kind}: {exc}"
        if context:
            message = f"{message}\n  context: {context}"
        self._logger.error(message, exc_info=(type(exc), exc, exc.__traceback__))
        self._handler.flush()

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()
