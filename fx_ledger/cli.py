"""Console menu for managing currency rates and their files."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Sequence

from fx_ledger.codecs import supported_formats
from fx_ledger.errors import RateFileError
from fx_ledger.journal import DEFAULT_ERROR_LOG_PATH, FileErrorJournal
from fx_ledger.models import CurrencyRate
from fx_ledger.rate_book import RateBook
from fx_ledger.storage import RateStorage
from fx_ledger.utils.logger import get_logger, set_verbosity
from fx_ledger.utils.timestamps import format_rate

LOGGER = get_logger(__name__)

__all__ = ["MENU", "RateConsole", "format_record", "main", "parse_args"]

MENU = (
    "1. Read data from file",
    "2. Write data to file",
    "3. Display data",
    "4. Sort data",
    "5. Search data",
    "6. Add data",
    "7. Remove data",
    "8. Update data",
    "9. Exit",
)
EXIT_CHOICE = "9"


def format_record(record: CurrencyRate) -> str:
    return (
        f"ID: {record.id}, Currency: {record.currency}, Rate: {format_rate(record.rate)}, "
        f"Date: {record.update_date.date().isoformat()}"
    )


class RateConsole:
    """Interactive loop driving a :class:`RateBook`.

    ``prompt`` and ``output`` default to :func:`input` and :func:`print`.
    """

    def __init__(
        self,
        book: RateBook,
        *,
        prompt: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self.book = book
        self.prompt = prompt or input
        self.output = output or print
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.read_file,
            "2": self.write_file,
            "3": self.display,
            "4": self.sort,
            "5": self.search,
            "6": self.add,
            "7": self.remove,
            "8": self.update,
        }

    def run(self) -> None:
        while True:
            for line in MENU:
                self.output(line)
            try:
                choice = self.prompt("Choose an option: ").strip()
            except EOFError:
                return
            if choice == EXIT_CHOICE:
                return
            action = self._actions.get(choice)
            if action is None:
                self.output("Invalid choice. Try again.")
                continue
            try:
                action()
            except EOFError:
                return
            except RateFileError as exc:
                self.output(f"Error: {exc}")
            except (ValueError, TypeError) as exc:
                self.output(f"Invalid input: {exc}")

    def _ask_file(self) -> tuple[str, str]:
        file_name = self.prompt("Enter file name: ").strip()
        token = self.prompt(f"Choose format ({', '.join(supported_formats()).upper()}): ").strip()
        # A blank answer falls back to the file suffix.
        return file_name, token or Path(file_name).suffix.lstrip(".")

    def read_file(self) -> None:
        file_name, token = self._ask_file()
        count = self.book.load(file_name, token)
        self.output(f"Loaded {count} record(s).")

    def write_file(self) -> None:
        file_name, token = self._ask_file()
        self.book.save(file_name, token)
        self.output("Data saved.")

    def display(self, records: Sequence[CurrencyRate] | None = None) -> None:
        for record in self.book.records if records is None else records:
            self.output(format_record(record))

    def sort(self) -> None:
        field = self.prompt("Sort by (Id, Currency, Rate, UpdateDate): ")
        if self.book.sort_by(field):
            self.output("Data sorted.")
        else:
            self.output(f"Unknown field {field.strip()!r}; order unchanged.")

    def search(self) -> None:
        term = self.prompt("Search for: ")
        self.display(self.book.search(term))

    def add(self) -> None:
        rate_id = int(self.prompt("Enter ID: "))
        currency = self.prompt("Enter currency: ")
        rate = self.prompt("Enter rate: ")
        self.book.add(rate_id, currency, rate)
        self.output("Data added.")

    def remove(self) -> None:
        rate_id = int(self.prompt("Enter ID to remove: "))
        self.output("Data removed." if self.book.remove(rate_id) else "Record not found.")

    def update(self) -> None:
        rate_id = int(self.prompt("Enter ID to update: "))
        if self.book.find(rate_id) is None:
            self.output("Record not found.")
            return
        currency = self.prompt("Enter new currency: ")
        rate = self.prompt("Enter new rate: ")
        self.book.update(rate_id, currency, rate)
        self.output("Data updated.")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--error-log",
        dest="error_log",
        default=str(DEFAULT_ERROR_LOG_PATH),
        help="Append-only file receiving one entry per read/write failure",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log codec resolution and file activity to the console",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbosity(args.verbose)
    journal = FileErrorJournal(args.error_log)
    try:
        RateConsole(RateBook(storage=RateStorage(journal))).run()
    finally:
        journal.close()
    LOGGER.debug("Session finished")
