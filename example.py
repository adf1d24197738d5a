from decimal import Decimal

from fx_ledger import FileErrorJournal, NotFoundError, RateBook, RateStorage, __version__

print(__version__)  # 0.1.0

journal = FileErrorJournal("error_log.txt")
book = RateBook(storage=RateStorage(journal))

# Manual entry stamps the update date with the current time
book.add(1, "USD", Decimal("1.1"))
book.add(2, "EUR", "0.9")

# The same records in every supported format
for token in ("csv", "json", "xml", "yaml"):
    book.save(f"rates.{token}", token)

# Format tokens are case-insensitive
book.load("rates.json", "JSON")
print(book.search("USD"))
# => [CurrencyRate(id=1, currency='USD', rate=Decimal('1.1'), update_date=datetime(...))]

book.sort_by("Rate")
print([record.currency for record in book.records])
# => ['EUR', 'USD']

# Failures carry a kind and are appended to error_log.txt
try:
    book.load("missing.csv", "csv")
except NotFoundError as exc:
    print(exc.kind)  # ErrorKind.NOT_FOUND

journal.close()
