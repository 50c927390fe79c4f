"""
CSV output and input for the result tables.

All tables are UTF-8, delimiter-separated (";" by default), header row first.
Rows are flushed as they are written, so an interrupted run leaves every row
written so far on disk.
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from wikidivisions.core.exceptions import ParsingError
from wikidivisions.core.records import DivisionRecord, NameTranslation, SubdivisionRecord

logger = logging.getLogger(__name__)

DIVISIONS_HEADER = ["ISO-3166-1", "ISO-3166-2", "Name1", "Name2", "Wikipedia", "Type"]
SUBDIVISIONS_HEADER = ["ISO-3166-1", "ISO-3166-2", "ISO Region", "Name1", "Name2", "Wikipedia", "Type"]
NAMES_HEADER = ["ISO-3166-1", "ISO-3166-2", "language_code", "value", "wikipedia"]

Record = Union[DivisionRecord, SubdivisionRecord, NameTranslation]


class CsvTableWriter:
    """
    Append-only writer for one result table.

    Example:
        >>> with CsvTableWriter(path, DIVISIONS_HEADER) as writer:
        ...     writer.write(record)
    """

    def __init__(self, path: Path, header: List[str], delimiter: str = ";"):
        self.path = Path(path)
        self.header = header
        self.delimiter = delimiter
        self.rows_written = 0
        self._file = None
        self._writer = None

    def open(self) -> "CsvTableWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file, delimiter=self.delimiter)
        self._writer.writerow(self.header)
        logger.debug(f"Opened {self.path}")
        return self

    def write(self, record: Record):
        self._writer.writerow(record.to_row())
        self._file.flush()
        self.rows_written += 1

    def write_all(self, records: Iterable[Record]) -> int:
        count = 0
        for record in records:
            self.write(record)
            count += 1
        return count

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.info(f"Wrote {self.rows_written} rows to {self.path}")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _read_rows(path: Path, header: List[str], delimiter: str) -> Iterator[List[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f, delimiter=delimiter)
        found = next(reader, None)
        if found != header:
            raise ParsingError(
                f"Unexpected header {found!r}, expected {header!r}",
                page_url=str(path),
                element="header",
            )
        for line_number, row in enumerate(reader, start=2):
            if not row:
                continue
            if len(row) != len(header):
                raise ParsingError(
                    f"Line {line_number} has {len(row)} fields, expected {len(header)}",
                    page_url=str(path),
                )
            yield row


def read_divisions(path: Path, delimiter: str = ";") -> Iterator[DivisionRecord]:
    """Read back a divisions table."""
    for row in _read_rows(path, DIVISIONS_HEADER, delimiter):
        yield DivisionRecord(*row)


def read_subdivisions(path: Path, delimiter: str = ";") -> Iterator[SubdivisionRecord]:
    """Read back a subdivisions table."""
    for row in _read_rows(path, SUBDIVISIONS_HEADER, delimiter):
        yield SubdivisionRecord(*row)


def read_names(path: Path, delimiter: str = ";") -> Iterator[NameTranslation]:
    """Read back a names table."""
    for row in _read_rows(path, NAMES_HEADER, delimiter):
        yield NameTranslation(*row)
