"""
Row extraction for the divisions and subdivisions tables.

Each data row yields one record:
- ISO code from column 0 (the monospace span if there is one), suffix after
  the first hyphen: "AD-07" -> "07"
- Name and article URL from the first titled link in the row that is not a
  flag/image link, else the plain text of column 1
- Type from the resolved type column, else the label from the index page
- Parent code (subdivisions only) from the parent column

Rows are independent. A malformed row raises MalformedRowError, which is
logged and skipped unless the extractor is strict.
"""
import logging
from typing import Iterator, List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import Tag

from wikidivisions.core.exceptions import MalformedRowError
from wikidivisions.core.records import DivisionRecord, SubdivisionRecord
from wikidivisions.parser.html_utils import monospace_text, remove_hidden, row_cells
from wikidivisions.parser.table_locator import LocatedTable

logger = logging.getLogger(__name__)

# Link classes used for flag and coat-of-arms thumbnails
IMAGE_LINK_CLASSES = frozenset({"image", "mw-file-description"})

CODE_CELL = 0
NAME_CELL = 1


def split_iso_code(raw: str) -> Optional[str]:
    """Suffix after the first hyphen, or None if there is no usable suffix."""
    if "-" not in raw:
        return None
    suffix = raw.split("-", 1)[1].strip()
    return suffix or None


def parent_code(raw: str) -> str:
    """
    Parent division code: suffix after the first hyphen, or the raw text.

    Bare country codes ("FR") have no hyphen and are kept verbatim.
    """
    if "-" in raw:
        return raw.split("-", 1)[1].strip()
    return raw.strip()


def find_article_link(row: Tag) -> Optional[Tag]:
    """First link in the row with a non-empty title that is not an image link."""
    for anchor in row.find_all("a", title=True):
        if not anchor["title"].strip():
            continue
        if IMAGE_LINK_CLASSES.intersection(anchor.get("class") or []):
            continue
        return anchor
    return None


class RowExtractor:
    """
    Builds records from the data rows of a located table.

    Example:
        >>> extractor = RowExtractor("AD", "https://en.wikipedia.org")
        >>> for record in extractor.extract_divisions(located, "parishes"):
        ...     print(record.iso_subdivision_code, record.primary_name)
    """

    def __init__(
        self,
        country_code: str,
        base_url: str,
        strict: bool = False,
        page_url: Optional[str] = None,
    ):
        """
        Initialize the extractor.

        Args:
            country_code: ISO 3166-1 code written into every record
            base_url: Reference site URL for resolving article links
            strict: Raise on the first malformed row instead of skipping it
            page_url: Page URL for diagnostics
        """
        self.country_code = country_code
        self.base_url = base_url.rstrip("/") + "/"
        self.strict = strict
        self.page_url = page_url
        self.skipped_rows = 0

    def _cell(self, cells: List[Tag], index: int, field_name: str, row_index: int) -> Tag:
        if index >= len(cells):
            raise MalformedRowError(
                f"Row has {len(cells)} cells, no column {index}",
                page_url=self.page_url,
                field_name=field_name,
                row_index=row_index,
            )
        return cells[index]

    def _iso_code(self, cells: List[Tag], row_index: int) -> str:
        raw = monospace_text(self._cell(cells, CODE_CELL, "ISO-3166-2", row_index))
        code = split_iso_code(raw)
        if code is None:
            raise MalformedRowError(
                "Code cell has no hyphen-separated subdivision code",
                page_url=self.page_url,
                field_name="ISO-3166-2",
                field_value=raw.strip(),
                row_index=row_index,
            )
        return code

    def _name_and_url(self, row: Tag, cells: List[Tag], row_index: int) -> Tuple[str, str, str]:
        anchor = find_article_link(row)
        if anchor is not None:
            return (
                anchor["title"].strip(),
                anchor.get_text().strip(),
                urljoin(self.base_url, anchor.get("href", "")),
            )

        name = self._cell(cells, NAME_CELL, "Name1", row_index).get_text().strip()
        return name, name, ""

    def _type(self, cells: List[Tag], type_index: Optional[int], fallback: Optional[str], row_index: int) -> str:
        if type_index is None:
            return (fallback or "").strip()
        return self._cell(cells, type_index, "Type", row_index).get_text().strip()

    def _rows(self, located: LocatedTable) -> Iterator[Tuple[int, Tag, List[Tag]]]:
        for row_index, row in enumerate(located.rows, start=1):
            remove_hidden(row)
            yield row_index, row, row_cells(row)

    def _handle(self, error: MalformedRowError):
        if self.strict:
            raise error
        self.skipped_rows += 1
        logger.warning(f"{self.country_code}: skipping malformed row: {error}")

    def extract_divisions(
        self,
        located: LocatedTable,
        fallback_type: Optional[str],
    ) -> Iterator[DivisionRecord]:
        """
        Yield a DivisionRecord per data row.

        Args:
            located: The divisions table
            fallback_type: Type label for tables without a type column
        """
        for row_index, row, cells in self._rows(located):
            try:
                iso_code = self._iso_code(cells, row_index)
                primary, secondary, url = self._name_and_url(row, cells, row_index)
                type_label = self._type(cells, located.type_index, fallback_type, row_index)
            except MalformedRowError as e:
                self._handle(e)
                continue

            yield DivisionRecord(
                country_code=self.country_code,
                iso_subdivision_code=iso_code,
                primary_name=primary,
                secondary_name=secondary,
                wikipedia_url=url,
                type_label=type_label,
            )

    def extract_subdivisions(
        self,
        located: LocatedTable,
        fallback_type: Optional[str],
    ) -> Iterator[SubdivisionRecord]:
        """
        Yield a SubdivisionRecord per data row.

        Args:
            located: The subdivisions table (parent_index must be set)
            fallback_type: Type label for tables without a type column
        """
        for row_index, row, cells in self._rows(located):
            try:
                parent_cell = self._cell(cells, located.parent_index, "ISO Region", row_index)
                parent = parent_code(monospace_text(parent_cell))
                iso_code = self._iso_code(cells, row_index)
                primary, secondary, url = self._name_and_url(row, cells, row_index)
                type_label = self._type(cells, located.type_index, fallback_type, row_index)
            except MalformedRowError as e:
                self._handle(e)
                continue

            yield SubdivisionRecord(
                country_code=self.country_code,
                iso_subdivision_code=iso_code,
                parent_iso_code=parent,
                primary_name=primary,
                secondary_name=secondary,
                wikipedia_url=url,
                type_label=type_label,
            )
