"""
Locates the divisions and subdivisions tables on a country's ISO 3166-2 page.

Column layout varies from page to page, so the type and parent columns are
found by their header text.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from wikidivisions.core.exceptions import ParsingError
from wikidivisions.parser.html_utils import SORTABLE_TABLE, cell_index, normalized_text, row_cells

logger = logging.getLogger(__name__)

# Header of a per-row type column, in order of preference
TYPE_HEADERS = ("Subdivision category", "Subdivision type")

# Header of the parent column: exact text, or a prefix such as "In region"
PARENT_HEADER = "Parent subdivision"
PARENT_HEADER_PREFIX = "In "


@dataclass
class LocatedTable:
    """A table with its resolved column positions."""

    table: Tag
    rows: List[Tag] = field(default_factory=list)  # Data rows, header excluded
    type_index: Optional[int] = None  # None: use the type label from the index page
    parent_index: Optional[int] = None  # Subdivisions tables only


def get_type_index(header_row: Tag) -> Optional[int]:
    """Column of the per-row type value, if the table has one."""
    headers = [cell for cell in row_cells(header_row) if cell.name == "th"]
    for expected in TYPE_HEADERS:
        for header in headers:
            if normalized_text(header) == expected:
                return cell_index(header)
    return None


def find_parent_header(soup: BeautifulSoup) -> Optional[Tag]:
    """
    First header cell of a sortable table naming the parent division.

    An exact "Parent subdivision" header anywhere on the page wins over
    an "In ..." header.
    """
    headers = [th for table in soup.select(SORTABLE_TABLE) for th in table.find_all("th")]

    for header in headers:
        if normalized_text(header) == PARENT_HEADER:
            return header

    for header in headers:
        if normalized_text(header).startswith(PARENT_HEADER_PREFIX):
            return header

    return None


def _data_rows(table: Tag, header_row: Tag) -> List[Tag]:
    rows = table.find_all("tr")
    position = next(i for i, row in enumerate(rows) if row is header_row)
    return rows[position + 1:]


def locate_divisions_table(soup: BeautifulSoup, page_url: Optional[str] = None) -> LocatedTable:
    """
    The first sortable table of the page.

    Raises:
        ParsingError: If the page has no sortable table
    """
    table = soup.select_one(SORTABLE_TABLE)
    if table is None:
        raise ParsingError("Divisions table not found", page_url=page_url, element=SORTABLE_TABLE)

    rows = table.find_all("tr")
    if not rows:
        raise ParsingError("Divisions table has no rows", page_url=page_url, element="tr")

    type_index = get_type_index(rows[0])
    logger.debug(f"Divisions table: {len(rows) - 1} rows, type column {type_index}")

    return LocatedTable(table=table, rows=rows[1:], type_index=type_index)


def locate_subdivisions_table(
    soup: BeautifulSoup,
    page_url: Optional[str] = None,
) -> Optional[LocatedTable]:
    """
    The table holding the parent column, or None when the country has no subdivisions.
    """
    header = find_parent_header(soup)
    if header is None:
        return None

    header_row = header.find_parent("tr")
    table = header_row.find_parent("table") if header_row is not None else None
    if table is None:
        raise ParsingError(
            "Parent header is not inside a table row",
            page_url=page_url,
            element=normalized_text(header),
        )

    parent_index = cell_index(header)
    type_index = get_type_index(header_row)
    rows = _data_rows(table, header_row)
    logger.debug(
        f"Subdivisions table: {len(rows)} rows, parent column {parent_index}, "
        f"type column {type_index}"
    )

    return LocatedTable(table=table, rows=rows, type_index=type_index, parent_index=parent_index)
