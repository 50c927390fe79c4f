"""
Parser for the ISO 3166-2 index page.

The index page lists every country in a sortable table:
column 0 links to the country's ISO 3166-2 page, column 2 describes the
division types ("7 parishes", or two lines such as "13 regions" /
"96 departments"), or holds an em dash when the country has no divisions.
"""
import logging
from typing import Dict, List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from wikidivisions.core.config import SUBDIVISION_PAGE_PREFIX
from wikidivisions.core.exceptions import ParsingError
from wikidivisions.core.records import CountryLink
from wikidivisions.parser.html_utils import SORTABLE_TABLE, row_cells

logger = logging.getLogger(__name__)

# Known spellings of the "no divisions" placeholder. The second one is an
# em dash whose UTF-8 bytes were decoded as Windows-1252.
NO_DIVISIONS_PLACEHOLDERS = ("—", "â€”")

COUNTRY_CELL = 0
TYPES_CELL = 2


def type_cell_lines(cell: Tag) -> List[str]:
    """Non-empty lines of the type cell, treating <br> as a line break."""
    for br in cell.find_all("br"):
        br.replace_with("\n")
    return [line.strip() for line in cell.get_text().split("\n") if line.strip()]


def type_label(line: str) -> str:
    """Drop the leading count: "7 parishes" -> "parishes"."""
    parts = line.split(" ", 1)
    return parts[1].strip() if len(parts) == 2 else line


def split_type_labels(lines: List[str]) -> Tuple[str, Optional[str]]:
    """
    Division and subdivision type labels from the type cell lines.

    Returns:
        (division_type_label, subdivision_type_label or None)
    """
    if len(lines) > 2:
        logger.warning(f"Type cell has {len(lines)} lines, using the first two: {lines}")
    division_type = type_label(lines[0])
    subdivision_type = type_label(lines[1]) if len(lines) > 1 else None
    return division_type, subdivision_type


def parse_country_links(
    soup: BeautifulSoup,
    base_url: str,
    page_url: Optional[str] = None,
) -> Dict[str, CountryLink]:
    """
    Extract the countries that have divisions from the index page.

    Args:
        soup: Parsed index page
        base_url: Reference site URL used to make country page links absolute
        page_url: Page URL for error messages

    Returns:
        Mapping of ISO 3166-1 code to CountryLink, in table row order

    Raises:
        ParsingError: If the table is missing, a row lacks its country page
            link, or the type cell holds an unknown placeholder
    """
    table = soup.select_one(SORTABLE_TABLE)
    if table is None:
        raise ParsingError("Index table not found", page_url=page_url, element=SORTABLE_TABLE)

    links: Dict[str, CountryLink] = {}
    rows = table.find_all("tr")

    for row_index, row in enumerate(rows[1:], start=1):
        cells = row_cells(row)
        if len(cells) <= TYPES_CELL:
            raise ParsingError(
                f"Index row {row_index} has {len(cells)} cells, expected at least {TYPES_CELL + 1}",
                page_url=page_url,
                element="td",
            )

        types_text = cells[TYPES_CELL].get_text().strip()
        if types_text in NO_DIVISIONS_PLACEHOLDERS:
            logger.debug(f"Index row {row_index}: no divisions")
            continue

        lines = type_cell_lines(cells[TYPES_CELL])
        if not any(ch.isalnum() for ch in types_text) or not lines:
            raise ParsingError(
                f"Index row {row_index} has an unrecognized type cell {types_text!r}",
                page_url=page_url,
                element="type cell",
            )

        link = cells[COUNTRY_CELL].select_one(f'a[href^="{SUBDIVISION_PAGE_PREFIX}"]')
        if link is None:
            raise ParsingError(
                f"Index row {row_index} has no link to a subdivision page",
                details={"cell": cells[COUNTRY_CELL].get_text().strip()},
                page_url=page_url,
                element=f'a[href^="{SUBDIVISION_PAGE_PREFIX}"]',
            )

        country_code = link.get_text().strip()
        division_type, subdivision_type = split_type_labels(lines)

        links[country_code] = CountryLink(
            country_code=country_code,
            detail_page_url=urljoin(base_url.rstrip("/") + "/", link["href"]),
            division_type_label=division_type,
            subdivision_type_label=subdivision_type,
        )

    logger.info(f"Found {len(links)} countries with divisions")
    return links
