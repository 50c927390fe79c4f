"""
Parsers for Wikipedia ISO 3166-2 pages.

Turns BeautifulSoup documents into records: the index of country pages,
the divisions/subdivisions tables of each country page and the
interlanguage links of each division article.
"""

from .index_parser import parse_country_links
from .names_parser import extract_name_translations, is_fetchable_article
from .row_extractor import RowExtractor
from .table_locator import LocatedTable, locate_divisions_table, locate_subdivisions_table

__all__ = [
    "parse_country_links",
    "extract_name_translations",
    "is_fetchable_article",
    "RowExtractor",
    "LocatedTable",
    "locate_divisions_table",
    "locate_subdivisions_table",
]
