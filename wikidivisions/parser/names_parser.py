"""
Interlanguage name extraction from a division's article.

The language switcher lists one link per language edition; each link's title
reads "Native Name – English gloss, disambiguator", e.g.
"日本 – Japan, country". Only "Native Name" is kept.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from wikidivisions.core.records import DivisionRecord, NameTranslation

logger = logging.getLogger(__name__)

# Container ids of the language switcher (classic skin, then Vector 2022)
LANGUAGE_PANEL_IDS = ("p-lang", "p-lang-btn")
INTERLANGUAGE_LINK = "a.interlanguage-link-target"

REDLINK_MARKER = "redlink=1"
TITLE_SEPARATOR = " – "
PARENTHESIZED = re.compile(r"\([^)]*\)")


def is_fetchable_article(url: str) -> bool:
    """True for a non-empty article URL that is not a redlink."""
    return bool(url) and REDLINK_MARKER not in url


def clean_translated_name(title: str) -> str:
    """
    Native name from an interlanguage link title.

    >>> clean_translated_name("日本 – Japan, country")
    '日本'
    >>> clean_translated_name("Bretagne (région administrative) – Brittany")
    'Bretagne'
    """
    name = title.split(TITLE_SEPARATOR, 1)[0]
    name = name.split(",", 1)[0]
    name = PARENTHESIZED.sub("", name)
    return name.strip()


def find_language_panel(soup: BeautifulSoup) -> Optional[Tag]:
    for panel_id in LANGUAGE_PANEL_IDS:
        panel = soup.find(id=panel_id)
        if panel is not None:
            return panel
    return None


def parse_interlanguage_links(soup: BeautifulSoup) -> Dict[str, Tuple[str, str]]:
    """
    Names by language code from the language switcher.

    Returns:
        {language_code: (translated_name, href)}, empty if the page has no
        language switcher. A language listed twice keeps its last link.
    """
    panel = find_language_panel(soup)
    if panel is None:
        return {}

    names: Dict[str, Tuple[str, str]] = {}
    for link in panel.select(INTERLANGUAGE_LINK):
        language_code = link.get("lang") or link.get("hreflang")
        if not language_code:
            logger.warning(f"Interlanguage link without a language code: {link.get('href')}")
            continue
        names[language_code] = (clean_translated_name(link.get("title", "")), link.get("href", ""))

    return names


def extract_name_translations(soup: BeautifulSoup, division: DivisionRecord) -> List[NameTranslation]:
    """
    NameTranslation rows for one division article.

    Args:
        soup: The division's parsed article
        division: The division the article belongs to

    Returns:
        One NameTranslation per language, in page order
    """
    return [
        NameTranslation(
            country_code=division.country_code,
            iso_subdivision_code=division.iso_subdivision_code,
            language_code=language_code,
            translated_name=name,
            source_url=href,
        )
        for language_code, (name, href) in parse_interlanguage_links(soup).items()
    ]
