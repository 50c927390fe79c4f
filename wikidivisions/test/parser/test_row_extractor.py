"""
Tests for row extraction (wikidivisions/parser/row_extractor.py)

Tests cover:
- Code splitting and monospace preference
- Link selection (image links skipped, hidden text stripped)
- Type column vs. fallback type
- Parent codes with and without a hyphen
- Lenient and strict handling of malformed rows
"""

import pytest
from bs4 import BeautifulSoup

from wikidivisions.core.exceptions import MalformedRowError
from wikidivisions.core.records import DivisionRecord, SubdivisionRecord
from wikidivisions.parser.row_extractor import (
    RowExtractor,
    find_article_link,
    parent_code,
    split_iso_code,
)
from wikidivisions.parser.table_locator import locate_divisions_table, locate_subdivisions_table

BASE_URL = "https://en.wikipedia.org"


def divisions_page(*rows: str, header: str = "<th>Code</th><th>Name</th>") -> BeautifulSoup:
    return BeautifulSoup(
        f'<table class="wikitable sortable"><tr>{header}</tr>{"".join(rows)}</table>',
        "html.parser",
    )


class TestSplitIsoCode:
    """Tests for split_iso_code and parent_code."""

    def test_suffix_after_first_hyphen(self):
        assert split_iso_code("AD-07") == "07"

    def test_keeps_later_hyphens(self):
        assert split_iso_code("XA-01-AB") == "01-AB"

    def test_no_hyphen(self):
        assert split_iso_code("AD07") is None

    def test_empty_suffix(self):
        assert split_iso_code("AD- ") is None

    def test_parent_with_hyphen(self):
        assert parent_code("FR-ARA") == "ARA"

    def test_parent_without_hyphen(self):
        assert parent_code(" FR ") == "FR"


class TestFindArticleLink:
    """Tests for find_article_link."""

    def test_skips_image_link(self):
        row = BeautifulSoup(
            '<tr><td><a class="image" title="Flag" href="/wiki/File:F.svg"></a>'
            '<a href="/wiki/Alpha" title="Alpha">Alpha</a></td></tr>',
            "html.parser",
        ).tr
        assert find_article_link(row)["href"] == "/wiki/Alpha"

    def test_skips_file_description_link(self):
        row = BeautifulSoup(
            '<tr><td><a class="mw-file-description" title="Flag" href="/wiki/File:F.svg"></a>'
            '<a href="/wiki/Alpha" title="Alpha">Alpha</a></td></tr>',
            "html.parser",
        ).tr
        assert find_article_link(row)["title"] == "Alpha"

    def test_skips_empty_title(self):
        row = BeautifulSoup(
            '<tr><td><a href="#cite" title="">[1]</a><a href="/wiki/Alpha">Alpha</a></td></tr>',
            "html.parser",
        ).tr
        assert find_article_link(row) is None


class TestExtractDivisions:
    """Tests for RowExtractor.extract_divisions."""

    def test_country_page_rows(self, country_soup):
        extractor = RowExtractor("XA", BASE_URL)
        records = list(extractor.extract_divisions(locate_divisions_table(country_soup), "province"))

        assert records == [
            DivisionRecord(
                country_code="XA",
                iso_subdivision_code="01",
                primary_name="Alpha Province",
                secondary_name="Alpha",
                wikipedia_url="https://en.wikipedia.org/wiki/Alpha_Province",
                type_label="province",
            ),
            DivisionRecord(
                country_code="XA",
                iso_subdivision_code="02",
                primary_name="Beta",
                secondary_name="Beta",
                wikipedia_url="",
                type_label="region",
            ),
        ]

    def test_fallback_type_without_type_column(self):
        soup = divisions_page(
            "<tr><td>AD-02</td><td>Canillo</td></tr>",
            "<tr><td>AD-03</td><td>Encamp</td></tr>",
        )
        records = list(RowExtractor("AD", BASE_URL).extract_divisions(locate_divisions_table(soup), "parish"))
        assert [r.type_label for r in records] == ["parish", "parish"]

    def test_monospace_preferred_over_cell_text(self):
        soup = divisions_page(
            '<tr><td><span style="font-family:monospace">AD-07</span> (since 1978)</td><td>Andorra la Vella</td></tr>'
        )
        record = next(RowExtractor("AD", BASE_URL).extract_divisions(locate_divisions_table(soup), "parish"))
        assert record.iso_subdivision_code == "07"

    def test_hidden_text_removed_from_fallback_name(self):
        soup = divisions_page(
            '<tr><td>AD-08</td><td><span style="display:none;">Escaldes</span> Escaldes-Engordany </td></tr>'
        )
        record = next(RowExtractor("AD", BASE_URL).extract_divisions(locate_divisions_table(soup), "parish"))
        assert record.primary_name == "Escaldes-Engordany"
        assert record.secondary_name == "Escaldes-Engordany"
        assert record.wikipedia_url == ""

    def test_redlink_url_is_kept(self):
        soup = divisions_page(
            '<tr><td>XA-09</td><td><a href="/w/index.php?title=Nine&amp;action=edit&amp;redlink=1" '
            'class="new" title="Nine (page does not exist)">Nine</a></td></tr>'
        )
        record = next(RowExtractor("XA", BASE_URL).extract_divisions(locate_divisions_table(soup), "x"))
        assert record.wikipedia_url == "https://en.wikipedia.org/w/index.php?title=Nine&action=edit&redlink=1"

    def test_malformed_row_skipped(self, caplog):
        """A code cell without a hyphen is skipped; other rows are kept."""
        soup = divisions_page(
            "<tr><td>AD02</td><td>Canillo</td></tr>",
            "<tr><td>AD-03</td><td>Encamp</td></tr>",
        )
        extractor = RowExtractor("AD", BASE_URL)
        records = list(extractor.extract_divisions(locate_divisions_table(soup), "parish"))

        assert [r.iso_subdivision_code for r in records] == ["03"]
        assert extractor.skipped_rows == 1
        assert "skipping malformed row" in caplog.text

    def test_malformed_row_strict(self):
        soup = divisions_page("<tr><td>AD02</td><td>Canillo</td></tr>")
        extractor = RowExtractor("AD", BASE_URL, strict=True, page_url="https://en.wikipedia.org/wiki/ISO_3166-2:AD")

        with pytest.raises(MalformedRowError) as exc_info:
            list(extractor.extract_divisions(locate_divisions_table(soup), "parish"))

        assert exc_info.value.field_value == "AD02"
        assert exc_info.value.row_index == 1

    def test_missing_type_cell(self):
        soup = divisions_page(
            "<tr><td>AD-02</td><td>Canillo</td></tr>",
            header="<th>Code</th><th>Name</th><th>Subdivision type</th>",
        )
        extractor = RowExtractor("AD", BASE_URL)
        assert list(extractor.extract_divisions(locate_divisions_table(soup), "parish")) == []
        assert extractor.skipped_rows == 1


class TestExtractSubdivisions:
    """Tests for RowExtractor.extract_subdivisions."""

    def test_country_page_rows(self, country_soup):
        extractor = RowExtractor("XA", BASE_URL)
        located = locate_subdivisions_table(country_soup)
        records = list(extractor.extract_subdivisions(located, "district"))

        assert records == [
            SubdivisionRecord(
                country_code="XA",
                iso_subdivision_code="01-AB",
                parent_iso_code="01",
                primary_name="Abc (district)",
                secondary_name="Abc",
                wikipedia_url="https://en.wikipedia.org/wiki/Abc_(district)",
                type_label="district",
            ),
            SubdivisionRecord(
                country_code="XA",
                iso_subdivision_code="CD",
                parent_iso_code="XA",
                primary_name="Cde",
                secondary_name="Cde",
                wikipedia_url="",
                type_label="district",
            ),
        ]

    def test_no_fallback_type(self, country_soup):
        """Countries with a single type line get an empty subdivision type."""
        located = locate_subdivisions_table(country_soup)
        records = list(RowExtractor("XA", BASE_URL).extract_subdivisions(located, None))
        assert {r.type_label for r in records} == {""}
