"""
Record types produced by the pipelines.

Records are built from one parsed page at a time and written straight away;
nothing is kept once a row is serialized.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CountryLink:
    """A row of the index table for a country that has divisions."""

    country_code: str  # ISO 3166-1 alpha-2 (e.g., "AD")
    detail_page_url: str  # Absolute URL of the country's ISO 3166-2 page
    division_type_label: str  # e.g., "parishes"
    subdivision_type_label: Optional[str] = None  # Second line of the type cell, if any


@dataclass
class DivisionRecord:
    """Row of the divisions table."""

    country_code: str
    iso_subdivision_code: str  # Suffix after the hyphen in "CC-XXX"
    primary_name: str  # Link title
    secondary_name: str  # Link display text
    wikipedia_url: str  # Empty if the row has no article link
    type_label: str

    def to_row(self) -> List[str]:
        return [
            self.country_code,
            self.iso_subdivision_code,
            self.primary_name,
            self.secondary_name,
            self.wikipedia_url,
            self.type_label,
        ]


@dataclass
class SubdivisionRecord:
    """Row of the subdivisions table."""

    country_code: str
    iso_subdivision_code: str
    parent_iso_code: str  # Parent division suffix, or a bare country code
    primary_name: str
    secondary_name: str
    wikipedia_url: str
    type_label: str

    def to_row(self) -> List[str]:
        return [
            self.country_code,
            self.iso_subdivision_code,
            self.parent_iso_code,
            self.primary_name,
            self.secondary_name,
            self.wikipedia_url,
            self.type_label,
        ]


@dataclass
class NameTranslation:
    """Name of a division in another language edition."""

    country_code: str
    iso_subdivision_code: str
    language_code: str
    translated_name: str
    source_url: str

    def to_row(self) -> List[str]:
        return [
            self.country_code,
            self.iso_subdivision_code,
            self.language_code,
            self.translated_name,
            self.source_url,
        ]
