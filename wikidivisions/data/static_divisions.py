"""
Divisions that are written from static data instead of being scraped.

France's ISO 3166-2 page still lists the regions in force before the
2016 reform, so the 13 metropolitan regions created on January 1, 2016
are maintained here with links to the French Wikipedia.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from wikidivisions.core.records import DivisionRecord


@dataclass
class StaticDivision:
    """A division entered by hand."""

    url: str
    name: str
    name2: Optional[str] = None  # Display name when it differs from the article title


@dataclass
class StaticCountryDivisions:
    """Replacement for a country's scraped divisions table."""

    country_code: str
    type_label: str
    divisions: Dict[str, StaticDivision]

    def records(self) -> List[DivisionRecord]:
        return [
            DivisionRecord(
                country_code=self.country_code,
                iso_subdivision_code=iso_code,
                primary_name=division.name,
                secondary_name=division.name2 or division.name,
                wikipedia_url=division.url,
                type_label=self.type_label,
            )
            for iso_code, division in self.divisions.items()
        ]


# France regions since January 1, 2016
FRANCE_REGIONS = StaticCountryDivisions(
    country_code="FR",
    type_label="metropolitan region",
    divisions={
        "ARA": StaticDivision(url="https://fr.wikipedia.org/wiki/Auvergne-Rh%C3%B4ne-Alpes", name="Auvergne-Rhône-Alpes"),
        "BFC": StaticDivision(url="https://fr.wikipedia.org/wiki/Bourgogne-Franche-Comt%C3%A9", name="Bourgogne-Franche-Comté"),
        "BRE": StaticDivision(url="https://fr.wikipedia.org/wiki/Bretagne", name="Bretagne"),
        "CVL": StaticDivision(url="https://fr.wikipedia.org/wiki/Centre-Val_de_Loire", name="Centre-Val de Loire"),
        "COR": StaticDivision(url="https://fr.wikipedia.org/wiki/Corse", name="Corse"),
        "GES": StaticDivision(url="https://fr.wikipedia.org/wiki/Grand_Est", name="Grand Est"),
        "HDF": StaticDivision(url="https://fr.wikipedia.org/wiki/Hauts-de-France", name="Hauts-de-France"),
        "IDF": StaticDivision(url="https://fr.wikipedia.org/wiki/%C3%8Ele-de-France", name="Île-de-France"),
        "NOR": StaticDivision(url="https://fr.wikipedia.org/wiki/Normandie", name="Normandie"),
        "NAQ": StaticDivision(url="https://fr.wikipedia.org/wiki/Nouvelle-Aquitaine", name="Nouvelle-Aquitaine"),
        "OCC": StaticDivision(
            url="https://fr.wikipedia.org/wiki/Occitanie_(r%C3%A9gion_administrative)",
            name="Occitanie (région administrative)",
            name2="Occitanie",
        ),
        "PDL": StaticDivision(url="https://fr.wikipedia.org/wiki/Pays_de_la_Loire", name="Pays de la Loire"),
        "PAC": StaticDivision(url="https://fr.wikipedia.org/wiki/Provence-Alpes-C%C3%B4te_d%27Azur", name="Provence-Alpes-Côte d'Azur"),
    },
)

# Countries whose divisions table is not scraped
STATIC_DIVISIONS: Dict[str, StaticCountryDivisions] = {
    FRANCE_REGIONS.country_code: FRANCE_REGIONS,
}


def get_static_divisions(country_code: str) -> Optional[StaticCountryDivisions]:
    """Static divisions for a country, if its table is maintained by hand."""
    return STATIC_DIVISIONS.get(country_code.upper())
