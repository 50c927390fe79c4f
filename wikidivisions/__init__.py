"""
Wikipedia Divisions - country subdivisions with ISO-3166-2 codes.

Scrapes the ISO 3166-2 pages of the English Wikipedia into semicolon-delimited
CSV tables of divisions, subdivisions and their names in other languages.
"""

__version__ = "0.1.0"
