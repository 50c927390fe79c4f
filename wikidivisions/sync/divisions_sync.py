"""
Divisions and subdivisions extraction.

Fetches the ISO 3166-2 index page, then each country's page, and writes
result/divisions.csv and result/subdivisions.csv. Pages are fetched one at a
time in index order; rows are written in page order as they are extracted.

Usage:
    wikidivisions-parse [--result-dir DIR] [--strict] [--log-level LEVEL]
"""
import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Set

from wikidivisions.core.config import DIVISIONS_FILE, LOG_LEVELS, SUBDIVISIONS_FILE, Config
from wikidivisions.core.exceptions import ConfigurationError, DivisionsError
from wikidivisions.core.logging import setup_logging
from wikidivisions.core.records import CountryLink
from wikidivisions.crawler.wikipedia_client import WikipediaClient
from wikidivisions.data.static_divisions import STATIC_DIVISIONS, get_static_divisions
from wikidivisions.export.csv_files import DIVISIONS_HEADER, SUBDIVISIONS_HEADER, CsvTableWriter
from wikidivisions.parser.index_parser import parse_country_links
from wikidivisions.parser.row_extractor import RowExtractor
from wikidivisions.parser.table_locator import locate_divisions_table, locate_subdivisions_table
from wikidivisions.utils.progress import ProgressTracker

logger = logging.getLogger(__name__)


class DivisionsSyncService:
    """
    Service producing the divisions and subdivisions tables.

    Countries listed in STATIC_DIVISIONS get their divisions from static data;
    their subdivisions are still scraped.
    """

    def __init__(self, settings: Optional[Config] = None, client: Optional[WikipediaClient] = None):
        """
        Initialize the service.

        Args:
            settings: Run configuration (defaults to the environment config)
            client: Page client (defaults to a WikipediaClient built from settings)
        """
        self.config = settings or Config()
        self.client = client or WikipediaClient(settings=self.config)
        self.progress = ProgressTracker("countries", enabled=self.config.progress_enabled)

    def run(self) -> Dict[str, int]:
        """
        Run the extraction.

        Returns:
            Statistics: countries, divisions, subdivisions and skipped_rows counts

        Raises:
            FetchError: If any page cannot be fetched
            ParsingError: If a page does not have the expected structure
        """
        stats = {"countries": 0, "divisions": 0, "subdivisions": 0, "skipped_rows": 0}

        logger.info("=" * 60)
        logger.info("Divisions extraction")
        logger.info("=" * 60)
        logger.info(f"Index: {self.config.index_url}")
        logger.info(f"Result directory: {self.config.result_dir}")
        logger.info(f"Row policy: {'strict' if self.config.strict_rows else 'skip malformed rows'}")

        delimiter = self.config.csv_delimiter
        divisions_path = self.config.result_path(DIVISIONS_FILE)
        subdivisions_path = self.config.result_path(SUBDIVISIONS_FILE)

        with CsvTableWriter(divisions_path, DIVISIONS_HEADER, delimiter) as divisions, \
                CsvTableWriter(subdivisions_path, SUBDIVISIONS_HEADER, delimiter) as subdivisions:

            index_page = self.client.fetch_page(self.config.index_url)
            country_links = parse_country_links(index_page, self.config.base_url, self.config.index_url)

            static_written: Set[str] = set()
            self.progress.start(len(country_links))

            for country_code, link in country_links.items():
                print(f"{country_code}: {link.detail_page_url}", flush=True)

                extractor = self.process_country(link, divisions, subdivisions, stats)
                if get_static_divisions(country_code) is not None:
                    static_written.add(country_code)

                stats["countries"] += 1
                stats["skipped_rows"] += extractor.skipped_rows
                self.progress.update()

            # Static divisions are written even if the index no longer lists the country
            for country_code, static in STATIC_DIVISIONS.items():
                if country_code not in static_written:
                    logger.info(f"{country_code}: not in the index, writing static divisions")
                    stats["divisions"] += divisions.write_all(static.records())

            self.progress.finish()

        logger.info(
            f"Wrote {stats['divisions']} divisions and {stats['subdivisions']} subdivisions "
            f"for {stats['countries']} countries ({stats['skipped_rows']} rows skipped)"
        )
        return stats

    def process_country(
        self,
        link: CountryLink,
        divisions: CsvTableWriter,
        subdivisions: CsvTableWriter,
        stats: Dict[str, int],
    ) -> RowExtractor:
        """
        Fetch one country page and write its rows.

        Returns:
            The extractor used, for its skipped row count
        """
        page_url = link.detail_page_url
        page = self.client.fetch_page(page_url)
        extractor = RowExtractor(
            link.country_code,
            self.config.base_url,
            strict=self.config.strict_rows,
            page_url=page_url,
        )

        static = get_static_divisions(link.country_code)
        if static is not None:
            logger.debug(f"{link.country_code}: using static divisions")
            division_count = divisions.write_all(static.records())
        else:
            located = locate_divisions_table(page, page_url)
            division_count = divisions.write_all(
                extractor.extract_divisions(located, link.division_type_label)
            )

        subdivision_count = 0
        located = locate_subdivisions_table(page, page_url)
        if located is not None:
            subdivision_count = subdivisions.write_all(
                extractor.extract_subdivisions(located, link.subdivision_type_label)
            )

        logger.debug(f"{link.country_code}: {division_count} divisions, {subdivision_count} subdivisions")
        stats["divisions"] += division_count
        stats["subdivisions"] += subdivision_count
        return extractor

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def build_config(args: argparse.Namespace, base: Optional[Config] = None) -> Config:
    """
    Apply command line overrides to a Config.

    Without a base, fields not given on the command line are read from the
    environment; an invalid value raises ConfigurationError.
    """
    overrides = {}
    if args.result_dir:
        overrides["result_dir"] = Path(args.result_dir)
    if getattr(args, "strict", False):
        overrides["strict_rows"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    if base is None:
        return Config(**overrides)
    return dataclasses.replace(base, **overrides)


def build_arg_parser(description: str, strict_option: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--result-dir", help="Directory for the CSV files")
    if strict_option:
        parser.add_argument("--strict", action="store_true", help="Abort on the first malformed row")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Log level")
    return parser


def main(argv=None):
    """Main entry point for the divisions extraction."""
    args = build_arg_parser("Extract ISO 3166-2 divisions and subdivisions from Wikipedia").parse_args(argv)

    try:
        settings = build_config(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging("wikidivisions", level=settings.log_level)

    try:
        with DivisionsSyncService(settings) as service:
            service.run()
    except KeyboardInterrupt:
        logger.warning("Interrupted, output files are incomplete")
        sys.exit(130)  # Standard exit code for SIGINT
    except DivisionsError as e:
        logger.error(f"Extraction failed, output files are incomplete: {e}")
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error, output files are incomplete")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
