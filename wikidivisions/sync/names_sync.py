"""
Translated division names.

Reads result/divisions.csv, fetches each division's Wikipedia article and
writes the names found in its language switcher to result/names.csv.
Divisions without an article (no URL, or a redlink) are skipped without a fetch.

Usage:
    wikidivisions-names [--result-dir DIR] [--log-level LEVEL]
"""
import logging
import sys
from typing import Dict, Optional

from wikidivisions.core.config import DIVISIONS_FILE, NAMES_FILE, Config
from wikidivisions.core.exceptions import ConfigurationError, DivisionsError
from wikidivisions.core.logging import setup_logging
from wikidivisions.crawler.wikipedia_client import WikipediaClient
from wikidivisions.export.csv_files import NAMES_HEADER, CsvTableWriter, read_divisions
from wikidivisions.parser.names_parser import extract_name_translations, is_fetchable_article
from wikidivisions.sync.divisions_sync import build_arg_parser, build_config
from wikidivisions.utils.progress import ProgressTracker

logger = logging.getLogger(__name__)


class NamesSyncService:
    """Service producing the names table from an existing divisions table."""

    def __init__(self, settings: Optional[Config] = None, client: Optional[WikipediaClient] = None):
        """
        Initialize the service.

        Args:
            settings: Run configuration (defaults to the environment config)
            client: Page client (defaults to a WikipediaClient built from settings)
        """
        self.config = settings or Config()
        self.client = client or WikipediaClient(settings=self.config)
        self.progress = ProgressTracker("divisions", enabled=self.config.progress_enabled)

    def run(self) -> Dict[str, int]:
        """
        Run the name extraction.

        Returns:
            Statistics: divisions, fetched, skipped and names counts

        Raises:
            FetchError: If an article cannot be fetched
            ParsingError: If the divisions table cannot be read
        """
        stats = {"divisions": 0, "fetched": 0, "skipped": 0, "names": 0}
        delimiter = self.config.csv_delimiter
        divisions_path = self.config.result_path(DIVISIONS_FILE)

        logger.info(f"Reading divisions from {divisions_path}")
        divisions = list(read_divisions(divisions_path, delimiter))
        stats["divisions"] = len(divisions)

        with CsvTableWriter(self.config.result_path(NAMES_FILE), NAMES_HEADER, delimiter) as names:
            self.progress.start(len(divisions))

            for division in divisions:
                url = division.wikipedia_url
                if not is_fetchable_article(url):
                    stats["skipped"] += 1
                    self.progress.update()
                    continue

                print(f"{division.country_code}-{division.iso_subdivision_code}: {url}", flush=True)

                page = self.client.fetch_page(url)
                count = names.write_all(extract_name_translations(page, division))
                if count == 0:
                    logger.debug(f"No other languages for {url}")

                stats["fetched"] += 1
                stats["names"] += count
                self.progress.update()

            self.progress.finish()

        logger.info(
            f"Wrote {stats['names']} names for {stats['fetched']} articles "
            f"({stats['skipped']} divisions without an article)"
        )
        return stats

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def main(argv=None):
    """Main entry point for the name extraction."""
    parser = build_arg_parser(
        "Extract translated division names from Wikipedia interlanguage links",
        strict_option=False,
    )
    args = parser.parse_args(argv)

    try:
        settings = build_config(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging("wikidivisions", level=settings.log_level)

    try:
        with NamesSyncService(settings) as service:
            service.run()
    except KeyboardInterrupt:
        logger.warning("Interrupted, names file is incomplete")
        sys.exit(130)
    except DivisionsError as e:
        logger.error(f"Name extraction failed, names file is incomplete: {e}")
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"Divisions table not found, run wikidivisions-parse first: {e}")
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error, names file is incomplete")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
