"""
Wikipedia Divisions Configuration
Centralized configuration read from the environment (and an optional .env file)
"""
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from wikidivisions.core.exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load from .env file with UTF-8 encoding (Windows compatibility)
env_path = PROJECT_ROOT / '.env'
load_dotenv(dotenv_path=env_path, encoding='utf-8')


def _get_int(key: str, default: str) -> int:
    value = os.getenv(key, default)
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Expected an integer, got {value!r}", config_key=key)


def _get_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes")


# =============================================================================
# Wikipedia Configuration
# =============================================================================
DEFAULT_WIKIPEDIA_BASE_URL = "https://en.wikipedia.org"
DEFAULT_WIKIPEDIA_INDEX_PATH = "/wiki/ISO_3166-2"

# Links from the index table to per-country pages start with this path
SUBDIVISION_PAGE_PREFIX = "/wiki/ISO_3166-2"

# =============================================================================
# HTTP Configuration
# =============================================================================
DEFAULT_HTTP_TIMEOUT = "30"
DEFAULT_HTTP_USER_AGENT = "wikipedia-divisions/0.1.0"

# =============================================================================
# Output Configuration
# =============================================================================
# Relative to the working directory
DEFAULT_RESULT_DIR = "result"
DEFAULT_CSV_DELIMITER = ";"

DIVISIONS_FILE = "divisions.csv"
SUBDIVISIONS_FILE = "subdivisions.csv"
NAMES_FILE = "names.csv"

# Skip malformed rows (false) or abort the run on the first one (true)
DEFAULT_STRICT_ROWS = "false"

# =============================================================================
# Logging Configuration
# =============================================================================
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# =============================================================================
# Progress Configuration
# =============================================================================
DEFAULT_PROGRESS_ENABLED = "true"


@dataclass
class Config:
    """
    Settings passed explicitly into each pipeline.

    Defaults are read from the environment when the object is created. Any field
    can be overridden per run, e.g. ``Config(result_dir=tmp_path, strict_rows=True)``.
    """

    # Wikipedia
    base_url: str = field(default_factory=lambda: os.getenv("WIKIPEDIA_BASE_URL", DEFAULT_WIKIPEDIA_BASE_URL))
    index_path: str = field(default_factory=lambda: os.getenv("WIKIPEDIA_INDEX_PATH", DEFAULT_WIKIPEDIA_INDEX_PATH))

    # HTTP
    http_timeout: int = field(default_factory=lambda: _get_int("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT))
    user_agent: str = field(default_factory=lambda: os.getenv("HTTP_USER_AGENT", DEFAULT_HTTP_USER_AGENT))

    # Output
    result_dir: Path = field(default_factory=lambda: Path(os.getenv("RESULT_DIR", DEFAULT_RESULT_DIR)))
    csv_delimiter: str = field(default_factory=lambda: os.getenv("CSV_DELIMITER", DEFAULT_CSV_DELIMITER))
    strict_rows: bool = field(default_factory=lambda: _get_bool("STRICT_ROWS", DEFAULT_STRICT_ROWS))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    # Progress
    progress_enabled: bool = field(default_factory=lambda: _get_bool("PROGRESS_ENABLED", DEFAULT_PROGRESS_ENABLED))

    def __post_init__(self):
        self.result_dir = Path(self.result_dir)
        self.log_level = self.log_level.upper()
        if len(self.csv_delimiter) != 1:
            raise ConfigurationError(
                f"CSV delimiter must be a single character, got {self.csv_delimiter!r}",
                config_key="CSV_DELIMITER",
            )
        if self.http_timeout <= 0:
            raise ConfigurationError(
                f"HTTP timeout must be positive, got {self.http_timeout}",
                config_key="HTTP_TIMEOUT",
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}",
                config_key="LOG_LEVEL",
            )

    @property
    def index_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.index_path.lstrip('/')}"

    def result_path(self, file_name: str) -> Path:
        """Path of an output file inside the result directory."""
        return self.result_dir / file_name
