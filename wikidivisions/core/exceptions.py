"""
Wikipedia Divisions Exception Hierarchy

Centralized exception classes for the scraping pipelines.
Provides specific exception types for each error category:
network failures, page structure mismatches and malformed rows.
"""
from typing import Any, Optional


class DivisionsError(Exception):
    """
    Base exception for all pipeline errors.

    All custom exceptions should inherit from this class
    to enable consistent error handling in the entry points.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Initialize DivisionsError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class FetchError(DivisionsError):
    """
    Network errors.

    Raised when a page cannot be fetched from the reference site.
    Never recovered: the run halts.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        """
        Initialize FetchError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            status_code: HTTP status code if applicable
            url: The URL that failed
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        """Return string representation including status code and URL if present."""
        base = super().__str__()
        parts = [base]
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        if self.url:
            parts.append(f"URL: {self.url}")
        return " | ".join(parts) if len(parts) > 1 else base


class ParsingError(DivisionsError):
    """
    Page structure errors.

    Raised when an expected table, header cell or link is absent,
    or a cell holds a value no known variant accounts for.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        page_url: Optional[str] = None,
        element: Optional[str] = None,
    ):
        """
        Initialize ParsingError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            page_url: The page being parsed
            element: Description of the element that was expected
        """
        super().__init__(message, details)
        self.page_url = page_url
        self.element = element

    def __str__(self) -> str:
        """Return string representation including page and element if present."""
        base = super().__str__()
        parts = [base]
        if self.page_url:
            parts.append(f"Page: {self.page_url}")
        if self.element:
            parts.append(f"Element: {self.element}")
        return " | ".join(parts) if len(parts) > 1 else base


class MalformedRowError(ParsingError):
    """
    Row data errors.

    Raised for a single table row whose cells do not have the expected shape
    (code cell without a hyphen, missing cell). Skipped with a warning unless
    the run is strict.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        page_url: Optional[str] = None,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        row_index: Optional[int] = None,
    ):
        """
        Initialize MalformedRowError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            page_url: The page the row belongs to
            field_name: The field that failed
            field_value: The raw value that failed
            row_index: Position of the row in its table (header is 0)
        """
        super().__init__(message, details, page_url=page_url)
        self.field_name = field_name
        self.field_value = field_value
        self.row_index = row_index

    def __str__(self) -> str:
        """Return string representation including field, value and row if present."""
        base = super().__str__()
        parts = [base]
        if self.field_name:
            parts.append(f"Field: {self.field_name}")
        if self.field_value is not None:
            parts.append(f"Value: {self.field_value!r}")
        if self.row_index is not None:
            parts.append(f"Row: {self.row_index}")
        return " | ".join(parts) if len(parts) > 1 else base


class ConfigurationError(DivisionsError):
    """
    Configuration errors.

    Raised when a configuration value is missing or invalid.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        config_key: Optional[str] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            config_key: The configuration key that is problematic
        """
        super().__init__(message, details)
        self.config_key = config_key

    def __str__(self) -> str:
        """Return string representation including config key if present."""
        base = super().__str__()
        if self.config_key:
            return f"{base} | Key: {self.config_key}"
        return base
