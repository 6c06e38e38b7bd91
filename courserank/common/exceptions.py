"""
CourseRank Exception Hierarchy

Usage:
    1. Bad configuration → InvalidConfigurationError at construction time
    2. Malformed input data → InvalidInputError (with line details)
    3. File access failures → DataLoadError or DataExportError, wrapping the OSError

Example:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataLoadError("Cannot read CSV file", {"path": str(path)}) from e
"""

from typing import Any


class CourseRankError(Exception):
    """Base exception for all CourseRank errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize CourseRank error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Validation Errors
# ============================================================


class ValidationError(CourseRankError):
    """Input validation failures."""

    pass


class InvalidInputError(ValidationError):
    """Malformed course or prerequisite data."""

    pass


class InvalidConfigurationError(ValidationError):
    """Invalid ranking configuration."""

    pass


# ============================================================
# Data Loading Errors
# ============================================================


class DataLoadError(CourseRankError):
    """Course data could not be read from its source."""

    pass


class DataExportError(CourseRankError):
    """Exported data could not be written."""

    pass
