"""Custom exception hierarchy for spreadsheet import errors."""
from typing import Any, Dict, Optional


class ExcelImportError(Exception):
    """Base exception for all spreadsheet import errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with message and optional diagnostic details."""
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SourceNotFoundError(ExcelImportError):
    """Raised when the referenced spreadsheet cannot be located."""
    pass


class UnsupportedFormatError(ExcelImportError):
    """Raised when the source is not a recognized spreadsheet container."""
    pass


class SizeLimitExceededError(ExcelImportError):
    """Raised when the source exceeds the configured size ceiling."""
    pass


class InvalidHeaderIndexError(ExcelImportError):
    """Raised when an explicit header row index cannot designate a header."""
    pass


class HeaderNotFoundError(ExcelImportError):
    """Raised when no row in column A matches the requested header label."""
    pass


class DuplicateHeaderError(ExcelImportError):
    """Raised in strict mode when two header cells normalize to the same label."""
    pass


class UnboundFieldsError(ExcelImportError):
    """Raised in strict mode when schema fields have no matching column."""
    pass


class ImportConfigError(ExcelImportError):
    """Raised when import arguments or the record type are unusable."""
    pass
