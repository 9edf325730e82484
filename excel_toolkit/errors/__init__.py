"""Error handling module."""
from excel_toolkit.errors.exceptions import (
    ExcelImportError,
    SourceNotFoundError,
    UnsupportedFormatError,
    SizeLimitExceededError,
    InvalidHeaderIndexError,
    HeaderNotFoundError,
    DuplicateHeaderError,
    UnboundFieldsError,
    ImportConfigError,
)

__all__ = [
    "ExcelImportError",
    "SourceNotFoundError",
    "UnsupportedFormatError",
    "SizeLimitExceededError",
    "InvalidHeaderIndexError",
    "HeaderNotFoundError",
    "DuplicateHeaderError",
    "UnboundFieldsError",
    "ImportConfigError",
]
