"""Typed record import from the first worksheet of Excel workbooks."""
from excel_toolkit.config import ImporterSettings, get_settings
from excel_toolkit.errors import (
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
from excel_toolkit.importer import ExcelImporter, import_records
from excel_toolkit.models import (
    FieldSpec,
    Grid,
    HeaderSelection,
    HeaderStrategy,
    ImportedRow,
    RecordSchema,
)
from excel_toolkit.readers import ExcelGridReader, GridReader
from excel_toolkit.runtime import initialize

__version__ = "0.1.0"

__all__ = [
    "ExcelImporter",
    "import_records",
    "ImporterSettings",
    "get_settings",
    "initialize",
    "FieldSpec",
    "RecordSchema",
    "Grid",
    "HeaderSelection",
    "HeaderStrategy",
    "ImportedRow",
    "GridReader",
    "ExcelGridReader",
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
