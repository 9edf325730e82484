"""Spreadsheet readers and source guards."""
from excel_toolkit.readers.base_reader import GridReader
from excel_toolkit.readers.excel_reader import ExcelGridReader
from excel_toolkit.readers.file_guard import (
    validate_extension,
    validate_source,
    validate_source_path,
    validate_source_size,
)

__all__ = [
    "GridReader",
    "ExcelGridReader",
    "validate_source",
    "validate_source_path",
    "validate_extension",
    "validate_source_size",
]
