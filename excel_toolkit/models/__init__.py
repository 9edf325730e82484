"""Data models for grids, record schemas and field bindings."""
from excel_toolkit.models.grid import Grid, Row, is_blank_row, to_cell_text
from excel_toolkit.models.schema import ALIAS_METADATA_KEY, FieldSpec, RecordSchema
from excel_toolkit.models.binding import (
    ColumnMap,
    DuplicateLabel,
    FieldBinding,
    HeaderSelection,
    HeaderStrategy,
    ImportedRow,
    normalize_label,
)

__all__ = [
    "Grid",
    "Row",
    "is_blank_row",
    "to_cell_text",
    "ALIAS_METADATA_KEY",
    "FieldSpec",
    "RecordSchema",
    "ColumnMap",
    "DuplicateLabel",
    "FieldBinding",
    "HeaderSelection",
    "HeaderStrategy",
    "ImportedRow",
    "normalize_label",
]
