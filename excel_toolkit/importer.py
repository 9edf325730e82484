"""Spreadsheet importer: binds the first worksheet of a workbook to typed records.

Each import call runs the same pipeline:

    source guards -> read grid -> locate header -> build column map
    -> resolve field bindings -> materialize rows

Every failure is terminal for the call; no partial result is returned.
"""
from pathlib import Path
from typing import Any, List, Optional, Union

import structlog

from excel_toolkit.binding.column_map import build_column_map
from excel_toolkit.binding.header_locator import locate_header_row
from excel_toolkit.binding.row_materializer import materialize_rows
from excel_toolkit.binding.schema_resolver import resolve_bindings
from excel_toolkit.config import ImporterSettings, get_settings
from excel_toolkit.errors.exceptions import ImportConfigError
from excel_toolkit.models.binding import HeaderSelection, HeaderStrategy, ImportedRow
from excel_toolkit.models.grid import Grid
from excel_toolkit.models.schema import RecordSchema
from excel_toolkit.readers.base_reader import GridReader
from excel_toolkit.readers.excel_reader import ExcelGridReader
from excel_toolkit.readers.file_guard import validate_source
from excel_toolkit.runtime import initialize

logger = structlog.get_logger(__name__)

RecordType = Union[type, RecordSchema]


class ExcelImporter:
    """Imports the first worksheet of an Excel file as a list of records.

    The header row is found with one of three strategies, chosen per call:

    - first row (default)
    - explicit row index: ``header_row=2`` (must be > 0)
    - column A match: ``column_a_header="ID"``

    Columns are matched to record fields by field name or declared alias,
    trimmed and case-insensitively. Blank rows are skipped.

    Example:
        >>> class Contact(BaseModel):
        ...     ID: str = ""
        ...     first_name: str = Field(default="", alias="First Name")
        >>> contacts = ExcelImporter().import_records("contacts.xlsx", Contact)
    """

    def __init__(
        self,
        settings: Optional[ImporterSettings] = None,
        reader: Optional[GridReader] = None
    ):
        """Initialize importer.

        Args:
            settings: Importer settings (defaults to get_settings())
            reader: Grid reader (defaults to ExcelGridReader)
        """
        self._settings = settings or get_settings()
        self._reader = reader or ExcelGridReader()

    @property
    def settings(self) -> ImporterSettings:
        return self._settings

    def import_records(
        self,
        source: Union[str, Path],
        record_type: RecordType,
        *,
        header_row: Optional[int] = None,
        column_a_header: Optional[str] = None
    ) -> List[Any]:
        """Import one record per non-blank data row, in row order.

        Args:
            source: Path to an .xls/.xlsx file
            record_type: Pydantic model, dataclass, or explicit RecordSchema
            header_row: Zero-based header row index (> 0)
            column_a_header: Label to look for in column A

        Returns:
            List of populated records

        Raises:
            SourceNotFoundError: File doesn't exist
            UnsupportedFormatError: Not a supported or readable workbook
            SizeLimitExceededError: File exceeds the size ceiling
            InvalidHeaderIndexError: header_row <= 0 or past the last row
            HeaderNotFoundError: No column A cell matched column_a_header
            ImportConfigError: Both header_row and column_a_header given
        """
        rows = self.import_rows(
            source,
            record_type,
            header_row=header_row,
            column_a_header=column_a_header,
        )
        return [row.record for row in rows]

    def import_rows(
        self,
        source: Union[str, Path],
        record_type: RecordType,
        *,
        header_row: Optional[int] = None,
        column_a_header: Optional[str] = None
    ) -> List[ImportedRow]:
        """Like import_records, but keeps each record's zero-based source row."""
        initialize(self._settings)

        selection = self._select_header(header_row, column_a_header)
        schema = RecordSchema.for_type(record_type)

        log = logger.bind(source=str(source), record_type=schema.record_type.__name__)
        log.debug("import_started", strategy=selection.strategy.value)

        path = validate_source(source, self._settings)
        grid = self._reader.read(path)

        return self._bind(grid, schema, selection, log)

    def import_grid(
        self,
        grid: Grid,
        record_type: RecordType,
        selection: Optional[HeaderSelection] = None
    ) -> List[ImportedRow]:
        """Bind an already decoded grid; no file access."""
        initialize(self._settings)

        schema = RecordSchema.for_type(record_type)
        log = logger.bind(source=grid.source, record_type=schema.record_type.__name__)

        return self._bind(grid, schema, selection or HeaderSelection.first_row(), log)

    def _select_header(
        self,
        header_row: Optional[int],
        column_a_header: Optional[str]
    ) -> HeaderSelection:
        """Turn call arguments into exactly one header strategy."""
        if header_row is not None and column_a_header is not None:
            raise ImportConfigError(
                "Pass either header_row or column_a_header, not both",
                details={"header_row": header_row, "column_a_header": column_a_header}
            )
        if header_row is not None:
            return HeaderSelection.at_row(header_row)
        if column_a_header is not None:
            return HeaderSelection.column_a(column_a_header)
        return HeaderSelection.first_row()

    def _bind(
        self,
        grid: Grid,
        schema: RecordSchema,
        selection: HeaderSelection,
        log: Any
    ) -> List[ImportedRow]:
        """Run header location, column mapping, binding and materialization."""
        header_index = locate_header_row(grid, selection)
        log.debug("header_located", strategy=selection.strategy.value, header_row=header_index)

        if selection.strategy is HeaderStrategy.FIRST_ROW:
            labels = grid.column_labels()
        else:
            labels = grid.row(header_index)
        column_map = build_column_map(labels, strict=self._settings.strict_headers)
        log.debug(
            "column_map_built",
            column_count=len(column_map),
            duplicate_count=len(column_map.duplicates),
        )

        bindings = resolve_bindings(
            schema,
            column_map,
            require_all=self._settings.require_all_fields,
        )
        log.debug(
            "bindings_resolved",
            bound_fields=[b.field.name for b in bindings],
            declared_count=len(schema.fields),
        )

        imported = materialize_rows(grid, header_index + 1, schema, bindings)

        data_rows = max(len(grid) - header_index - 1, 0)
        log.info(
            "import_completed",
            sheet_name=grid.sheet_name,
            header_row=header_index,
            data_rows=data_rows,
            records=len(imported),
            blank_rows_skipped=data_rows - len(imported),
        )
        return imported


def import_records(
    source: Union[str, Path],
    record_type: RecordType,
    *,
    header_row: Optional[int] = None,
    column_a_header: Optional[str] = None
) -> List[Any]:
    """Import records with a default ExcelImporter; see ExcelImporter.import_records."""
    return ExcelImporter().import_records(
        source,
        record_type,
        header_row=header_row,
        column_a_header=column_a_header,
    )
