"""Turns data rows into records using resolved field bindings."""
from typing import List, Sequence

from excel_toolkit.models.binding import FieldBinding, ImportedRow
from excel_toolkit.models.grid import Grid, is_blank_row
from excel_toolkit.models.schema import RecordSchema


def materialize_rows(
    grid: Grid,
    start_row: int,
    schema: RecordSchema,
    bindings: Sequence[FieldBinding]
) -> List[ImportedRow]:
    """Build one record per non-blank row from start_row to the end of the grid.

    Bound fields receive the cell's trimmed text; a field whose cell is absent
    or past the end of a short row keeps its default.
    """
    imported: List[ImportedRow] = []

    for row_index in range(start_row, len(grid)):
        row = grid.row(row_index)
        if is_blank_row(row):
            continue

        record = schema.new_record()
        for binding in bindings:
            if binding.column_index >= len(row):
                continue
            cell = row[binding.column_index]
            if cell is None:
                continue
            setattr(record, binding.field.name, cell.strip())

        imported.append(ImportedRow(row_index=row_index, record=record))

    return imported
