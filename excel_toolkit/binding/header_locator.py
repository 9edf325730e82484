"""Locates the header row of a grid under one of three strategies."""
from typing import Optional

import structlog

from excel_toolkit.errors.exceptions import (
    HeaderNotFoundError,
    ImportConfigError,
    InvalidHeaderIndexError,
)
from excel_toolkit.models.binding import HeaderSelection, HeaderStrategy
from excel_toolkit.models.grid import Grid

logger = structlog.get_logger(__name__)


def locate_header_row(grid: Grid, selection: HeaderSelection) -> int:
    """Return the zero-based index of the header row.

    The first data row is always the returned index + 1.

    Args:
        grid: Worksheet grid to search
        selection: Header-locating strategy and its argument

    Returns:
        Header row index

    Raises:
        InvalidHeaderIndexError: Explicit index <= 0 or past the end of the grid
        HeaderNotFoundError: No row matched the column A label
    """
    if selection.strategy is HeaderStrategy.FIRST_ROW:
        return 0

    if selection.strategy is HeaderStrategy.EXPLICIT_INDEX:
        return _validate_explicit_index(grid, selection.row_index)

    if selection.strategy is HeaderStrategy.COLUMN_A_MATCH:
        return find_column_a_header(grid, selection.label)

    raise ImportConfigError(f"Unknown header strategy: {selection.strategy!r}")


def _validate_explicit_index(grid: Grid, row_index: Optional[int]) -> int:
    # Index 0 belongs to the first-row strategy.
    if not isinstance(row_index, int) or isinstance(row_index, bool) or row_index <= 0:
        raise InvalidHeaderIndexError(
            f"Header row index '{row_index}' is invalid",
            details={"header_row": row_index}
        )
    if row_index >= len(grid):
        raise InvalidHeaderIndexError(
            f"Header row index '{row_index}' is past the end of the worksheet ({len(grid)} rows)",
            details={"header_row": row_index, "row_count": len(grid)}
        )
    return row_index


def find_column_a_header(grid: Grid, label: str) -> int:
    """Return the first row whose trimmed column A cell equals label, ignoring case."""
    target = (label or "").lower()

    for row_index, row in enumerate(grid.rows):
        if not row or row[0] is None:
            continue
        cell = row[0].strip()
        if cell and cell.lower() == target:
            logger.debug("column_a_header_matched", row_index=row_index, label=label)
            return row_index

    raise HeaderNotFoundError(
        f"Header row with '{label}' not found in column A.",
        details={"label": label, "rows_scanned": len(grid)}
    )
