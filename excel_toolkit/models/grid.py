"""In-memory representation of one worksheet's cell text."""
import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Iterable, List, Optional

Row = List[Optional[str]]


def to_cell_text(value: Any) -> Optional[str]:
    """Convert a decoded cell value to its text form.

    Absent cells (None, NaN) stay None. Whole floats lose the trailing ".0"
    so that an ID typed as 1001 reads back as "1001".
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


@dataclass
class Grid:
    """Ordered rows of optional text cells; rows need not be rectangular."""
    rows: List[Row] = field(default_factory=list)
    sheet_name: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_values(
        cls,
        values: Iterable[Iterable[Any]],
        sheet_name: Optional[str] = None,
        source: Optional[str] = None
    ) -> "Grid":
        """Build a grid from raw decoded values, converting each cell to text."""
        rows = [[to_cell_text(cell) for cell in row] for row in values]
        return cls(rows=rows, sheet_name=sheet_name, source=source)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the widest row."""
        return max((len(row) for row in self.rows), default=0)

    def row(self, index: int) -> Row:
        return self.rows[index]

    def cell(self, row_index: int, column_index: int) -> Optional[str]:
        """Return a cell, treating missing trailing cells as absent."""
        row = self.rows[row_index]
        if column_index < len(row):
            return row[column_index]
        return None

    def column_labels(self) -> Row:
        """Labeled-column projection of the first row, padded to the grid width."""
        if not self.rows:
            return []
        first = list(self.rows[0])
        return first + [None] * (self.width - len(first))


def is_blank_row(row: Row) -> bool:
    """A row is blank when every cell is absent or whitespace-only."""
    return all(cell is None or not cell.strip() for cell in row)
