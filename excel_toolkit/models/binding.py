"""Dataclasses produced by the header-resolution and binding steps."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from excel_toolkit.models.schema import FieldSpec


def normalize_label(label: str) -> str:
    """Normalize a header label or binding key: trimmed, case-insensitive."""
    return label.strip().lower()


class HeaderStrategy(Enum):
    """How the header row is located."""
    FIRST_ROW = "first_row"
    EXPLICIT_INDEX = "explicit_index"
    COLUMN_A_MATCH = "column_a_match"


@dataclass(frozen=True)
class HeaderSelection:
    """One header-locating strategy plus its argument."""
    strategy: HeaderStrategy
    row_index: Optional[int] = None
    label: Optional[str] = None

    @classmethod
    def first_row(cls) -> "HeaderSelection":
        return cls(HeaderStrategy.FIRST_ROW)

    @classmethod
    def at_row(cls, row_index: int) -> "HeaderSelection":
        return cls(HeaderStrategy.EXPLICIT_INDEX, row_index=row_index)

    @classmethod
    def column_a(cls, label: str) -> "HeaderSelection":
        return cls(HeaderStrategy.COLUMN_A_MATCH, label=label)


@dataclass(frozen=True)
class DuplicateLabel:
    """A header label that appeared in more than one column."""
    label: str
    previous_index: int
    index: int


@dataclass
class ColumnMap:
    """Normalized header label to column index."""
    indices: Dict[str, int] = field(default_factory=dict)
    labels: Dict[int, str] = field(default_factory=dict)
    duplicates: List[DuplicateLabel] = field(default_factory=list)

    def lookup(self, label: Optional[str]) -> Optional[int]:
        """Return the column index for a label, matching as the map was built."""
        if label is None:
            return None
        return self.indices.get(normalize_label(label))

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.lookup(label) is not None

    def __len__(self) -> int:
        return len(self.indices)


@dataclass(frozen=True)
class FieldBinding:
    """A record field resolved to the column that feeds it."""
    field: FieldSpec
    column_index: int


@dataclass(frozen=True)
class ImportedRow:
    """A materialized record and the zero-based grid row it came from."""
    row_index: int
    record: Any
