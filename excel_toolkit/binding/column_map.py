"""Builds the normalized label to column index map from a header row."""
from typing import Iterable, Optional

import structlog

from excel_toolkit.errors.exceptions import DuplicateHeaderError
from excel_toolkit.models.binding import ColumnMap, DuplicateLabel, normalize_label

logger = structlog.get_logger(__name__)


def build_column_map(labels: Iterable[Optional[str]], strict: bool = False) -> ColumnMap:
    """Map each non-empty header label to its column index.

    Labels are trimmed and compared case-insensitively. When two labels
    normalize to the same key the later column wins and the collision is
    recorded in ``ColumnMap.duplicates``.

    Args:
        labels: Header cells in column order (a raw row or column metadata)
        strict: Raise on duplicate labels instead of overwriting

    Raises:
        DuplicateHeaderError: strict is set and a label repeats
    """
    column_map = ColumnMap()

    for index, raw in enumerate(labels):
        if raw is None:
            continue
        label = raw.strip()
        if not label:
            continue

        key = normalize_label(label)
        previous = column_map.indices.get(key)
        if previous is not None:
            if strict:
                raise DuplicateHeaderError(
                    f"Header '{label}' appears in columns {previous} and {index}",
                    details={"label": label, "columns": [previous, index]}
                )
            column_map.duplicates.append(DuplicateLabel(label=key, previous_index=previous, index=index))
            logger.debug("duplicate_header_overwritten", label=label, previous_index=previous, index=index)

        column_map.indices[key] = index
        column_map.labels[index] = label

    return column_map
