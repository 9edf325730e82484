"""Resolves which record fields are fed by which grid columns."""
from typing import List

import structlog

from excel_toolkit.errors.exceptions import UnboundFieldsError
from excel_toolkit.models.binding import ColumnMap, FieldBinding
from excel_toolkit.models.schema import RecordSchema

logger = structlog.get_logger(__name__)


def resolve_bindings(
    schema: RecordSchema,
    column_map: ColumnMap,
    require_all: bool = False
) -> List[FieldBinding]:
    """Pair every declared field with its column, in declaration order.

    A field whose binding key has no column is left out; the field keeps
    its default on every record.

    Args:
        schema: Declared record fields
        column_map: Normalized header map
        require_all: Raise instead of omitting unmatched fields

    Raises:
        UnboundFieldsError: require_all is set and some field has no column
    """
    bindings: List[FieldBinding] = []
    unbound: List[str] = []

    for spec in schema.fields:
        column_index = column_map.lookup(spec.binding_key)
        if column_index is None:
            unbound.append(spec.name)
            continue
        bindings.append(FieldBinding(field=spec, column_index=column_index))

    if unbound:
        if require_all:
            raise UnboundFieldsError(
                f"No column found for fields: {', '.join(unbound)}",
                details={
                    "record_type": schema.record_type.__name__,
                    "fields": unbound,
                    "columns": sorted(column_map.labels.values()),
                }
            )
        logger.debug("fields_without_column", record_type=schema.record_type.__name__, fields=unbound)

    return bindings
