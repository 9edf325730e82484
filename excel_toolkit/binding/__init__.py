"""Header resolution and record binding engine."""
from excel_toolkit.binding.header_locator import find_column_a_header, locate_header_row
from excel_toolkit.binding.column_map import build_column_map
from excel_toolkit.binding.schema_resolver import resolve_bindings
from excel_toolkit.binding.row_materializer import materialize_rows

__all__ = [
    "locate_header_row",
    "find_column_a_header",
    "build_column_map",
    "resolve_bindings",
    "materialize_rows",
]
