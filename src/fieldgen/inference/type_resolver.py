import logging

from fieldgen.canonical.column import Column
from fieldgen.observability.logger import log_event
from fieldgen.pipeline.column_type import normalized_type_string
from fieldgen.standards.data_types import DEFAULT_DATA_TYPE, get_data_type, is_mapped


def resolve_data_type(column: Column) -> str:
    """
    Field type for a column. First match wins:
    1. caller override keyed by driver type name (returned verbatim)
    2. native scan type, when preferred and exposed
    3. built-in type table (total, falls back to DEFAULT_DATA_TYPE)
    """
    override = column.data_type_map.get(column.database_type_name)
    if override is not None:
        return override(column)

    if column.use_scan_type and column.scan_type is not None:
        return column.scan_type.name

    if not is_mapped(column.database_type_name):
        log_event(
            "UNMAPPED_DATA_TYPE",
            {
                "table": column.table_name,
                "column": column.name,
                "database_type_name": column.database_type_name,
                "fallback": DEFAULT_DATA_TYPE,
            },
            level=logging.WARNING,
        )

    return get_data_type(column.database_type_name, normalized_type_string(column))
