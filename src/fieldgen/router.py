import logging
from typing import Dict, List, Mapping

from fieldgen.canonical.column import Column, column_from_dict
from fieldgen.canonical.index import group_by_column
from fieldgen.execution.settings import GenerationSettings
from fieldgen.observability.identity import extract_user_identity
from fieldgen.observability.logger import RequestTimer, generate_request_id, log_event
from fieldgen.outputs.field_exporter import FieldExporter
from fieldgen.pipeline.field_assembler import to_fields
from fieldgen.utils.exceptions import ColumnDefinitionError, FieldGenError


def build_table_columns(table: Dict, settings: GenerationSettings) -> List[Column]:
    """
    Introspected table record → fully configured columns.
    """
    if not isinstance(table, Mapping):
        raise ColumnDefinitionError(
            f"Table record must be a mapping, got {type(table).__name__}"
        )

    table_name = table.get("name")
    if not table_name:
        raise ColumnDefinitionError("Table record is missing a name")

    index_records = table.get("indexes") or []
    records = table.get("columns") or []
    if not isinstance(index_records, list) or not all(isinstance(r, Mapping) for r in index_records):
        raise ColumnDefinitionError(f"Indexes of table '{table_name}' must be a list of mappings")
    if not isinstance(records, list):
        raise ColumnDefinitionError(f"Columns of table '{table_name}' must be a list")

    memberships = group_by_column(index_records)

    columns = []
    for record in records:
        column = column_from_dict(record, table_name=table_name)
        columns.append(settings.configure(column, memberships.get(column.name, [])))
    return columns


def route(payload: Dict, headers: Mapping[str, str] = None) -> Dict:
    """
    Generator entry point.

    Flow:
    Settings → Columns (+ indexes) → Fields → Export
    """
    request_id = generate_request_id()
    user_id = extract_user_identity(headers, payload)
    timer = RequestTimer()

    tables = payload.get("tables") or []
    if not isinstance(tables, list):
        raise ColumnDefinitionError("tables must be a list of table records")

    log_event("FIELD_GENERATION_STARTED", {
        "request_id": request_id,
        "user_id": user_id,
        "tables": len(tables),
    })

    try:
        settings = GenerationSettings.from_dict(
            payload.get("settings"),
            dialect=payload.get("dialect"),
        )

        result: Dict[str, List[Dict]] = {}
        for table in tables:
            columns = build_table_columns(table, settings)
            fields = to_fields(columns, settings.options)
            result[table["name"]] = FieldExporter(fields).export()

    except FieldGenError as e:
        log_event("FIELD_GENERATION_FAILED", {
            "request_id": request_id,
            "user_id": user_id,
            "error": str(e),
        }, level=logging.ERROR)
        raise

    log_event("FIELD_GENERATION_COMPLETED", {
        "request_id": request_id,
        "user_id": user_id,
        "tables": list(result),
        "fields": sum(len(v) for v in result.values()),
        "duration_seconds": timer.duration(),
    })

    return {
        "status": "SUCCESS",
        "request_id": request_id,
        "tables": result,
    }
