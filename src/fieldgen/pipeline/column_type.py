from fieldgen.canonical.column import Column


def normalized_type_string(column: Column) -> str:
    """
    Raw column type with driver quirks removed.

    Some drivers append a spurious `binary` qualifier:
    - `blob binary` → `blob`
    - `varbinary(20) binary` → `varbinary(20)`
    Falls back to the driver type name when no raw type is exposed.
    """
    column_type = column.column_type
    if column_type is None:
        return column.database_type_name

    if column_type.endswith("blob binary"):
        column_type = column_type.replace("blob binary", "blob")

    if "varbinary" in column_type and " binary" in column_type:
        column_type = column_type.replace(" binary", "")

    return column_type
