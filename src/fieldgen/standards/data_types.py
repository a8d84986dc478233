"""
Built-in database type → field type table.

Spans mysql / postgres / sqlite / sqlserver driver type names.
Keys are lower-case driver type names; each entry maps the raw
column type string to a field type.
"""

from typing import Callable, Dict

DEFAULT_DATA_TYPE = "string"

TIME_TYPE = "time.Time"
SOFT_DELETE_TYPE = "gorm.DeletedAt"
SOFT_DELETE_COLUMN = "deleted_at"

INTEGER_TYPE_PREFIX = "int"
UNSIGNED_MARKER = "unsigned"
UNSIGNED_PREFIX = "u"
OPTIONAL_PREFIX = "*"


def _fixed(type_name: str) -> Callable[[str], str]:
    return lambda column_type: type_name


def _tinyint(column_type: str) -> str:
    # tinyint(1) is the mysql boolean
    if column_type.strip().startswith("tinyint(1)"):
        return "bool"
    return "int32"


DATA_TYPE_TABLE: Dict[str, Callable[[str], str]] = {
    # --------------------
    # Integers
    # --------------------
    "numeric": _fixed("int32"),
    "integer": _fixed("int32"),
    "int": _fixed("int32"),
    "smallint": _fixed("int32"),
    "mediumint": _fixed("int32"),
    "bigint": _fixed("int64"),
    "year": _fixed("int32"),
    "tinyint": _tinyint,

    # --------------------
    # Floating point
    # --------------------
    "float": _fixed("float32"),
    "real": _fixed("float64"),
    "double": _fixed("float64"),
    "decimal": _fixed("float64"),

    # --------------------
    # Text
    # --------------------
    "char": _fixed("string"),
    "varchar": _fixed("string"),
    "tinytext": _fixed("string"),
    "mediumtext": _fixed("string"),
    "longtext": _fixed("string"),
    "text": _fixed("string"),
    "json": _fixed("string"),
    "enum": _fixed("string"),

    # --------------------
    # Binary
    # --------------------
    "binary": _fixed("[]byte"),
    "varbinary": _fixed("[]byte"),
    "tinyblob": _fixed("[]byte"),
    "blob": _fixed("[]byte"),
    "mediumblob": _fixed("[]byte"),
    "longblob": _fixed("[]byte"),
    "bit": _fixed("[]uint8"),

    # --------------------
    # Time
    # --------------------
    "time": _fixed(TIME_TYPE),
    "date": _fixed(TIME_TYPE),
    "datetime": _fixed(TIME_TYPE),
    "timestamp": _fixed(TIME_TYPE),

    "boolean": _fixed("bool"),
}


def is_mapped(database_type_name: str) -> bool:
    return (database_type_name or "").lower() in DATA_TYPE_TABLE


def get_data_type(database_type_name: str, column_type: str) -> str:
    """
    Field type for a driver type name; unknown names fall back
    to DEFAULT_DATA_TYPE.
    """
    convert = DATA_TYPE_TABLE.get((database_type_name or "").lower())
    if convert is None:
        return DEFAULT_DATA_TYPE
    return convert(column_type or "")
