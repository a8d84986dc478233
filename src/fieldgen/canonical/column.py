from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from fieldgen.canonical.index import Index
from fieldgen.standards.default_policy import DEFAULT_VALUE_POLICY, DefaultValuePolicy
from fieldgen.utils.exceptions import ColumnDefinitionError


class ScanKind(str, Enum):
    """
    Coarse classification of the driver's native scan type.
    """
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    STRING = "string"
    STRUCT = "struct"
    SLICE = "slice"
    OTHER = "other"


@dataclass(frozen=True)
class ScanType:
    name: str                   # int64, sql.NullString, time.Time ...
    kind: ScanKind = ScanKind.OTHER


def _identity(name: str) -> str:
    return name


# Resolver invoked with the column when its driver type name is overridden.
TypeOverride = Callable[["Column"], str]


@dataclass(frozen=True)
class Column:
    """
    One introspected table column plus its generation context.
    Build configured instances through ColumnBuilder.
    """
    table_name: str
    name: str
    database_type_name: str

    column_type: Optional[str] = None      # raw type string, e.g. int(10) unsigned
    nullable: Optional[bool] = None
    default_value: Optional[str] = None
    comment: Optional[str] = None
    primary_key: Optional[bool] = None
    auto_increment: Optional[bool] = None
    scan_type: Optional[ScanType] = None

    # Generation context
    indexes: Tuple[Optional[Index], ...] = ()
    use_scan_type: bool = False
    data_type_map: Mapping[str, TypeOverride] = field(default_factory=dict)
    json_tag_ns: Callable[[str], str] = _identity
    default_policy: DefaultValuePolicy = DEFAULT_VALUE_POLICY


class ColumnBuilder:
    """
    Collects generation context and produces an immutable Column.

        column = (
            ColumnBuilder(raw_column)
            .with_indexes(indexes)
            .with_json_tag_ns(to_lower_camel)
            .build()
        )
    """

    def __init__(self, column: Column):
        self._column = column
        self._context: Dict = {}

    def with_indexes(self, indexes: Iterable[Optional[Index]]) -> "ColumnBuilder":
        self._context["indexes"] = tuple(indexes or ())
        return self

    def with_data_type_map(self, data_type_map: Mapping[str, TypeOverride]) -> "ColumnBuilder":
        self._context["data_type_map"] = dict(data_type_map or {})
        return self

    def with_scan_type_preference(self, use_scan_type: bool = True) -> "ColumnBuilder":
        self._context["use_scan_type"] = bool(use_scan_type)
        return self

    def with_json_tag_ns(self, json_tag_ns: Optional[Callable[[str], str]]) -> "ColumnBuilder":
        self._context["json_tag_ns"] = json_tag_ns or _identity
        return self

    def with_default_policy(self, policy: DefaultValuePolicy) -> "ColumnBuilder":
        self._context["default_policy"] = policy or DEFAULT_VALUE_POLICY
        return self

    def build(self) -> Column:
        return replace(self._column, **self._context)


def _parse_scan_type(raw) -> Optional[ScanType]:
    if raw is None:
        return None

    if isinstance(raw, str):
        return ScanType(name=raw)

    if not isinstance(raw, Mapping):
        raise ColumnDefinitionError(
            f"scan_type must be a name or a mapping, got {type(raw).__name__}"
        )

    try:
        kind = ScanKind(str(raw.get("kind", ScanKind.OTHER.value)).lower())
    except ValueError:
        raise ColumnDefinitionError(
            f"Unknown scan type kind: {raw.get('kind')}"
        )

    return ScanType(name=raw.get("name", ""), kind=kind)


def column_from_dict(record: Mapping, table_name: str = "") -> Column:
    """
    Build a bare Column from an introspection record (YAML / JSON).
    """
    if not isinstance(record, Mapping):
        raise ColumnDefinitionError(
            f"Column record in table '{table_name}' must be a mapping, "
            f"got {type(record).__name__}"
        )

    name = record.get("name")
    database_type_name = record.get("database_type_name")

    if not name:
        raise ColumnDefinitionError(
            f"Column in table '{table_name}' is missing a name"
        )
    if not database_type_name:
        raise ColumnDefinitionError(
            f"Column '{table_name}.{name}' is missing database_type_name"
        )

    default_value = record.get("default_value")

    return Column(
        table_name=record.get("table_name", table_name),
        name=name,
        database_type_name=database_type_name,
        column_type=record.get("column_type"),
        nullable=record.get("nullable"),
        default_value=None if default_value is None else str(default_value),
        comment=record.get("comment"),
        primary_key=record.get("primary_key"),
        auto_increment=record.get("auto_increment"),
        scan_type=_parse_scan_type(record.get("scan_type")),
    )
