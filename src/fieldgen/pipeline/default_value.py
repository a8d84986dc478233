from typing import Tuple

from fieldgen.canonical.column import Column, ScanKind
from fieldgen.standards.default_policy import DefaultValuePolicy

_SCALAR_KINDS = {
    ScanKind.BOOL,
    ScanKind.INT,
    ScanKind.UINT,
    ScanKind.FLOAT,
    ScanKind.STRING,
}


def default_tag_value(column: Column) -> Tuple[str, bool]:
    """
    (value, present) for the default tag.

    A blank default is quoted ('' / '  ') so an intentional empty-string
    default stays distinguishable from no default at all.
    """
    value = column.default_value
    if value is None:
        return "", False

    if value.strip() == "":
        return f"'{value}'", True

    return value, True


def need_default_tag(
    column: Column,
    default_value: str,
    policy: DefaultValuePolicy = None,
) -> bool:
    """
    Whether a present default should be pinned in the generated tag.
    """
    policy = policy or column.default_policy
    kind = column.scan_type.kind if column.scan_type is not None else ScanKind.OTHER

    if kind in _SCALAR_KINDS:
        return True

    if kind == ScanKind.STRUCT:
        literal = default_value
        if policy.cast_marker:
            literal = literal.split(policy.cast_marker, 1)[0]
        return literal.strip(policy.zero_value_chars) != ""

    return column.name not in policy.managed_columns


def eligible_default(column: Column) -> Tuple[str, bool]:
    """
    (value, eligible): the default tag value when one should be emitted.
    """
    value, present = default_tag_value(column)
    if not present:
        return "", False
    return value, need_default_tag(column, value)
