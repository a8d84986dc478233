"""
Pipeline step: storage-mapping tags

Builds the gorm tag set for one column:
- column name and normalized column type
- primary key / auto increment, otherwise not null
- one index / uniqueIndex entry per index membership
- default value (policy permitting)
- comment without its binding marker
"""

from fieldgen.canonical.column import Column
from fieldgen.canonical.gorm_tag import (
    TAG_KEY_GORM_AUTO_INCREMENT,
    TAG_KEY_GORM_COLUMN,
    TAG_KEY_GORM_COMMENT,
    TAG_KEY_GORM_DEFAULT,
    TAG_KEY_GORM_INDEX,
    TAG_KEY_GORM_NOT_NULL,
    TAG_KEY_GORM_PRIMARY_KEY,
    TAG_KEY_GORM_TYPE,
    TAG_KEY_GORM_UNIQUE_INDEX,
    GormTag,
)
from fieldgen.pipeline.column_type import normalized_type_string
from fieldgen.pipeline.comment_binding import extract_binding
from fieldgen.pipeline.default_value import eligible_default


def is_multiline_comment(column: Column) -> bool:
    return column.comment is not None and "\n" in column.comment


def build_gorm_tag(column: Column) -> GormTag:
    tag = GormTag({
        TAG_KEY_GORM_COLUMN: [column.name],
        TAG_KEY_GORM_TYPE: [normalized_type_string(column)],
    })

    # A primary key is never tagged not null on its own.
    if column.primary_key is True:
        tag.set(TAG_KEY_GORM_PRIMARY_KEY, "")
        if column.auto_increment is not None:
            tag.set(TAG_KEY_GORM_AUTO_INCREMENT, "true" if column.auto_increment else "false")
    elif column.nullable is False:
        tag.set(TAG_KEY_GORM_NOT_NULL, "")

    for index in column.indexes:
        if index is None or index.primary_key:
            continue

        entry = f"{index.name},priority:{index.priority}"
        if index.unique:
            tag.append(TAG_KEY_GORM_UNIQUE_INDEX, entry)
        else:
            tag.append(TAG_KEY_GORM_INDEX, entry)

    default_value, eligible = eligible_default(column)
    if eligible:
        tag.set(TAG_KEY_GORM_DEFAULT, default_value)

    if column.comment:
        comment = column.comment
        if is_multiline_comment(column):
            comment = comment.replace("\n", "\\n")
        comment, _ = extract_binding(comment)
        tag.set(TAG_KEY_GORM_COMMENT, comment)

    return tag
