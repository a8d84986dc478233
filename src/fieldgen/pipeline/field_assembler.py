"""
Pipeline step: Column → Field

Responsibilities:
- Resolve the base field type
- Apply unsigned promotion
- Pick exactly one of soft-delete / default / nullable promotion
- Route the comment's binding directive into the generic tags
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from fieldgen.canonical.column import Column
from fieldgen.canonical.field import TAG_KEY_BINDING, TAG_KEY_JSON, Field
from fieldgen.inference.type_resolver import resolve_data_type
from fieldgen.pipeline.column_type import normalized_type_string
from fieldgen.pipeline.comment_binding import extract_binding
from fieldgen.pipeline.default_value import eligible_default
from fieldgen.pipeline.tag_builder import build_gorm_tag, is_multiline_comment
from fieldgen.standards.data_types import (
    INTEGER_TYPE_PREFIX,
    OPTIONAL_PREFIX,
    SOFT_DELETE_COLUMN,
    SOFT_DELETE_TYPE,
    TIME_TYPE,
    UNSIGNED_MARKER,
    UNSIGNED_PREFIX,
)


class Promotion(Enum):
    SOFT_DELETE = "SOFT_DELETE"
    DEFAULT_PROMOTED = "DEFAULT_PROMOTED"
    NULLABLE_PROMOTED = "NULLABLE_PROMOTED"
    PLAIN = "PLAIN"


@dataclass(frozen=True)
class PromotionOptions:
    nullable: bool = False
    coverable: bool = False
    signable: bool = False


def decide_promotion(
    column: Column,
    field_type: str,
    nullable: bool,
    coverable: bool,
) -> Promotion:
    """
    Soft-delete, defaulted and nullable columns each get a different
    representation; the promotions never stack.
    """
    if column.name == SOFT_DELETE_COLUMN and field_type == TIME_TYPE:
        return Promotion.SOFT_DELETE

    if coverable:
        _, eligible = eligible_default(column)
        if eligible:
            return Promotion.DEFAULT_PROMOTED

    if nullable and not field_type.startswith(OPTIONAL_PREFIX) and column.nullable is True:
        return Promotion.NULLABLE_PROMOTED

    return Promotion.PLAIN


def apply_promotion(promotion: Promotion, field_type: str) -> str:
    if promotion == Promotion.SOFT_DELETE:
        return SOFT_DELETE_TYPE
    if promotion in (Promotion.DEFAULT_PROMOTED, Promotion.NULLABLE_PROMOTED):
        return OPTIONAL_PREFIX + field_type
    return field_type


def to_field(
    column: Column,
    nullable: bool = False,
    coverable: bool = False,
    signable: bool = False,
) -> Field:
    field_type = resolve_data_type(column)

    if (
        signable
        and UNSIGNED_MARKER in normalized_type_string(column)
        and field_type.startswith(INTEGER_TYPE_PREFIX)
    ):
        field_type = UNSIGNED_PREFIX + field_type

    promotion = decide_promotion(column, field_type, nullable, coverable)
    field_type = apply_promotion(promotion, field_type)

    comment, binding = extract_binding(column.comment or "")

    tag = {TAG_KEY_JSON: column.json_tag_ns(column.name)}
    if binding:
        tag[TAG_KEY_BINDING] = binding

    return Field(
        name=column.name,
        type=field_type,
        column_name=column.name,
        multiline_comment=is_multiline_comment(column),
        gorm_tag=build_gorm_tag(column),
        tag=tag,
        column_comment=comment,
    )


def to_fields(columns: Iterable[Column], options: PromotionOptions = None) -> List[Field]:
    options = options or PromotionOptions()
    return [
        to_field(
            column,
            nullable=options.nullable,
            coverable=options.coverable,
            signable=options.signable,
        )
        for column in columns
    ]
