"""Tests for canonical column, index, field and tag models."""

import dataclasses

import pytest

from fieldgen.canonical.column import Column, ColumnBuilder, ScanKind, ScanType, column_from_dict
from fieldgen.canonical.field import Field
from fieldgen.canonical.gorm_tag import GormTag
from fieldgen.canonical.index import Index, group_by_column
from fieldgen.utils.exceptions import ColumnDefinitionError


def test_gorm_tag_set_replaces():
    tag = GormTag().set("default", "1").set("default", "2")
    assert tag.get("default") == ["2"]


def test_gorm_tag_append_accumulates():
    tag = GormTag().append("index", "a,priority:1").append("index", "b,priority:2")
    assert tag.get("index") == ["a,priority:1", "b,priority:2"]
    assert tag.build() == "index:a,priority:1;index:b,priority:2"


def test_gorm_tag_build_ranks_known_keys():
    tag = GormTag()
    tag.set("comment", "c")
    tag.set("not null", "")
    tag.set("type", "int")
    tag.set("column", "id")
    assert tag.build() == "column:id;type:int;not null;comment:c"


def test_gorm_tag_empty():
    assert GormTag().build() == ""
    assert len(GormTag()) == 0


def test_gorm_tag_get_returns_copy():
    tag = GormTag({"column": ["id"]})
    tag.get("column").append("other")
    assert tag.get("column") == ["id"]


def test_group_by_column():
    grouped = group_by_column([
        {"name": "PRIMARY", "columns": ["id"], "primary_key": True, "unique": True},
        {"name": "idx_name_age", "columns": ["name", "age"], "unique": False},
        {"name": "uk_name", "columns": ["name"], "unique": True},
    ])

    assert grouped["id"] == [Index("PRIMARY", priority=1, primary_key=True, unique=True)]
    assert grouped["age"] == [Index("idx_name_age", priority=2, unique=False)]
    assert [i.name for i in grouped["name"]] == ["idx_name_age", "uk_name"]


def test_group_by_column_empty():
    assert group_by_column(None) == {}
    assert group_by_column([{}]) == {}


def test_builder_produces_frozen_column():
    raw = Column(table_name="users", name="id", database_type_name="bigint")
    column = ColumnBuilder(raw).with_scan_type_preference().with_json_tag_ns(None).build()

    assert column.use_scan_type is True
    assert column.json_tag_ns("user_id") == "user_id"
    assert raw.use_scan_type is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        column.name = "other"


def test_builder_copies_override_map():
    overrides = {"int": lambda c: "int"}
    column = ColumnBuilder(Column("t", "c", "int")).with_data_type_map(overrides).build()
    overrides["bigint"] = lambda c: "x"
    assert list(column.data_type_map) == ["int"]


def test_column_from_dict():
    column = column_from_dict(
        {
            "name": "score",
            "database_type_name": "int",
            "column_type": "int(11) unsigned",
            "nullable": True,
            "default_value": 0,
            "scan_type": {"name": "uint32", "kind": "UINT"},
        },
        table_name="games",
    )

    assert column.table_name == "games"
    assert column.default_value == "0"
    assert column.scan_type == ScanType("uint32", ScanKind.UINT)
    assert column.primary_key is None


def test_column_from_dict_scan_type_name_only():
    column = column_from_dict({"name": "a", "database_type_name": "int", "scan_type": "int32"})
    assert column.scan_type == ScanType("int32", ScanKind.OTHER)


def test_column_from_dict_requires_name_and_type():
    with pytest.raises(ColumnDefinitionError, match="missing a name"):
        column_from_dict({"database_type_name": "int"}, table_name="t")
    with pytest.raises(ColumnDefinitionError, match="missing database_type_name"):
        column_from_dict({"name": "a"}, table_name="t")


def test_column_from_dict_unknown_scan_kind():
    with pytest.raises(ColumnDefinitionError, match="Unknown scan type kind"):
        column_from_dict({"name": "a", "database_type_name": "int", "scan_type": {"kind": "pointer"}})


def test_field_tags():
    field = Field(
        name="email",
        type="string",
        column_name="email",
        gorm_tag=GormTag({"column": ["email"], "type": ["varchar(255)"]}),
        tag={"json": "email", "binding": "required"},
    )
    assert field.tags() == 'gorm:"column:email;type:varchar(255)" binding:"required" json:"email"'


def test_column_from_dict_rejects_non_mapping_record():
    with pytest.raises(ColumnDefinitionError, match="must be a mapping, got str"):
        column_from_dict("a", table_name="t")


def test_column_from_dict_rejects_list_scan_type():
    with pytest.raises(ColumnDefinitionError, match="scan_type must be a name or a mapping"):
        column_from_dict({"name": "a", "database_type_name": "int", "scan_type": ["int32", "int"]})


def test_field_and_tag_are_not_hashable():
    field = Field(name="id", type="int64", column_name="id")

    assert field == Field(name="id", type="int64", column_name="id")
    with pytest.raises(TypeError):
        hash(field)
    with pytest.raises(TypeError):
        hash(GormTag())
