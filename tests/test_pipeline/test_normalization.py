"""Tests for column type quirks, comment bindings and default values."""

from fieldgen.canonical.column import Column, ColumnBuilder, ScanKind, ScanType
from fieldgen.pipeline.column_type import normalized_type_string
from fieldgen.pipeline.comment_binding import extract_binding
from fieldgen.pipeline.default_value import default_tag_value, eligible_default, need_default_tag
from fieldgen.standards.default_policy import DefaultValuePolicy, get_default_value_policy


def _column(**kwargs) -> Column:
    values = {"table_name": "t", "name": "c", "database_type_name": "varchar"}
    values.update(kwargs)
    return Column(**values)


# ------------------------------------------
# Column type quirks
# ------------------------------------------
def test_varbinary_binary_suffix_removed():
    assert normalized_type_string(_column(column_type="varbinary(20) binary")) == "varbinary(20)"


def test_blob_binary_suffix_removed():
    assert normalized_type_string(_column(column_type="blob binary")) == "blob"
    assert normalized_type_string(_column(column_type="mediumblob binary")) == "mediumblob"


def test_blob_binary_only_when_trailing():
    assert normalized_type_string(_column(column_type="blob binary x")) == "blob binary x"


def test_binary_kept_outside_varbinary():
    assert normalized_type_string(_column(column_type="char(16) binary")) == "char(16) binary"


def test_falls_back_to_database_type_name():
    assert normalized_type_string(_column(database_type_name="TEXT")) == "TEXT"


# ------------------------------------------
# Comment binding
# ------------------------------------------
def test_extract_binding():
    assert extract_binding("user email [[required]]") == ("user email ", "required")


def test_extract_binding_in_middle():
    assert extract_binding("age [[gte=0]] years") == ("age  years", "gte=0")


def test_extract_binding_without_marker():
    assert extract_binding("plain") == ("plain", "")
    assert extract_binding("") == ("", "")


def test_unbalanced_marker_is_not_a_binding():
    assert extract_binding("broken [[required") == ("broken [[required", "")
    assert extract_binding("broken required]]") == ("broken required]]", "")


def test_extract_binding_on_later_line():
    assert extract_binding("first\nsecond [[max=5]]") == ("first\nsecond ", "max=5")


# ------------------------------------------
# Default values
# ------------------------------------------
def test_no_default():
    assert default_tag_value(_column()) == ("", False)


def test_blank_default_quoted():
    assert default_tag_value(_column(default_value="")) == ("''", True)
    assert default_tag_value(_column(default_value="  ")) == ("'  '", True)


def test_default_returned_unchanged():
    assert default_tag_value(_column(default_value=" 1 ")) == (" 1 ", True)


def test_scalar_kinds_always_need_default():
    for kind in (ScanKind.BOOL, ScanKind.INT, ScanKind.UINT, ScanKind.FLOAT, ScanKind.STRING):
        column = _column(name="created_at", scan_type=ScanType("x", kind))
        assert need_default_tag(column, "0") is True


def test_struct_kind_zero_values_suppressed():
    column = _column(scan_type=ScanType("time.Time", ScanKind.STRUCT))
    assert need_default_tag(column, "'0000-00-00 00:00:00'") is False
    assert need_default_tag(column, "'0'") is False
    assert need_default_tag(column, "'2020-01-01 00:00:00'") is True


def test_other_kind_managed_columns():
    assert need_default_tag(_column(name="created_at"), "now()") is False
    assert need_default_tag(_column(name="updated_at"), "now()") is False
    assert need_default_tag(_column(name="seen_at"), "now()") is True


def test_policy_from_builder():
    policy = DefaultValuePolicy(zero_value_chars="'0:- ()", managed_columns=frozenset({"modified"}))
    column = (
        ColumnBuilder(_column(name="modified", default_value="getdate()"))
        .with_default_policy(policy)
        .build()
    )
    assert eligible_default(column) == ("getdate()", False)


def test_dialect_policies():
    assert get_default_value_policy("POSTGRES").cast_marker == "::"
    assert get_default_value_policy("oracle") == get_default_value_policy()


def test_postgres_cast_stripped_before_zero_value_check():
    policy = get_default_value_policy("postgres")
    column = _column(scan_type=ScanType("time.Time", ScanKind.STRUCT))

    assert need_default_tag(column, "'00:00:00'::time without time zone", policy) is False
    assert need_default_tag(column, "'1000-01-01 10:10:11'::timestamp without time zone", policy) is True


def test_ones_and_zeros_default_kept():
    column = _column(scan_type=ScanType("time.Time", ScanKind.STRUCT))
    for dialect in ("mysql", "postgres", "sqlite", "sqlserver"):
        assert need_default_tag(column, "'1000-01-01 10:10:11'", get_default_value_policy(dialect)) is True
