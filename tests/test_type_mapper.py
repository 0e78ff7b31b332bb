import pytest

from ddlforge.services.ddl_synthesis.mapping import (
    TypeMapper,
    format_type,
    get_canonical_base_type,
    get_field_type_for_database,
    map_type,
    parse_field_type,
)
from ddlforge.services.ddl_synthesis.mapping.type_mapper import _build_rule


@pytest.mark.parametrize("raw, expected", [
    ("varchar", "VARCHAR(255)"),
    ("varchar(100)", "VARCHAR(100)"),
    ("varchar(70000)", "VARCHAR(70000)"),
    ("varchar(max)", "VARCHAR(MAX)"),
    ("char", "CHAR(1)"),
    ("tinyint", "TINYINT(1)"),
    ("tinyint(4)", "TINYINT(4)"),
    ("decimal", "DECIMAL(18, 2)"),
    ("numeric(10,2)", "DECIMAL(10, 2)"),
    ("boolean", "TINYINT(1)"),
    ("int(11)", "INT"),
    ("int unsigned", "INT UNSIGNED"),
    ("decimal(10,2) unsigned", "DECIMAL(10, 2) UNSIGNED"),
    ("serial", "BIGINT UNSIGNED AUTO_INCREMENT"),
    ("timestamp(6)", "TIMESTAMP"),
    ("mediumtext", "MEDIUMTEXT"),
    ("datetime(3)", "DATETIME(3)"),
])
def test_mysql_mapping(raw, expected):
    assert get_field_type_for_database("mysql", raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("int", "INTEGER"),
    ("int(11)", "INTEGER"),
    ("int unsigned", "INTEGER"),
    ("decimal", "NUMERIC(18, 2)"),
    ("double", "DOUBLE PRECISION"),
    ("float", "DOUBLE PRECISION"),
    ("json", "JSONB"),
    ("bit", "BOOLEAN"),
    ("longtext", "TEXT"),
    ("time", "TIME WITHOUT TIME ZONE"),
    ("time with time zone", "TIME WITH TIME ZONE"),
    ("timestamptz", "TIMESTAMP WITH TIME ZONE"),
    ("timestamp with time zone", "TIMESTAMP WITH TIME ZONE"),
    ("timestamp(3)", "TIMESTAMP(3)"),
    ("blob", "BYTEA"),
])
def test_postgresql_mapping(raw, expected):
    assert get_field_type_for_database("postgresql", raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("datetime", "DATETIME2"),
    ("datetime2", "DATETIME2"),
    ("timestamp", "DATETIME2"),
    ("datetime2(3)", "DATETIME2(3)"),
    ("nvarchar", "NVARCHAR(255)"),
    ("varchar(max)", "VARCHAR(MAX)"),
    ("text", "NVARCHAR(MAX)"),
    ("longtext", "NVARCHAR(MAX)"),
    ("varbinary", "VARBINARY(MAX)"),
    ("serial", "BIGINT IDENTITY(1,1)"),
    ("uuid", "UNIQUEIDENTIFIER"),
    ("int unsigned", "INT"),
])
def test_sqlserver_mapping(raw, expected):
    assert get_field_type_for_database("sqlserver", raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("longtext", "CLOB"),
    ("int", "NUMBER(10)"),
    ("tinyint", "NUMBER(3)"),
    ("smallint", "NUMBER(5)"),
    ("bigint", "NUMBER(19)"),
    ("decimal", "NUMBER(18, 2)"),
    ("number(10,2)", "NUMBER(10, 2)"),
    ("jsonb", "CLOB"),
    ("double", "BINARY_DOUBLE"),
    ("real", "BINARY_FLOAT"),
    ("boolean", "NUMBER(1)"),
    ("uuid", "CHAR(36)"),
    ("varbinary", "RAW(2000)"),
    ("serial", "NUMBER GENERATED ALWAYS AS IDENTITY"),
    ("varchar", "VARCHAR2(255)"),
    ("varchar(5000)", "VARCHAR2(5000)"),
    ("varchar(max)", "VARCHAR2(MAX)"),
    ("timestamptz(6)", "TIMESTAMP WITH TIME ZONE"),
    ("nvarchar(100)", "NVARCHAR2(100)"),
])
def test_oracle_mapping(raw, expected):
    assert get_field_type_for_database("oracle", raw) == expected


class TestFallback:

    @pytest.mark.parametrize("dialect", ["mysql", "postgresql", "sqlserver", "oracle"])
    def test_unknown_type_is_uppercased_with_args(self, dialect):
        assert get_field_type_for_database(dialect, "geometry") == "GEOMETRY"
        assert get_field_type_for_database(dialect, "money(10)") == "MONEY(10)"

    def test_unknown_type_keeps_unsigned_only_on_mysql(self):
        assert get_field_type_for_database("mysql", "mediumint unsigned") == "MEDIUMINT UNSIGNED"
        assert get_field_type_for_database("postgresql", "mediumint unsigned") == "MEDIUMINT"

    def test_leading_unsigned_is_part_of_the_type_name(self):
        assert get_field_type_for_database("mysql", "unsigned int") == "UNSIGNED INT"
        assert get_field_type_for_database("mysql", "int unsigned") == "INT UNSIGNED"

    def test_unparseable_type_returns_raw(self):
        assert get_field_type_for_database("mysql", "(255)") == "(255)"
        assert get_field_type_for_database("mysql", "") == ""


class TestTypeMapper:

    def test_mapping_is_repeatable(self):
        parsed = parse_field_type("decimal(12,4)")
        assert map_type(parsed, "oracle") == map_type(parsed, "oracle")

    # Oracle renders the integer family as NUMBER(n), so only lossless pairs are listed
    @pytest.mark.parametrize("dialect, canonical, args", [
        ("mysql", "int", ()),
        ("mysql", "bigint", ()),
        ("mysql", "varchar", ("100",)),
        ("mysql", "varchar", ("70000",)),
        ("mysql", "varchar", ("max",)),
        ("postgresql", "int", ()),
        ("postgresql", "varchar", ("100",)),
        ("sqlserver", "int", ()),
        ("sqlserver", "varchar", ("max",)),
        ("oracle", "varchar", ("5000",)),
        ("oracle", "varchar", ("max",)),
    ])
    def test_rendered_type_canonicalizes_back(self, dialect, canonical, args):
        rendered = map_type(parse_field_type(format_type(canonical, args)), dialect)
        assert get_canonical_base_type(rendered) == canonical

    def test_has_mapping_uses_aliases(self):
        mapper = TypeMapper.create("mysql")
        assert mapper.has_mapping("integer")
        assert not mapper.has_mapping("geometry")
        assert "varchar" in mapper.get_supported_types()

    def test_format_type_renders_max(self):
        assert format_type("nvarchar", ["max"]) == "NVARCHAR(MAX)"
        assert format_type("bigint", [], "IDENTITY(1,1)") == "BIGINT IDENTITY(1,1)"

    def test_transform_rule_decides_alone(self):
        assert get_field_type_for_database("oracle", "serial(5)") == "NUMBER GENERATED ALWAYS AS IDENTITY"
        assert get_field_type_for_database("oracle", "timestamp with time zone") == "TIMESTAMP WITH TIME ZONE"

    def test_unknown_transform_falls_back_to_declarative(self):
        rule = _build_rule("varchar", {"transform": "no_such_transform", "target": "varchar2", "default_args": ["10"]})
        assert rule.transform is None
        assert rule.target == "varchar2"
        assert rule.default_args == ("10",)
