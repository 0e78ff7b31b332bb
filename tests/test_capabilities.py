import pytest

from ddlforge.services.ddl_synthesis.mapping import (
    default_kind_options,
    get_capabilities,
    on_update_options,
    supports_auto_increment,
    supports_default_current_timestamp,
    supports_on_update_current_timestamp,
    supports_uuid_default,
)


@pytest.mark.parametrize("dialect, canonical, expected", [
    ("mysql", "int", True),
    ("mysql", "tinyint", True),
    ("mysql", "varchar", False),
    ("postgresql", "bigint", True),
    ("postgresql", "tinyint", False),
    ("sqlserver", "tinyint", True),
    ("sqlserver", "varchar", False),
    ("oracle", "decimal", True),
    ("oracle", "varchar", False),
])
def test_supports_auto_increment(dialect, canonical, expected):
    assert supports_auto_increment(dialect, canonical) is expected


@pytest.mark.parametrize("dialect, canonical, expected", [
    ("mysql", "timestamp", True),
    ("mysql", "datetime", True),
    ("postgresql", "timestamptz", True),
    ("sqlserver", "datetime2", True),
    ("oracle", "timestamp", True),
    ("oracle", "varchar", False),
])
def test_supports_default_current_timestamp(dialect, canonical, expected):
    assert supports_default_current_timestamp(dialect, canonical) is expected


def test_on_update_is_mysql_only():
    assert supports_on_update_current_timestamp("mysql", "timestamp")
    assert supports_on_update_current_timestamp("mysql", "datetime")
    assert not supports_on_update_current_timestamp("postgresql", "timestamp")
    assert not supports_on_update_current_timestamp("sqlserver", "datetime")
    assert not supports_on_update_current_timestamp("oracle", "timestamp")


def test_uuid_defaults():
    assert supports_uuid_default("mysql", "varchar")
    assert supports_uuid_default("postgresql", "uuid")
    assert not supports_uuid_default("oracle", "int")


def test_expressions_per_dialect():
    assert get_capabilities("sqlserver").current_timestamp_expression == "GETDATE()"
    assert get_capabilities("oracle").uuid_default_expression == "SYS_GUID()"
    assert get_capabilities("mysql").auto_increment_clause == "AUTO_INCREMENT"
    assert get_capabilities("postgresql").auto_increment_clause == ""


def test_unknown_dialect_supports_nothing():
    assert not supports_auto_increment("db2", "int")


class TestOptions:

    def test_integer_column_offers_auto_increment(self):
        assert default_kind_options("mysql", "int") == ["none", "auto_increment", "constant"]

    def test_timestamp_column_offers_current_timestamp(self):
        assert default_kind_options("mysql", "timestamp") == ["none", "constant", "current_timestamp"]

    def test_uuid_column_offers_uuid(self):
        assert default_kind_options("postgresql", "uuid") == ["none", "constant", "uuid"]

    def test_on_update_options(self):
        assert on_update_options("mysql", "datetime") == ["none", "current_timestamp"]
        assert on_update_options("oracle", "timestamp") == ["none"]
