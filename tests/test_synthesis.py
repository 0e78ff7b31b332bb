import pytest

from ddlforge.services.ddl_synthesis import (
    DDLForgeError,
    DDLStrategyRegistry,
    DialectId,
    UnsupportedDialect,
    build_dcl,
    build_ddl,
    default_registry,
    is_supported,
    supported_dialects,
)
from ddlforge.services.ddl_synthesis.strategies import DDLStrategy, OracleStrategy

ALL_DIALECTS = ["mysql", "postgresql", "sqlserver", "oracle"]


class StubStrategy(DDLStrategy):
    dialect = DialectId.MYSQL

    def generate_table_ddl(self, table_name, table_comment, fields):
        return f"-- stub {table_name}"


class TestBuildDDL:

    def test_mysql_users_scenario(self, users_fields, registry):
        sql = build_ddl("mysql", "users", "", users_fields, registry=registry)
        assert sql.startswith(
            "CREATE TABLE users (\n  id INT AUTO_INCREMENT NOT NULL,\n  name VARCHAR(255) NULL\n);"
        )

    @pytest.mark.parametrize("table_name", ["", "   ", None])
    def test_missing_table_name_placeholder(self, table_name, users_fields, registry):
        assert build_ddl("mysql", table_name, "", users_fields, registry=registry) == "-- missing table name"

    def test_missing_fields_placeholder(self, registry):
        assert build_ddl("oracle", "users", "", [], registry=registry) == "-- missing field definitions"

    def test_indexes_follow_blank_line_in_order(self, users_fields, primary_key_index, email_index, registry):
        sql = build_ddl("postgresql", " users ", "", users_fields, [primary_key_index, email_index], registry=registry)
        table_ddl, index_block = sql.split("\n\n")
        assert table_ddl.startswith("CREATE TABLE users (")
        assert index_block == (
            "ALTER TABLE users ADD PRIMARY KEY (id, created_at);\n"
            "CREATE UNIQUE INDEX uk_users_email ON users (email ASC);"
        )

    def test_accepts_enum_dialect(self, users_fields, registry):
        assert build_ddl(DialectId.SQLSERVER, "users", "", users_fields, registry=registry).startswith("CREATE TABLE users")

    def test_unsupported_dialect_raises(self, users_fields, registry):
        with pytest.raises(UnsupportedDialect) as exc_info:
            build_ddl("db2", "users", "", users_fields, registry=registry)
        assert exc_info.value.dialect == "db2"
        assert isinstance(exc_info.value, DDLForgeError)
        assert "Unsupported database type: db2" in str(exc_info.value)

    def test_placeholders_win_over_unknown_dialect(self, users_fields, registry):
        assert build_ddl("db2", "", "", [], registry=registry) == "-- missing table name"
        assert build_ddl("db2", "users", "", [], registry=registry) == "-- missing field definitions"

    def test_uses_default_registry(self, users_fields):
        assert build_ddl("mysql", "users", "", users_fields).startswith("CREATE TABLE users (")


class TestBuildDCL:

    @pytest.mark.parametrize("dialect", ALL_DIALECTS)
    def test_single_grant_for_every_dialect(self, dialect, registry):
        assert build_dcl(dialect, "users", ["CBD_READ"], registry=registry) == "GRANT SELECT ON users TO CBD_READ;"

    def test_principals_trimmed_and_blank_skipped(self, registry):
        assert build_dcl("mysql", " users ", [" reader ", "", "  ", "auditor"], registry=registry) == (
            "GRANT SELECT ON users TO reader;\n"
            "GRANT SELECT ON users TO auditor;"
        )

    def test_empty_inputs_render_nothing(self, registry):
        assert build_dcl("mysql", "users", [], registry=registry) == ""
        assert build_dcl("mysql", "  ", ["reader"], registry=registry) == ""

    def test_empty_input_with_unknown_dialect_renders_nothing(self, registry):
        assert build_dcl("db2", "", ["reader"], registry=registry) == ""
        assert build_dcl("db2", "users", [" "], registry=registry) == ""

    def test_unsupported_dialect_raises(self, registry):
        with pytest.raises(UnsupportedDialect):
            build_dcl("sqlite", "users", ["reader"], registry=registry)


class TestRegistry:

    def test_prepopulated_with_all_dialects(self, registry):
        assert registry.supported_dialects() == sorted(ALL_DIALECTS)
        assert isinstance(registry.resolve(DialectId.ORACLE), OracleStrategy)

    def test_register_overrides_without_touching_default(self, registry, users_fields):
        registry.register(DialectId.MYSQL, StubStrategy())
        assert build_ddl("mysql", "users", "", users_fields, registry=registry) == "-- stub users"
        assert not isinstance(default_registry.resolve("mysql"), StubStrategy)

    def test_empty_registry_rejects_everything(self):
        with pytest.raises(UnsupportedDialect):
            DDLStrategyRegistry().resolve("mysql")

    def test_lookup_is_case_insensitive(self, registry):
        assert registry.is_supported("MySQL")
        assert not registry.is_supported("db2")

    def test_module_helpers(self):
        assert supported_dialects() == sorted(ALL_DIALECTS)
        assert is_supported("postgresql")
