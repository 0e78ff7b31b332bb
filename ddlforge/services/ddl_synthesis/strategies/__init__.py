"""
DDL Strategies - dialect-specific CREATE TABLE / index / comment rendering

Usage:
    from ddlforge.services.ddl_synthesis.strategies import PostgresStrategy

    strategy = PostgresStrategy()
    sql = strategy.generate_table_ddl("public.users", "Users", fields)
"""

from .base import DDLStrategy, get_schema_and_table, split_qualified_name
from .mysql_strategy import MySqlStrategy
from .postgresql_strategy import PostgresStrategy
from .sqlserver_strategy import SqlServerStrategy
from .oracle_strategy import OracleStrategy

__all__ = [
    # Base class
    "DDLStrategy",
    "get_schema_and_table",
    "split_qualified_name",

    # Implementations
    "MySqlStrategy",
    "PostgresStrategy",
    "SqlServerStrategy",
    "OracleStrategy",
]
