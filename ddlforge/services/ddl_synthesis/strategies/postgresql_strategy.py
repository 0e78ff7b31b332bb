"""
PostgreSQL Strategy - PostgreSQL-specific CREATE TABLE output
"""

from typing import Sequence

from ..models import DialectId, NormalizedField
from .base import DDLStrategy


class PostgresStrategy(DDLStrategy):
    """Strategy for PostgreSQL: nullable columns carry no clause, comments are COMMENT ON statements."""

    dialect = DialectId.POSTGRESQL

    NULL_CLAUSE = ""

    TABLE_COMMENT_TEMPLATE = "COMMENT ON TABLE {table_name} IS '{comment_text}';"
    COLUMN_COMMENT_TEMPLATE = "COMMENT ON COLUMN {table_name}.{column_name} IS '{comment_text}';"

    def generate_table_ddl(
        self,
        table_name: str,
        table_comment: str,
        fields: Sequence[NormalizedField]
    ) -> str:
        qualified_name = self.format_table_name(table_name)
        statements = [self._create_table_statement(qualified_name, fields)]
        statements.extend(self._generate_comment_sql(qualified_name, table_comment, fields))
        return "\n".join(statements)
