"""
SQL Server Strategy - SQL Server-specific CREATE TABLE output
"""

from typing import List, Sequence

from ..mapping import escape_single_quotes
from ..models import DialectId, NormalizedField
from .base import DDLStrategy, get_schema_and_table


class SqlServerStrategy(DDLStrategy):
    """Strategy for SQL Server: IDENTITY(1,1) columns, comments as MS_Description extended properties."""

    dialect = DialectId.SQLSERVER

    EXTENDED_PROPERTY_TEMPLATE = (
        "EXEC sp_addextendedproperty @name = N'MS_Description', @value = N'{comment_text}', "
        "@level0type = N'SCHEMA', @level0name = {schema_name}, "
        "@level1type = N'TABLE', @level1name = N'{table}'"
    )
    COLUMN_LEVEL_TEMPLATE = ", @level2type = N'COLUMN', @level2name = N'{column_name}'"

    def generate_table_ddl(
        self,
        table_name: str,
        table_comment: str,
        fields: Sequence[NormalizedField]
    ) -> str:
        schema, table = get_schema_and_table(table_name)
        qualified_name = f"{schema}.{table}" if schema else table

        statements = [self._create_table_statement(qualified_name, fields)]
        statements.extend(self._generate_comment_sql(table_name, table_comment, fields))
        return "\n".join(statements)

    def _generate_comment_sql(self, table_name: str, table_comment: str, fields: Sequence[NormalizedField]) -> List[str]:
        """One sp_addextendedproperty call for the table and one per commented column."""
        schema, table = get_schema_and_table(table_name)
        # Without a schema the property lands in the caller's default schema
        schema_name = f"N'{escape_single_quotes(schema)}'" if schema else "SCHEMA_NAME()"
        base_params = {"schema_name": schema_name, "table": escape_single_quotes(table)}

        comment_sqls = []
        table_comment = (table_comment or "").strip()
        if table_comment:
            comment_sqls.append(
                self.EXTENDED_PROPERTY_TEMPLATE.format(comment_text=escape_single_quotes(table_comment), **base_params)
                + ";"
            )

        for field in fields:
            comment_text = (field.comment or "").strip()
            if not comment_text:
                continue
            comment_sqls.append(
                self.EXTENDED_PROPERTY_TEMPLATE.format(comment_text=escape_single_quotes(comment_text), **base_params)
                + self.COLUMN_LEVEL_TEMPLATE.format(column_name=escape_single_quotes(field.name))
                + ";"
            )
        return comment_sqls
