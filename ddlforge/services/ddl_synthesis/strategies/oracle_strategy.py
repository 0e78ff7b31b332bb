"""
Oracle Strategy - Oracle-specific CREATE TABLE output
"""

from typing import Sequence

from ..models import DialectId, NormalizedField
from .base import DDLStrategy, get_schema_and_table


class OracleStrategy(DDLStrategy):
    """Strategy for Oracle: DEFAULT precedes NOT NULL, comments are COMMENT ON statements."""

    dialect = DialectId.ORACLE

    # Oracle's column grammar wants the DEFAULT clause ahead of inline constraints
    COLUMN_CLAUSE_ORDER = ("auto_increment", "default", "nullability", "on_update", "comment")

    NULL_CLAUSE = ""

    TABLE_COMMENT_TEMPLATE = "COMMENT ON TABLE {table_name} IS '{comment_text}';"
    COLUMN_COMMENT_TEMPLATE = "COMMENT ON COLUMN {table_name}.{column_name} IS '{comment_text}';"
    SYNONYM_TEMPLATE = "CREATE OR REPLACE PUBLIC SYNONYM {synonym_name} FOR {table_name};"

    def __init__(self, render_identity: bool = False, include_synonyms: bool = False):
        """
        Args:
            render_identity: Emit GENERATED BY DEFAULT AS IDENTITY for auto_increment columns
            include_synonyms: Append a CREATE OR REPLACE PUBLIC SYNONYM statement
        """
        super().__init__(render_identity=render_identity)
        self.include_synonyms = include_synonyms

    def generate_table_ddl(
        self,
        table_name: str,
        table_comment: str,
        fields: Sequence[NormalizedField]
    ) -> str:
        qualified_name = self.format_table_name(table_name)
        statements = [self._create_table_statement(qualified_name, fields)]
        statements.extend(self._generate_comment_sql(qualified_name, table_comment, fields))

        if self.include_synonyms and qualified_name:
            _, synonym_name = get_schema_and_table(qualified_name)
            statements.append(self.SYNONYM_TEMPLATE.format(synonym_name=synonym_name, table_name=qualified_name))

        return "\n".join(statements)
