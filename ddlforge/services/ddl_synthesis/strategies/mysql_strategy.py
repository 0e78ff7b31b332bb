"""
MySQL Strategy - MySQL-specific CREATE TABLE output
"""

from typing import Sequence

from ..mapping import escape_single_quotes
from ..models import DialectId, NormalizedField
from .base import DDLStrategy


class MySqlStrategy(DDLStrategy):
    """Strategy for MySQL/MariaDB: comments are inline on columns and the table."""

    dialect = DialectId.MYSQL

    def generate_table_ddl(
        self,
        table_name: str,
        table_comment: str,
        fields: Sequence[NormalizedField]
    ) -> str:
        """MySQL keeps everything in one statement via COMMENT / COMMENT=."""
        table_comment = (table_comment or "").strip()
        comment_clause = f" COMMENT='{escape_single_quotes(table_comment)}'" if table_comment else ""
        return self._create_table_statement(self.format_table_name(table_name), fields, comment_clause)

    def _inline_comment(self, field: NormalizedField) -> str:
        comment_text = (field.comment or "").strip()
        return f" COMMENT '{escape_single_quotes(comment_text)}'" if comment_text else ""
