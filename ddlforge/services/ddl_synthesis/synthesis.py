"""
Top-level entry points: ``build_ddl`` and ``build_dcl``.

Both are meant to run on every edit of a half-filled table definition, so
missing input yields placeholder text instead of an exception. The only
error raised is ``UnsupportedDialect``, and only once there is something to render.
"""

from typing import Iterable, Optional, Sequence

from ddlforge.config import config
from ddlforge.utils.logger import setup_logger
from .models import IndexDefinition, NormalizedField
from .registry import DDLStrategyRegistry, default_registry

logger = setup_logger('synthesis')

_placeholders = (config.get('synthesis', {}) or {}).get('placeholders', {}) or {}
MISSING_TABLE_NAME = _placeholders.get('missing_table_name', '-- missing table name')
MISSING_FIELDS = _placeholders.get('missing_fields', '-- missing field definitions')


def build_ddl(
    dialect,
    table_name: str,
    table_comment: str,
    fields: Sequence[NormalizedField],
    indexes: Sequence[IndexDefinition] = (),
    registry: Optional[DDLStrategyRegistry] = None,
) -> str:
    """
    Render CREATE TABLE, comment and index statements for one table.

    Args:
        dialect: DialectId or its string value
        table_name: Possibly qualified table name
        table_comment: Table comment ("" for none)
        fields: Column definitions
        indexes: Index / primary key definitions, rendered in order
        registry: Strategy registry; defaults to the process-wide one

    Returns:
        SQL text, or a placeholder comment when the table name or fields are missing

    Raises:
        UnsupportedDialect: No strategy is registered for *dialect* and the input is complete
    """
    table = (table_name or "").strip()
    if not table:
        return MISSING_TABLE_NAME
    if not fields:
        return MISSING_FIELDS

    strategy = (registry or default_registry).resolve(dialect)

    table_ddl = strategy.generate_table_ddl(table, table_comment or "", fields)
    if not indexes:
        return table_ddl

    index_ddls = [strategy.generate_index_ddl(table, index) for index in indexes]
    logger.debug(f"Built DDL for '{table}' with {len(fields)} fields and {len(index_ddls)} indexes.")
    return table_ddl + "\n\n" + "\n".join(index_ddls)


def build_dcl(
    dialect,
    table_name: str,
    principals: Iterable[str],
    registry: Optional[DDLStrategyRegistry] = None,
) -> str:
    """One ``GRANT SELECT`` per non-blank principal, newline separated; "" when nothing to grant."""
    table = (table_name or "").strip()
    names = [p.strip() for p in principals or [] if p and p.strip()]
    if not table or not names:
        return ""

    (registry or default_registry).resolve(dialect)
    return "\n".join(f"GRANT SELECT ON {table} TO {name};" for name in names)
