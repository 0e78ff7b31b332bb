"""
Base DDL Strategy - shared rendering for dialect-specific CREATE TABLE output

Strategies handle dialect differences such as:
- Column suffixes (AUTO_INCREMENT vs IDENTITY(1,1) vs nothing)
- Nullability spelling (explicit NULL vs implicit)
- Comments (inline COMMENT vs COMMENT ON vs sp_addextendedproperty)
- DEFAULT expressions for current time and UUIDs
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ddlforge.utils.logger import setup_logger
from ..mapping import (
    TypeMapper,
    canonicalize_base_type,
    escape_single_quotes,
    format_constant_default,
    get_capabilities,
    parse_field_type,
    supports_auto_increment,
    supports_default_current_timestamp,
    supports_on_update_current_timestamp,
    supports_uuid_default,
)
from ..models import DefaultKind, DialectId, IndexDefinition, NormalizedField, OnUpdate
from ..utils.dialect_utils import normalize_dialect


def split_qualified_name(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(".") if part.strip()]


def get_schema_and_table(raw: str) -> Tuple[str, str]:
    """Split ``db.schema.table`` into (``db.schema``, ``table``)."""
    parts = split_qualified_name(raw)
    if len(parts) <= 1:
        return "", parts[0] if parts else raw.strip()
    return ".".join(parts[:-1]), parts[-1]


class DDLStrategy(ABC):
    """
    Abstract base class for dialect DDL strategies.

    Subclasses set ``dialect`` and implement ``generate_table_ddl``; index and
    primary key DDL is shared unless a dialect overrides it.

    Usage:
        strategy = registry.resolve("postgresql")
        sql = strategy.generate_table_ddl("public.users", "Users", fields)
    """

    dialect: DialectId

    # Column clause order after "<name> <type>"
    COLUMN_CLAUSE_ORDER: Tuple[str, ...] = ("auto_increment", "nullability", "default", "on_update", "comment")

    NULL_CLAUSE = " NULL"
    NOT_NULL_CLAUSE = " NOT NULL"

    def __init__(self, render_identity: bool = False):
        """
        Args:
            render_identity: Emit the dialect's identity clause for auto_increment
                columns where the dialect has no plain column suffix for it.
        """
        self.render_identity = render_identity
        self.logger = setup_logger(self.__class__.__name__)

    def get_database_type(self) -> DialectId:
        return self.dialect

    # ==================== Identifiers ====================

    def format_table_name(self, table_name: str) -> str:
        """Trim every dot-separated segment and drop empty ones."""
        parts = split_qualified_name(table_name)
        if not parts:
            return table_name.strip()
        return ".".join(parts)

    def format_field_name(self, field_name: str) -> str:
        """Field names are emitted as typed; reserved words are flagged upstream, not quoted."""
        return field_name

    # ==================== Table DDL ====================

    @abstractmethod
    def generate_table_ddl(
        self,
        table_name: str,
        table_comment: str,
        fields: Sequence[NormalizedField]
    ) -> str:
        """
        Generate the CREATE TABLE statement plus any comment statements.

        Args:
            table_name: Table name, optionally schema/database qualified
            table_comment: Table comment ("" for none)
            fields: Column definitions in output order

        Returns:
            One or more ';'-terminated statements joined by newlines
        """
        pass

    def _create_type_mapper(self) -> TypeMapper:
        return TypeMapper.create(self.dialect)

    def _create_table_statement(self, qualified_name: str, fields: Sequence[NormalizedField], table_suffix: str = "") -> str:
        type_mapper = self._create_type_mapper()
        column_lines = [self._render_column(field, type_mapper) for field in fields]
        self.logger.debug(f"Rendered {len(column_lines)} columns for '{qualified_name}'.")
        return f"CREATE TABLE {qualified_name} (\n" + ",\n".join(column_lines) + f"\n){table_suffix};"

    def _render_column(self, field: NormalizedField, type_mapper: TypeMapper) -> str:
        parsed = parse_field_type(field.type)
        canonical = canonicalize_base_type(parsed.base_type)
        clauses = {
            "auto_increment": self._auto_increment_clause(field, canonical),
            "nullability": self._nullability_clause(field),
            "default": self._default_clause(field, canonical),
            "on_update": self._on_update_clause(field, canonical),
            "comment": self._inline_comment(field),
        }
        rendered = "".join(clauses[name] for name in self.COLUMN_CLAUSE_ORDER)
        return f"  {self.format_field_name(field.name)} {type_mapper.map_type(parsed)}{rendered}"

    def _auto_increment_clause(self, field: NormalizedField, canonical: str) -> str:
        if field.default_kind != DefaultKind.AUTO_INCREMENT:
            return ""
        if not supports_auto_increment(self.dialect, canonical):
            self.logger.debug(f"Auto increment not supported for {normalize_dialect(self.dialect)} type '{canonical}' on '{field.name}'.")
            return ""
        caps = get_capabilities(self.dialect)
        clause = caps.auto_increment_clause or (caps.identity_clause if self.render_identity else "")
        return f" {clause}" if clause else ""

    def _nullability_clause(self, field: NormalizedField) -> str:
        return self.NULL_CLAUSE if field.nullable else self.NOT_NULL_CLAUSE

    def _default_clause(self, field: NormalizedField, canonical: str) -> str:
        kind = field.default_kind
        if kind == DefaultKind.CONSTANT:
            return format_constant_default(canonical, field.default_value)
        if kind == DefaultKind.CURRENT_TIMESTAMP and supports_default_current_timestamp(self.dialect, canonical):
            return f" DEFAULT {get_capabilities(self.dialect).current_timestamp_expression}"
        if kind == DefaultKind.UUID and supports_uuid_default(self.dialect, canonical):
            return f" DEFAULT {get_capabilities(self.dialect).uuid_default_expression}"
        return ""

    def _on_update_clause(self, field: NormalizedField, canonical: str) -> str:
        if field.on_update == OnUpdate.CURRENT_TIMESTAMP and supports_on_update_current_timestamp(self.dialect, canonical):
            return f" ON UPDATE {get_capabilities(self.dialect).on_update_expression}"
        return ""

    def _inline_comment(self, field: NormalizedField) -> str:
        return ""

    # ==================== Comment statements ====================

    TABLE_COMMENT_TEMPLATE: Optional[str] = None
    COLUMN_COMMENT_TEMPLATE: Optional[str] = None

    def _generate_comment_sql(self, qualified_name: str, table_comment: str, fields: Sequence[NormalizedField]) -> List[str]:
        """COMMENT ON statements from the class templates; table first, then columns in field order."""
        comment_sqls = []
        table_comment = (table_comment or "").strip()

        if table_comment and self.TABLE_COMMENT_TEMPLATE:
            comment_sqls.append(self.TABLE_COMMENT_TEMPLATE.format(
                table_name=qualified_name, comment_text=escape_single_quotes(table_comment)
            ))

        if self.COLUMN_COMMENT_TEMPLATE:
            for field in fields:
                comment_text = (field.comment or "").strip()
                if not comment_text:
                    continue
                comment_sqls.append(self.COLUMN_COMMENT_TEMPLATE.format(
                    table_name=qualified_name,
                    column_name=self.format_field_name(field.name),
                    comment_text=escape_single_quotes(comment_text),
                ))
        return comment_sqls

    # ==================== Index DDL ====================

    def generate_index_ddl(self, table_name: str, index: IndexDefinition) -> str:
        return self._generate_standard_index_ddl(table_name, index)

    def _generate_primary_key_ddl(self, table_name: str, index: IndexDefinition) -> str:
        field_list = ", ".join(f.name for f in index.fields)
        return f"ALTER TABLE {self.format_table_name(table_name)} ADD PRIMARY KEY ({field_list});"

    def _format_index_field_list(self, index: IndexDefinition) -> str:
        return ", ".join(f"{f.name} {_direction(f.direction)}" for f in index.fields)

    def _generate_standard_index_ddl(self, table_name: str, index: IndexDefinition) -> str:
        if index.is_primary:
            return self._generate_primary_key_ddl(table_name, index)

        index_type = "UNIQUE INDEX" if index.unique else "INDEX"
        field_list = self._format_index_field_list(index)
        qualified_name = self.format_table_name(table_name)
        return f"CREATE {index_type} {index.name} ON {qualified_name} ({field_list});"


def _direction(direction) -> str:
    return getattr(direction, "value", direction)
