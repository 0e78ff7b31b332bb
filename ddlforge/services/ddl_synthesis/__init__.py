"""
DDL Synthesis Package - multi-dialect CREATE TABLE / INDEX / GRANT generation.

Main Components:
    - build_ddl / build_dcl: Entry points for table, index and grant statements
    - DDLStrategyRegistry: Dialect -> strategy lookup, substitutable in tests
    - Strategies: MySQL, PostgreSQL, SQL Server and Oracle renderers
    - Mapping: Type parsing, alias canonicalization, dialect type rules
    - Validation / normalization: Helpers for callers working from editor rows

Usage:
    from ddlforge.services.ddl_synthesis import build_ddl, NormalizedField

    sql = build_ddl(
        "mysql", "users", "",
        [NormalizedField(name="id", type="int", nullable=False, default_kind="auto_increment")],
    )
"""

from .exceptions import DDLForgeError, UnsupportedDialect
from .models import (
    DefaultKind,
    DialectId,
    IndexDefinition,
    IndexDirection,
    IndexField,
    NormalizedField,
    OnUpdate,
    ParsedType,
)
from .normalization import normalize_fields, sanitize_indexes
from .registry import (
    DDLStrategyRegistry,
    create_default_registry,
    default_registry,
    is_supported,
    supported_dialects,
)
from .synthesis import build_dcl, build_ddl
from .validation import collect_field_warnings, find_duplicate_field_names, is_reserved_keyword

__all__ = [
    'build_ddl',
    'build_dcl',
    'DDLStrategyRegistry',
    'create_default_registry',
    'default_registry',
    'supported_dialects',
    'is_supported',
    'DDLForgeError',
    'UnsupportedDialect',
    'DialectId',
    'DefaultKind',
    'OnUpdate',
    'IndexDirection',
    'ParsedType',
    'NormalizedField',
    'IndexField',
    'IndexDefinition',
    'normalize_fields',
    'sanitize_indexes',
    'collect_field_warnings',
    'find_duplicate_field_names',
    'is_reserved_keyword',
]
