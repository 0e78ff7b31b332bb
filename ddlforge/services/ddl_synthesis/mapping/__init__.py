"""
Type handling for DDL synthesis: parsing raw type strings, alias
canonicalization, per-dialect rendering, capability checks and DEFAULT
clause formatting.
"""

from .type_parser import parse_field_type
from .type_aliases import canonicalize_base_type, get_canonical_base_type, get_type_aliases
from .type_mapper import (
    MappingRule,
    TypeMapper,
    format_type,
    get_field_type_for_database,
    load_mapping_rules,
    map_type,
)
from .capabilities import (
    DialectCapabilities,
    default_kind_options,
    get_capabilities,
    on_update_options,
    supports_auto_increment,
    supports_default_current_timestamp,
    supports_on_update_current_timestamp,
    supports_uuid_default,
)
from .default_values import (
    escape_single_quotes,
    format_constant_default,
    is_likely_function_or_keyword,
    should_quote_default,
)

__all__ = [
    "parse_field_type",
    "canonicalize_base_type",
    "get_canonical_base_type",
    "get_type_aliases",
    "MappingRule",
    "TypeMapper",
    "format_type",
    "get_field_type_for_database",
    "load_mapping_rules",
    "map_type",
    "DialectCapabilities",
    "default_kind_options",
    "get_capabilities",
    "on_update_options",
    "supports_auto_increment",
    "supports_default_current_timestamp",
    "supports_on_update_current_timestamp",
    "supports_uuid_default",
    "escape_single_quotes",
    "format_constant_default",
    "is_likely_function_or_keyword",
    "should_quote_default",
]
