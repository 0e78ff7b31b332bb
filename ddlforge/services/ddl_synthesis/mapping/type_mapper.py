"""
Dialect type rendering driven by ``config/dialects/<dialect>/type_mappings.json``.

Each entry under ``rules`` is keyed by canonical type and is either
declarative::

    "decimal": {"target": "numeric", "default_args": ["18", "2"]}
    "int":     {"target": "int", "ignore_args": true, "suffix_policy": "unsigned"}
    "serial":  {"target": "bigint", "ignore_args": true,
                "suffix_policy": "literal", "suffix": "IDENTITY(1,1)"}

or names a transform from ``TYPE_TRANSFORMS``; the remaining keys of the entry
become the transform's parameters::

    "serial": {"transform": "literal_type",
               "rendered": "NUMBER GENERATED ALWAYS AS IDENTITY"}

When a transform is present it alone decides the rendered type.
"""

from dataclasses import dataclass
from functools import lru_cache, partial
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ddlforge.utils.logger import setup_logger
from ..models import DialectId, ParsedType
from ..utils.config_loader import load_json_from_dialect_config
from ..utils.dialect_utils import normalize_dialect
from .type_aliases import canonicalize_base_type
from .type_parser import parse_field_type

logger = setup_logger('type_mapper')

SUFFIX_NONE = "none"
SUFFIX_UNSIGNED = "unsigned"
SUFFIX_LITERAL = "literal"


@dataclass(frozen=True)
class MappingRule:
    target: str = ""
    default_args: Tuple[str, ...] = ()
    suffix_policy: str = SUFFIX_NONE
    suffix: str = ""
    ignore_args: bool = False
    transform: Optional[Callable[[ParsedType], str]] = None


def format_type(base: str, args: Sequence[str] = (), suffix: str = "") -> str:
    """``TARGET(a, b) SUFFIX`` with ``max`` arguments rendered as ``MAX``."""
    formatted_args = ", ".join(_uppercase_arg(a) for a in args)
    type_core = f"{base.upper()}({formatted_args})" if formatted_args else base.upper()
    return f"{type_core} {suffix}" if suffix else type_core


def _uppercase_arg(value: str) -> str:
    return "MAX" if value.lower() == "max" else value


# ---------------------------------------------------------------------------
# Transforms (irregular rules)
# ---------------------------------------------------------------------------

def _literal_type(parsed: ParsedType, *, rendered: str, **_: Any) -> str:
    """Fixed rendering; arguments and modifiers on the input are ignored."""
    return rendered


TYPE_TRANSFORMS: Dict[str, Callable[..., str]] = {
    "literal_type": _literal_type,
}


def _build_rule(canonical: str, entry: Dict[str, Any]) -> MappingRule:
    transform_name = entry.get("transform")
    if transform_name:
        func = TYPE_TRANSFORMS.get(transform_name)
        if func is None:
            logger.warning(f"Unknown transform '{transform_name}' for '{canonical}', using declarative rule.")
        else:
            params = {k: v for k, v in entry.items() if k != "transform"}
            return MappingRule(target=entry.get("target", canonical), transform=partial(func, **params))

    return MappingRule(
        target=entry.get("target", canonical),
        default_args=tuple(str(a) for a in entry.get("default_args", [])),
        suffix_policy=entry.get("suffix_policy", SUFFIX_NONE),
        suffix=entry.get("suffix", ""),
        ignore_args=bool(entry.get("ignore_args", False)),
    )


@lru_cache(maxsize=None)
def load_mapping_rules(dialect: str) -> Dict[str, MappingRule]:
    raw_cfg = load_json_from_dialect_config(logger, dialect, 'type_mappings.json')
    rules = raw_cfg.get('rules', {}) if isinstance(raw_cfg, dict) else {}
    if not rules:
        logger.warning(f"No type mapping rules for dialect '{dialect}'; all types will pass through.")
    return {canonical: _build_rule(canonical, entry) for canonical, entry in rules.items()}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TypeMapper:
    """Renders parsed column types for one dialect."""

    def __init__(self, dialect: str):
        self.dialect = normalize_dialect(dialect)
        self.rules = load_mapping_rules(self.dialect)

    @classmethod
    def create(cls, dialect) -> "TypeMapper":
        return cls(dialect)

    def map_type(self, parsed: ParsedType) -> str:
        if not parsed.base_type:
            return parsed.raw

        canonical = canonicalize_base_type(parsed.base_type)
        rule = self.rules.get(canonical)

        if rule is None:
            logger.debug(f"No {self.dialect} mapping for '{canonical}', passing through.")
            return format_type(parsed.base_type, parsed.args, self._unsigned_suffix(parsed))

        if rule.transform is not None:
            return rule.transform(parsed)

        if rule.ignore_args or not parsed.args:
            args = rule.default_args
        else:
            args = parsed.args

        if rule.suffix_policy == SUFFIX_UNSIGNED:
            suffix = self._unsigned_suffix(parsed)
        elif rule.suffix_policy == SUFFIX_LITERAL:
            suffix = rule.suffix
        else:
            suffix = ""

        return format_type(rule.target, args, suffix)

    def get_supported_types(self) -> List[str]:
        return list(self.rules.keys())

    def has_mapping(self, base_type: str) -> bool:
        return canonicalize_base_type(base_type) in self.rules

    def _unsigned_suffix(self, parsed: ParsedType) -> str:
        return "UNSIGNED" if parsed.unsigned and self.dialect == DialectId.MYSQL.value else ""


def map_type(parsed: ParsedType, dialect) -> str:
    return TypeMapper.create(dialect).map_type(parsed)


def get_field_type_for_database(dialect, raw_type: str) -> str:
    """Map a raw type string straight to the dialect's rendered type."""
    return map_type(parse_field_type(raw_type), dialect)
