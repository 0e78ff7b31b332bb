"""
Pre-synthesis checks the caller runs to warn users.

Field names are emitted unquoted, so a reserved word or a repeated name
produces DDL the target database rejects. Nothing here blocks generation.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, List, Sequence

from ddlforge.utils.logger import setup_logger
from .models import NormalizedField
from .utils.config_loader import load_json_from_dialect_config
from .utils.dialect_utils import normalize_dialect

logger = setup_logger('field_validation')

RESERVED_KEYWORD = "reserved_keyword"
DUPLICATE_NAME = "duplicate_name"


@lru_cache(maxsize=None)
def get_reserved_keywords(dialect: str) -> FrozenSet[str]:
    cfg = load_json_from_dialect_config(logger, dialect, 'reserved_keywords.json')
    keywords = cfg.get('keywords', []) if isinstance(cfg, dict) else []
    return frozenset(k.lower() for k in keywords)


def is_reserved_keyword(dialect, identifier: str) -> bool:
    lowered = (identifier or "").strip().lower()
    if not lowered:
        return False
    return lowered in get_reserved_keywords(normalize_dialect(dialect))


def find_duplicate_field_names(fields: Sequence[NormalizedField]) -> List[str]:
    """Names that occur more than once (case-insensitive), in first-seen spelling and order."""
    seen: Dict[str, str] = {}
    duplicates: List[str] = []
    for field in fields:
        key = field.name.strip().lower()
        if not key:
            continue
        if key in seen:
            if seen[key] not in duplicates:
                duplicates.append(seen[key])
        else:
            seen[key] = field.name.strip()
    return duplicates


def collect_field_warnings(dialect, fields: Sequence[NormalizedField]) -> List[Dict[str, str]]:
    warnings = []
    dialect_key = normalize_dialect(dialect)

    for field in fields:
        if is_reserved_keyword(dialect_key, field.name):
            warnings.append({
                "field": field.name,
                "code": RESERVED_KEYWORD,
                "message": f"'{field.name}' is a reserved keyword in {dialect_key} and is emitted unquoted.",
            })

    for name in find_duplicate_field_names(fields):
        warnings.append({
            "field": name,
            "code": DUPLICATE_NAME,
            "message": f"Field name '{name}' is used more than once.",
        })

    if warnings:
        logger.info(f"{len(warnings)} field warning(s) for {dialect_key}.")
    return warnings
