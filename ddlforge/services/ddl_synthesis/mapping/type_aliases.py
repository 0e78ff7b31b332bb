from functools import lru_cache
from typing import Dict

from ddlforge.utils.logger import setup_logger
from ..utils.config_loader import load_json_from_dialect_config
from .type_parser import parse_field_type

logger = setup_logger('type_aliases')


@lru_cache(maxsize=1)
def get_type_aliases() -> Dict[str, str]:
    """Spelling → canonical type, read once from config/type_aliases.json."""
    aliases = load_json_from_dialect_config(logger, None, 'type_aliases.json')
    if not aliases:
        logger.warning("type_aliases.json is empty or missing; base types will pass through unchanged.")
    return dict(aliases)


def canonicalize_base_type(base_type: str) -> str:
    # Exact lookup: callers hand over ParsedType.base_type, which is already lowercase.
    return get_type_aliases().get(base_type, base_type)


def get_canonical_base_type(raw_type: str) -> str:
    return canonicalize_base_type(parse_field_type(raw_type).base_type)
