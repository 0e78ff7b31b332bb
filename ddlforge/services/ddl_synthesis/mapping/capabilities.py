"""
Per-dialect feature predicates, read from ``config/dialects/<dialect>/capabilities.json``.

A dialect with no capability file supports nothing, so column suffixes such as
AUTO_INCREMENT or DEFAULT CURRENT_TIMESTAMP are simply left out.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, List

from ddlforge.utils.logger import setup_logger
from ..models import DefaultKind, OnUpdate
from ..utils.config_loader import load_json_from_dialect_config
from ..utils.dialect_utils import normalize_dialect

logger = setup_logger('capabilities')


@dataclass(frozen=True)
class DialectCapabilities:
    auto_increment_types: FrozenSet[str] = frozenset()
    auto_increment_clause: str = ""
    identity_clause: str = ""
    current_timestamp_types: FrozenSet[str] = frozenset()
    current_timestamp_expression: str = ""
    on_update_types: FrozenSet[str] = frozenset()
    on_update_expression: str = ""
    uuid_default_types: FrozenSet[str] = frozenset()
    uuid_default_expression: str = ""


@lru_cache(maxsize=None)
def get_capabilities(dialect) -> DialectCapabilities:
    key = normalize_dialect(dialect)
    cfg = load_json_from_dialect_config(logger, key, 'capabilities.json')
    if not cfg:
        logger.warning(f"No capabilities configured for dialect '{key}'.")

    def section(name):
        value = cfg.get(name, {}) if isinstance(cfg, dict) else {}
        return value if isinstance(value, dict) else {}

    auto_inc = section('auto_increment')
    current_ts = section('default_current_timestamp')
    on_update = section('on_update_current_timestamp')
    uuid_default = section('uuid_default')

    return DialectCapabilities(
        auto_increment_types=frozenset(auto_inc.get('types', [])),
        auto_increment_clause=auto_inc.get('clause', ''),
        identity_clause=auto_inc.get('identity_clause', ''),
        current_timestamp_types=frozenset(current_ts.get('types', [])),
        current_timestamp_expression=current_ts.get('expression', ''),
        on_update_types=frozenset(on_update.get('types', [])),
        on_update_expression=on_update.get('expression', ''),
        uuid_default_types=frozenset(uuid_default.get('types', [])),
        uuid_default_expression=uuid_default.get('expression', ''),
    )


def supports_auto_increment(dialect, canonical: str) -> bool:
    return canonical in get_capabilities(dialect).auto_increment_types


def supports_default_current_timestamp(dialect, canonical: str) -> bool:
    return canonical in get_capabilities(dialect).current_timestamp_types


def supports_on_update_current_timestamp(dialect, canonical: str) -> bool:
    return canonical in get_capabilities(dialect).on_update_types


def supports_uuid_default(dialect, canonical: str) -> bool:
    return canonical in get_capabilities(dialect).uuid_default_types


def default_kind_options(dialect, canonical: str) -> List[str]:
    """Default kinds that make sense for a column of *canonical* type, in menu order."""
    options = [DefaultKind.NONE.value, DefaultKind.CONSTANT.value]
    if supports_auto_increment(dialect, canonical):
        options.insert(1, DefaultKind.AUTO_INCREMENT.value)
    if supports_uuid_default(dialect, canonical):
        options.append(DefaultKind.UUID.value)
    if supports_default_current_timestamp(dialect, canonical):
        options.append(DefaultKind.CURRENT_TIMESTAMP.value)
    return options


def on_update_options(dialect, canonical: str) -> List[str]:
    options = [OnUpdate.NONE.value]
    if supports_on_update_current_timestamp(dialect, canonical):
        options.append(OnUpdate.CURRENT_TIMESTAMP.value)
    return options
