"""
Strategy registry - maps a dialect to the strategy that renders its DDL.

A registry is an ordinary value: tests build their own with
``create_default_registry()`` and ``register`` substitutes, while the HTTP
layer and ``build_ddl`` fall back to ``default_registry``.
"""

import threading
from typing import Dict, List, Optional

from ddlforge.config import config
from ddlforge.utils.logger import setup_logger
from .exceptions import UnsupportedDialect
from .models import DialectId
from .strategies import (
    DDLStrategy,
    MySqlStrategy,
    OracleStrategy,
    PostgresStrategy,
    SqlServerStrategy,
)
from .utils.dialect_utils import normalize_dialect

logger = setup_logger('strategy_registry')


class DDLStrategyRegistry:
    """Dialect -> strategy lookup with a single writer lock."""

    def __init__(self, strategies: Optional[Dict[DialectId, DDLStrategy]] = None):
        self._lock = threading.Lock()
        self._strategies: Dict[str, DDLStrategy] = {}
        for dialect, strategy in (strategies or {}).items():
            self.register(dialect, strategy)

    def register(self, dialect, strategy: DDLStrategy) -> None:
        """Register *strategy* for *dialect*, replacing any existing entry."""
        key = normalize_dialect(dialect)
        with self._lock:
            previous = self._strategies.get(key)
            self._strategies[key] = strategy
        if previous is not None:
            logger.info(f"Replaced {type(previous).__name__} with {type(strategy).__name__} for '{key}'.")

    def resolve(self, dialect) -> DDLStrategy:
        key = normalize_dialect(dialect)
        strategy = self._strategies.get(key)
        if strategy is None:
            logger.error(f"No DDL strategy registered for '{key}'.")
            raise UnsupportedDialect(key)
        return strategy

    def supported_dialects(self) -> List[str]:
        return sorted(self._strategies.keys())

    def is_supported(self, dialect) -> bool:
        return normalize_dialect(dialect) in self._strategies


def create_default_registry(
    render_identity: Optional[bool] = None,
    oracle_public_synonyms: Optional[bool] = None,
) -> DDLStrategyRegistry:
    """
    Registry pre-populated with the four built-in strategies.

    Flags left as None are read from the ``synthesis`` section of settings.yaml.
    """
    synthesis_cfg = config.get('synthesis', {}) or {}
    if render_identity is None:
        render_identity = bool(synthesis_cfg.get('render_identity', False))
    if oracle_public_synonyms is None:
        oracle_public_synonyms = bool(synthesis_cfg.get('oracle_public_synonyms', False))

    return DDLStrategyRegistry({
        DialectId.MYSQL: MySqlStrategy(),
        DialectId.POSTGRESQL: PostgresStrategy(render_identity=render_identity),
        DialectId.SQLSERVER: SqlServerStrategy(),
        DialectId.ORACLE: OracleStrategy(render_identity=render_identity, include_synonyms=oracle_public_synonyms),
    })


default_registry = create_default_registry()


def supported_dialects() -> List[str]:
    return default_registry.supported_dialects()


def is_supported(dialect) -> bool:
    return default_registry.is_supported(dialect)
