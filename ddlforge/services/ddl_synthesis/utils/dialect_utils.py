"""
SQLGlot dialect utilities for DDL synthesis.
Handles mapping between ddlforge dialect ids and their corresponding SQLGlot dialects.
"""
from typing import Optional


def get_sqlglot_dialect(dialect: str) -> Optional[str]:
    """
    Get the SQLGlot dialect used to read statements generated for *dialect*.

    Args:
        dialect: ddlforge dialect id (e.g., 'mysql', 'postgresql', 'sqlserver', 'oracle')

    Returns:
        SQLGlot dialect string or None for default behavior
    """
    dialect_map = {
        'mysql': 'mysql',
        'postgresql': 'postgres',
        'postgres': 'postgres',
        'sqlserver': 'tsql',
        'oracle': 'oracle',
    }

    return dialect_map.get(str(dialect).lower().strip())


def normalize_dialect(dialect) -> str:
    """Return the registry key for *dialect* (enum member or free text)."""
    value = getattr(dialect, 'value', dialect)
    return str(value).lower().strip()
