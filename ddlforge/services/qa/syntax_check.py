"""
Syntax check of generated DDL with sqlglot.

The synthesizer never needs a database; this parses its output in the
target dialect so obviously broken statements are caught before anyone
runs them.
"""

from typing import Any, Dict, List

from ddlforge.utils.logger import setup_logger
from ..ddl_synthesis.utils.dialect_utils import get_sqlglot_dialect, normalize_dialect
from ..ddl_synthesis.utils.parser_utils import safe_parse

logger = setup_logger("qa.syntax_check")

# sp_addextendedproperty calls are opaque to sqlglot's T-SQL grammar
_SKIPPED_PREFIXES = ("EXEC ",)


def split_statements(sql: str) -> List[str]:
    """Split generated SQL on statement-terminating semicolons at line ends."""
    statements, current = [], []
    for line in sql.splitlines():
        if not line.strip() or line.lstrip().startswith("--"):
            continue
        current.append(line)
        if line.rstrip().endswith(";"):
            statements.append("\n".join(current))
            current = []
    if current:
        statements.append("\n".join(current))
    return statements


def verify_sql(dialect, sql: str) -> Dict[str, Any]:
    """
    Parse every statement of *sql* in *dialect*.

    Returns:
        ``{"dialect", "checked", "skipped", "issues": [{"statement", "error"}]}``
    """
    dialect_key = normalize_dialect(dialect)
    sqlglot_dialect = get_sqlglot_dialect(dialect_key)
    result: Dict[str, Any] = {"dialect": dialect_key, "checked": 0, "skipped": 0, "issues": []}

    for statement in split_statements(sql or ""):
        if statement.lstrip().upper().startswith(_SKIPPED_PREFIXES):
            result["skipped"] += 1
            continue
        result["checked"] += 1
        _, error = safe_parse(statement, sqlglot_dialect)
        if error:
            result["issues"].append({"statement": statement, "error": error})

    if result["issues"]:
        logger.warning(f"{len(result['issues'])} of {result['checked']} {dialect_key} statements failed to parse.")
    else:
        logger.debug(f"All {result['checked']} {dialect_key} statements parsed.")
    return result
