import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError, TokenError
import logging

logger = logging.getLogger(__name__)

def safe_parse(sql: str, dialect: str) -> tuple[list[exp.Expression] | None, str | None]:
    """
    Safely parses one or more SQL statements into ASTs.

    Args:
        sql: The SQL text to parse.
        dialect: The sqlglot dialect to use for parsing.

    Returns:
        A tuple containing (asts, error_message).
        If successful, asts is the list of parsed expressions and error_message is None.
        If it fails, asts is None and error_message is a formatted error string.
    """
    try:
        asts = [ast for ast in sqlglot.parse(sql, read=dialect) if ast is not None]
        return asts, None
    except (ParseError, TokenError) as e:
        logger.debug(f"Failed to parse statement: {e}")
        error_message = f"-- SYNTAX ERROR: Failed to parse statement due to: {e}"
        return None, error_message
