"""Rendering of constant DEFAULT clauses and SQL string literal escaping."""

FUNCTION_KEYWORDS = (
    "current_timestamp",
    "now",
    "sysdate",
    "getdate",
    "systimestamp",
    "uuid",
    "gen_random_uuid",
    "newid",
    "sys_guid",
)

CHARACTER_TYPES = frozenset({
    "char", "nchar", "varchar", "nvarchar", "text", "mediumtext", "longtext",
    "uuid", "xml", "json", "clob", "varchar2", "nvarchar2",
})

TEMPORAL_TYPES = frozenset({
    "date", "time", "timetz", "timestamp", "timestamptz", "datetime", "datetime2",
})


def escape_single_quotes(value: str) -> str:
    return value.replace("'", "''")


def is_likely_function_or_keyword(value: str) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return False
    return any(keyword in lowered for keyword in FUNCTION_KEYWORDS)


def should_quote_default(canonical: str) -> bool:
    return canonical in CHARACTER_TYPES or canonical in TEMPORAL_TYPES


def format_constant_default(canonical: str, raw_value: str) -> str:
    """` DEFAULT <value>` for a user-entered constant, or "" when there is none.

    Escaping happens here, at render time; *raw_value* must be the unescaped text.
    """
    value = (raw_value or "").strip()
    if not value:
        return ""
    if is_likely_function_or_keyword(value):
        return f" DEFAULT {value}"
    if should_quote_default(canonical):
        return f" DEFAULT '{escape_single_quotes(value)}'"
    return f" DEFAULT {value}"
