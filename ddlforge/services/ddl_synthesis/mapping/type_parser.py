"""
Parsing of loosely formatted, human-entered column type strings.

Accepted shape::

    <base tokens>+ [ '(' <arg>, ... ')' ] <modifier tokens>*

e.g. ``decimal(10,2) unsigned``, ``time with time zone``, ``varchar( MAX )``.
Anything that does not fit degrades to whatever prefix does match instead of
raising, so the caller can keep generating while the user is still typing.
"""

import re

from ..models import ParsedType

_TYPE_PATTERN = re.compile(r"^([a-z0-9_]+(?:\s+[a-z0-9_]+)*)\s*(\(([^)]*)\))?(.*)$")

UNSIGNED = "unsigned"


def parse_field_type(raw_type: str) -> ParsedType:
    raw = (raw_type or "").strip()
    if not raw:
        return ParsedType(base_type="", args=(), unsigned=False, raw="")

    match = _TYPE_PATTERN.match(raw.lower())
    if not match:
        return ParsedType(base_type="", args=(), unsigned=False, raw=raw)

    base_tokens = match.group(1).split()
    args = tuple(
        part.strip() for part in (match.group(3) or "").split(",") if part.strip()
    )
    modifiers = set((match.group(4) or "").split())

    unsigned = UNSIGNED in modifiers
    # Only a trailing "unsigned" is a modifier; "unsigned int" keeps it in the
    # base type.
    if base_tokens[-1] == UNSIGNED:
        unsigned = True
        base_tokens.pop()

    return ParsedType(
        base_type=" ".join(base_tokens),
        args=args,
        unsigned=unsigned,
        raw=raw,
    )
