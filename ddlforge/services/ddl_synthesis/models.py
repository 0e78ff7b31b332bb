"""
Value types shared by the DDL synthesis layers.

Everything here is an immutable dataclass or a ``str`` enum so instances can be
passed between threads and compared against plain strings coming from JSON
payloads (``DefaultKind.CONSTANT == "constant"``).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class DialectId(str, Enum):
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLSERVER = "sqlserver"
    ORACLE = "oracle"


class DefaultKind(str, Enum):
    NONE = "none"
    AUTO_INCREMENT = "auto_increment"
    CONSTANT = "constant"
    CURRENT_TIMESTAMP = "current_timestamp"
    UUID = "uuid"


class OnUpdate(str, Enum):
    NONE = "none"
    CURRENT_TIMESTAMP = "current_timestamp"


class IndexDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class ParsedType:
    """A user-entered type string split into base type, arguments and flags."""
    base_type: str
    args: Tuple[str, ...] = ()
    unsigned: bool = False
    raw: str = ""


@dataclass(frozen=True)
class NormalizedField:
    """Column definition as consumed by the strategies."""
    name: str
    type: str
    comment: str = ""
    nullable: bool = True
    default_kind: DefaultKind = DefaultKind.NONE
    default_value: str = ""
    on_update: OnUpdate = OnUpdate.NONE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NormalizedField":
        """Build a field from an API payload; unknown kinds collapse to ``none``."""
        return cls(
            name=str(data.get("name") or ""),
            type=str(data.get("type") or ""),
            comment=str(data.get("comment") or ""),
            nullable=_as_bool(data.get("nullable"), default=True),
            default_kind=_coerce(DefaultKind, data.get("default_kind"), DefaultKind.NONE),
            default_value=str(data.get("default_value") or ""),
            on_update=_coerce(OnUpdate, data.get("on_update"), OnUpdate.NONE),
        )


@dataclass(frozen=True)
class IndexField:
    name: str
    direction: IndexDirection = IndexDirection.ASC


@dataclass(frozen=True)
class IndexDefinition:
    id: str
    name: str
    fields: Tuple[IndexField, ...] = field(default_factory=tuple)
    unique: bool = False
    is_primary: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexDefinition":
        fields = tuple(
            IndexField(
                name=str(f.get("name") or ""),
                direction=_coerce(IndexDirection, str(f.get("direction") or "ASC").upper(), IndexDirection.ASC),
            )
            for f in data.get("fields") or []
        )
        return cls(
            id=str(data.get("id") or data.get("name") or ""),
            name=str(data.get("name") or ""),
            fields=fields,
            unique=_as_bool(data.get("unique"), default=False),
            is_primary=_as_bool(data.get("is_primary", data.get("isPrimary")), default=False),
        )


YES_VALUES = frozenset({"y", "yes", "true", "1", "是", "√"})


def normalize_boolean(value: Any) -> bool:
    """Yes-like labels (``yes``, ``true``, ``1``, ``是`` ...) are true; everything else is false."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in YES_VALUES


def _as_bool(value: Any, default: bool) -> bool:
    return default if value is None else normalize_boolean(value)


def _coerce(enum_cls, value, fallback):
    try:
        return enum_cls(value)
    except ValueError:
        return fallback
