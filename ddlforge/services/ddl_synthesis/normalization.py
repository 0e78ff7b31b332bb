"""
Turns loosely typed editor rows into the value types the strategies consume.

Rows use the grid's column names (``fieldName``, ``fieldType`` ...) and its
labels for booleans and default kinds; API payloads that already use
``name``/``type`` keys go through ``NormalizedField.from_dict`` instead.
"""

from typing import Any, Dict, Iterable, List

from .models import (
    DefaultKind,
    IndexDefinition,
    IndexDirection,
    IndexField,
    NormalizedField,
    OnUpdate,
    normalize_boolean,
)

DEFAULT_KIND_LABELS = {
    "自增": DefaultKind.AUTO_INCREMENT,
    "常量": DefaultKind.CONSTANT,
    "当前时间": DefaultKind.CURRENT_TIMESTAMP,
    "uuid": DefaultKind.UUID,
    "auto_increment": DefaultKind.AUTO_INCREMENT,
    "constant": DefaultKind.CONSTANT,
    "current_timestamp": DefaultKind.CURRENT_TIMESTAMP,
}

ON_UPDATE_LABELS = {
    "当前时间": OnUpdate.CURRENT_TIMESTAMP,
    "current_timestamp": OnUpdate.CURRENT_TIMESTAMP,
}


def to_string_safe(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_default_kind(value: Any) -> DefaultKind:
    return DEFAULT_KIND_LABELS.get(to_string_safe(value).strip(), DefaultKind.NONE)


def normalize_on_update(value: Any) -> OnUpdate:
    return ON_UPDATE_LABELS.get(to_string_safe(value).strip(), OnUpdate.NONE)


def normalize_fields(rows: Iterable[Dict[str, Any]]) -> List[NormalizedField]:
    """Trim every cell and drop rows without a name or a type."""
    fields = []
    for row in rows:
        field = NormalizedField(
            name=to_string_safe(row.get("fieldName")).strip(),
            type=to_string_safe(row.get("fieldType")).strip(),
            comment=to_string_safe(row.get("fieldComment")).strip(),
            nullable=normalize_boolean(row.get("nullable")),
            default_kind=normalize_default_kind(row.get("defaultKind")),
            default_value=to_string_safe(row.get("defaultValue")).strip(),
            on_update=normalize_on_update(row.get("onUpdate")),
        )
        if field.name and field.type:
            fields.append(field)
    return fields


def sanitize_indexes(indexes: Iterable[IndexDefinition]) -> List[IndexDefinition]:
    """Trim names, force directions to ASC/DESC and drop unnamed or empty indexes."""
    sanitized = []
    for index in indexes:
        fields = tuple(
            IndexField(
                name=to_string_safe(f.name).strip(),
                direction=IndexDirection.DESC if f.direction == IndexDirection.DESC else IndexDirection.ASC,
            )
            for f in index.fields
        )
        name = to_string_safe(index.name).strip()
        if name and fields:
            sanitized.append(IndexDefinition(
                id=index.id,
                name=name,
                fields=fields,
                unique=bool(index.unique),
                is_primary=bool(index.is_primary),
            ))
    return sanitized
