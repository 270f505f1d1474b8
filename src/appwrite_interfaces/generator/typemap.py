"""Attribute-to-TypeScript type mapping and identifier casing."""

from __future__ import annotations

import re

from appwrite_interfaces.schema.models import Attribute

FALLBACK_TYPE = "any"
ARRAY_SUFFIX = "[]"
TO_MANY_SUFFIX = "ToMany"

TYPE_MAP: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "float": "number",
    "boolean": "boolean",
    "email": "string",
    "url": "string",
    "ip": "string",
    "enum": "string",
    "datetime": "string",
}

_SEPARATOR_RE = re.compile(r"[_-](\w)", re.ASCII)
_FIRST_CHAR_RE = re.compile(r"^\w", re.ASCII)


def to_pascal_case(value: str) -> str:
    """``user_profile`` / ``user-profile`` -> ``UserProfile``. Empty stays empty."""
    value = _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), value)
    return _FIRST_CHAR_RE.sub(lambda m: m.group(0).upper(), value)


def resolve_type(attr: Attribute, fallback: str = FALLBACK_TYPE) -> str:
    if attr.is_relationship:
        if not attr.related_collection:
            return fallback
        return to_pascal_case(attr.related_collection)
    return TYPE_MAP.get(attr.type, fallback)


def array_suffix(attr: Attribute) -> str:
    # *ToMany relationships are arrays whatever the array flag says
    if attr.relation_type and attr.relation_type.endswith(TO_MANY_SUFFIX):
        return ARRAY_SUFFIX
    return ARRAY_SUFFIX if attr.array else ""
