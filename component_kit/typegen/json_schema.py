"""JSON Schema to TypeScript conversion.

Only the top-level ``properties`` map is read; nested object schemas are
emitted as ``object`` or ``Record<string, any>`` rather than expanded.
"""

from __future__ import annotations

from typing import Any

from .emitter import generate_typescript_types
from .models import FieldSchema, TypeGenerationError, TypeSchema


_PRIMITIVE_TYPES: dict[str, str] = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
}


def map_json_type(prop: dict[str, Any]) -> str:
    """Map one JSON Schema property definition to a TypeScript type."""
    kind = prop.get("type")
    # Union types such as ["string", "null"] are not narrowed.
    if not isinstance(kind, str):
        return "any"
    if kind in _PRIMITIVE_TYPES:
        return _PRIMITIVE_TYPES[kind]
    if kind == "array":
        items = prop.get("items") or {}
        item_type = items.get("type") if isinstance(items, dict) else None
        if not isinstance(item_type, str) or not item_type:
            item_type = "any"
        return f"{item_type}[]"
    if kind == "object":
        return "Record<string, any>" if prop.get("additionalProperties") else "object"
    return "any"


def extract_fields(json_schema: dict[str, Any]) -> list[FieldSchema]:
    """Return one :class:`FieldSchema` per entry of ``properties``, in order."""
    required_names = json_schema.get("required")
    required = (
        {name for name in required_names if isinstance(name, str)}
        if isinstance(required_names, list)
        else set()
    )
    properties = json_schema.get("properties")
    if not isinstance(properties, dict):
        return []

    fields: list[FieldSchema] = []
    for name, value in properties.items():
        prop = value if isinstance(value, dict) else {}
        fields.append(
            FieldSchema(
                name=name,
                type=map_json_type(prop),
                required=name in required,
                description=prop.get("description"),
            )
        )

    return fields


def generate_from_json(json_schema: dict[str, Any], type_name: str) -> str:
    """Generate the interface text for a JSON Schema object.

    A schema without ``properties`` yields empty interfaces.

    Raises:
        TypeGenerationError: If *json_schema* is not a JSON object.
    """
    if not isinstance(json_schema, dict):
        raise TypeGenerationError("JSON schema must be an object at the top level")
    return generate_typescript_types(
        TypeSchema(name=type_name, properties=extract_fields(json_schema))
    )
