"""TypeScript interface generation from JSON Schema and GraphQL SDL."""

from component_kit.typegen.emitter import generate_typescript_types
from component_kit.typegen.graphql import generate_from_graphql
from component_kit.typegen.json_schema import generate_from_json, map_json_type
from component_kit.typegen.models import FieldSchema, TypeGenerationError, TypeSchema

__all__ = [
    "FieldSchema",
    "TypeGenerationError",
    "TypeSchema",
    "generate_from_graphql",
    "generate_from_json",
    "generate_typescript_types",
    "map_json_type",
]
