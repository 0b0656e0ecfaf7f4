"""TypeScript interface emission.

Every schema is emitted twice: once under its own name and once with a
``Props`` suffix for direct use as component properties. The two interfaces
carry identical field lists; the Props interface does not extend the first.
"""

from __future__ import annotations

from .models import FieldSchema, TypeSchema


def _property_lines(prop: FieldSchema) -> list[str]:
    lines: list[str] = []
    if prop.description:
        lines.append(f"  /** {prop.description} */")
    optional = "" if prop.required else "?"
    lines.append(f"  {prop.name}{optional}: {prop.type};")
    return lines


def generate_typescript_types(schema: TypeSchema) -> str:
    """Render *schema* as an interface followed by its ``Props`` duplicate."""
    imports = ""
    if schema.interfaces:
        imports = "\n".join(
            f"import {{ {name} }} from './{name}';" for name in schema.interfaces
        ) + "\n\n"

    body = "\n".join(line for prop in schema.properties for line in _property_lines(prop))

    interface_definition = f"export interface {schema.name} {{\n{body}\n}}"
    props_interface = f"export interface {schema.name}Props {{\n{body}\n}}"

    return f"{imports}{interface_definition}\n\n{props_interface}\n"
