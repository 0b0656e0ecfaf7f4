"""GraphQL SDL to TypeScript conversion.

A deliberately small textual parser: it drops description strings and ``#``
comments, locates the ``type <Name>`` block, and reads ``name: Type`` field
definitions until the first closing brace. Fields are read one after another
from the start of each line, so text inside directive arguments never yields a
field. GraphQL scalar and object type names are emitted unchanged
(``ID`` stays ``ID``); only the non-null marker ``!`` is removed and turned
into a required field.
"""

from __future__ import annotations

import re

from .emitter import generate_typescript_types
from .models import FieldSchema, TypeGenerationError, TypeSchema


_RE_FIELD = re.compile(
    r"""
    \s*
    (?P<name>\w+)            # field name
    \s*(?P<bang>!?)          # optional '!' directly after the name
    \s*(?:\([^)]*\))?        # optional argument list, may span lines
    \s*:\s*
    (?P<type>[^\s,@]+)       # type expression, e.g. [String!]!
    (?:\s*@\w+(?:\s*\([^)]*\))?)*   # trailing directives
    [ \t]*,?
    """,
    re.VERBOSE,
)

# Block strings first so a triple quote is not read as an empty string.
_RE_STRING = re.compile(r'"""[\s\S]*?"""|"(?:[^"\\\n]|\\.)*"')


def _type_header(type_name: str) -> re.Pattern[str]:
    return re.compile(rf"\btype\s+{re.escape(type_name)}\b[^{{}}]*\{{")


def _strip_comments(schema_text: str) -> str:
    return "\n".join(line.split("#", 1)[0] for line in schema_text.split("\n"))


def _strip_strings(schema_text: str) -> str:
    return _RE_STRING.sub("", schema_text)


def extract_type_body(schema_text: str, type_name: str) -> str:
    """Return the text between ``type <Name> {`` and its closing brace.

    Raises:
        TypeGenerationError: If the schema has no ``type <Name>`` block.
    """
    text = _strip_comments(_strip_strings(schema_text))
    header = _type_header(type_name).search(text)
    if header is None:
        raise TypeGenerationError(f"Type {type_name} not found in GraphQL schema")

    end = text.find("}", header.end())
    if end == -1:
        end = len(text)
    return text[header.end():end]


def extract_fields(schema_text: str, type_name: str) -> list[FieldSchema]:
    """Parse the fields of ``type <Name>`` in declaration order."""
    body = extract_type_body(schema_text, type_name)
    fields: list[FieldSchema] = []

    pos = 0
    while pos < len(body):
        match = _RE_FIELD.match(body, pos)
        if match is None or match.end() == pos:
            # Not a field definition; resume on the next line.
            newline = body.find("\n", pos)
            if newline == -1:
                break
            pos = newline + 1
            continue

        raw_type = match.group("type")
        fields.append(
            FieldSchema(
                name=match.group("name"),
                type=raw_type.replace("!", ""),
                required=bool(match.group("bang")) or raw_type.endswith("!"),
            )
        )
        pos = match.end()

    return fields


def generate_from_graphql(schema_text: str, type_name: str) -> str:
    """Generate the interface text for ``type <Name>`` in *schema_text*."""
    return generate_typescript_types(
        TypeSchema(name=type_name, properties=extract_fields(schema_text, type_name))
    )
