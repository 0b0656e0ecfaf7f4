"""Shared pytest fixtures for the component-kit test suite.

Provides reusable fixtures for:
- An isolated working directory with no ``CK_*`` environment overrides
- Sample CSS modules (clean and violating)
- Sample JSON and GraphQL schemas
"""

from __future__ import annotations

import json
import os
import textwrap
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_ck_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any ``CK_*`` variables so config defaults are predictable."""
    for key in list(os.environ):
        if key.startswith("CK_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory that is also the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# CSS samples
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_css() -> str:
    """A CSS module that satisfies every rule."""
    return textwrap.dedent("""\
        /* Card styles */
        .card {
          padding: 1rem;
          color: red;
        }

        .card:hover {
          background-color: #f5f5f5;
        }

        .cardTitle {
          font-size: 1.25rem;
        }
    """)


@pytest.fixture
def violating_css() -> str:
    """A CSS module with one violation per rule."""
    return textwrap.dedent("""\
        .Header-Title {
          color: blue;
        }
        #main { color: blue; }
        * { margin: 0; }
        .box { width: 10px; }
    """)


@pytest.fixture
def css_tree(tmp_path: Path, clean_css: str, violating_css: str) -> Path:
    """A components directory with nested CSS modules and unrelated files."""
    root = tmp_path / "components"
    (root / "Card").mkdir(parents=True)
    (root / "Header" / "parts").mkdir(parents=True)
    (root / "Card" / "Card.module.css").write_text(clean_css, encoding="utf-8")
    (root / "Header" / "parts" / "Header.module.css").write_text(violating_css, encoding="utf-8")
    (root / "Header" / "global.css").write_text("#app { width: 10px; }\n", encoding="utf-8")
    (root / "Header" / "Header.tsx").write_text("export {};\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

@pytest.fixture
def item_schema() -> dict:
    return {
        "properties": {
            "id": {"type": "string"},
            "count": {"type": "number"},
        },
        "required": ["id"],
    }


@pytest.fixture
def user_json_schema() -> dict:
    """A JSON schema exercising every type mapping."""
    return {
        "type": "object",
        "properties": {
            "id": {"type": "string", "description": "Unique identifier"},
            "age": {"type": "number"},
            "active": {"type": "boolean"},
            "tags": {"type": "array", "items": {"type": "string"}},
            "history": {"type": "array"},
            "settings": {"type": "object", "additionalProperties": True},
            "address": {"type": "object"},
            "score": {"type": "integer"},
        },
        "required": ["id", "active"],
    }


@pytest.fixture
def graphql_schema() -> str:
    return textwrap.dedent("""\
        # Sample schema
        type Query {
          user(id: ID!): User
        }

        type User implements Node {
          id: ID!
          # display name
          name: String
          tags: [String!]!
          posts(first: Int): [Post]
        }

        type UserProfile {
          bio: String
        }

        type Post {
          title: String!
        }
    """)


@pytest.fixture
def schema_files(tmp_path: Path, item_schema: dict, graphql_schema: str) -> dict[str, Path]:
    """Schema files written to disk for CLI tests."""
    json_path = tmp_path / "item-schema.json"
    json_path.write_text(json.dumps(item_schema), encoding="utf-8")
    graphql_path = tmp_path / "schema.graphql"
    graphql_path.write_text(graphql_schema, encoding="utf-8")
    bad_json = tmp_path / "broken.json"
    bad_json.write_text("{not json", encoding="utf-8")
    return {"json": json_path, "graphql": graphql_path, "bad_json": bad_json}
