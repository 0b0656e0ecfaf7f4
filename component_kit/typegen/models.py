"""Pydantic models for TypeScript type generation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class TypeGenerationError(Exception):
    """Raised when a schema cannot be turned into TypeScript declarations."""


class FieldSchema(BaseModel):
    """A single named, typed field extracted from an input schema."""
    name: str = Field(..., description="Property name as emitted in the interface")
    type: str = Field(..., description="TypeScript type expression, e.g. 'string[]'")
    required: bool = Field(default=False, description="Emitted without '?' when True")
    description: Optional[str] = Field(default=None, description="Rendered as a doc comment")


class TypeSchema(BaseModel):
    """Everything needed to emit one interface and its Props twin."""
    name: str = Field(..., description="Interface name, e.g. 'User'")
    properties: list[FieldSchema] = Field(default_factory=list)
    interfaces: list[str] = Field(
        default_factory=list,
        description="Sibling types imported with `import { X } from './X';`",
    )
