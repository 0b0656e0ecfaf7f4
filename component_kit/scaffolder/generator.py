"""Component scaffolding orchestrator.

Takes a component name and ``GenerationOptions`` and writes a ready-to-use
React component directory::

    components/<Name>/
        <Name>.tsx            component source (selected template variant)
        <Name>.module.css     CSS module (only when ``styled``)
        index.ts              barrel file (exports the Props type when ``typed``)
        <Name>.test.tsx       Testing Library smoke test

Existing files are overwritten. There is no rollback: a filesystem error
part-way through leaves the files written so far in place.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field

from component_kit.config import Config
from component_kit.utils import ensure_dir, print_warning

from .templates import (
    DEFAULT_VARIANT,
    INDEX_TEMPLATE,
    TEMPLATE_VARIANTS,
    TEST_TEMPLATE,
    TemplateRenderer,
    TemplateVariant,
    component_context,
    resolve_variant,
)


_RE_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class ScaffoldError(Exception):
    """Raised when a component cannot be generated from the given input."""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class GenerationOptions(BaseModel):
    """Options recognised by :meth:`ComponentGenerator.generate`."""

    type: str = Field(default=DEFAULT_VARIANT, description="Template variant name")
    styled: bool = Field(default=True, description="Write a CSS module alongside the component")
    typed: bool = Field(default=True, description="Export the Props type from index.ts")

    @classmethod
    def from_config(cls, config: Config) -> "GenerationOptions":
        """Options seeded from the configured defaults."""
        return cls(type=config.default_template, styled=config.styled, typed=config.typed)


class GenerationResult(BaseModel):
    """Outcome of a single scaffolding run."""

    component_name: str
    component_dir: Path
    variant: str = Field(..., description="Variant actually rendered after fallback")
    files: list[Path] = Field(default_factory=list, description="Written files, in write order")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Renders the component, style, barrel and test files for one component."""

    def __init__(
        self,
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        component_name: str,
        options: GenerationOptions | None = None,
        base_dir: str | Path | None = None,
    ) -> GenerationResult:
        """Generate the component directory for *component_name*.

        Args:
            component_name: PascalCase component name, used verbatim for
                filenames and the exported symbol.
            options: Variant and output switches. Defaults come from the
                configuration.
            base_dir: Directory the configured ``components_dir`` is resolved
                against. Defaults to the current working directory.

        Returns:
            A :class:`GenerationResult` listing every written file.

        Raises:
            ScaffoldError: If *component_name* is empty or not an identifier.
            OSError: If a directory or file cannot be written.
        """
        _validate_component_name(component_name)
        options = options or GenerationOptions.from_config(self.config)
        variant = self._select_variant(options.type)

        component_dir = self.config.components_path(base_dir) / component_name
        ensure_dir(component_dir)

        context = component_context(component_name, typed=options.typed)
        written: list[Path] = []

        written.append(
            self.renderer.render_to_file(
                variant.source, component_dir / f"{component_name}.tsx", context
            )
        )

        if options.styled:
            written.append(
                self.renderer.render_to_file(
                    variant.styles,
                    component_dir / f"{component_name}{self.config.css_module_suffix}",
                    context,
                )
            )

        written.append(
            self.renderer.render_to_file(INDEX_TEMPLATE, component_dir / "index.ts", context)
        )
        written.append(
            self.renderer.render_to_file(
                TEST_TEMPLATE, component_dir / f"{component_name}.test.tsx", context
            )
        )

        return GenerationResult(
            component_name=component_name,
            component_dir=component_dir,
            variant=variant.name,
            files=written,
        )

    def render_component(self, component_name: str, variant_name: str = DEFAULT_VARIANT) -> str:
        """Return the rendered component source without writing anything."""
        _validate_component_name(component_name)
        variant = resolve_variant(variant_name)
        return self.renderer.render(variant.source, component_context(component_name))

    def render_styles(self, component_name: str, variant_name: str = DEFAULT_VARIANT) -> str:
        """Return the rendered CSS module without writing anything."""
        _validate_component_name(component_name)
        variant = resolve_variant(variant_name)
        return self.renderer.render(variant.styles, component_context(component_name))

    # -- Internals ---------------------------------------------------------

    def _select_variant(self, name: str) -> TemplateVariant:
        if name not in TEMPLATE_VARIANTS:
            print_warning(
                f"Unknown template type '{name}', falling back to '{DEFAULT_VARIANT}'"
            )
        return resolve_variant(name)


def create_component(
    component_name: str,
    options: GenerationOptions | None = None,
    base_dir: str | Path | None = None,
    config: Config | None = None,
) -> GenerationResult:
    """Shortcut for ``ComponentGenerator(config).generate(...)``."""
    return ComponentGenerator(config).generate(component_name, options, base_dir)


def _validate_component_name(component_name: str) -> None:
    if not component_name or not component_name.strip():
        raise ScaffoldError("Component name is required")
    if not _RE_IDENTIFIER.match(component_name):
        raise ScaffoldError(
            f"Invalid component name '{component_name}': "
            "must be a JavaScript identifier, e.g. 'UserCard'"
        )
