"""Jinja2 template rendering for component scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``component_kit/scaffolder/templates/`` directory, and the immutable registry
of template variants (``simple``, ``interactive``, ``data``, ``form``), each
pairing a component-source template with a CSS module template.

Templates use two placeholders:

- ``{{ComponentName}}`` -- the component name exactly as given (PascalCase)
- ``{{componentName}}`` -- the component name lower-cased
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from pydantic import BaseModel, ConfigDict, Field

from component_kit.utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

DEFAULT_VARIANT = "simple"

INDEX_TEMPLATE = "index.ts.j2"
TEST_TEMPLATE = "component.test.tsx.j2"


# ---------------------------------------------------------------------------
# Template variants
# ---------------------------------------------------------------------------


class TemplateVariant(BaseModel):
    """A named pair of component-source and CSS module templates."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Variant name, e.g. 'interactive'")
    source: str = Field(..., description="Component template path relative to the template root")
    styles: str = Field(..., description="CSS module template path relative to the template root")
    description: str = Field(default="", description="What the generated component does")


TEMPLATE_VARIANTS: dict[str, TemplateVariant] = {
    variant.name: variant
    for variant in (
        TemplateVariant(
            name="simple",
            source="components/simple.tsx.j2",
            styles="styles/simple.module.css.j2",
            description="Presentational wrapper with primary/secondary variants",
        ),
        TemplateVariant(
            name="interactive",
            source="components/interactive.tsx.j2",
            styles="styles/interactive.module.css.j2",
            description="Toggle button with local state and an onToggle callback",
        ),
        TemplateVariant(
            name="data",
            source="components/data.tsx.j2",
            styles="styles/data.module.css.j2",
            description="Fetches a list from a URL with loading and error states",
        ),
        TemplateVariant(
            name="form",
            source="components/form.tsx.j2",
            styles="styles/form.module.css.j2",
            description="Email/password form with client-side validation",
        ),
    )
}


def available_variants() -> list[str]:
    """Return the registered variant names in registration order."""
    return list(TEMPLATE_VARIANTS)


def resolve_variant(name: str | None) -> TemplateVariant:
    """Return the variant registered under *name*, or the ``simple`` variant."""
    return TEMPLATE_VARIANTS.get(name or DEFAULT_VARIANT, TEMPLATE_VARIANTS[DEFAULT_VARIANT])


def component_context(component_name: str, **extra: Any) -> dict[str, Any]:
    """Build the placeholder context for *component_name*."""
    return {
        "ComponentName": component_name,
        "componentName": component_name.lower(),
        **extra,
    }


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for component scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory. Autoescaping is disabled since the output is
    TypeScript and CSS, not HTML.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"components/simple.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically and an existing file is
        overwritten. Returns the output path.
        """
        content = self.render(template_path, context)
        return write_text(output_path, content)
