"""component-kit scaffolder -- generates React component boilerplate.

Quick usage::

    from component_kit.scaffolder import ComponentGenerator, GenerationOptions

    generator = ComponentGenerator()
    result = generator.generate("UserCard", GenerationOptions(type="data"))
    print(result.files)
"""

from component_kit.scaffolder.generator import (
    ComponentGenerator,
    GenerationOptions,
    GenerationResult,
    ScaffoldError,
    create_component,
)
from component_kit.scaffolder.templates import (
    TEMPLATE_VARIANTS,
    TemplateRenderer,
    TemplateVariant,
    available_variants,
)

__all__ = [
    "ComponentGenerator",
    "GenerationOptions",
    "GenerationResult",
    "ScaffoldError",
    "TEMPLATE_VARIANTS",
    "TemplateRenderer",
    "TemplateVariant",
    "available_variants",
    "create_component",
]
