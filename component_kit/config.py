"""component-kit configuration.

Typed configuration shared by the three command-line tools. Settings use a
Pydantic v2 model so they can be validated at construction time and loaded
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable, ``None`` when unset or empty."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return None
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {raw!r}")


class Config(BaseModel):
    """Global component-kit configuration.

    Instances are usually created once by a CLI entry point through
    :meth:`from_env` and then passed to the generator, validator or watcher.
    """

    components_dir: Path = Field(
        default=Path("components"),
        description="Directory (relative to the working directory) holding generated components",
    )
    css_module_suffix: str = Field(
        default=".module.css",
        description="Filename suffix that identifies a CSS module",
    )
    default_template: str = Field(
        default="simple",
        description="Template variant used when none is requested",
    )
    styled: bool = Field(default=True, description="Emit a CSS module by default")
    typed: bool = Field(default=True, description="Export the Props type from the barrel file")
    watch_poll_interval: float = Field(
        default=1.0,
        ge=0.1,
        description="Seconds the watch loop sleeps between interrupt checks",
    )

    @field_validator("css_module_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("css_module_suffix must start with '.'")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def components_path(self, base_dir: str | Path | None = None) -> Path:
        """Return the components directory resolved against *base_dir*.

        Defaults to the current working directory.
        """
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        return base / self.components_dir

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CK_COMPONENTS_DIR, CK_CSS_MODULE_SUFFIX, CK_DEFAULT_TEMPLATE,
            CK_STYLED, CK_TYPED, CK_WATCH_INTERVAL.

        Raises:
            ValueError: If a variable cannot be parsed or fails validation
                (pydantic's ``ValidationError`` is a ``ValueError``).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CK_COMPONENTS_DIR"):
            kwargs["components_dir"] = Path(os.environ["CK_COMPONENTS_DIR"])
        if os.environ.get("CK_CSS_MODULE_SUFFIX"):
            kwargs["css_module_suffix"] = os.environ["CK_CSS_MODULE_SUFFIX"]
        if os.environ.get("CK_DEFAULT_TEMPLATE"):
            kwargs["default_template"] = os.environ["CK_DEFAULT_TEMPLATE"]
        if os.environ.get("CK_WATCH_INTERVAL"):
            raw = os.environ["CK_WATCH_INTERVAL"]
            try:
                kwargs["watch_poll_interval"] = float(raw)
            except ValueError:
                raise ValueError(f"Invalid number for CK_WATCH_INTERVAL: {raw!r}") from None

        styled = _env_flag("CK_STYLED")
        if styled is not None:
            kwargs["styled"] = styled
        typed = _env_flag("CK_TYPED")
        if typed is not None:
            kwargs["typed"] = typed

        return cls(**kwargs)
