"""moltron-frontend configuration.

Typed settings for the scaffolding run. Everything that the original tool
hard-coded (minimum Node.js version, generator packages, component list,
extra dependencies) lives here as Pydantic v2 models so it can be validated
at construction time and overridden from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_COMPONENTS: list[str] = [
    "button",
    "card",
    "input",
    "badge",
    "separator",
    "scroll-area",
    "tooltip",
    "dialog",
]

DEFAULT_DEPENDENCIES: list[str] = [
    "framer-motion@latest",
    "next-seo@latest",
    "lucide-react@latest",
    "clsx@latest",
    "tailwind-merge@latest",
]


class NodeRequirement(BaseModel):
    """Minimum Node.js runtime accepted before any generator runs.

    Next.js 15+ needs Node 18.17 or newer.
    """

    min_major: int = Field(default=18, ge=0)
    min_minor: int = Field(default=17, ge=0)
    framework_label: str = Field(default="Next.js 15+")

    @property
    def label(self) -> str:
        """Human-readable minimum, e.g. ``"18.17+"``."""
        return f"{self.min_major}.{self.min_minor}+"

    def is_satisfied_by(self, major: int, minor: int) -> bool:
        """Return ``True`` if ``major.minor`` meets the minimum."""
        if major != self.min_major:
            return major > self.min_major
        return minor >= self.min_minor


class GeneratorSettings(BaseModel):
    """Options for the ``create-next-app`` invocation."""

    package: str = Field(default="create-next-app@latest")
    app_dir_name: str = Field(
        default="my-app",
        min_length=1,
        description="Directory created by the generator inside the project directory",
    )
    import_alias: str = Field(default="@/*")


class UISettings(BaseModel):
    """Options for the shadcn/ui initializer and component installs."""

    package: str = Field(default="shadcn@latest")
    components: list[str] = Field(default_factory=lambda: list(DEFAULT_COMPONENTS))


class Settings(BaseModel):
    """Global moltron-frontend settings.

    Instances are created once by the CLI entry point and handed to the
    ``ProjectInitializer``.
    """

    output_dir: Path = Field(default=Path("."))
    node: NodeRequirement = Field(default_factory=NodeRequirement)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    ui: UISettings = Field(default_factory=UISettings)
    dependencies: list[str] = Field(default_factory=lambda: list(DEFAULT_DEPENDENCIES))
    command_timeout: int | None = Field(
        default=None,
        ge=1,
        description="Per-command timeout in seconds; None waits indefinitely",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            MOLTRON_OUTPUT_DIR, MOLTRON_APP_DIR, MOLTRON_COMMAND_TIMEOUT,
            MOLTRON_NEXT_PACKAGE, MOLTRON_SHADCN_PACKAGE.
        """
        generator_kwargs: dict[str, Any] = {}
        if os.environ.get("MOLTRON_APP_DIR"):
            generator_kwargs["app_dir_name"] = os.environ["MOLTRON_APP_DIR"]
        if os.environ.get("MOLTRON_NEXT_PACKAGE"):
            generator_kwargs["package"] = os.environ["MOLTRON_NEXT_PACKAGE"]

        ui_kwargs: dict[str, Any] = {}
        if os.environ.get("MOLTRON_SHADCN_PACKAGE"):
            ui_kwargs["package"] = os.environ["MOLTRON_SHADCN_PACKAGE"]

        timeout: int | None = None
        if os.environ.get("MOLTRON_COMMAND_TIMEOUT"):
            timeout = int(os.environ["MOLTRON_COMMAND_TIMEOUT"])

        return cls(
            output_dir=Path(os.environ.get("MOLTRON_OUTPUT_DIR", ".")),
            generator=GeneratorSettings(**generator_kwargs),
            ui=UISettings(**ui_kwargs),
            command_timeout=timeout,
        )
