"""Project initialization orchestrator.

Takes a ``ProjectConfig`` and scaffolds a Next.js 15+ app with shadcn/ui by
shelling out to ``npx``/``npm``, then injects the selected aesthetic's theme
variables and an SEO-aware root layout into the generated app.

Every step is a pass/fail gate. Steps run strictly in order and the first
failure stops the run; nothing already written is rolled back.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moltron_frontend.config import Settings
from moltron_frontend.seo import generate_seo_config
from moltron_frontend.themes import Aesthetic, Theme
from moltron_frontend.utils import ensure_dir, format_command, print_step, run_command

from .templates import TemplateRenderer

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]
VersionProbe = Callable[[], Awaitable[str]]

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """What to scaffold. Created once per invocation and never mutated."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, used as the directory name")
    aesthetic: Aesthetic = Field(default_factory=Aesthetic.default)
    theme: Theme = Field(default=Theme.LIGHT)
    description: str | None = Field(default=None, description="SEO description")

    @field_validator("name")
    @classmethod
    def _valid_directory_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name must not be empty")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"Project name must be a plain directory name: {value!r}")
        return value

    @field_validator("aesthetic", mode="before")
    @classmethod
    def _resolve_aesthetic(cls, value: object) -> Aesthetic:
        return Aesthetic.resolve(value if isinstance(value, (str, Aesthetic)) else None)


class InitResult(BaseModel):
    """Outcome of one ``ProjectInitializer.run``."""

    success: bool
    error: str | None = None
    project_dir: Path | None = None
    app_dir: Path | None = None
    steps_completed: list[str] = Field(default_factory=list)


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


# ---------------------------------------------------------------------------
# Version parsing
# ---------------------------------------------------------------------------


def parse_node_version(raw: str) -> tuple[int, int]:
    """Parse ``node --version`` output (``"v20.1.0"``) into ``(major, minor)``.

    Raises:
        ScaffoldError: If *raw* does not start with ``major.minor``.
    """
    match = _VERSION_RE.match(raw.strip())
    if match is None:
        raise ScaffoldError(f"Unable to parse Node.js version from {raw.strip()!r}")
    return int(match.group(1)), int(match.group(2))


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ProjectInitializer:
    """Runs the scaffolding pipeline for one ``ProjectConfig``.

    The command runner and the Node.js version probe are injectable so the
    external world can be simulated; by default both go through
    ``moltron_frontend.utils.run_command``.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Settings | None = None,
        *,
        runner: CommandRunner = run_command,
        version_probe: VersionProbe | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()
        self._runner = runner
        self._version_probe = version_probe or self._probe_node_version

    @property
    def project_dir(self) -> Path:
        return Path(self.settings.output_dir) / self.config.name

    @property
    def app_dir(self) -> Path:
        return self.project_dir / self.settings.generator.app_dir_name

    # -- Public API --------------------------------------------------------

    def steps(self) -> list[tuple[str, Callable[[], Awaitable[None]]]]:
        """Return the ordered ``(name, step)`` pipeline."""
        return [
            ("ensure-directory", self._ensure_directory),
            ("check-node", self._check_node),
            ("create-app", self._create_app),
            ("init-ui", self._init_ui),
            ("add-components", self._add_components),
            ("install-deps", self._install_dependencies),
            ("apply-theme", self._apply_theme),
            ("write-layout", self._write_layout),
        ]

    async def run(self) -> InitResult:
        """Run every step in order, stopping at the first failure."""
        completed: list[str] = []
        for name, step in self.steps():
            try:
                await step()
            except (ScaffoldError, OSError) as exc:
                return InitResult(
                    success=False,
                    error=str(exc),
                    project_dir=self.project_dir,
                    app_dir=self.app_dir,
                    steps_completed=completed,
                )
            completed.append(name)

        return InitResult(
            success=True,
            project_dir=self.project_dir,
            app_dir=self.app_dir,
            steps_completed=completed,
        )

    # -- Steps -------------------------------------------------------------

    async def _ensure_directory(self) -> None:
        ensure_dir(self.project_dir)

    async def _check_node(self) -> None:
        raw = await self._version_probe()
        major, minor = parse_node_version(raw)
        node = self.settings.node
        if not node.is_satisfied_by(major, minor):
            raise ScaffoldError(
                f"Node.js {node.label} required for {node.framework_label} "
                f"(found {raw.strip()})"
            )

    async def _create_app(self) -> None:
        generator = self.settings.generator
        print_step(f"Creating Next.js project in {self.app_dir}...")
        await self._exec(
            [
                "npx",
                generator.package,
                generator.app_dir_name,
                "--typescript",
                "--tailwind",
                "--eslint",
                "--app",
                "--no-src-dir",
                "--import-alias",
                generator.import_alias,
                "--use-npm",
                "--no-turbopack",
            ],
            cwd=self.project_dir,
        )

    async def _init_ui(self) -> None:
        base_color = self.config.theme.base_color
        print_step(f"Initializing shadcn/ui (base color: {base_color})...")
        await self._exec(
            ["npx", self.settings.ui.package, "init", "--yes", "--base-color", base_color],
            cwd=self.app_dir,
        )

    async def _add_components(self) -> None:
        # One invocation per component, in order.
        for component in self.settings.ui.components:
            print_step(f"Installing {component}...")
            await self._exec(
                ["npx", self.settings.ui.package, "add", component, "-y"],
                cwd=self.app_dir,
            )

    async def _install_dependencies(self) -> None:
        print_step("Installing latest dependencies...")
        await self._exec(["npm", "install", *self.settings.dependencies], cwd=self.app_dir)

    async def _apply_theme(self) -> None:
        print_step(f"Applying {self.config.aesthetic.value} theme ({self.config.theme.value})...")
        await self.renderer.write_theme(self.app_dir, self.config.aesthetic, self.config.theme)

    async def _write_layout(self) -> None:
        print_step("Writing root layout with SEO metadata...")
        seo = generate_seo_config(self.config.name, self.config.description)
        await self.renderer.write_layout(self.app_dir, seo, self.config.theme)

    # -- Helpers -----------------------------------------------------------

    async def _exec(self, cmd: list[str], cwd: Path) -> str:
        """Run *cmd* through the runner and raise on a non-zero exit."""
        returncode, stdout, stderr = await self._runner(
            cmd, cwd=cwd, timeout=self.settings.command_timeout
        )
        if returncode != 0:
            cmd_str = format_command(cmd)
            message = f"Command failed (exit {returncode}): {cmd_str}"
            if stderr:
                message = f"{message}\n{stderr}"
            raise ScaffoldError(message, command=cmd_str, stderr=stderr)
        return stdout

    async def _probe_node_version(self) -> str:
        return await self._exec(["node", "--version"], cwd=Path.cwd())
