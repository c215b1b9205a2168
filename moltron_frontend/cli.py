"""Command-line interface for moltron-frontend.

Usage::

    moltron-frontend init my-app --aesthetic=cyber-neon --dark
    moltron-frontend layout my-app --dir ./my-app/my-app --aesthetic brutalist
    python -m moltron_frontend help
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from moltron_frontend import __version__
from moltron_frontend.config import Settings
from moltron_frontend.scaffolder import ProjectConfig, ProjectInitializer, TemplateRenderer
from moltron_frontend.seo import generate_seo_config
from moltron_frontend.themes import Aesthetic, Theme, is_known_aesthetic
from moltron_frontend.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

_HELP_COMMANDS = ("help", "--help", "-h")


def print_help() -> None:
    """Print the top-level usage screen."""
    aesthetics = ", ".join(a.value for a in Aesthetic)
    console.print(f"[bold]moltron-frontend[/bold] {__version__} - Frontend Specialist with shadcn/ui")
    console.print()
    console.print("[bold]Commands:[/bold]")
    console.print("  init <name>          Initialize new project with shadcn")
    console.print("  component <name>     Generate a new component")
    console.print("  page <name>          Generate a new page")
    console.print("  layout <name>        Generate root layout with SEO")
    console.print()
    console.print("[bold]Aesthetics:[/bold]")
    console.print(f"  {aesthetics}")
    console.print()
    console.print("[bold]Examples:[/bold]")
    console.print("  moltron-frontend init my-app --aesthetic=cyber-neon --dark")
    console.print("  moltron-frontend layout my-app --dir ./my-app/my-app --aesthetic=editorial")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        print_error(f"Error: {message}")
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="moltron-frontend",
        description="Scaffold Next.js + shadcn/ui projects with a distinctive aesthetic",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    init = subparsers.add_parser("init", help="Initialize new project with shadcn")
    init.add_argument("name", nargs="?", help="Project name (directory to create)")
    _add_theme_arguments(init)
    init.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )

    layout = subparsers.add_parser("layout", help="Generate root layout with SEO")
    layout.add_argument("name", nargs="?", help="Project name used in the SEO title")
    _add_theme_arguments(layout)
    layout.add_argument(
        "--dir",
        default=".",
        help="Existing Next.js app directory (default: current directory)",
    )

    for command, label in (("component", "component"), ("page", "page")):
        stub = subparsers.add_parser(command, help=f"Generate a new {label}")
        stub.add_argument("name", nargs="?")
        stub.add_argument("--aesthetic", default=None)

    return parser


def _add_theme_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--aesthetic",
        default=None,
        help=f"Visual preset (default: {Aesthetic.default().value})",
    )
    parser.add_argument("--dark", action="store_true", help="Use the dark theme")
    parser.add_argument("--description", default=None, help="SEO description")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _project_config(args: argparse.Namespace) -> ProjectConfig | None:
    """Build the ``ProjectConfig`` for *args*, or print why it cannot be built."""
    if not args.name:
        print_error("Project name required")
        return None
    if args.aesthetic is not None and not is_known_aesthetic(args.aesthetic):
        print_warning(
            f"Unknown aesthetic '{args.aesthetic}', "
            f"falling back to {Aesthetic.default().value}"
        )
    try:
        return ProjectConfig(
            name=args.name,
            aesthetic=args.aesthetic,
            theme=Theme.from_dark_flag(args.dark),
            description=args.description,
        )
    except ValidationError as exc:
        print_error(f"Invalid project configuration: {exc.errors()[0]['msg']}")
        return None


def _cmd_init(args: argparse.Namespace) -> int:
    config = _project_config(args)
    if config is None:
        return 1

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print_error(f"Invalid environment configuration: {exc}")
        return 1
    if args.output:
        settings = settings.model_copy(update={"output_dir": Path(args.output)})

    console.print(
        f"Creating [bold]{config.name}[/bold] with {config.aesthetic.value} "
        f"aesthetic ({config.theme.value})..."
    )
    result = asyncio.run(ProjectInitializer(config, settings).run())

    if not result.success:
        print_error(f"Error: {result.error}")
        return 1

    print_success("Project initialized successfully!")
    print_summary_table(
        {
            "Project": config.name,
            "Aesthetic": config.aesthetic.value,
            "Theme": config.theme.value,
            "App directory": str(result.app_dir),
        },
        title="Next steps",
    )
    console.print(f"  cd {result.app_dir}")
    console.print("  npm run dev")
    return 0


async def _write_layout_files(
    renderer: TemplateRenderer, app_dir: Path, config: ProjectConfig
) -> list[Path]:
    theme_path = await renderer.write_theme(app_dir, config.aesthetic, config.theme)
    seo = generate_seo_config(config.name, config.description)
    layout_path = await renderer.write_layout(app_dir, seo, config.theme)
    return [theme_path, layout_path]


def _cmd_layout(args: argparse.Namespace) -> int:
    config = _project_config(args)
    if config is None:
        return 1

    app_dir = Path(args.dir)
    if not app_dir.is_dir():
        print_error(f"App directory not found: {app_dir}")
        return 1

    try:
        written = asyncio.run(_write_layout_files(TemplateRenderer(), app_dir, config))
    except OSError as exc:
        print_error(f"Error: {exc}")
        return 1

    for path in written:
        print_success(f"Wrote {path}")
    return 0


def _cmd_component(args: argparse.Namespace) -> int:
    console.print("Component generation coming soon...")
    return 0


def _cmd_page(args: argparse.Namespace) -> int:
    console.print("Page generation coming soon...")
    return 0


_COMMANDS = {
    "init": _cmd_init,
    "layout": _cmd_layout,
    "component": _cmd_component,
    "page": _cmd_page,
}


def main(argv: list[str] | None = None) -> int:
    """Parse *argv* and dispatch. Returns the process exit code."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    if not args_list or args_list[0] in _HELP_COMMANDS:
        print_help()
        return 0

    parser = build_parser()
    try:
        args = parser.parse_args(args_list)
    except SystemExit as exc:
        # --version and per-command --help exit through argparse
        return exc.code if isinstance(exc.code, int) else 0

    handler = _COMMANDS.get(args.command)
    if handler is None:
        print_help()
        return 0
    return handler(args)


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
