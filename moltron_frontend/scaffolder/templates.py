"""Jinja2 template rendering for files injected into the generated app.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``moltron_frontend/scaffolder/templates/`` directory and renders the theme
stylesheet and the SEO-aware root layout.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from moltron_frontend.seo import SEOMetadata
from moltron_frontend.themes import Aesthetic, Theme, render_theme_css

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

THEME_TEMPLATE = "theme.css.j2"
LAYOUT_TEMPLATE = "layout.tsx.j2"


class TemplateRenderer:
    """Renders Jinja2 templates for the Next.js app directory.

    Templates are rendered with a context dictionary built from the resolved
    style block and SEO metadata.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out

    # -- Project files -----------------------------------------------------

    async def write_theme(
        self,
        app_dir: str | Path,
        aesthetic: Aesthetic,
        theme: Theme,
    ) -> Path:
        """Write ``app/theme.css`` for *aesthetic* and *theme*."""
        context = {
            "aesthetic": aesthetic.value,
            "theme": theme.value,
            "css": render_theme_css(aesthetic, theme),
        }
        return await self.render_to_file(
            THEME_TEMPLATE, Path(app_dir) / "app" / "theme.css", context
        )

    async def write_layout(
        self, app_dir: str | Path, seo: SEOMetadata, theme: Theme
    ) -> Path:
        """Write ``app/layout.tsx`` exporting *seo* as the page metadata."""
        metadata = seo.to_next_metadata()
        viewport = parse_viewport(metadata.pop("viewport"))
        context = {
            "metadata": metadata,
            "viewport": viewport,
            "theme": theme.value,
        }
        return await self.render_to_file(
            LAYOUT_TEMPLATE, Path(app_dir) / "app" / "layout.tsx", context
        )


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def parse_viewport(directive: str) -> dict[str, Any]:
    """Convert a ``<meta name="viewport">`` string into a Next.js ``Viewport``.

    ``"width=device-width, initial-scale=1"`` becomes
    ``{"width": "device-width", "initialScale": 1}``.
    """
    viewport: dict[str, Any] = {}
    for part in directive.split(","):
        key, sep, value = part.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key:
            continue
        head, *rest = key.split("-")
        name = head + "".join(word.capitalize() for word in rest)
        try:
            number = float(value)
        except ValueError:
            viewport[name] = value
        else:
            viewport[name] = int(number) if number.is_integer() else number
    return viewport
