"""Tests for the Jinja2 TemplateRenderer (moltron_frontend.scaffolder.templates)."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from moltron_frontend.scaffolder.templates import TemplateRenderer, parse_viewport
from moltron_frontend.seo import generate_seo_config
from moltron_frontend.themes import Aesthetic, Theme, render_theme_css

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestRender:
    def test_bundled_templates_present(self, renderer: TemplateRenderer):
        assert (renderer.template_dir / "theme.css.j2").is_file()
        assert (renderer.template_dir / "layout.tsx.j2").is_file()

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.txt.j2").write_text("Hello {{ name }}!", encoding="utf-8")
        assert TemplateRenderer(tmp_path).render("hello.txt.j2", {"name": "Acme"}) == "Hello Acme!"

    @pytest.mark.asyncio
    async def test_render_to_file_creates_parents(self, tmp_path: Path):
        (tmp_path / "t.j2").write_text("{{ value }}\n", encoding="utf-8")
        out = await TemplateRenderer(tmp_path).render_to_file(
            "t.j2", tmp_path / "deep" / "nested" / "out.txt", {"value": 42}
        )
        assert out.read_text(encoding="utf-8") == "42\n"


class TestWriteTheme:
    @pytest.mark.asyncio
    async def test_writes_theme_css(self, renderer: TemplateRenderer, tmp_path: Path):
        path = await renderer.write_theme(tmp_path, Aesthetic.ORGANIC, Theme.LIGHT)

        assert path == tmp_path / "app" / "theme.css"
        css = path.read_text(encoding="utf-8")
        assert css.startswith("/* organic aesthetic, light theme.")
        assert render_theme_css(Aesthetic.ORGANIC, Theme.LIGHT) in css
        assert "  --background: hsl(40 30% 97%);" in css
        assert "  --radius: 1rem;" in css
        assert "font-family: var(--font-sans);" in css


class TestWriteLayout:
    @pytest.mark.asyncio
    async def test_layout_exports_metadata(self, renderer: TemplateRenderer, tmp_path: Path):
        seo = generate_seo_config("Acme", "Rockets.")
        path = await renderer.write_layout(tmp_path, seo, Theme.LIGHT)

        assert path == tmp_path / "app" / "layout.tsx"
        layout = path.read_text(encoding="utf-8")
        assert 'import "./globals.css";' in layout
        assert 'import "./theme.css";' in layout
        assert 'import type { Metadata, Viewport } from "next";' in layout
        assert '<meta name="viewport"' not in layout
        assert 'className="dark"' not in layout

        match = re.search(r"export const metadata: Metadata = (\{.*?\});", layout, re.S)
        assert match is not None
        metadata = json.loads(match.group(1))
        assert metadata["title"] == "Acme - Premium Frontend Experience"
        assert metadata["openGraph"]["description"] == "Rockets."
        assert metadata["twitter"]["card"] == "summary_large_image"
        assert "viewport" not in metadata

        match = re.search(r"export const viewport: Viewport = (\{.*?\});", layout, re.S)
        assert match is not None
        assert json.loads(match.group(1)) == {"width": "device-width", "initialScale": 1}

    @pytest.mark.asyncio
    async def test_dark_layout_sets_class(self, renderer: TemplateRenderer, tmp_path: Path):
        path = await renderer.write_layout(tmp_path, generate_seo_config("Acme"), Theme.DARK)
        assert '<html lang="en" className="dark">' in path.read_text(encoding="utf-8")


class TestParseViewport:
    def test_default_directive(self):
        assert parse_viewport("width=device-width, initial-scale=1") == {
            "width": "device-width",
            "initialScale": 1,
        }

    def test_fractional_and_multiword_keys(self):
        assert parse_viewport("initial-scale=1.5, maximum-scale=2, user-scalable=no") == {
            "initialScale": 1.5,
            "maximumScale": 2,
            "userScalable": "no",
        }

    def test_entries_without_value_ignored(self):
        assert parse_viewport("width=device-width, shrink-to-fit") == {"width": "device-width"}
