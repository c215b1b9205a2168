"""Tests for the SEO metadata builder (moltron_frontend.seo)."""

from __future__ import annotations

import pytest

from moltron_frontend.seo import (
    DEFAULT_DESCRIPTION,
    DEFAULT_KEYWORDS,
    SEOMetadata,
    generate_seo_config,
)

pytestmark = pytest.mark.unit


class TestGenerateSeoConfig:
    def test_default_description_and_title(self):
        seo = generate_seo_config("Acme", None)
        assert seo.title == "Acme - Premium Frontend Experience"
        assert seo.description == DEFAULT_DESCRIPTION
        assert seo.description.startswith("A distinctive, production-grade frontend interface")

    def test_empty_description_uses_default(self):
        assert generate_seo_config("Acme", "").description == DEFAULT_DESCRIPTION

    def test_custom_description_propagates(self):
        seo = generate_seo_config("Acme", "Rockets and anvils.")
        assert seo.description == "Rockets and anvils."
        assert seo.open_graph.description == "Rockets and anvils."
        assert seo.twitter.description == "Rockets and anvils."

    def test_social_fields(self):
        seo = generate_seo_config("Acme")
        assert seo.open_graph.title == "Acme"
        assert seo.open_graph.type == "website"
        assert seo.open_graph.locale == "en_US"
        assert seo.twitter.card == "summary_large_image"
        assert seo.twitter.title == "Acme"

    def test_fixed_directives(self):
        seo = generate_seo_config("Acme")
        assert seo.keywords == DEFAULT_KEYWORDS
        assert seo.robots == "index, follow"
        assert seo.viewport == "width=device-width, initial-scale=1"

    def test_keywords_not_shared(self):
        seo = generate_seo_config("Acme")
        seo.keywords.append("extra")
        assert "extra" not in generate_seo_config("Acme").keywords


class TestNextMetadata:
    def test_camel_case_keys(self):
        data = generate_seo_config("Acme").to_next_metadata()
        assert set(data) == {
            "title", "description", "keywords", "openGraph",
            "twitter", "robots", "viewport",
        }
        assert data["openGraph"]["locale"] == "en_US"

    def test_populate_by_field_name(self):
        seo = SEOMetadata(
            title="t",
            description="d",
            open_graph={"title": "t", "description": "d"},
            twitter={"title": "t", "description": "d"},
        )
        assert seo.open_graph.type == "website"
