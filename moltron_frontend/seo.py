"""SEO metadata for the generated Next.js root layout."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_DESCRIPTION = (
    "A distinctive, production-grade frontend interface crafted with "
    "meticulous attention to aesthetic details."
)

DEFAULT_KEYWORDS: list[str] = [
    "frontend",
    "design",
    "web",
    "react",
    "nextjs",
    "shadcn",
    "ui",
    "ux",
]


class _MetadataModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OpenGraph(_MetadataModel):
    title: str
    description: str
    type: str = "website"
    locale: str = "en_US"


class TwitterCard(_MetadataModel):
    card: str = "summary_large_image"
    title: str
    description: str


class SEOMetadata(_MetadataModel):
    """Fixed-shape metadata record for a Next.js ``metadata`` export."""

    title: str
    description: str
    keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    open_graph: OpenGraph
    twitter: TwitterCard
    robots: str = "index, follow"
    viewport: str = "width=device-width, initial-scale=1"

    def to_next_metadata(self) -> dict[str, Any]:
        """Return the record with Next.js key names (``openGraph`` etc.)."""
        return self.model_dump(by_alias=True)


def generate_seo_config(name: str, description: str | None = None) -> SEOMetadata:
    """Build the SEO metadata record for project *name*.

    A missing or empty *description* is replaced by ``DEFAULT_DESCRIPTION``.
    """
    resolved = description or DEFAULT_DESCRIPTION
    return SEOMetadata(
        title=f"{name} - Premium Frontend Experience",
        description=resolved,
        open_graph=OpenGraph(title=name, description=resolved),
        twitter=TwitterCard(title=name, description=resolved),
    )
