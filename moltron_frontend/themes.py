"""Aesthetic presets and the theme-variable table.

Each of the six aesthetics carries a light and a dark ``StyleBlock``: the
shadcn/ui CSS custom properties (HSL triples written ``"H S% L%"``), a corner
radius and two font stacks. The table is read-only; lookups never fail
because unknown aesthetics resolve to ``Aesthetic.default()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class Aesthetic(str, Enum):
    """Named visual-style presets."""

    CYBER_NEON = "cyber-neon"
    BRUTALIST = "brutalist"
    ORGANIC = "organic"
    RETRO_FUTURE = "retro-future"
    EDITORIAL = "editorial"
    MINIMAL_LUXURY = "minimal-luxury"

    @classmethod
    def default(cls) -> "Aesthetic":
        return cls.CYBER_NEON

    @classmethod
    def resolve(cls, value: "str | Aesthetic | None") -> "Aesthetic":
        """Return the matching aesthetic, or the default for unknown values."""
        if isinstance(value, Aesthetic):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.default()


class Theme(str, Enum):
    """Light/dark mode selector."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_dark_flag(cls, dark: bool) -> "Theme":
        return cls.DARK if dark else cls.LIGHT

    @property
    def base_color(self) -> str:
        """shadcn/ui base palette used for this theme."""
        return "neutral" if self is Theme.DARK else "stone"


def is_known_aesthetic(value: str | Aesthetic | None) -> bool:
    """Return ``True`` if *value* names one of the six aesthetics."""
    if isinstance(value, Aesthetic):
        return True
    return (value or "").strip().lower() in {a.value for a in Aesthetic}


_NON_COLOR_FIELDS = frozenset({"radius", "font_sans", "font_mono"})


class StyleBlock(BaseModel):
    """The fixed set of CSS variables for one (aesthetic, theme) pair."""

    model_config = ConfigDict(frozen=True)

    background: str
    foreground: str
    card: str
    card_foreground: str
    popover: str
    popover_foreground: str
    primary: str
    primary_foreground: str
    secondary: str
    secondary_foreground: str
    muted: str
    muted_foreground: str
    accent: str
    accent_foreground: str
    destructive: str
    destructive_foreground: str
    border: str
    input: str
    ring: str
    radius: str
    font_sans: str
    font_mono: str

    def as_css_variables(self) -> dict[str, str]:
        """Return ``{"--background": "0 0% 4%", ...}`` in declaration order."""
        return {
            f"--{name.replace('_', '-')}": value
            for name, value in self.model_dump().items()
        }

    def to_css(self, selector: str = ":root") -> str:
        """Render the block as a CSS rule.

        Colour triples are wrapped as ``hsl(H S% L%)``; radius and fonts are
        written unchanged.
        """
        lines = [f"{selector} {{"]
        for name, value in self.model_dump().items():
            if name not in _NON_COLOR_FIELDS:
                value = f"hsl({value})"
            lines.append(f"  --{name.replace('_', '-')}: {value};")
        lines.append("}")
        return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Theme table
# ---------------------------------------------------------------------------

_CYBER_NEON_FONTS = {"font_sans": "'Geist', system-ui, sans-serif", "font_mono": "'JetBrains Mono', monospace"}
_BRUTALIST_FONTS = {"font_sans": "'Space Grotesk', system-ui, sans-serif", "font_mono": "'Space Mono', monospace"}
_ORGANIC_FONTS = {"font_sans": "'Instrument Serif', Georgia, serif", "font_mono": "'IBM Plex Mono', monospace"}
_RETRO_FUTURE_FONTS = {"font_sans": "'Orbitron', system-ui, sans-serif", "font_mono": "'Share Tech Mono', monospace"}
_EDITORIAL_FONTS = {"font_sans": "'Playfair Display', Georgia, serif", "font_mono": "'Fira Code', monospace"}
_MINIMAL_LUXURY_FONTS = {
    "font_sans": "'Cormorant Garamond', 'Times New Roman', serif",
    "font_mono": "'Source Code Pro', monospace",
}

_TABLE: dict[Aesthetic, dict[Theme, StyleBlock]] = {
    Aesthetic.CYBER_NEON: {
        Theme.DARK: StyleBlock(
            background="0 0% 4%", foreground="0 0% 95%",
            card="0 0% 6%", card_foreground="0 0% 95%",
            popover="0 0% 6%", popover_foreground="0 0% 95%",
            primary="180 100% 50%", primary_foreground="0 0% 4%",
            secondary="300 100% 50%", secondary_foreground="0 0% 95%",
            muted="0 0% 15%", muted_foreground="0 0% 65%",
            accent="60 100% 50%", accent_foreground="0 0% 4%",
            destructive="0 84% 60%", destructive_foreground="0 0% 95%",
            border="0 0% 20%", input="0 0% 20%", ring="180 100% 50%",
            radius="0.5rem", **_CYBER_NEON_FONTS,
        ),
        Theme.LIGHT: StyleBlock(
            background="0 0% 98%", foreground="0 0% 10%",
            card="0 0% 100%", card_foreground="0 0% 10%",
            popover="0 0% 100%", popover_foreground="0 0% 10%",
            primary="180 100% 40%", primary_foreground="0 0% 98%",
            secondary="300 100% 45%", secondary_foreground="0 0% 98%",
            muted="0 0% 92%", muted_foreground="0 0% 40%",
            accent="60 100% 50%", accent_foreground="0 0% 10%",
            destructive="0 84% 60%", destructive_foreground="0 0% 98%",
            border="0 0% 85%", input="0 0% 85%", ring="180 100% 40%",
            radius="0.5rem", **_CYBER_NEON_FONTS,
        ),
    },
    Aesthetic.BRUTALIST: {
        Theme.DARK: StyleBlock(
            background="0 0% 8%", foreground="0 0% 98%",
            card="0 0% 12%", card_foreground="0 0% 98%",
            popover="0 0% 12%", popover_foreground="0 0% 98%",
            primary="0 0% 98%", primary_foreground="0 0% 8%",
            secondary="0 0% 25%", secondary_foreground="0 0% 98%",
            muted="0 0% 20%", muted_foreground="0 0% 60%",
            accent="0 100% 50%", accent_foreground="0 0% 98%",
            destructive="0 84% 60%", destructive_foreground="0 0% 98%",
            border="0 0% 30%", input="0 0% 30%", ring="0 0% 98%",
            radius="0px", **_BRUTALIST_FONTS,
        ),
        Theme.LIGHT: StyleBlock(
            background="0 0% 96%", foreground="0 0% 8%",
            card="0 0% 100%", card_foreground="0 0% 8%",
            popover="0 0% 100%", popover_foreground="0 0% 8%",
            primary="0 0% 8%", primary_foreground="0 0% 96%",
            secondary="0 0% 85%", secondary_foreground="0 0% 8%",
            muted="0 0% 90%", muted_foreground="0 0% 40%",
            accent="0 100% 50%", accent_foreground="0 0% 96%",
            destructive="0 84% 60%", destructive_foreground="0 0% 98%",
            border="0 0% 0%", input="0 0% 80%", ring="0 0% 8%",
            radius="0px", **_BRUTALIST_FONTS,
        ),
    },
    Aesthetic.ORGANIC: {
        Theme.DARK: StyleBlock(
            background="150 20% 8%", foreground="40 30% 95%",
            card="150 15% 12%", card_foreground="40 30% 95%",
            popover="150 15% 12%", popover_foreground="40 30% 95%",
            primary="140 40% 45%", primary_foreground="0 0% 98%",
            secondary="30 40% 50%", secondary_foreground="0 0% 98%",
            muted="150 10% 20%", muted_foreground="40 20% 65%",
            accent="35 80% 55%", accent_foreground="0 0% 98%",
            destructive="0 60% 50%", destructive_foreground="0 0% 98%",
            border="150 15% 25%", input="150 15% 25%", ring="140 40% 45%",
            radius="1rem", **_ORGANIC_FONTS,
        ),
        Theme.LIGHT: StyleBlock(
            background="40 30% 97%", foreground="150 20% 15%",
            card="40 25% 100%", card_foreground="150 20% 15%",
            popover="40 25% 100%", popover_foreground="150 20% 15%",
            primary="140 40% 35%", primary_foreground="0 0% 98%",
            secondary="30 40% 55%", secondary_foreground="0 0% 98%",
            muted="40 20% 92%", muted_foreground="150 10% 40%",
            accent="35 80% 50%", accent_foreground="0 0% 98%",
            destructive="0 60% 50%", destructive_foreground="0 0% 98%",
            border="40 20% 85%", input="40 20% 85%", ring="140 40% 35%",
            radius="1rem", **_ORGANIC_FONTS,
        ),
    },
    Aesthetic.RETRO_FUTURE: {
        Theme.DARK: StyleBlock(
            background="220 30% 8%", foreground="45 80% 95%",
            card="220 25% 12%", card_foreground="45 80% 95%",
            popover="220 25% 12%", popover_foreground="45 80% 95%",
            primary="280 70% 55%", primary_foreground="0 0% 98%",
            secondary="45 90% 50%", secondary_foreground="220 30% 8%",
            muted="220 20% 20%", muted_foreground="45 40% 70%",
            accent="190 80% 50%", accent_foreground="220 30% 8%",
            destructive="0 70% 55%", destructive_foreground="0 0% 98%",
            border="220 20% 25%", input="220 20% 25%", ring="280 70% 55%",
            radius="0.25rem", **_RETRO_FUTURE_FONTS,
        ),
        Theme.LIGHT: StyleBlock(
            background="45 30% 96%", foreground="220 30% 15%",
            card="45 25% 100%", card_foreground="220 30% 15%",
            popover="45 25% 100%", popover_foreground="220 30% 15%",
            primary="280 60% 50%", primary_foreground="0 0% 98%",
            secondary="45 90% 50%", secondary_foreground="220 30% 15%",
            muted="45 20% 92%", muted_foreground="220 20% 45%",
            accent="190 70% 45%", accent_foreground="0 0% 98%",
            destructive="0 70% 55%", destructive_foreground="0 0% 98%",
            border="45 20% 85%", input="45 20% 85%", ring="280 60% 50%",
            radius="0.25rem", **_RETRO_FUTURE_FONTS,
        ),
    },
    Aesthetic.EDITORIAL: {
        Theme.DARK: StyleBlock(
            background="220 20% 6%", foreground="30 20% 95%",
            card="220 15% 10%", card_foreground="30 20% 95%",
            popover="220 15% 10%", popover_foreground="30 20% 95%",
            primary="30 60% 55%", primary_foreground="220 20% 6%",
            secondary="220 15% 20%", secondary_foreground="30 20% 95%",
            muted="220 10% 18%", muted_foreground="30 10% 65%",
            accent="0 60% 55%", accent_foreground="0 0% 98%",
            destructive="0 60% 50%", destructive_foreground="0 0% 98%",
            border="220 10% 25%", input="220 10% 25%", ring="30 60% 55%",
            radius="0px", **_EDITORIAL_FONTS,
        ),
        Theme.LIGHT: StyleBlock(
            background="30 20% 97%", foreground="220 20% 12%",
            card="30 20% 100%", card_foreground="220 20% 12%",
            popover="30 20% 100%", popover_foreground="220 20% 12%",
            primary="30 60% 45%", primary_foreground="0 0% 98%",
            secondary="220 15% 92%", secondary_foreground="220 20% 12%",
            muted="30 15% 94%", muted_foreground="220 10% 45%",
            accent="0 60% 50%", accent_foreground="0 0% 98%",
            destructive="0 60% 50%", destructive_foreground="0 0% 98%",
            border="30 15% 85%", input="30 15% 85%", ring="30 60% 45%",
            radius="0px", **_EDITORIAL_FONTS,
        ),
    },
    Aesthetic.MINIMAL_LUXURY: {
        Theme.DARK: StyleBlock(
            background="0 0% 7%", foreground="40 20% 96%",
            card="0 0% 10%", card_foreground="40 20% 96%",
            popover="0 0% 10%", popover_foreground="40 20% 96%",
            primary="40 30% 65%", primary_foreground="0 0% 7%",
            secondary="0 0% 18%", secondary_foreground="40 20% 96%",
            muted="0 0% 15%", muted_foreground="40 10% 60%",
            accent="40 40% 70%", accent_foreground="0 0% 7%",
            destructive="0 50% 50%", destructive_foreground="0 0% 98%",
            border="0 0% 22%", input="0 0% 22%", ring="40 30% 65%",
            radius="0.125rem", **_MINIMAL_LUXURY_FONTS,
        ),
        Theme.LIGHT: StyleBlock(
            background="40 20% 98%", foreground="0 0% 10%",
            card="40 20% 100%", card_foreground="0 0% 10%",
            popover="40 20% 100%", popover_foreground="0 0% 10%",
            primary="40 30% 45%", primary_foreground="0 0% 98%",
            secondary="40 10% 94%", secondary_foreground="0 0% 10%",
            muted="40 10% 96%", muted_foreground="0 0% 45%",
            accent="40 40% 55%", accent_foreground="0 0% 98%",
            destructive="0 50% 50%", destructive_foreground="0 0% 98%",
            border="40 10% 88%", input="40 10% 88%", ring="40 30% 45%",
            radius="0.125rem", **_MINIMAL_LUXURY_FONTS,
        ),
    },
}

THEME_TABLE: Mapping[Aesthetic, Mapping[Theme, StyleBlock]] = MappingProxyType(
    {aesthetic: MappingProxyType(blocks) for aesthetic, blocks in _TABLE.items()}
)


def generate_theme_variables(
    aesthetic: str | Aesthetic | None, theme: str | Theme
) -> StyleBlock:
    """Look up the style block for *aesthetic* and *theme*.

    Unknown aesthetics fall back to ``Aesthetic.default()``. *theme* must be
    ``"light"`` or ``"dark"``.
    """
    return THEME_TABLE[Aesthetic.resolve(aesthetic)][Theme(theme)]


def render_theme_css(aesthetic: str | Aesthetic | None, theme: str | Theme) -> str:
    """Return the ``:root { ... }`` CSS text for *aesthetic* and *theme*."""
    return generate_theme_variables(aesthetic, theme).to_css()
