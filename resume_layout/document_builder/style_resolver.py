"""Style Resolver Module

Turns a (font size scale, spacing scale) selection into concrete font sizes
and vertical gaps for every visual role. Pure table lookup: base value times
scale factor.
"""
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from ..config import (
    CAPTION_COLOR,
    LINE_SPACING,
    TEMPLATE_SPACINGS,
    TEMPLATE_TYPE_SCALES,
    TEXT_COLOR,
)
from ..render_options import FontSizeScale, SpacingScale

FONT_ROLES = (
    "document_title",
    "section_title",
    "entry_title",
    "body_text",
    "detail_bullet",
    "caption",
)
SPACING_ROLES = (
    "after_title",
    "after_heading",
    "between_entries",
    "between_bullets",
    "section_gap",
    "contact_line",
)


@dataclass(frozen=True)
class FontSpec:
    """Concrete font for one role.

    Attributes:
        size: Font size in points
        bold: Bold weight if True
        color: Hex color string
    """

    size: float
    bold: bool = False
    color: str = TEXT_COLOR

    @property
    def leading(self) -> float:
        """Line height used both to measure and to draw."""
        return self.size * LINE_SPACING


@dataclass(frozen=True)
class StyleSheet:
    """Resolved fonts and spacing for one render."""

    fonts: Mapping[str, FontSpec]
    spacing: Mapping[str, float]

    def font(self, role: str) -> FontSpec:
        return self.fonts[role]

    def gap(self, role: str) -> float:
        return self.spacing[role]


def resolve(
    font_scale: FontSizeScale,
    spacing_scale: SpacingScale,
    type_scale: Optional[Mapping[str, Tuple[float, bool]]] = None,
    base_spacing: Optional[Mapping[str, float]] = None,
) -> StyleSheet:
    """
    Resolve concrete fonts and spacing.

    Monotonic by construction: larger scale factors never yield smaller sizes
    or gaps.

    Args:
        font_scale: Font size selection
        spacing_scale: Spacing selection
        type_scale: role -> (base size, bold); defaults to the Original template's
        base_spacing: role -> base gap in points; defaults to the Original template's

    Returns:
        StyleSheet with every font and spacing role populated
    """
    type_scale = type_scale or TEMPLATE_TYPE_SCALES["original"]
    base_spacing = base_spacing or TEMPLATE_SPACINGS["original"]

    font_factor = font_scale.scale_factor
    spacing_factor = spacing_scale.scale_factor

    fonts: Dict[str, FontSpec] = {}
    for role in FONT_ROLES:
        size, bold = type_scale[role]
        color = CAPTION_COLOR if role == "caption" else TEXT_COLOR
        fonts[role] = FontSpec(size=size * font_factor, bold=bold, color=color)

    spacing = {role: base_spacing[role] * spacing_factor for role in SPACING_ROLES}

    return StyleSheet(fonts=fonts, spacing=spacing)


def resolve_for_template(template_key: str, font_scale: FontSizeScale,
                         spacing_scale: SpacingScale) -> StyleSheet:
    """Resolve style using a template's own base tables."""
    return resolve(
        font_scale,
        spacing_scale,
        type_scale=TEMPLATE_TYPE_SCALES[template_key],
        base_spacing=TEMPLATE_SPACINGS[template_key],
    )
