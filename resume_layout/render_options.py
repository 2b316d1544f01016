"""Render Options

Template and typography selections, validated at the boundary.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .config import FONT_SIZE_FACTORS, SPACING_FACTORS
from .exceptions import InvalidConfigurationError


def _normalize(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(" ", "_")


class _ParseableEnum(Enum):
    """Enum accepting its value, member name or display name."""

    @classmethod
    def parse(cls, value: Union[str, "_ParseableEnum"]):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = _normalize(value)
            for member in cls:
                if key in (member.value, _normalize(member.name), _normalize(member.display_name)):
                    return member
        raise InvalidConfigurationError(
            cls.__name__, value, [member.display_name for member in cls]
        )

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class FontSizeScale(_ParseableEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def scale_factor(self) -> float:
        return FONT_SIZE_FACTORS[self.value]


class SpacingScale(_ParseableEnum):
    COMPACT = "compact"
    NORMAL = "normal"
    RELAXED = "relaxed"

    @property
    def scale_factor(self) -> float:
        return SPACING_FACTORS[self.value]


class TemplateKind(_ParseableEnum):
    """Closed set of visual templates."""

    ORIGINAL = "original"
    MODERN_MINIMALIST = "modern_minimalist"
    CLASSIC_PROFESSIONAL = "classic_professional"
    COMPACT_EFFICIENT = "compact_efficient"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @property
    def product_id(self) -> str:
        """In-app purchase identifier; empty for the free template."""
        return _PRODUCT_IDS[self.value]

    @property
    def requires_entitlement(self) -> bool:
        return bool(self.product_id)


_DISPLAY_NAMES = {
    "original": "Original",
    "modern_minimalist": "Modern Minimalist",
    "classic_professional": "Classic Professional",
    "compact_efficient": "Compact and Efficient",
}

_PRODUCT_IDS = {
    "original": "",
    "modern_minimalist": "template2",
    "classic_professional": "template3",
    "compact_efficient": "template4",
}


@dataclass(frozen=True)
class StyleConfig:
    """The (font size, spacing) pair chosen by the user.

    Attributes:
        font_size: Scale applied to every font size
        spacing: Scale applied to every vertical gap
    """

    font_size: FontSizeScale = FontSizeScale.MEDIUM
    spacing: SpacingScale = SpacingScale.NORMAL

    def __post_init__(self):
        """Accept string names and validate them."""
        object.__setattr__(self, "font_size", FontSizeScale.parse(self.font_size))
        object.__setattr__(self, "spacing", SpacingScale.parse(self.spacing))
