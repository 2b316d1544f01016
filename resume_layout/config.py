"""Configuration Constants

Constants for résumé layout and PDF generation.
"""
from reportlab.lib.pagesizes import letter

# Page Geometry (points, 72 per inch)
PAGE_SIZE = letter  # 612 x 792, shared by every template
PAGE_MARGINS = {
    "top": 36.0,
    "bottom": 72.0,
    "left": 36.0,
    "right": 36.0,
}

# Leading as a multiple of font size (same value is used to measure and to draw)
LINE_SPACING = 1.2

# Minimum room a section heading needs below it before it may be drawn
SECTION_LOOKAHEAD_MIN = 20.0

# Text Glyphs
BULLET = "•"
INLINE_SKILL_SEPARATOR = " • "
CONTACT_SEPARATOR = " | "

# Column Layouts
TWO_COLUMN_SPLIT = {
    "left": 0.35,   # share of content width; the right column takes the rest
    "gutter": 20.0,
}
HALF_COLUMN_GUTTER = 10.0
GRID_GUTTER = 10.0
SKILL_GRID_COLUMNS = 2
DETAIL_INDENT = 10.0  # bullets sit further right than their entry heading
DATE_GAP = 12.0  # min space between a heading and its right-aligned date

# Colors
TEXT_COLOR = "#000000"
CAPTION_COLOR = "#555555"
RULE_COLOR = "#808080"
DIVIDER_COLOR = "#D3D3D3"

# Font Scale / Spacing Scale factors
FONT_SIZE_FACTORS = {
    "small": 0.7,
    "medium": 1.0,
    "large": 1.1,
}
SPACING_FACTORS = {
    "compact": 0.8,
    "normal": 1.0,
    "relaxed": 1.2,
}

# Base type scale per template: role -> (point size, bold)
TEMPLATE_TYPE_SCALES = {
    "original": {
        "document_title": (24.0, True),
        "section_title": (16.0, True),
        "entry_title": (14.0, True),
        "body_text": (12.0, False),
        "detail_bullet": (12.0, False),
        "caption": (12.0, False),
    },
    "modern_minimalist": {
        "document_title": (24.0, True),
        "section_title": (14.0, True),
        "entry_title": (12.0, True),
        "body_text": (10.0, False),
        "detail_bullet": (10.0, False),
        "caption": (10.0, False),
    },
    "classic_professional": {
        "document_title": (24.0, True),
        "section_title": (14.0, True),
        "entry_title": (12.0, True),
        "body_text": (12.0, False),
        "detail_bullet": (12.0, False),
        "caption": (10.0, False),
    },
    "compact_efficient": {
        "document_title": (18.0, True),
        "section_title": (12.0, True),
        "entry_title": (11.0, True),
        "body_text": (10.0, False),
        "detail_bullet": (10.0, False),
        "caption": (9.0, False),
    },
}

# Base spacing per template: role -> points before the spacing factor
TEMPLATE_SPACINGS = {
    "original": {
        "after_title": 10.0,
        "after_heading": 10.0,
        "between_entries": 10.0,
        "between_bullets": 5.0,
        "section_gap": 10.0,
        "contact_line": 8.0,
    },
    "modern_minimalist": {
        "after_title": 6.0,
        "after_heading": 5.0,
        "between_entries": 10.0,
        "between_bullets": 5.0,
        "section_gap": 10.0,
        "contact_line": 5.0,
    },
    "classic_professional": {
        "after_title": 10.0,
        "after_heading": 5.0,
        "between_entries": 15.0,
        "between_bullets": 5.0,
        "section_gap": 10.0,
        "contact_line": 5.0,
    },
    "compact_efficient": {
        "after_title": 4.0,
        "after_heading": 2.0,
        "between_entries": 5.0,
        "between_bullets": 2.0,
        "section_gap": 5.0,
        "contact_line": 2.0,
    },
}

# PDF Metadata
DOCUMENT_CREATOR = "SimpleCV"
