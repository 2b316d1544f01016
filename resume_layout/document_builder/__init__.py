"""Document Builder Package

This package lays out a résumé and draws it as a PDF:

Core Classes:
- DocumentBuilder: Main orchestrator class (from builder.py)
- FontManager: Font registration and fallback
- TextMeasurer / ReportLabMeasurer: Text wrapping and measurement
- PageCursor: Write position and page breaks
- SectionRenderer: Section-by-section layout
- DrawingSurface / ReportLabSurface: Page drawing and PDF output

Utilities:
- coordinate_utils: Coordinate conversion functions
- style_resolver: Font and spacing resolution
- templates: Template composers

Helper Functions:
- generate: Render a résumé to PDF bytes
- render: Render a résumé and keep page count and style
- generate_async: generate() on a worker thread
- default_font_manager: FontManager shared by renders that do not pass one
"""

# Import core classes
from .builder import (
    DocumentBuilder,
    default_font_manager,
    generate,
    generate_async,
    render,
)
from .font_manager import FontManager
from .measurement import ReportLabMeasurer, TextMeasurer
from .page_cursor import CursorMark, PageCursor, PageGeometry
from .section_renderer import Column, HeaderLayout, SectionRenderer
from .style_resolver import FontSpec, StyleSheet
from .surface import DrawingSurface, ReportLabSurface
from . import coordinate_utils, style_resolver, templates

# Expose public API
__all__ = [
    # Main builder class
    'DocumentBuilder',

    # Helper functions
    'default_font_manager',
    'generate',
    'generate_async',
    'render',

    # Component classes
    'FontManager',
    'TextMeasurer',
    'ReportLabMeasurer',
    'PageCursor',
    'PageGeometry',
    'CursorMark',
    'SectionRenderer',
    'Column',
    'HeaderLayout',
    'FontSpec',
    'StyleSheet',
    'DrawingSurface',
    'ReportLabSurface',

    # Utility modules
    'coordinate_utils',
    'style_resolver',
    'templates',
]
