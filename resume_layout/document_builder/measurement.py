"""Measurement Module

Measures how much room a string needs once wrapped to a column width.

The section renderers hand the exact lines returned by ``wrap()`` to the
drawing surface, so a block is always drawn with the line breaks it was
measured with.
"""
from typing import List, Tuple

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics

from ..exceptions import MeasurementError
from .font_manager import FontManager
from .style_resolver import FontSpec


class TextMeasurer:
    """Base measurer: greedy word wrap on top of ``text_width()``.

    Subclasses supply ``text_width()``; they may replace ``wrap()`` with a
    backend's own line breaker.
    """

    def text_width(self, text: str, font: FontSpec) -> float:
        raise NotImplementedError

    def line_height(self, font: FontSpec) -> float:
        """Height of one unwrapped line."""
        return font.leading

    def wrap(self, text: str, font: FontSpec, max_width: float) -> List[str]:
        """
        Break text into lines no wider than max_width.

        Explicit newlines start a new line. A single word wider than the
        column is kept whole on its own line.

        Args:
            text: Text to wrap
            font: Font the text will be drawn with
            max_width: Column width in points

        Returns:
            Lines in reading order; empty list for empty text
        """
        lines: List[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if current and self.text_width(candidate, font) > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            if current:
                lines.append(current)
        return lines

    def measure(self, text: str, font: FontSpec, max_width: float) -> Tuple[float, float]:
        """
        Bounding box of text wrapped to max_width.

        Args:
            text: Text to measure
            font: Font the text will be drawn with
            max_width: Column width in points

        Returns:
            (width, height) in points; (0, 0) for empty text
        """
        lines = self.wrap(text, font, max_width)
        if not lines:
            return 0.0, 0.0
        width = max(self.text_width(line, font) for line in lines)
        return width, len(lines) * self.line_height(font)


class ReportLabMeasurer(TextMeasurer):
    """Measures with ReportLab's font metrics and line breaker."""

    def __init__(self, font_manager: FontManager):
        self.font_manager = font_manager

    def text_width(self, text: str, font: FontSpec) -> float:
        font_name = self.font_manager.get_font_name(bold=font.bold)
        try:
            return pdfmetrics.stringWidth(text, font_name, font.size)
        except Exception as e:
            raise MeasurementError(text, str(e)) from e

    def wrap(self, text: str, font: FontSpec, max_width: float) -> List[str]:
        if not text or not text.strip():
            return []
        font_name = self.font_manager.get_font_name(bold=font.bold)
        try:
            lines = simpleSplit(text, font_name, font.size, max_width)
        except Exception as e:
            raise MeasurementError(text, str(e)) from e
        return [line for line in lines if line.strip()]
