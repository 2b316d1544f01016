"""Font Manager Module

Handles font registration and the sans-serif fallback chain.
"""
import os
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..exceptions import FontError


class FontManager:
    """Manages font registration and maps font weight to a registered font.

    This class handles:
    - Font path lookups across common system locations
    - Font registration with ReportLab
    - Font fallback chain (DejaVu → Liberation → Helvetica)
    - Bold variant registration

    The measurer and the drawing surface share one FontManager per render, so
    text is always measured with the font it is drawn with.

    Attributes:
        font_name: Name of the registered regular font (e.g., 'DejaVuSans' or 'Helvetica')
        font_name_bold: Name of the registered bold font (e.g., 'DejaVuSans-Bold' or 'Helvetica-Bold')
    """

    REGULAR_PATHS = [
        '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
        '/usr/share/fonts/dejavu/DejaVuSans.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
    ]
    BOLD_PATHS = [
        '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',
        '/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf',
    ]

    def __init__(self, use_system_fonts: bool = True, font_path: Optional[str] = None,
                 bold_font_path: Optional[str] = None):
        """
        Initialize FontManager and register fonts.

        Args:
            use_system_fonts: If True, look for a Unicode sans-serif font on the system;
                              otherwise use the built-in Helvetica family
            font_path: Optional explicit TTF path for the regular font
            bold_font_path: Optional explicit TTF path for the bold font
        """
        self.font_name = 'Helvetica'  # Default fallback
        self.font_name_bold = 'Helvetica-Bold'  # Bold fallback

        if font_path:
            self._register_explicit(font_path, bold_font_path)
        elif use_system_fonts:
            self._setup_fonts()

    def _register_explicit(self, font_path: str, bold_font_path: Optional[str]):
        """Register caller-supplied fonts; failures are fatal."""
        try:
            pdfmetrics.registerFont(TTFont('ResumeSans', font_path))
            self.font_name = 'ResumeSans'
            if bold_font_path:
                pdfmetrics.registerFont(TTFont('ResumeSans-Bold', bold_font_path))
                self.font_name_bold = 'ResumeSans-Bold'
            else:
                self.font_name_bold = self.font_name
        except Exception as e:
            raise FontError(f"Could not register font {font_path}: {e}") from e

    def _setup_fonts(self):
        """
        Register the first available Unicode sans-serif font.

        Falls back to Helvetica if no fonts are found. Also registers the bold
        variant; if only the regular face exists, bold text uses it too.
        """
        font_found = False
        for font_path in self.REGULAR_PATHS:
            if os.path.exists(font_path):
                try:
                    pdfmetrics.registerFont(TTFont('ResumeSans', font_path))
                    self.font_name = 'ResumeSans'
                    font_found = True
                    print(f"DEBUG: Registered font from: {font_path}")
                    break
                except Exception as e:
                    print(f"DEBUG: Failed to register font {font_path}: {e}")
                    continue

        if not font_found:
            print("DEBUG: No system sans-serif font found, using Helvetica")
            return

        for bold_font_path in self.BOLD_PATHS:
            if os.path.exists(bold_font_path):
                try:
                    pdfmetrics.registerFont(TTFont('ResumeSans-Bold', bold_font_path))
                    self.font_name_bold = 'ResumeSans-Bold'
                    print(f"DEBUG: Registered bold font from: {bold_font_path}")
                    return
                except Exception as e:
                    print(f"DEBUG: Failed to register bold font {bold_font_path}: {e}")
                    continue

        print("WARNING: Bold font not found, using regular font for bold text")
        self.font_name_bold = self.font_name

    def get_font_name(self, bold: bool = False) -> str:
        """
        Get the registered font name.

        Args:
            bold: If True, return the bold variant; otherwise return regular font

        Returns:
            Font name string suitable for use with ReportLab
        """
        return self.font_name_bold if bold else self.font_name
