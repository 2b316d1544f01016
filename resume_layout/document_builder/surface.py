"""Drawing Surface Module

The minimal drawing interface the layout engine needs: open a page, draw
pre-wrapped text, draw a rule, produce the document bytes.

Column layouts revisit earlier pages (the right column starts back on the
page where the left column started), so the ReportLab surface keeps a display
list per page and only writes the canvas in ``finalize()``.
"""
import io
from typing import Callable, Dict, List, Sequence

from reportlab.lib import colors
from reportlab.pdfgen import canvas as pdfcanvas

from ..config import DOCUMENT_CREATOR
from ..exceptions import SurfaceError
from . import coordinate_utils
from .font_manager import FontManager
from .page_cursor import PageGeometry
from .style_resolver import FontSpec

ALIGNMENTS = ("left", "center", "right")


class DrawingSurface:
    """Interface used by the section renderers.

    All coordinates are top-down layout coordinates in points.
    """

    def begin_page(self, page_index: int):
        raise NotImplementedError

    def draw_text(self, page_index: int, lines: Sequence[str], x: float, y: float,
                  width: float, font: FontSpec, align: str = "left"):
        raise NotImplementedError

    def draw_line(self, page_index: int, x1: float, y1: float, x2: float, y2: float,
                  color: str, line_width: float = 0.5):
        raise NotImplementedError

    @property
    def page_count(self) -> int:
        raise NotImplementedError

    def finalize(self) -> bytes:
        raise NotImplementedError


class ReportLabSurface(DrawingSurface):
    """Draws onto a ReportLab canvas and returns PDF bytes."""

    def __init__(self, geometry: PageGeometry, font_manager: FontManager,
                 title: str = "", author: str = ""):
        """
        Initialize surface.

        Args:
            geometry: Page size shared by every page of the document
            font_manager: Same FontManager the measurer uses
            title: Optional PDF title metadata
            author: Optional PDF author metadata
        """
        self.geometry = geometry
        self.font_manager = font_manager
        self.title = title
        self.author = author
        self._pages: Dict[int, List[Callable]] = {}

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def begin_page(self, page_index: int):
        """Open pages up to page_index. Opening an existing page is a no-op."""
        for index in range(page_index + 1):
            self._pages.setdefault(index, [])

    def draw_text(self, page_index: int, lines: Sequence[str], x: float, y: float,
                  width: float, font: FontSpec, align: str = "left"):
        """
        Queue a block of already-wrapped lines.

        Args:
            page_index: Page to draw on
            lines: Lines exactly as returned by the measurer
            x: Left edge of the block's column
            y: Top edge of the block (top-down)
            width: Column width used for center/right alignment
            font: Font the lines were measured with
            align: "left", "center" or "right"
        """
        if align not in ALIGNMENTS:
            raise ValueError(f"align must be one of {ALIGNMENTS}, got {align!r}")
        if not lines:
            return
        self.begin_page(page_index)
        page_height = self.geometry.page_height
        font_name = self.font_manager.get_font_name(bold=font.bold)
        lines = list(lines)

        def op(canvas):
            canvas.setFont(font_name, font.size)
            canvas.setFillColor(colors.HexColor(font.color))
            for i, line in enumerate(lines):
                baseline = coordinate_utils.baseline_for_line(y, i, font.size, font.leading, page_height)
                if align == "left":
                    canvas.drawString(x, baseline, line)
                else:
                    line_width = canvas.stringWidth(line, font_name, font.size)
                    if align == "center":
                        line_x = coordinate_utils.centered_x(x, width, line_width)
                    else:
                        line_x = coordinate_utils.right_aligned_x(x, width, line_width)
                    canvas.drawString(line_x, baseline, line)

        self._pages[page_index].append(op)

    def draw_line(self, page_index: int, x1: float, y1: float, x2: float, y2: float,
                  color: str, line_width: float = 0.5):
        """Queue a straight rule between two top-down points."""
        self.begin_page(page_index)
        page_height = self.geometry.page_height

        def op(canvas):
            canvas.setStrokeColor(colors.HexColor(color))
            canvas.setLineWidth(line_width)
            canvas.line(
                x1, coordinate_utils.flip_y_coordinate(y1, page_height),
                x2, coordinate_utils.flip_y_coordinate(y2, page_height),
            )

        self._pages[page_index].append(op)

    def finalize(self) -> bytes:
        """
        Write every page and return the PDF bytes.

        Returns:
            Complete PDF document

        Raises:
            SurfaceError: If ReportLab fails to write the document
        """
        buffer = io.BytesIO()
        try:
            canvas = pdfcanvas.Canvas(
                buffer,
                pagesize=(self.geometry.page_width, self.geometry.page_height),
            )
            canvas.setCreator(DOCUMENT_CREATOR)
            if self.author:
                canvas.setAuthor(self.author)
            if self.title:
                canvas.setTitle(self.title)

            for page_index in sorted(self._pages) or [0]:
                for op in self._pages.get(page_index, []):
                    op(canvas)
                canvas.showPage()

            canvas.save()
        except Exception as e:
            raise SurfaceError(f"Could not write PDF: {e}") from e

        return buffer.getvalue()
