"""Document Builder Module

Orchestrates one résumé render by coordinating specialized components:
- FontManager: Font registration and fallback
- TextMeasurer: Text wrapping and measurement
- style_resolver: Concrete fonts and gaps for the chosen scales
- PageCursor: Vertical position and page breaks
- SectionRenderer + template composers: What goes where
- DrawingSurface: Pages and PDF bytes

Every render builds its own cursor, stylesheet, measurer and surface, so
concurrent renders share nothing but the default FontManager, whose fonts
are registered in ReportLab's registry once per process.
"""
import asyncio
import threading
from typing import Optional, Union

from ..exceptions import TemplateLockedError
from ..render_options import StyleConfig, TemplateKind
from ..render_result import RenderResult
from ..resume import ResumeDocument
from ..utils import format_file_size
from .font_manager import FontManager
from .measurement import ReportLabMeasurer, TextMeasurer
from .page_cursor import PageCursor, PageGeometry
from .section_renderer import SectionRenderer
from .style_resolver import resolve_for_template
from .surface import DrawingSurface, ReportLabSurface
from .templates import get_composer


_default_font_manager: Optional[FontManager] = None
_default_font_lock = threading.Lock()


def default_font_manager() -> FontManager:
    """Process-wide FontManager; fonts are registered once, on first use."""
    global _default_font_manager
    with _default_font_lock:
        if _default_font_manager is None:
            _default_font_manager = FontManager()
        return _default_font_manager


class DocumentBuilder:
    """Build one résumé PDF.

    A builder renders a single document; create a new one per render.

    Attributes:
        template: Template the résumé is laid out with
        style_config: Font size and spacing selection
        geometry: Page size and margins
        font_manager: Fonts shared by the measurer and the surface
        measurer: Text measurement backend
    """

    def __init__(self, template: Union[TemplateKind, str],
                 style_config: Optional[StyleConfig] = None,
                 geometry: Optional[PageGeometry] = None,
                 font_manager: Optional[FontManager] = None,
                 measurer: Optional[TextMeasurer] = None,
                 surface: Optional[DrawingSurface] = None,
                 cancel_event: Optional[threading.Event] = None):
        """
        Initialize document builder.

        Args:
            template: Template kind or its name
            style_config: Scales to apply; defaults to medium / normal
            geometry: Page geometry; defaults to US Letter with standard margins
            font_manager: Optional pre-configured FontManager; defaults to the shared one
            measurer: Optional measurer (tests pass a deterministic one)
            surface: Optional drawing surface; defaults to a ReportLab PDF surface
            cancel_event: Optional event; setting it aborts the render at the next checkpoint

        Raises:
            InvalidConfigurationError: If the template or a scale name is unknown
        """
        self.template = TemplateKind.parse(template)
        self.style_config = style_config or StyleConfig()
        self.geometry = geometry or PageGeometry.default()
        self.cancel_event = cancel_event

        # Font registration is only needed when ReportLab measures or draws
        if font_manager is None and (measurer is None or surface is None):
            font_manager = default_font_manager()
        self.font_manager = font_manager
        self.measurer = measurer or ReportLabMeasurer(font_manager)
        self._surface = surface

        self.style = resolve_for_template(
            self.template.value,
            self.style_config.font_size,
            self.style_config.spacing,
        )

    def build(self, resume: ResumeDocument) -> RenderResult:
        """
        Lay out the résumé and produce the PDF.

        Args:
            resume: Résumé to render

        Returns:
            RenderResult with PDF bytes and page count

        Raises:
            RenderCancelledError: If cancel_event was set before the render finished
            MeasurementError: If text could not be measured
            SurfaceError: If the PDF could not be written
        """
        name = resume.personal_info.name
        print(f"DEBUG: Rendering '{self.template.display_name}' template "
              f"(font size: {self.style_config.font_size.value}, spacing: {self.style_config.spacing.value})")

        surface = self._surface or ReportLabSurface(
            self.geometry, self.font_manager, title=_document_title(name), author=name,
        )
        cursor = PageCursor(self.geometry, on_new_page=surface.begin_page, cancel_event=self.cancel_event)
        cursor.check_cancelled()

        renderer = SectionRenderer(surface, self.measurer, self.style, cursor)
        get_composer(self.template)(renderer, resume)
        cursor.check_cancelled()

        pdf_bytes = surface.finalize()
        print(f"DEBUG: Finalized {surface.page_count} page(s), {format_file_size(len(pdf_bytes))}")

        return RenderResult(
            pdf_bytes=pdf_bytes,
            page_count=surface.page_count,
            template=self.template,
            style_config=self.style_config,
            person_name=name,
        )


def _document_title(name: str) -> str:
    return f"{name} - Resume" if name and name.strip() else "Resume"


def _check_entitlement(template: TemplateKind, entitled: bool):
    if template.requires_entitlement and not entitled:
        raise TemplateLockedError(template.display_name, template.product_id)


def render(resume: ResumeDocument, template: Union[TemplateKind, str],
           style_config: Optional[StyleConfig] = None, *, entitled: bool = True,
           cancel_event: Optional[threading.Event] = None,
           font_manager: Optional[FontManager] = None) -> RenderResult:
    """
    Render a résumé and keep the render details.

    Args:
        resume: Résumé to render
        template: Template kind or its name
        style_config: Font size and spacing selection (default medium / normal)
        entitled: Whether the user owns the template's product; premium
                  templates are refused without it
        cancel_event: Optional event; setting it aborts the render
        font_manager: Optional pre-configured FontManager

    Returns:
        RenderResult

    Raises:
        InvalidConfigurationError: Unknown template or scale
        TemplateLockedError: Premium template without entitlement
        RenderCancelledError: Render abandoned by the caller
    """
    template = TemplateKind.parse(template)
    _check_entitlement(template, entitled)
    builder = DocumentBuilder(
        template,
        style_config=style_config,
        font_manager=font_manager,
        cancel_event=cancel_event,
    )
    return builder.build(resume)


def generate(resume: ResumeDocument, template: Union[TemplateKind, str],
             style_config: Optional[StyleConfig] = None, *, entitled: bool = True,
             cancel_event: Optional[threading.Event] = None,
             font_manager: Optional[FontManager] = None) -> bytes:
    """
    Render a résumé to PDF bytes.

    Same arguments and errors as render().
    """
    return render(
        resume, template, style_config,
        entitled=entitled, cancel_event=cancel_event, font_manager=font_manager,
    ).pdf_bytes


async def generate_async(resume: ResumeDocument, template: Union[TemplateKind, str],
                         style_config: Optional[StyleConfig] = None, *,
                         entitled: bool = True,
                         font_manager: Optional[FontManager] = None) -> bytes:
    """
    Render a résumé on a worker thread.

    Cancelling the awaiting task stops the worker at its next page break or
    section boundary; no bytes are produced for a cancelled render.
    """
    cancel_event = threading.Event()
    try:
        return await asyncio.to_thread(
            generate, resume, template, style_config,
            entitled=entitled, cancel_event=cancel_event, font_manager=font_manager,
        )
    except asyncio.CancelledError:
        cancel_event.set()
        raise
