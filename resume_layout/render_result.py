"""Render Result Dataclass

Output of one résumé render.
"""
from dataclasses import dataclass

from .render_options import StyleConfig, TemplateKind
from .utils import clean_filename, format_file_size


@dataclass(frozen=True)
class RenderResult:
    """Result of rendering one résumé.

    Attributes:
        pdf_bytes: Complete PDF document
        page_count: Number of pages in the document
        template: Template the résumé was laid out with
        style_config: Font size and spacing selection used
        person_name: Name from the résumé header, used for the export file name
    """

    pdf_bytes: bytes
    page_count: int
    template: TemplateKind
    style_config: StyleConfig
    person_name: str = ""

    @property
    def size_label(self) -> str:
        """Human-readable document size, e.g. "45.3 KB"."""
        return format_file_size(len(self.pdf_bytes))

    @property
    def suggested_filename(self) -> str:
        """File name offered to the share sheet, e.g. "Jane_Doe_Resume.pdf"."""
        if not self.person_name.strip():
            return "Resume.pdf"
        return f"{clean_filename(self.person_name)}_Resume.pdf"
