"""Shared fixtures: a deterministic measurer, a recording surface, sample résumés."""
from dataclasses import dataclass
from typing import List, Sequence

import pytest

from resume_layout import (
    CustomSection,
    HistoryEntry,
    PersonalInfo,
    Project,
    ResumeDocument,
    StyleConfig,
)
from resume_layout.document_builder import DocumentBuilder, DrawingSurface, TextMeasurer
from resume_layout.document_builder.page_cursor import PageGeometry
from resume_layout.document_builder.style_resolver import FontSpec

# Every glyph is half as wide as the font size
CHAR_WIDTH_FACTOR = 0.5


class FakeMeasurer(TextMeasurer):
    """Fixed-width measurer so layout tests do not depend on installed fonts."""

    def __init__(self):
        self.wrap_calls = 0

    def text_width(self, text: str, font: FontSpec) -> float:
        return len(text) * font.size * CHAR_WIDTH_FACTOR

    def wrap(self, text: str, font: FontSpec, max_width: float) -> List[str]:
        self.wrap_calls += 1
        return super().wrap(text, font, max_width)


@dataclass
class TextBlock:
    page: int
    lines: List[str]
    x: float
    y: float
    width: float
    font: FontSpec
    align: str

    @property
    def height(self) -> float:
        return len(self.lines) * self.font.leading

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Rule:
    page: int
    x1: float
    y1: float
    x2: float
    y2: float
    color: str


class RecordingSurface(DrawingSurface):
    """Keeps every drawing call in order instead of writing a PDF."""

    def __init__(self):
        self.blocks: List[TextBlock] = []
        self.rules: List[Rule] = []
        self.pages_begun: List[int] = []

    def begin_page(self, page_index: int):
        if page_index not in self.pages_begun:
            self.pages_begun.append(page_index)

    def draw_text(self, page_index: int, lines: Sequence[str], x: float, y: float,
                  width: float, font: FontSpec, align: str = "left"):
        self.begin_page(page_index)
        self.blocks.append(TextBlock(page_index, list(lines), x, y, width, font, align))

    def draw_line(self, page_index: int, x1: float, y1: float, x2: float, y2: float,
                  color: str, line_width: float = 0.5):
        self.rules.append(Rule(page_index, x1, y1, x2, y2, color))

    @property
    def page_count(self) -> int:
        return max(self.pages_begun) + 1 if self.pages_begun else 0

    def finalize(self) -> bytes:
        return b"%PDF-recorded"

    # Helpers for assertions

    def all_text(self) -> str:
        return " ".join(line for block in self.blocks for line in block.lines)

    def lines_in_reading_order(self) -> List[str]:
        ordered = sorted(self.blocks, key=lambda block: (block.page, block.y))
        return [line for block in ordered for line in block.lines]

    def blocks_containing(self, text: str) -> List[TextBlock]:
        return [block for block in self.blocks if any(text in line for line in block.lines)]


@pytest.fixture
def geometry() -> PageGeometry:
    return PageGeometry.default()


@pytest.fixture
def measurer() -> FakeMeasurer:
    return FakeMeasurer()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def render_layout():
    """Render with the fake measurer and return the recording surface."""

    def _render(resume: ResumeDocument, template, style_config: StyleConfig = None,
                cancel_event=None) -> RecordingSurface:
        surface = RecordingSurface()
        builder = DocumentBuilder(
            template,
            style_config=style_config,
            measurer=FakeMeasurer(),
            surface=surface,
            cancel_event=cancel_event,
        )
        builder.build(resume)
        return surface

    return _render


@pytest.fixture
def full_resume() -> ResumeDocument:
    """Every field populated with short, distinct values."""
    return ResumeDocument(
        personal_info=PersonalInfo(
            name="Jane Doe",
            address="Springfield",
            phone_number="555-0100",
            email="jane@example.com",
            website="janedoe.dev",
        ),
        summary="Backend engineer focused on reliable data systems.",
        professional_history=(
            HistoryEntry(
                title="Acme",
                subtitle="Engineer",
                start_year=2019,
                end_year=None,
                details=("Built billing", "Led migration"),
            ),
            HistoryEntry(
                title="Initech",
                subtitle="Intern",
                start_year=2017,
                end_year=2018,
                details=("Wrote tests",),
            ),
        ),
        educational_history=(
            HistoryEntry(
                title="State U",
                subtitle="BSc",
                start_year=2013,
                end_year=2017,
                details=("Honors",),
            ),
        ),
        projects=(
            Project(title="Parser", details="Fast CSV parser"),
        ),
        skills=("Python", "SQL", "Docker"),
        custom_sections=(
            CustomSection(title="Languages", content=("French",)),
        ),
    )


def make_long_resume(entries: int = 20, bullets: int = 5) -> ResumeDocument:
    """Résumé with enough history to span several pages."""
    history = tuple(
        HistoryEntry(
            title=f"Company {i:02d}",
            subtitle=f"Role {i:02d}",
            start_year=2000 + i,
            end_year=2001 + i,
            details=tuple(f"Detail {i:02d}-{j} shipped work" for j in range(1, bullets + 1)),
        )
        for i in range(1, entries + 1)
    )
    return ResumeDocument(
        personal_info=PersonalInfo(name="Long Resume", email="long@example.com"),
        summary="Summary line.",
        professional_history=history,
        skills=("Python", "Go"),
    )


@pytest.fixture
def long_resume() -> ResumeDocument:
    return make_long_resume()


@pytest.fixture
def long_resume_factory():
    return make_long_resume
