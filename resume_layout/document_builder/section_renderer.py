"""Section Renderer Module

Measures and places the content of each résumé section top-to-bottom inside a
column, asking the page cursor for room before every block.

Pagination rules shared by every section:
- A heading is only drawn when the block that follows it fits below it: the
  whole block when heading and block fit on one page, otherwise its first line.
- An entry heading is reserved together with its first detail bullet.
- A paragraph that fits on a fresh page is moved there whole; a paragraph
  taller than a page is split between lines, never inside one. A skills-grid
  row taller than a page is split the same way, all cells at the same line.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import (
    BULLET,
    DATE_GAP,
    DETAIL_INDENT,
    GRID_GUTTER,
    SECTION_LOOKAHEAD_MIN,
    SKILL_GRID_COLUMNS,
)
from ..resume import CustomSection, HistoryEntry, PersonalInfo, Project
from ..utils import format_year_range, join_present
from .measurement import TextMeasurer
from .page_cursor import CursorMark, PageCursor, PageGeometry
from .style_resolver import FontSpec, StyleSheet
from .surface import DrawingSurface


@dataclass(frozen=True)
class Column:
    """Horizontal extent of a column: left edge and width in points."""

    x: float
    width: float

    @classmethod
    def full_width(cls, geometry: PageGeometry) -> "Column":
        return cls(geometry.margin_left, geometry.content_width)

    @property
    def right(self) -> float:
        return self.x + self.width

    def inset(self, indent: float) -> "Column":
        return Column(self.x + indent, self.width - indent)


@dataclass(frozen=True)
class HeaderLayout:
    """How a template arranges the name and contact block.

    Attributes:
        contact_groups: Each tuple of PersonalInfo field names becomes one line
                        (one field per tuple stacks the fields)
        separator: Joins the fields of one line
        align: "left" or "center"
        website_prefix: Text placed before the website
        rule_color: If set, a horizontal rule is drawn under the name
    """

    contact_groups: Tuple[Tuple[str, ...], ...]
    separator: str = " | "
    align: str = "left"
    website_prefix: str = ""
    rule_color: Optional[str] = None


@dataclass(frozen=True)
class _EntryPlan:
    """Measured history entry, ready to draw."""

    heading_lines: List[str]
    date_lines: List[str]
    heading_height: float
    bullets: List[List[str]]
    unit_height: float
    keep_first_whole: bool


class SectionRenderer:
    """Draws résumé sections through a measurer, a cursor and a surface.

    One instance serves one render; every add_* method returns the cursor's
    y position after the section.
    """

    def __init__(self, surface: DrawingSurface, measurer: TextMeasurer,
                 style: StyleSheet, cursor: PageCursor):
        """
        Initialize section renderer.

        Args:
            surface: Drawing surface receiving wrapped text and rules
            measurer: Measures and wraps text (same line breaks are drawn)
            style: Resolved fonts and spacing for this render
            cursor: Page cursor shared by every section of the render
        """
        self.surface = surface
        self.measurer = measurer
        self.style = style
        self.cursor = cursor

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _wrap(self, text: Optional[str], font: FontSpec, width: float) -> List[str]:
        if not text or not text.strip():
            return []
        return self.measurer.wrap(text, font, width)

    def _height(self, lines: Sequence[str], font: FontSpec) -> float:
        return len(lines) * self.measurer.line_height(font)

    def _make_room(self, height: float):
        """Break the page unless the block fits or the page is still empty."""
        if self.cursor.at_page_top:
            return
        self.cursor.ensure_room(min(height, self.cursor.geometry.content_height))

    def _kept_with(self, head: float, lines: Sequence[str], font: FontSpec) -> Tuple[float, bool]:
        """
        Room to reserve for a heading and the block that must follow it.

        Returns:
            (height, keep_whole): the whole block is kept with the heading when
            both fit on one page; otherwise only its first line is.
        """
        body = self._height(lines, font)
        if head + body <= self.cursor.geometry.content_height:
            return head + body, True
        return head + (self.measurer.line_height(font) if lines else 0.0), False

    def _draw_lines(self, lines: Sequence[str], font: FontSpec, column: Column,
                    align: str = "left", keep_whole: bool = True):
        """
        Draw wrapped lines at the cursor, paginating between lines.

        Args:
            lines: Lines from the measurer
            font: Font the lines were wrapped with
            column: Column the lines were wrapped to
            align: Horizontal alignment inside the column
            keep_whole: Move the block to a fresh page when it fits there but not here
        """
        if not lines:
            return

        leading = self.measurer.line_height(font)
        height = len(lines) * leading
        if keep_whole and not self.cursor.reserve(height) \
                and height <= self.cursor.geometry.content_height:
            self._make_room(height)

        remaining_lines = list(lines)
        while remaining_lines:
            fit = int((self.cursor.remaining + 1e-6) // leading)
            if fit <= 0:
                if self.cursor.at_page_top:
                    fit = 1
                else:
                    self.cursor.new_page()
                    continue
            chunk, remaining_lines = remaining_lines[:fit], remaining_lines[fit:]
            self.surface.draw_text(
                self.cursor.page_index, chunk, column.x, self.cursor.y,
                column.width, font, align,
            )
            self.cursor.advance(len(chunk) * leading)
            if remaining_lines:
                self.cursor.new_page()

    def _draw_paragraph(self, text: str, font: FontSpec, column: Column,
                        align: str = "left"):
        self._draw_lines(self._wrap(text, font, column.width), font, column, align)

    def _title_lines(self, title: str, column: Column) -> Tuple[List[str], float]:
        """Wrapped section title and its height including the gap below it."""
        font = self.style.font("section_title")
        lines = self._wrap(title, font, column.width)
        return lines, self._height(lines, font) + self.style.gap("after_title")

    def _section_title(self, title: str, column: Column, first_unit_height: float):
        """
        Draw a section title if its first content unit fits below it.

        Args:
            title: Section title text
            column: Column to draw in
            first_unit_height: Height of the first block that follows the title
        """
        lines, title_height = self._title_lines(title, column)
        self._make_room(title_height + max(first_unit_height, SECTION_LOOKAHEAD_MIN))
        self._draw_lines(lines, self.style.font("section_title"), column)
        self.cursor.advance(self.style.gap("after_title"))

    def _bullet_lines(self, text: str, column: Column) -> List[str]:
        return self._wrap(f"{BULLET} {text.strip()}", self.style.font("detail_bullet"), column.width)

    # ------------------------------------------------------------------
    # Header and decoration
    # ------------------------------------------------------------------

    def add_header(self, info: PersonalInfo, column: Column, layout: HeaderLayout) -> float:
        """
        Draw the name and contact block at the top of the first page.

        The name is never pagination-checked: it is always the first block.
        Empty contact fields are omitted; a line whose fields are all empty
        is skipped.
        """
        title_font = self.style.font("document_title")
        contact_font = self.style.font("caption")

        name_lines = self._wrap(info.name, title_font, column.width)
        if name_lines:
            self.surface.draw_text(
                self.cursor.page_index, name_lines, column.x, self.cursor.y,
                column.width, title_font, layout.align,
            )
            self.cursor.advance(self._height(name_lines, title_font))

        if layout.rule_color:
            self.cursor.advance(5)
            self.add_rule(column, layout.rule_color)
            self.cursor.advance(10)
        else:
            self.cursor.advance(self.style.gap("contact_line"))

        for group in layout.contact_groups:
            text = join_present((getattr(info, field) for field in group), layout.separator)
            if text:
                self._draw_paragraph(text, contact_font, column, layout.align)
                self.cursor.advance(self.style.gap("contact_line"))

        if info.website and info.website.strip():
            self._draw_paragraph(
                f"{layout.website_prefix}{info.website.strip()}", contact_font, column, layout.align,
            )
            self.cursor.advance(self.style.gap("contact_line"))

        self.cursor.advance(self.style.gap("section_gap"))
        return self.cursor.y

    def add_rule(self, column: Column, color: str) -> float:
        """Draw a horizontal rule across the column at the cursor."""
        self.surface.draw_line(
            self.cursor.page_index, column.x, self.cursor.y, column.right, self.cursor.y, color,
        )
        return self.cursor.y

    def add_vertical_rule(self, x: float, start: CursorMark, color: str):
        """Draw a vertical divider on every page from the start mark down."""
        geometry = self.cursor.geometry
        for page_index in range(start.page_index, self.surface.page_count):
            top = start.y if page_index == start.page_index else geometry.margin_top
            self.surface.draw_line(page_index, x, top, x, geometry.bottom_limit, color)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def add_text_section(self, title: str, text: str, column: Column) -> float:
        """
        Draw a titled paragraph. Empty text draws nothing, not even the title.
        """
        if not text or not text.strip():
            return self.cursor.y
        self.cursor.check_cancelled()

        font = self.style.font("body_text")
        lines = self._wrap(text, font, column.width)
        _, title_height = self._title_lines(title, column)
        needed, keep_whole = self._kept_with(title_height, lines, font)

        self._section_title(title, column, needed - title_height)
        self._draw_lines(lines, font, column, keep_whole=keep_whole)
        self.cursor.advance(self.style.gap("section_gap"))
        return self.cursor.y

    def add_history_section(self, title: str, entries: Sequence[HistoryEntry], column: Column,
                            date_position: str = "below") -> float:
        """
        Draw professional or educational history.

        Each entry is a "{title}, {subtitle}" heading, its date range, then one
        bullet per detail indented under the heading.

        Args:
            title: Section title
            entries: Entries in display order
            column: Column to draw in
            date_position: "below" the heading or "right"-aligned on the heading line
        """
        if not entries:
            return self.cursor.y
        self.cursor.check_cancelled()

        plans = [self._plan_entry(entry, column, date_position) for entry in entries]
        self._section_title(title, column, plans[0].unit_height)

        bullet_font = self.style.font("detail_bullet")
        detail_column = column.inset(DETAIL_INDENT)
        for plan in plans:
            self.cursor.check_cancelled()
            self._make_room(plan.unit_height)
            self._draw_entry_heading(plan, column, date_position)
            self.cursor.advance(self.style.gap("after_heading"))

            for index, lines in enumerate(plan.bullets):
                keep_whole = plan.keep_first_whole if index == 0 else True
                self._draw_lines(lines, bullet_font, detail_column, keep_whole=keep_whole)
                self.cursor.advance(self.style.gap("between_bullets"))

            self.cursor.advance(self.style.gap("between_entries"))

        self.cursor.advance(self.style.gap("section_gap"))
        return self.cursor.y

    def _plan_entry(self, entry: HistoryEntry, column: Column, date_position: str) -> _EntryPlan:
        """Wrap an entry and work out how much room its heading needs."""
        heading_font = self.style.font("entry_title")
        date_font = self.style.font("caption")
        date_text = format_year_range(entry.start_year, entry.end_year)

        if date_position == "right":
            date_width = self.measurer.text_width(date_text, date_font)
            heading_width = max(column.width - date_width - DATE_GAP, column.width / 2)
            heading_lines = self._wrap(entry.heading, heading_font, heading_width)
            date_lines = [date_text]
            heading_height = max(self._height(heading_lines, heading_font),
                                 self._height(date_lines, date_font))
        else:
            heading_lines = self._wrap(entry.heading, heading_font, column.width)
            date_lines = self._wrap(date_text, date_font, column.width)
            heading_height = (self._height(heading_lines, heading_font)
                              + self._height(date_lines, date_font))

        detail_column = column.inset(DETAIL_INDENT)
        bullets = [
            self._bullet_lines(detail, detail_column)
            for detail in entry.details if detail and detail.strip()
        ]
        unit_height, keep_first_whole = self._kept_with(
            heading_height + self.style.gap("after_heading"),
            bullets[0] if bullets else [],
            self.style.font("detail_bullet"),
        )
        return _EntryPlan(heading_lines, date_lines, heading_height, bullets,
                          unit_height, keep_first_whole)

    def _draw_entry_heading(self, plan: _EntryPlan, column: Column, date_position: str):
        heading_font = self.style.font("entry_title")
        date_font = self.style.font("caption")

        if date_position == "right":
            self._make_room(plan.heading_height)
            page_index, top = self.cursor.page_index, self.cursor.y
            self.surface.draw_text(page_index, plan.date_lines, column.x, top,
                                   column.width, date_font, "right")
            self._draw_lines(plan.heading_lines, heading_font, column)
            # The date line may be taller than the heading
            if self.cursor.page_index == page_index and self.cursor.y < top + plan.heading_height:
                self.cursor.advance(top + plan.heading_height - self.cursor.y)
        else:
            self._draw_lines(plan.heading_lines, heading_font, column)
            self._draw_lines(plan.date_lines, date_font, column)

    def add_projects_section(self, title: str, projects: Sequence[Project], column: Column) -> float:
        """
        Draw projects: title line, then details paragraph.

        A project missing its title or details renders only the part it has.
        """
        projects = [project for project in projects if not project.is_empty]
        if not projects:
            return self.cursor.y
        self.cursor.check_cancelled()

        title_font = self.style.font("entry_title")
        details_font = self.style.font("body_text")

        plans = []
        for project in projects:
            title_lines = self._wrap(project.title, title_font, column.width)
            details_lines = self._wrap(project.details, details_font, column.width)
            head = self._height(title_lines, title_font)
            if title_lines and details_lines:
                head += self.style.gap("after_heading")
            unit_height, keep_whole = self._kept_with(head, details_lines, details_font)
            plans.append((title_lines, details_lines, unit_height, keep_whole))

        self._section_title(title, column, plans[0][2])

        for title_lines, details_lines, unit_height, keep_whole in plans:
            self.cursor.check_cancelled()
            self._make_room(unit_height)
            if title_lines:
                self._draw_lines(title_lines, title_font, column)
                if details_lines:
                    self.cursor.advance(self.style.gap("after_heading"))
            self._draw_lines(details_lines, details_font, column, keep_whole=keep_whole)
            self.cursor.advance(self.style.gap("between_entries"))

        self.cursor.advance(self.style.gap("section_gap"))
        return self.cursor.y

    def add_skills_inline(self, title: str, skills: Sequence[str], column: Column,
                          separator: str) -> float:
        """Draw skills as one wrapped paragraph joined by separator."""
        return self.add_text_section(title, join_present(skills, separator), column)

    def add_bullet_list(self, title: str, items: Sequence[str], column: Column) -> float:
        """Draw a titled bulleted list, one pagination check per bullet."""
        items = [item for item in items if item and item.strip()]
        if not items:
            return self.cursor.y
        self.cursor.check_cancelled()

        font = self.style.font("detail_bullet")
        bullets = [self._bullet_lines(item, column) for item in items]
        _, title_height = self._title_lines(title, column)
        needed, keep_first_whole = self._kept_with(title_height, bullets[0], font)
        self._section_title(title, column, needed - title_height)

        for index, lines in enumerate(bullets):
            keep_whole = keep_first_whole if index == 0 else True
            self._draw_lines(lines, font, column, keep_whole=keep_whole)
            self.cursor.advance(self.style.gap("between_bullets"))

        self.cursor.advance(self.style.gap("section_gap"))
        return self.cursor.y

    def add_skills_grid(self, title: str, skills: Sequence[str], column: Column,
                        columns: int = SKILL_GRID_COLUMNS) -> float:
        """
        Draw skills in a grid of equal-width columns, filled row by row.

        Row height is the tallest cell in the row; the page-break check
        happens once per row. A row taller than a page is split between
        lines, every cell at the same line.
        """
        skills = [skill for skill in skills if skill and skill.strip()]
        if not skills:
            return self.cursor.y
        self.cursor.check_cancelled()

        font = self.style.font("detail_bullet")
        cell_width = (column.width - GRID_GUTTER * (columns - 1)) / columns
        rows = []
        for start in range(0, len(skills), columns):
            cells = [
                self._bullet_lines(skill, Column(column.x, cell_width))
                for skill in skills[start:start + columns]
            ]
            rows.append((cells, max(self._height(cell, font) for cell in cells)))

        _, title_height = self._title_lines(title, column)
        first_row = rows[0][1]
        if title_height + first_row > self.cursor.geometry.content_height:
            first_row = self.measurer.line_height(font)
        self._section_title(title, column, first_row)

        for cells, row_height in rows:
            if row_height <= self.cursor.geometry.content_height:
                self._make_room(row_height)
            self._draw_grid_row(cells, font, column, cell_width)
            self.cursor.advance(self.style.gap("between_bullets"))

        self.cursor.advance(self.style.gap("section_gap"))
        return self.cursor.y

    def _draw_grid_row(self, cells: Sequence[List[str]], font: FontSpec, column: Column,
                       cell_width: float):
        leading = self.measurer.line_height(font)
        depth = max(len(cell) for cell in cells)
        offset = 0
        while offset < depth:
            fit = int((self.cursor.remaining + 1e-6) // leading)
            if fit <= 0:
                if self.cursor.at_page_top:
                    fit = 1
                else:
                    self.cursor.new_page()
                    continue
            for index, cell in enumerate(cells):
                part = cell[offset:offset + fit]
                if part:
                    cell_x = column.x + index * (cell_width + GRID_GUTTER)
                    self.surface.draw_text(
                        self.cursor.page_index, part, cell_x, self.cursor.y, cell_width, font,
                    )
            self.cursor.advance(min(fit, depth - offset) * leading)
            offset += fit
            if offset < depth:
                self.cursor.new_page()

    def add_custom_sections(self, sections: Sequence[CustomSection], column: Column,
                            uppercase_titles: bool = False) -> float:
        """Draw free-form sections as bulleted lists."""
        for section in sections:
            title = section.title.upper() if uppercase_titles else section.title
            self.add_bullet_list(title, section.content, column)
        return self.cursor.y
