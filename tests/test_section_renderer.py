"""Tests for section layout and pagination, using the fake measurer."""
import re

import pytest

from resume_layout import CustomSection, HistoryEntry, PersonalInfo, Project
from resume_layout.config import BULLET
from resume_layout.document_builder import Column, HeaderLayout, PageCursor, SectionRenderer
from resume_layout.document_builder.style_resolver import resolve_for_template
from resume_layout.document_builder.templates import CLASSIC_HEADER, ORIGINAL_HEADER
from resume_layout.render_options import FontSizeScale, SpacingScale


@pytest.fixture
def renderer(surface, measurer, geometry):
    cursor = PageCursor(geometry, on_new_page=surface.begin_page)
    style = resolve_for_template("original", FontSizeScale.MEDIUM, SpacingScale.NORMAL)
    return SectionRenderer(surface, measurer, style, cursor)


@pytest.fixture
def column(geometry):
    return Column.full_width(geometry)


def move_to_remaining(renderer, remaining):
    """Place the cursor so that exactly `remaining` points are left on the page."""
    cursor = renderer.cursor
    cursor.advance(cursor.geometry.content_height - remaining)
    assert cursor.remaining == pytest.approx(remaining)


def assert_within_margins(surface, geometry):
    for block in surface.blocks:
        assert block.y >= geometry.margin_top - 1e-6
        assert block.bottom <= geometry.bottom_limit + 1e-6, block.lines


def drawn_words(surface, prefix):
    """Numbered words with the given prefix, in the order they were drawn."""
    return re.findall(rf"\b{prefix}\d{{4}}\b", surface.all_text())


class TestHeader:
    def test_missing_fields_are_omitted(self, renderer, surface, column):
        info = PersonalInfo(name="Jane Doe", email="jane@example.com", website="")
        renderer.add_header(info, column, ORIGINAL_HEADER)

        texts = [line for block in surface.blocks for line in block.lines]
        assert texts == ["Jane Doe", "jane@example.com"]
        assert "Website" not in surface.all_text()

    def test_website_line_has_prefix(self, renderer, surface, column):
        info = PersonalInfo(name="Jane", website="jane.dev")
        renderer.add_header(info, column, ORIGINAL_HEADER)

        assert surface.blocks_containing("Website: jane.dev")

    def test_inline_contact_line_skips_empty_parts(self, renderer, surface, column):
        info = PersonalInfo(name="Jane", email="jane@example.com", address="Springfield")
        renderer.add_header(info, column, CLASSIC_HEADER)

        assert surface.blocks_containing("jane@example.com | Springfield")
        assert all(block.align == "center" for block in surface.blocks)
        assert len(surface.rules) == 1

    def test_stacked_contact_lines(self, renderer, surface, column):
        layout = HeaderLayout(contact_groups=(("email",), ("phone_number",)))
        renderer.add_header(PersonalInfo(email="a@b.c", phone_number="555"), column, layout)

        assert [block.lines for block in surface.blocks] == [["a@b.c"], ["555"]]
        assert surface.blocks[0].y < surface.blocks[1].y


class TestTextSection:
    def test_empty_text_draws_nothing(self, renderer, surface, column):
        y = renderer.cursor.y
        assert renderer.add_text_section("Summary", "   ", column) == y
        assert surface.blocks == []

    def test_title_moves_with_first_line(self, renderer, surface, column, geometry):
        # Room for the title itself, not for the title and the text below it
        move_to_remaining(renderer, 30)
        renderer.add_text_section("Summary", "Short summary.", column)

        title, body = surface.blocks
        assert title.lines == ["Summary"]
        assert title.page == body.page == 1
        assert title.y == geometry.margin_top

    def test_paragraph_that_fits_a_page_is_kept_together(self, renderer, surface, column):
        text = " ".join(f"word{i:03d}" for i in range(150))
        move_to_remaining(renderer, 120)
        renderer.add_text_section("Summary", text, column)

        body_blocks = [block for block in surface.blocks if block.lines != ["Summary"]]
        assert len(body_blocks) == 1
        assert surface.blocks[0].page == body_blocks[0].page == 1

    def test_paragraph_taller_than_page_is_split_between_lines(self, renderer, surface, column,
                                                              measurer, geometry):
        text = " ".join(f"word{i:03d}" for i in range(1200))
        renderer.add_text_section("Summary", text, column)

        body_blocks = [block for block in surface.blocks if block.lines != ["Summary"]]
        assert len(body_blocks) > 1
        assert len({block.page for block in body_blocks}) == len(body_blocks)

        drawn = [line for block in body_blocks for line in block.lines]
        expected = measurer.wrap(text, renderer.style.font("body_text"), column.width)
        assert drawn == expected
        assert_within_margins(surface, geometry)

    def test_inline_skills(self, renderer, surface, column):
        renderer.add_skills_inline("Skills", ["Python", "", "Go"], column, " • ")

        assert surface.blocks_containing("Python • Go")


class TestHistorySection:
    def test_no_entries_draws_nothing(self, renderer, surface, column):
        renderer.add_history_section("Professional History", [], column)
        assert surface.blocks == []

    def test_entry_layout(self, renderer, surface, column):
        entry = HistoryEntry("Acme", "Engineer", 2019, None, ("Built billing", ""))
        renderer.add_history_section("Professional History", [entry], column)

        lines = surface.lines_in_reading_order()
        assert lines == [
            "Professional History",
            "Acme, Engineer",
            "2019 - Present",
            f"{BULLET} Built billing",
        ]
        bullet = surface.blocks_containing("Built billing")[0]
        heading = surface.blocks_containing("Acme, Engineer")[0]
        assert bullet.x > heading.x

    def test_right_aligned_dates_share_the_heading_line(self, renderer, surface, column):
        entry = HistoryEntry("Acme", "Engineer", 2015, 2018, ("Built billing",))
        renderer.add_history_section("EXPERIENCE", [entry], column, date_position="right")

        date = surface.blocks_containing("2015 - 2018")[0]
        heading = surface.blocks_containing("Acme, Engineer")[0]
        assert date.align == "right"
        assert date.y == heading.y

    def test_whitespace_entry_keeps_only_its_dates(self, renderer, surface, column):
        entry = HistoryEntry("  ", " ", 2020, 2021, ("   ", ""))
        renderer.add_history_section("Professional History", [entry], column)

        assert surface.lines_in_reading_order() == ["Professional History", "2020 - 2021"]

    def test_detail_taller_than_page_is_split(self, renderer, surface, column, geometry):
        detail = " ".join(f"d{i:04d}" for i in range(2500))
        entry = HistoryEntry("Acme", "Engineer", 2019, None, (detail, "After"))
        renderer.add_history_section("Professional History", [entry], column)

        assert surface.page_count > 1
        assert_within_margins(surface, geometry)
        assert drawn_words(surface, "d") == [f"d{i:04d}" for i in range(2500)]
        heading = surface.blocks_containing("Acme, Engineer")[0]
        assert surface.blocks_containing("d0000")[0].page == heading.page
        assert surface.blocks_containing("After")[0].page == surface.page_count - 1

    @pytest.mark.parametrize("remaining", range(20, 260, 9))
    def test_heading_is_never_separated_from_first_bullet(self, renderer, surface, column,
                                                          geometry, remaining):
        entries = [
            HistoryEntry(f"Company {i}", "Role", 2000 + i, 2001 + i,
                         (f"First {i} bullet", f"Second {i} bullet"))
            for i in range(4)
        ]
        move_to_remaining(renderer, remaining)
        renderer.add_history_section("Professional History", entries, column)

        for i in range(4):
            heading = surface.blocks_containing(f"Company {i}, Role")[0]
            first_bullet = surface.blocks_containing(f"First {i} bullet")[0]
            assert heading.page == first_bullet.page

        title = surface.blocks_containing("Professional History")[0]
        first_heading = surface.blocks_containing("Company 0, Role")[0]
        assert title.page == first_heading.page
        assert_within_margins(surface, geometry)


class TestProjectsSection:
    def test_partial_projects_render_only_present_parts(self, renderer, surface, column):
        projects = [
            Project(title="Title only"),
            Project(details="Details only"),
            Project(),
        ]
        renderer.add_projects_section("Projects", projects, column)

        assert [block.lines for block in surface.blocks] == [
            ["Projects"], ["Title only"], ["Details only"],
        ]
        title_block = surface.blocks[1]
        details_block = surface.blocks[2]
        assert title_block.font == renderer.style.font("entry_title")
        assert details_block.font == renderer.style.font("body_text")

    def test_all_empty_projects_draw_no_title(self, renderer, surface, column):
        renderer.add_projects_section("Projects", [Project(), Project(title="")], column)
        assert surface.blocks == []

    def test_whitespace_projects_draw_no_title(self, renderer, surface, column):
        y = renderer.cursor.y
        renderer.add_projects_section("Projects", [Project(title="   ", details="  ")], column)

        assert surface.blocks == []
        assert renderer.cursor.y == y

    def test_no_blank_gap_for_missing_details(self, renderer, surface, column):
        renderer.add_projects_section("Projects", [Project(title="A"), Project(title="B")], column)

        a, b = surface.blocks[1], surface.blocks[2]
        gap = b.y - a.bottom
        assert gap == pytest.approx(renderer.style.gap("between_entries"))


class TestSkillsAndLists:
    def test_grid_fills_rows(self, renderer, surface, column):
        renderer.add_skills_grid("SKILLS", ["A", "B", "C", "D", "E"], column, columns=2)

        cells = surface.blocks[1:]
        assert len(cells) == 5
        rows = sorted({cell.y for cell in cells})
        assert len(rows) == 3
        assert cells[0].y == cells[1].y
        assert cells[0].x < cells[1].x
        assert cells[2].x == cells[0].x

    def test_grid_row_taller_than_page_is_split(self, renderer, surface, column, geometry):
        tall = " ".join(f"s{i:04d}" for i in range(3000))
        renderer.add_skills_grid("SKILLS", [tall, "SQL", "Docker"], column, columns=2)

        assert surface.page_count > 1
        assert_within_margins(surface, geometry)
        assert drawn_words(surface, "s") == [f"s{i:04d}" for i in range(3000)]

        first = surface.blocks_containing("s0000")[0]
        sql = surface.blocks_containing("SQL")[0]
        assert (sql.page, sql.y) == (first.page, first.y)
        assert sql.x > first.x
        title = surface.blocks_containing("SKILLS")[0]
        assert title.page == first.page

        last = surface.blocks_containing("s2999")[0]
        docker = surface.blocks_containing("Docker")[0]
        assert (docker.page, docker.y) >= (last.page, last.bottom)

    def test_grid_row_moves_to_next_page_when_it_fits_there(self, renderer, surface, column):
        move_to_remaining(renderer, 120)
        renderer.add_skills_grid("SKILLS", ["A", "B", " ".join(["word"] * 300)], column, columns=2)

        tall = surface.blocks_containing("word")
        assert len(tall) == 1
        assert tall[0].page == 1

    def test_bullet_taller_than_page_is_split(self, renderer, surface, column, geometry):
        tall = " ".join(f"b{i:04d}" for i in range(3000))
        renderer.add_bullet_list("Skills", ["Python", tall, "Go"], column)

        assert_within_margins(surface, geometry)
        assert drawn_words(surface, "b") == [f"b{i:04d}" for i in range(3000)]
        assert surface.lines_in_reading_order()[-1] == f"{BULLET} Go"

    def test_bullet_list_skips_blank_items(self, renderer, surface, column):
        renderer.add_bullet_list("Skills", ["Python", " ", "SQL"], column)

        assert surface.lines_in_reading_order() == [
            "Skills", f"{BULLET} Python", f"{BULLET} SQL",
        ]

    def test_custom_sections(self, renderer, surface, column):
        sections = [
            CustomSection("Languages", ("French", "German")),
            CustomSection("Empty", ()),
        ]
        renderer.add_custom_sections(sections, column, uppercase_titles=True)

        assert surface.blocks_containing("LANGUAGES")
        assert not surface.blocks_containing("EMPTY")
        assert surface.blocks_containing("German")

    def test_whitespace_custom_section_draws_no_title(self, renderer, surface, column):
        renderer.add_custom_sections([CustomSection("Blank", ("   ", "", "\t"))], column)

        assert surface.blocks == []


def test_vertical_rule_on_every_page(renderer, surface, column, geometry):
    start = renderer.cursor.mark()
    renderer.add_text_section("Summary", " ".join(["word"] * 3000), column)
    renderer.add_vertical_rule(300, start, "#D3D3D3")

    assert surface.page_count > 1
    assert sorted(rule.page for rule in surface.rules) == list(range(surface.page_count))
    assert all(rule.y2 == geometry.bottom_limit for rule in surface.rules)
