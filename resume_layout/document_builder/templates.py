"""Template Composers

Each composer sequences the section renderers for one visual template and
supplies column geometry. Composers never measure or paginate on their own;
empty sections are skipped by the renderers themselves.
"""
from typing import Callable, Dict

from ..config import (
    CONTACT_SEPARATOR,
    DIVIDER_COLOR,
    HALF_COLUMN_GUTTER,
    INLINE_SKILL_SEPARATOR,
    RULE_COLOR,
    TEXT_COLOR,
    TWO_COLUMN_SPLIT,
)
from ..render_options import TemplateKind
from ..resume import ResumeDocument
from .section_renderer import Column, HeaderLayout, SectionRenderer

ORIGINAL_HEADER = HeaderLayout(
    contact_groups=(("address", "phone_number"), ("email",)),
    separator=INLINE_SKILL_SEPARATOR,
    website_prefix="Website: ",
)
MODERN_HEADER = HeaderLayout(
    contact_groups=(("email",), ("address",), ("phone_number",)),
    rule_color=RULE_COLOR,
)
CLASSIC_HEADER = HeaderLayout(
    contact_groups=(("email", "phone_number", "address"),),
    separator=CONTACT_SEPARATOR,
    align="center",
    rule_color=TEXT_COLOR,
)
COMPACT_HEADER = HeaderLayout(
    contact_groups=(("email", "phone_number", "address"),),
    separator=CONTACT_SEPARATOR,
)

Composer = Callable[[SectionRenderer, ResumeDocument], None]


def compose_original(renderer: SectionRenderer, resume: ResumeDocument):
    """Single column, section order of the first-generation template."""
    full = Column.full_width(renderer.cursor.geometry)

    renderer.add_header(resume.personal_info, full, ORIGINAL_HEADER)
    renderer.add_text_section("Summary", resume.summary, full)
    renderer.add_history_section("Professional History", resume.professional_history, full)
    renderer.add_history_section("Educational History", resume.educational_history, full)
    renderer.add_projects_section("Projects", resume.visible_projects, full)
    renderer.add_skills_inline("Skills", resume.visible_skills, full, INLINE_SKILL_SEPARATOR)
    renderer.add_custom_sections(resume.visible_custom_sections, full)


def compose_modern_minimalist(renderer: SectionRenderer, resume: ResumeDocument):
    """
    Full-width header, then a narrow left column and a wide right column.

    Left: skills and education. Right: summary, experience, projects and
    custom sections. Both columns start at the same position below the
    header; the document ends with the lower of the two. The gutter divider
    is only drawn when a column has content.
    """
    geometry = renderer.cursor.geometry
    full = Column.full_width(geometry)

    renderer.add_header(resume.personal_info, full, MODERN_HEADER)

    gutter = TWO_COLUMN_SPLIT["gutter"]
    left = Column(full.x, full.width * TWO_COLUMN_SPLIT["left"])
    right = Column(left.right + gutter, full.right - left.right - gutter)
    start = renderer.cursor.mark()

    renderer.add_bullet_list("Skills", resume.visible_skills, left)
    renderer.add_history_section("Education", resume.educational_history, left)
    left_end = renderer.cursor.mark()

    renderer.cursor.restore(start)
    renderer.add_text_section("Summary", resume.summary, right)
    renderer.add_history_section("Professional Experience", resume.professional_history, right)
    renderer.add_projects_section("Projects", resume.visible_projects, right)
    renderer.add_custom_sections(resume.visible_custom_sections, right)
    right_end = renderer.cursor.mark()

    renderer.cursor.restore(renderer.cursor.furthest(left_end, right_end))
    if left_end != start or right_end != start:
        renderer.add_vertical_rule(left.right + gutter / 2, start, DIVIDER_COLOR)


def compose_classic_professional(renderer: SectionRenderer, resume: ResumeDocument):
    """Centered header, uppercase section titles, right-aligned dates, skills grid."""
    full = Column.full_width(renderer.cursor.geometry)

    renderer.add_header(resume.personal_info, full, CLASSIC_HEADER)
    renderer.add_text_section("SUMMARY", resume.summary, full)
    renderer.add_history_section("PROFESSIONAL EXPERIENCE", resume.professional_history, full,
                                 date_position="right")
    renderer.add_history_section("EDUCATION", resume.educational_history, full,
                                 date_position="right")
    renderer.add_projects_section("PROJECTS", resume.visible_projects, full)
    renderer.add_skills_grid("SKILLS", resume.visible_skills, full)
    renderer.add_custom_sections(resume.visible_custom_sections, full, uppercase_titles=True)


def compose_compact_efficient(renderer: SectionRenderer, resume: ResumeDocument):
    """
    Dense single column for history, then skills and projects side by side.

    Custom sections continue full width below whichever half column ends lower.
    """
    full = Column.full_width(renderer.cursor.geometry)

    renderer.add_header(resume.personal_info, full, COMPACT_HEADER)
    renderer.add_text_section("Summary", resume.summary, full)
    renderer.add_history_section("Experience", resume.professional_history, full,
                                 date_position="right")
    renderer.add_history_section("Education", resume.educational_history, full,
                                 date_position="right")

    half_width = (full.width - HALF_COLUMN_GUTTER) / 2
    left = Column(full.x, half_width)
    right = Column(left.right + HALF_COLUMN_GUTTER, half_width)
    start = renderer.cursor.mark()

    renderer.add_bullet_list("Skills", resume.visible_skills, left)
    left_end = renderer.cursor.mark()

    renderer.cursor.restore(start)
    renderer.add_projects_section("Projects", resume.visible_projects, right)
    right_end = renderer.cursor.mark()

    renderer.cursor.restore(renderer.cursor.furthest(left_end, right_end))
    renderer.add_custom_sections(resume.visible_custom_sections, full)


COMPOSERS: Dict[TemplateKind, Composer] = {
    TemplateKind.ORIGINAL: compose_original,
    TemplateKind.MODERN_MINIMALIST: compose_modern_minimalist,
    TemplateKind.CLASSIC_PROFESSIONAL: compose_classic_professional,
    TemplateKind.COMPACT_EFFICIENT: compose_compact_efficient,
}


def get_composer(template: TemplateKind) -> Composer:
    """Composer for a template; every TemplateKind has exactly one."""
    return COMPOSERS[template]
