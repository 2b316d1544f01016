"""Résumé Data Model

Immutable input consumed by the layout engine. Records are produced by the
form-editing and persistence collaborators; the layout engine never mutates them.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PersonalInfo:
    """Contact block shown at the top of every template.

    Any field may be empty; empty fields are left out of the rendered header.
    """

    name: str = ""
    address: str = ""
    phone_number: str = ""
    email: str = ""
    website: Optional[str] = None


@dataclass(frozen=True)
class HistoryEntry:
    """One professional or educational history entry.

    Attributes:
        title: Company or institution
        subtitle: Position or degree
        start_year: Four-digit start year
        end_year: End year, None while ongoing ("Present")
        details: Bullet lines, rendered in order
    """

    title: str
    subtitle: str
    start_year: int
    end_year: Optional[int] = None
    details: Tuple[str, ...] = ()

    @property
    def heading(self) -> str:
        """Entry heading text, e.g. "Acme Corp, Engineer"."""
        parts = (self.title, self.subtitle)
        return ", ".join(part.strip() for part in parts if part and part.strip())


@dataclass(frozen=True)
class Project:
    """A project; either the title or the details may be absent.

    A project whose title and details are both blank is not shown.
    """

    title: Optional[str] = None
    details: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not ((self.title or "").strip() or (self.details or "").strip())


@dataclass(frozen=True)
class CustomSection:
    """A free-form titled list of lines."""

    title: str
    content: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResumeDocument:
    """Everything the layout engine needs to render one résumé."""

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    professional_history: Tuple[HistoryEntry, ...] = ()
    educational_history: Tuple[HistoryEntry, ...] = ()
    projects: Tuple[Project, ...] = ()
    skills: Tuple[str, ...] = ()
    custom_sections: Tuple[CustomSection, ...] = ()

    @property
    def visible_projects(self) -> List[Project]:
        return [project for project in self.projects if not project.is_empty]

    @property
    def visible_skills(self) -> List[str]:
        return [skill for skill in self.skills if skill and skill.strip()]

    @property
    def visible_custom_sections(self) -> List[CustomSection]:
        return [
            section for section in self.custom_sections
            if any(line and line.strip() for line in section.content)
        ]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeDocument":
        """
        Build a ResumeDocument from its stored dict form.

        Keys use the persistence layer's names (camelCase or snake_case are
        both accepted). Missing keys fall back to empty values.

        Args:
            data: Dict as stored alongside the résumé record

        Returns:
            ResumeDocument instance
        """
        info = data.get("personal_info") or data.get("personalInfo") or {}
        personal_info = PersonalInfo(
            name=info.get("name") or "",
            address=info.get("address") or "",
            phone_number=info.get("phone_number") or info.get("phoneNumber") or "",
            email=info.get("email") or "",
            website=info.get("website"),
        )

        def history(key: str, alt_key: str) -> Tuple[HistoryEntry, ...]:
            entries = data.get(key) or data.get(alt_key) or []
            return tuple(
                HistoryEntry(
                    title=entry.get("title") or "",
                    subtitle=entry.get("subtitle") or "",
                    start_year=int(entry.get("start_year") or entry.get("startYear") or 0),
                    end_year=_optional_int(entry.get("end_year", entry.get("endYear"))),
                    details=tuple(entry.get("details") or []),
                )
                for entry in entries
            )

        return cls(
            personal_info=personal_info,
            summary=data.get("summary", "") or "",
            professional_history=history("professional_history", "professionalHistory"),
            educational_history=history("educational_history", "educationalHistory"),
            projects=tuple(
                Project(title=item.get("title"), details=item.get("details"))
                for item in data.get("projects") or []
            ),
            skills=tuple(data.get("skills") or []),
            custom_sections=tuple(
                CustomSection(title=item.get("title") or "", content=tuple(item.get("content") or []))
                for item in (data.get("custom_sections") or data.get("customSections") or [])
            ),
        )


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)
