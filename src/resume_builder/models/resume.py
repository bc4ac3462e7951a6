"""Resume record and section schemas.

The record is an immutable pydantic model. Mutation helpers in
:mod:`resume_builder.services.resume_editor` return new records built with
``model_copy`` so observers can detect changes by identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "SCALAR_FIELDS",
    "SECTIONS",
    "EducationEntry",
    "EntryIndexError",
    "ExperienceEntry",
    "ExtracurricularEntry",
    "ProjectEntry",
    "ResumeEntry",
    "ResumeModelError",
    "ResumeRecord",
    "SectionSpec",
    "UnknownFieldError",
    "UnknownSectionError",
    "VolunteerEntry",
    "get_section",
]


class ResumeModelError(Exception):
    """Base class for invalid operations on a resume record."""


class UnknownSectionError(ResumeModelError, KeyError):
    """Raised when a section name is not one of the repeated sections."""


class UnknownFieldError(ResumeModelError, KeyError):
    """Raised when a field name does not exist on the targeted schema."""


class EntryIndexError(ResumeModelError, IndexError):
    """Raised when an entry index is outside the section bounds."""


class ResumeEntry(BaseModel):
    """Base class for one entry of a repeated section."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class EducationEntry(ResumeEntry):
    degree: str = ""
    institution: str = ""
    date: str = ""


class ExperienceEntry(ResumeEntry):
    title: str = ""
    company: str = ""
    location: str = ""
    dates: str = ""
    responsibilities: str = ""


class VolunteerEntry(ResumeEntry):
    role: str = ""
    organization: str = ""
    location: str = ""
    dates: str = ""
    description: str = ""


class ExtracurricularEntry(ResumeEntry):
    name: str = ""
    role: str = ""
    description: str = ""


class ProjectEntry(ResumeEntry):
    name: str = ""
    description: str = ""
    link: str = ""


class ResumeRecord(BaseModel):
    """The whole resume being edited.

    Every repeated section starts with a single blank entry.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    full_name: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    summary: str = ""
    education: tuple[EducationEntry, ...] = Field(default_factory=lambda: (EducationEntry(),))
    experience: tuple[ExperienceEntry, ...] = Field(default_factory=lambda: (ExperienceEntry(),))
    volunteer: tuple[VolunteerEntry, ...] = Field(default_factory=lambda: (VolunteerEntry(),))
    extracurriculars: tuple[ExtracurricularEntry, ...] = Field(
        default_factory=lambda: (ExtracurricularEntry(),)
    )
    projects: tuple[ProjectEntry, ...] = Field(default_factory=lambda: (ProjectEntry(),))
    skills: str = ""


@dataclass(frozen=True, slots=True)
class SectionSpec:
    """Static description of a repeated section.

    Attributes:
        key: Attribute name on :class:`ResumeRecord`.
        title: Heading shown in the editor and the preview.
        entry_type: Pydantic model of one entry.
        primary_field: Field whose value decides whether the preview shows the section.
        multiline_fields: Free-text fields rendered without a placeholder.
    """

    key: str
    title: str
    entry_type: type[ResumeEntry]
    primary_field: str
    multiline_fields: tuple[str, ...] = ()

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self.entry_type.model_fields)

    def blank_entry(self) -> ResumeEntry:
        return self.entry_type()


SCALAR_FIELDS: tuple[str, ...] = (
    "full_name",
    "email",
    "phone",
    "website",
    "summary",
    "skills",
)

# Ordered as they appear in the preview.
SECTIONS: dict[str, SectionSpec] = {
    "education": SectionSpec("education", "Education", EducationEntry, "degree"),
    "experience": SectionSpec(
        "experience",
        "Experience",
        ExperienceEntry,
        "title",
        multiline_fields=("responsibilities",),
    ),
    "volunteer": SectionSpec(
        "volunteer",
        "Volunteer Experience",
        VolunteerEntry,
        "role",
        multiline_fields=("description",),
    ),
    "extracurriculars": SectionSpec(
        "extracurriculars",
        "Extracurricular Activities",
        ExtracurricularEntry,
        "name",
        multiline_fields=("description",),
    ),
    "projects": SectionSpec(
        "projects",
        "Projects",
        ProjectEntry,
        "name",
        multiline_fields=("description",),
    ),
}


def get_section(name: str) -> SectionSpec:
    """Return the section registered under *name*.

    Raises:
        UnknownSectionError: If *name* is not a repeated section.
    """
    try:
        return SECTIONS[name]
    except KeyError:
        available = ", ".join(SECTIONS)
        msg = f"Unknown section {name!r}. Available: {available}"
        raise UnknownSectionError(msg) from None
