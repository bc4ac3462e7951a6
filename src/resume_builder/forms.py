"""Editor form descriptors and widget addressing.

The TUI builds its inputs from these descriptors and encodes each field's
location in the widget id, so a change event can be turned back into a store
event without a UI harness.
"""

from __future__ import annotations

from dataclasses import dataclass

from resume_builder.models.resume import SCALAR_FIELDS, SECTIONS, ResumeRecord
from resume_builder.services.resume_editor import EntryChanged, FieldChanged

__all__ = [
    "PERSONAL_FIELDS",
    "SECTION_FORMS",
    "SKILLS_FIELD",
    "SUMMARY_FIELD",
    "FieldAddress",
    "FormField",
    "SectionForm",
    "event_for",
    "field_id",
    "parse_field_id",
    "read_value",
]

_SCALAR_PREFIX = "field"
_ENTRY_PREFIX = "entry"


@dataclass(frozen=True, slots=True)
class FormField:
    name: str
    label: str
    placeholder: str = ""
    multiline: bool = False


@dataclass(frozen=True, slots=True)
class SectionForm:
    section: str
    title: str
    add_label: str
    fields: tuple[FormField, ...]


PERSONAL_FIELDS: tuple[FormField, ...] = (
    FormField("full_name", "Full Name", "Jane Doe"),
    FormField("email", "Email Address", "jane.doe@example.com"),
    FormField("phone", "Phone Number", "(123) 456-7890"),
    FormField("website", "Website / Portfolio", "github.com/janedoe"),
)

SUMMARY_FIELD = FormField(
    "summary", "Summary", "A brief 2-3 sentence summary...", multiline=True
)

SKILLS_FIELD = FormField(
    "skills", "Skills", "e.g., JavaScript, React, Node.js, Python, SQL, Git", multiline=True
)

SECTION_FORMS: dict[str, SectionForm] = {
    "education": SectionForm(
        "education",
        "Education",
        "Add Education",
        (
            FormField("degree", "Degree / Certificate", "B.S. in Computer Science"),
            FormField("institution", "Institution", "University of Technology"),
            FormField("date", "Graduation Date", "May 2019"),
        ),
    ),
    "experience": SectionForm(
        "experience",
        "Work Experience",
        "Add Experience",
        (
            FormField("title", "Job Title", "Software Engineer"),
            FormField("company", "Company", "Tech Solutions Inc."),
            FormField("location", "Location", "San Francisco, CA"),
            FormField("dates", "Dates", "Jan 2020 - Present"),
            FormField(
                "responsibilities",
                "Responsibilities",
                "Describe your key achievements...",
                multiline=True,
            ),
        ),
    ),
    "volunteer": SectionForm(
        "volunteer",
        "Volunteer Experience",
        "Add Volunteer Role",
        (
            FormField("role", "Role", "Event Coordinator"),
            FormField("organization", "Organization", "Community Outreach"),
            FormField("location", "Location", "New York, NY"),
            FormField("dates", "Dates", "Summer 2019"),
            FormField(
                "description", "Description", "Describe your contributions...", multiline=True
            ),
        ),
    ),
    "extracurriculars": SectionForm(
        "extracurriculars",
        "Extracurricular Activities",
        "Add Activity",
        (
            FormField("name", "Activity Name", "University Coding Club"),
            FormField("role", "Your Role", "President / Member"),
            FormField(
                "description",
                "Description",
                "Describe the activity and your involvement...",
                multiline=True,
            ),
        ),
    ),
    "projects": SectionForm(
        "projects",
        "Projects",
        "Add Project",
        (
            FormField("name", "Project Name", "AI Resume Builder"),
            FormField("description", "Description", "Describe the project...", multiline=True),
            FormField("link", "Link", "github.com/user/project-repo"),
        ),
    ),
}


@dataclass(frozen=True, slots=True)
class FieldAddress:
    """Where a form value lives: a scalar field or one field of a section entry."""

    field_name: str
    section: str | None = None
    index: int | None = None

    @property
    def is_entry(self) -> bool:
        return self.section is not None


def field_id(field_name: str, section: str | None = None, index: int | None = None) -> str:
    """Return the widget id for a field, e.g. ``entry-experience-0-title``."""
    if section is None:
        return f"{_SCALAR_PREFIX}-{field_name}"
    return f"{_ENTRY_PREFIX}-{section}-{index}-{field_name}"


def parse_field_id(widget_id: str | None) -> FieldAddress | None:
    """Decode an id made by :func:`field_id`; ``None`` for anything else."""
    if not widget_id:
        return None
    prefix, _, rest = widget_id.partition("-")
    if prefix == _SCALAR_PREFIX and rest in SCALAR_FIELDS:
        return FieldAddress(rest)
    if prefix != _ENTRY_PREFIX:
        return None

    parts = rest.split("-", 2)
    if len(parts) != 3 or parts[0] not in SECTIONS or not parts[1].isdigit():
        return None
    section, index, name = parts
    if name not in SECTIONS[section].field_names:
        return None
    return FieldAddress(name, section, int(index))


def event_for(address: FieldAddress, value: str) -> FieldChanged | EntryChanged:
    if address.is_entry:
        return EntryChanged(address.section, address.index, address.field_name, value)
    return FieldChanged(address.field_name, value)


def read_value(record: ResumeRecord, address: FieldAddress) -> str | None:
    """Current value at *address*, or ``None`` when the entry no longer exists."""
    if not address.is_entry:
        return getattr(record, address.field_name)
    entries = getattr(record, address.section)
    if address.index >= len(entries):
        return None
    return getattr(entries[address.index], address.field_name)
