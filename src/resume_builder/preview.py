"""Print-style projection of a resume record.

:func:`render_preview` is pure: the same record always yields an equal
:class:`PreviewDocument`. Exporters and the TUI consume the document rather
than the record, so everything the reader sees is decided here.

Section visibility follows one rule: a repeated section appears only when the
primary field of its *first* entry is filled in. A blank first entry hides the
whole section even if later entries have content.
"""

from __future__ import annotations

from dataclasses import dataclass

from resume_builder.models.resume import SECTIONS, ResumeEntry, ResumeRecord

__all__ = [
    "PLACEHOLDERS",
    "PreviewDocument",
    "PreviewHeader",
    "PreviewItem",
    "PreviewSection",
    "render_preview",
    "section_visible",
]

NAME_PLACEHOLDER = "Your Name"
EMAIL_PLACEHOLDER = "your.email@example.com"
PHONE_PLACEHOLDER = "(123) 456-7890"

# Fallback labels for blank single-line entry fields, by section.
PLACEHOLDERS: dict[str, dict[str, str]] = {
    "education": {"degree": "Degree", "date": "Date", "institution": "Institution"},
    "experience": {
        "title": "Job Title",
        "dates": "Dates",
        "company": "Company",
        "location": "Location",
    },
    "volunteer": {
        "role": "Volunteer Role",
        "dates": "Dates",
        "organization": "Organization",
        "location": "Location",
    },
    "extracurriculars": {"name": "Activity Name", "role": "Role"},
    "projects": {"name": "Project Name"},
}


@dataclass(frozen=True, slots=True)
class PreviewHeader:
    name: str
    email: str
    phone: str
    website: str | None = None


@dataclass(frozen=True, slots=True)
class PreviewItem:
    """One rendered entry.

    ``heading``/``heading_aside`` form the first line (e.g. title and dates),
    ``subheading``/``subheading_aside`` the second (e.g. company and location).
    """

    heading: str
    heading_aside: str | None = None
    subheading: str | None = None
    subheading_aside: str | None = None
    body: str = ""
    link: str | None = None


@dataclass(frozen=True, slots=True)
class PreviewSection:
    title: str
    text: str | None = None
    items: tuple[PreviewItem, ...] = ()


@dataclass(frozen=True, slots=True)
class PreviewDocument:
    header: PreviewHeader
    sections: tuple[PreviewSection, ...]

    def section(self, title: str) -> PreviewSection | None:
        for section in self.sections:
            if section.title == title:
                return section
        return None

    @property
    def section_titles(self) -> tuple[str, ...]:
        return tuple(section.title for section in self.sections)


def section_visible(record: ResumeRecord, section: str) -> bool:
    """Whether *section* shows in the preview: its first entry's primary field is set."""
    entries = getattr(record, section)
    if not entries:
        return False
    return bool(getattr(entries[0], SECTIONS[section].primary_field))


def _label(entry: ResumeEntry, section: str, field_name: str) -> str:
    return getattr(entry, field_name) or PLACEHOLDERS[section][field_name]


def _education_item(entry: ResumeEntry) -> PreviewItem:
    return PreviewItem(
        heading=_label(entry, "education", "degree"),
        heading_aside=_label(entry, "education", "date"),
        subheading=_label(entry, "education", "institution"),
    )


def _experience_item(entry: ResumeEntry) -> PreviewItem:
    return PreviewItem(
        heading=_label(entry, "experience", "title"),
        heading_aside=_label(entry, "experience", "dates"),
        subheading=_label(entry, "experience", "company"),
        subheading_aside=_label(entry, "experience", "location"),
        body=entry.responsibilities,
    )


def _volunteer_item(entry: ResumeEntry) -> PreviewItem:
    return PreviewItem(
        heading=_label(entry, "volunteer", "role"),
        heading_aside=_label(entry, "volunteer", "dates"),
        subheading=_label(entry, "volunteer", "organization"),
        subheading_aside=_label(entry, "volunteer", "location"),
        body=entry.description,
    )


def _extracurricular_item(entry: ResumeEntry) -> PreviewItem:
    return PreviewItem(
        heading=_label(entry, "extracurriculars", "name"),
        subheading=_label(entry, "extracurriculars", "role"),
        body=entry.description,
    )


def _project_item(entry: ResumeEntry) -> PreviewItem:
    return PreviewItem(
        heading=_label(entry, "projects", "name"),
        body=entry.description,
        link=entry.link or None,
    )


_ITEM_BUILDERS = {
    "education": _education_item,
    "experience": _experience_item,
    "volunteer": _volunteer_item,
    "extracurriculars": _extracurricular_item,
    "projects": _project_item,
}


def render_preview(record: ResumeRecord) -> PreviewDocument:
    """Project *record* into the document shown in the preview and exports."""
    header = PreviewHeader(
        name=record.full_name or NAME_PLACEHOLDER,
        email=record.email or EMAIL_PLACEHOLDER,
        phone=record.phone or PHONE_PLACEHOLDER,
        website=record.website or None,
    )

    sections: list[PreviewSection] = []
    if record.summary:
        sections.append(PreviewSection("Summary", text=record.summary))

    for key, spec in SECTIONS.items():
        if not section_visible(record, key):
            continue
        build = _ITEM_BUILDERS[key]
        items = tuple(build(entry) for entry in getattr(record, key))
        sections.append(PreviewSection(spec.title, items=items))

    if record.skills:
        sections.append(PreviewSection("Skills", text=record.skills))

    return PreviewDocument(header=header, sections=tuple(sections))
