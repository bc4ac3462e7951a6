from __future__ import annotations

from resume_builder.models.resume import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
    VolunteerEntry,
)
from resume_builder.preview import (
    EMAIL_PLACEHOLDER,
    NAME_PLACEHOLDER,
    PHONE_PLACEHOLDER,
    render_preview,
    section_visible,
)


def test_blank_record_shows_only_header_placeholders() -> None:
    document = render_preview(ResumeRecord())

    assert document.header.name == NAME_PLACEHOLDER
    assert document.header.email == EMAIL_PLACEHOLDER
    assert document.header.phone == PHONE_PLACEHOLDER
    assert document.header.website is None
    assert document.sections == ()


def test_header_uses_record_values() -> None:
    record = ResumeRecord(
        full_name="Jane Doe", email="jane@example.com", phone="555", website="janedoe.dev"
    )
    header = render_preview(record).header

    assert header.name == "Jane Doe"
    assert header.email == "jane@example.com"
    assert header.website == "janedoe.dev"


def test_section_hidden_when_first_entry_primary_is_blank() -> None:
    record = ResumeRecord(
        experience=(ExperienceEntry(), ExperienceEntry(title="Engineer")),
    )

    assert not section_visible(record, "experience")
    assert render_preview(record).section("Experience") is None


def test_section_shows_every_entry_once_first_is_filled() -> None:
    record = ResumeRecord(
        experience=(ExperienceEntry(title="Engineer"), ExperienceEntry()),
    )
    section = render_preview(record).section("Experience")

    assert section is not None
    assert len(section.items) == 2
    assert section.items[1].heading == "Job Title"


def test_empty_section_is_hidden() -> None:
    record = ResumeRecord(projects=())
    assert not section_visible(record, "projects")


def test_blank_single_line_fields_use_placeholders() -> None:
    record = ResumeRecord(education=(EducationEntry(degree="B.S."),))
    item = render_preview(record).section("Education").items[0]

    assert item.heading == "B.S."
    assert item.heading_aside == "Date"
    assert item.subheading == "Institution"


def test_multiline_fields_have_no_placeholder() -> None:
    record = ResumeRecord(
        experience=(ExperienceEntry(title="Engineer"),),
        volunteer=(VolunteerEntry(role="Coordinator"),),
    )
    document = render_preview(record)

    assert document.section("Experience").items[0].body == ""
    assert document.section("Volunteer Experience").items[0].body == ""


def test_project_link_only_when_set() -> None:
    record = ResumeRecord(
        projects=(ProjectEntry(name="A"), ProjectEntry(name="B", link="github.com/b")),
    )
    items = render_preview(record).section("Projects").items

    assert items[0].link is None
    assert items[1].link == "github.com/b"


def test_section_order() -> None:
    record = ResumeRecord(
        summary="Builder of things",
        skills="Python",
        education=(EducationEntry(degree="B.S."),),
        experience=(ExperienceEntry(title="Engineer"),),
        projects=(ProjectEntry(name="Tool"),),
    )

    assert render_preview(record).section_titles == (
        "Summary",
        "Education",
        "Experience",
        "Projects",
        "Skills",
    )


def test_render_is_pure() -> None:
    record = ResumeRecord(full_name="Jane", education=(EducationEntry(degree="B.S."),))
    assert render_preview(record) == render_preview(record)
