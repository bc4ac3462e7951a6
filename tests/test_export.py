"""Tests for the export utility module and document templates."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from docx import Document

from resume_builder.models.resume import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from resume_builder.preview import PreviewHeader
from resume_builder.templates import get_template, list_templates
from resume_builder.templates.base import ResumeTemplate
from resume_builder.utils.export import (
    _sanitize_filename,
    export_filename,
    export_resume,
    export_resume_to,
    prompt_export_location,
)


@pytest.fixture
def record() -> ResumeRecord:
    return ResumeRecord(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        website="janedoe.dev",
        summary="Engineer who ships.",
        education=(EducationEntry(degree="B.S. Computer Science", date="2019"),),
        experience=(
            ExperienceEntry(
                title="Software Engineer",
                company="Acme",
                dates="2020 - Present",
                responsibilities="Built the billing service\nLed the API migration",
            ),
        ),
        projects=(ProjectEntry(name="Resume Builder", link="https://github.com/jane/rb"),),
        skills="Python, SQL, Docker",
    )


class TestSanitizeFilename:
    def test_removes_invalid_characters(self) -> None:
        assert _sanitize_filename('test<>:"/\\|?*file') == "test_________file"

    def test_strips_leading_trailing_dots_spaces(self) -> None:
        assert _sanitize_filename("  ..test.. ") == "test"

    def test_returns_default_for_empty(self) -> None:
        assert _sanitize_filename("") == "resume"
        assert _sanitize_filename("...") == "resume"


class TestExportFilename:
    def test_uses_full_name(self, record: ResumeRecord) -> None:
        assert export_filename(record) == "Jane Doe.pdf"
        assert export_filename(record, "docx") == "Jane Doe.docx"

    def test_blank_name_falls_back(self) -> None:
        assert export_filename(ResumeRecord()) == "resume.pdf"

    def test_unknown_format_raises(self, record: ResumeRecord) -> None:
        with pytest.raises(ValueError, match="Unknown template 'txt'"):
            export_filename(record, "txt")


class TestTemplates:
    def test_registry(self) -> None:
        assert list_templates() == ["docx", "pdf"]
        assert get_template("pdf").extension == "pdf"

    def test_contact_line_includes_website_only_when_set(self) -> None:
        assert ResumeTemplate.contact_line(PreviewHeader("A", "a@b.c", "1")) == "a@b.c | 1"
        assert (
            ResumeTemplate.contact_line(PreviewHeader("A", "a@b.c", "1", "a.dev"))
            == "a@b.c | 1 | a.dev"
        )


class TestExportResume:
    def test_writes_pdf(self, record: ResumeRecord, tmp_path: Path) -> None:
        path = export_resume(record, output_dir=tmp_path)

        assert path == tmp_path / "Jane Doe.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_writes_docx_with_preview_content(self, record: ResumeRecord, tmp_path: Path) -> None:
        path = export_resume(record, output_dir=tmp_path, export_format="docx")

        text = "\n".join(p.text for p in Document(str(path)).paragraphs)
        assert "JANE DOE" in text
        assert "jane@example.com | 555-0100 | janedoe.dev" in text
        assert "Software Engineer | 2020 - Present" in text
        assert "Led the API migration" in text
        assert "SKILLS" in text
        # Volunteer's first entry is blank, so the section is hidden.
        assert "VOLUNTEER EXPERIENCE" not in text

    def test_blank_record_exports(self, tmp_path: Path) -> None:
        path = export_resume(ResumeRecord(), output_dir=tmp_path)

        assert path.name == "resume.pdf"
        assert path.stat().st_size > 0

    def test_pdf_handles_non_latin_text(self, tmp_path: Path) -> None:
        record = ResumeRecord(full_name="Zoë Ωmega", summary="Naïve – “quoted”")
        path = export_resume(record, output_dir=tmp_path)

        assert path.exists()

    def test_export_to_fixes_suffix_and_creates_dirs(
        self, record: ResumeRecord, tmp_path: Path
    ) -> None:
        target = tmp_path / "nested" / "cv.docx"
        path = export_resume_to(record, target, "docx")

        assert path == target
        assert path.exists()

    def test_export_to_without_suffix_defaults_to_pdf(
        self, record: ResumeRecord, tmp_path: Path
    ) -> None:
        path = export_resume_to(record, tmp_path / "cv")

        assert path.suffix == ".pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_export_to_requested_format_adds_missing_suffix(
        self, record: ResumeRecord, tmp_path: Path
    ) -> None:
        path = export_resume_to(record, tmp_path / "my_cv", "docx")

        assert path == tmp_path / "my_cv.docx"
        assert "JANE DOE" in Document(str(path)).paragraphs[0].text
        assert [p.name for p in tmp_path.iterdir()] == ["my_cv.docx"]

    def test_export_to_requested_format_replaces_foreign_suffix(
        self, record: ResumeRecord, tmp_path: Path
    ) -> None:
        path = export_resume_to(record, tmp_path / "cv.final", "pdf")

        assert path == tmp_path / "cv.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_export_to_requested_format_wins_over_other_template_suffix(
        self, record: ResumeRecord, tmp_path: Path
    ) -> None:
        path = export_resume_to(record, tmp_path / "cv.pdf", "docx")

        assert path == tmp_path / "cv.docx"
        assert not (tmp_path / "cv.pdf").exists()


class TestPromptExportLocation:
    def test_returns_path(self) -> None:
        with patch("easygui.filesavebox", return_value="/tmp/out.pdf") as box:
            assert prompt_export_location("Jane Doe.pdf") == Path("/tmp/out.pdf")
        assert box.call_args.kwargs["filetypes"] == ["*.pdf"]

    def test_cancel_returns_none(self) -> None:
        with patch("easygui.filesavebox", return_value=None):
            assert prompt_export_location("resume.docx") is None
