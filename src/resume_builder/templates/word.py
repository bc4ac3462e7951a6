"""Word document template."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from resume_builder.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from pathlib import Path

    from docx.text.paragraph import Paragraph

    from resume_builder.preview import PreviewDocument, PreviewItem

__all__ = ["DocxResumeTemplate"]

_FONT = "Cambria"


def _tight(paragraph: Paragraph, before: int = 0, after: int = 0) -> None:
    paragraph.paragraph_format.space_before = Pt(before)
    paragraph.paragraph_format.space_after = Pt(after)


def _run(
    paragraph: Paragraph,
    text: str,
    *,
    size: int = 11,
    bold: bool = False,
    italic: bool = False,
):
    run = paragraph.add_run(text)
    run.font.name = _FONT
    run.font.size = Pt(size)
    run.bold = bold
    run.italic = italic
    return run


class DocxResumeTemplate(ResumeTemplate):
    """Editable .docx rendering of the preview."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Word"

    @property
    def extension(self) -> str:
        return "docx"

    def write(self, document: PreviewDocument, path: Path) -> Path:
        doc = Document()
        for sec in doc.sections:
            sec.top_margin = Inches(0.6)
            sec.bottom_margin = Inches(0.6)
            sec.left_margin = Inches(0.7)
            sec.right_margin = Inches(0.7)

        header = document.header
        p = doc.add_paragraph()
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        _tight(p)
        _run(p, header.name.upper(), size=20, bold=True)

        p = doc.add_paragraph()
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        _tight(p, after=6)
        _run(p, self.contact_line(header))

        for section in document.sections:
            p = doc.add_paragraph()
            _tight(p, before=6, after=2)
            run = _run(p, section.title.upper(), size=12, bold=True)
            run.underline = True

            if section.text is not None:
                p = doc.add_paragraph()
                _tight(p)
                _run(p, section.text)

            for item in section.items:
                self._add_item(doc, item)

        doc.save(str(path))
        return path

    def _add_item(self, doc, item: PreviewItem) -> None:
        p = doc.add_paragraph()
        _tight(p, before=3)
        _run(p, item.heading, size=12, bold=True)
        if item.heading_aside:
            _run(p, f" | {item.heading_aside}", size=10)

        if item.subheading is not None:
            p = doc.add_paragraph()
            _tight(p)
            _run(p, item.subheading, bold=True, italic=True)
            if item.subheading_aside:
                _run(p, f" | {item.subheading_aside}", size=10, italic=True)

        if item.link:
            p = doc.add_paragraph()
            _tight(p)
            _run(p, item.link, size=10)

        for line in self.body_lines(item):
            p = doc.add_paragraph()
            _tight(p)
            p.paragraph_format.left_indent = Pt(12)
            _run(p, line, size=10)
