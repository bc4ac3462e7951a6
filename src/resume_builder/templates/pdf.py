"""Single-column A4 PDF template.

Lays out the preview the way the on-screen preview reads: a centred name and
contact line, then one ruled heading per section. Page breaks are left to
fpdf's automatic pagination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from resume_builder.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from pathlib import Path

    from resume_builder.preview import PreviewDocument, PreviewItem, PreviewSection

__all__ = ["PdfResumeTemplate"]

_FONT = "Times"
_MARGIN = 15


def _clean(text: str) -> str:
    """Encode for the built-in latin-1 PDF fonts."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class PdfResumeTemplate(ResumeTemplate):
    """Serif, print-style resume rendered with fpdf2."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "PDF"

    @property
    def extension(self) -> str:
        return "pdf"

    def write(self, document: PreviewDocument, path: Path) -> Path:
        pdf = FPDF(orientation="portrait", unit="mm", format="A4")
        pdf.set_auto_page_break(auto=True, margin=_MARGIN)
        pdf.set_margins(_MARGIN, _MARGIN, _MARGIN)
        pdf.add_page()

        self._add_header(pdf, document)
        for section in document.sections:
            self._add_section(pdf, section)

        pdf.output(str(path))
        return path

    # -- header ------------------------------------------------------------

    def _add_header(self, pdf: FPDF, document: PreviewDocument) -> None:
        header = document.header
        pdf.set_font(_FONT, "B", 22)
        pdf.cell(
            w=0, h=11, text=_clean(header.name.upper()), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_font(_FONT, size=10)
        pdf.cell(
            w=0, h=6, text=_clean(self.contact_line(header)), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        self._rule(pdf)
        pdf.ln(4)

    # -- sections ----------------------------------------------------------

    def _rule(self, pdf: FPDF) -> None:
        y = pdf.get_y() + 1
        pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.set_y(y + 1)

    def _add_section(self, pdf: FPDF, section: PreviewSection) -> None:
        pdf.set_font(_FONT, "B", 13)
        pdf.cell(
            w=0, h=8, text=_clean(section.title.upper()),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        self._rule(pdf)
        pdf.ln(1)

        if section.text is not None:
            pdf.set_font(_FONT, size=10)
            pdf.multi_cell(w=0, h=5, text=_clean(section.text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        for item in section.items:
            self._add_item(pdf, item)
        pdf.ln(4)

    def _split_line(
        self, pdf: FPDF, left: str, right: str | None, *, style: str, size: int
    ) -> None:
        """Write *left* and right-aligned *right* on the same line."""
        pdf.set_font(_FONT, style, size)
        if right:
            right_width = pdf.get_string_width(_clean(right)) + 2
            pdf.cell(w=pdf.epw - right_width, h=6, text=_clean(left))
            pdf.set_font(_FONT, "I" if "I" in style else "", size - 1)
            pdf.cell(
                w=right_width, h=6, text=_clean(right), align="R",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )
        else:
            pdf.cell(w=0, h=6, text=_clean(left), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _add_item(self, pdf: FPDF, item: PreviewItem) -> None:
        self._split_line(pdf, item.heading, item.heading_aside, style="B", size=12)
        if item.subheading is not None:
            self._split_line(pdf, item.subheading, item.subheading_aside, style="BI", size=11)
        if item.link:
            pdf.set_font(_FONT, "U", 10)
            pdf.set_text_color(37, 99, 235)
            pdf.cell(
                w=0, h=5, text=_clean(item.link), link=item.link,
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )
            pdf.set_text_color(0, 0, 0)
        if item.body:
            pdf.set_font(_FONT, size=10)
            pdf.multi_cell(w=0, h=5, text=_clean(item.body), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(2)
