"""Template registry for resume export."""

from __future__ import annotations

from resume_builder.templates.base import ResumeTemplate
from resume_builder.templates.pdf import PdfResumeTemplate
from resume_builder.templates.word import DocxResumeTemplate

__all__ = [
    "ResumeTemplate",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    "pdf": PdfResumeTemplate(),
    "docx": DocxResumeTemplate(),
}


def get_template(name: str) -> ResumeTemplate:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
