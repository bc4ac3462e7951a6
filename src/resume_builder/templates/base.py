"""Abstract base class for document export templates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from resume_builder.preview import PreviewDocument, PreviewHeader, PreviewItem

__all__ = ["ResumeTemplate"]

CONTACT_SEPARATOR = " | "


class ResumeTemplate(ABC):
    """Interface that every export template must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension without the dot, e.g. ``pdf``."""

    @abstractmethod
    def write(self, document: PreviewDocument, path: Path) -> Path:
        """Render *document* to *path* and return the written path."""

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def contact_line(header: PreviewHeader) -> str:
        """Return ``email | phone`` plus the website when one is set."""
        parts = [header.email, header.phone]
        if header.website:
            parts.append(header.website)
        return CONTACT_SEPARATOR.join(parts)

    @staticmethod
    def body_lines(item: PreviewItem) -> list[str]:
        """Split a multi-line body into non-empty lines."""
        return [line.rstrip() for line in item.body.splitlines() if line.strip()]
