"""Export utilities for writing the resume preview to PDF and DOCX files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from resume_builder.models.resume import ResumeRecord
from resume_builder.preview import render_preview
from resume_builder.templates import get_template

logger = logging.getLogger(__name__)

DEFAULT_BASENAME = "resume"


def _sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    # Replace invalid characters with underscores
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", name)
    # Remove leading/trailing whitespace and dots
    sanitized = sanitized.strip(". ")
    return sanitized or DEFAULT_BASENAME


def export_filename(record: ResumeRecord, export_format: str = "pdf") -> str:
    """Return ``<full name>.<ext>``, or ``resume.<ext>`` when the name is blank."""
    extension = get_template(export_format).extension
    return f"{_sanitize_filename(record.full_name)}.{extension}"


def export_resume(
    record: ResumeRecord,
    output_dir: Path | None = None,
    export_format: str = "pdf",
) -> Path:
    """Render the preview of *record* and write it into *output_dir*.

    Args:
        record: Resume to export.
        output_dir: Target directory; the current directory when omitted.
        export_format: Registered template name, ``pdf`` or ``docx``.

    Returns:
        Path to the created file.
    """
    output_dir = output_dir or Path.cwd()
    return export_resume_to(
        record, output_dir / export_filename(record, export_format), export_format
    )


def export_resume_to(
    record: ResumeRecord,
    output_path: Path,
    export_format: str = "pdf",
) -> Path:
    """Write *record* to *output_path* in *export_format*.

    The requested format wins over whatever suffix the path carries; the
    suffix is replaced with the template's extension.
    """
    template = get_template(export_format)
    if output_path.suffix.lower() != f".{template.extension}":
        output_path = output_path.with_suffix(f".{template.extension}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    path = template.write(render_preview(record), output_path)
    logger.info("Exported resume to %s", path)
    return path


def prompt_export_location(default_filename: str) -> Path | None:
    """Prompt user to select export location using system file dialog.

    Args:
        default_filename: Suggested filename (extension determines file filter)

    Returns:
        Selected path or None if cancelled
    """
    import easygui

    # Build file type filter from extension
    extension = default_filename.rsplit(".", 1)[-1] if "." in default_filename else "pdf"
    filetypes = [f"*.{extension}"]

    result = easygui.filesavebox(
        msg="Choose export location",
        title="Export Resume",
        default=default_filename,
        filetypes=filetypes,
    )

    if result:
        return Path(result)
    return None
