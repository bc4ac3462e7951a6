"""File dialog helpers"""

from __future__ import annotations

from pathlib import Path

RESUME_FILETYPES = [
    ["*.pdf", "*.doc", "*.docx", "*.png", "*.jpg", "*.jpeg", "*.webp", "Resume files"]
]


def prompt_for_resume_file() -> Path | None:
    """Display file picker dialog for an image, PDF, or Word resume.

    Returns:
        Path to selected file, or None if cancelled.
    """
    import easygui as eg

    path_str = eg.fileopenbox(
        msg="Select your resume (image, PDF, or Word document)",
        title="Upload Resume",
        default="*",
        filetypes=RESUME_FILETYPES,
    )
    return Path(path_str) if path_str else None
