"""Utility functions and helpers"""

from resume_builder.utils.display import prompt_for_resume_file
from resume_builder.utils.export import (
    export_filename,
    export_resume,
    export_resume_to,
    prompt_export_location,
)

__all__ = [
    "export_filename",
    "export_resume",
    "export_resume_to",
    "prompt_export_location",
    "prompt_for_resume_file",
]
