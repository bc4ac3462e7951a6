"""Data models and type definitions"""

from resume_builder.models.chat import (
    Attachment,
    ChatMessage,
    ChatRole,
    SessionState,
    UnsupportedFileError,
)
from resume_builder.models.resume import (
    SCALAR_FIELDS,
    SECTIONS,
    EducationEntry,
    EntryIndexError,
    ExperienceEntry,
    ExtracurricularEntry,
    ProjectEntry,
    ResumeEntry,
    ResumeModelError,
    ResumeRecord,
    SectionSpec,
    UnknownFieldError,
    UnknownSectionError,
    VolunteerEntry,
    get_section,
)

__all__ = [
    "SCALAR_FIELDS",
    "SECTIONS",
    "Attachment",
    "ChatMessage",
    "ChatRole",
    "EducationEntry",
    "EntryIndexError",
    "ExperienceEntry",
    "ExtracurricularEntry",
    "ProjectEntry",
    "ResumeEntry",
    "ResumeModelError",
    "ResumeRecord",
    "SectionSpec",
    "SessionState",
    "UnknownFieldError",
    "UnknownSectionError",
    "UnsupportedFileError",
    "VolunteerEntry",
    "get_section",
]
