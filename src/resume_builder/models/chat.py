"""Data models for the assistant chat."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "ACCEPTED_MIME_TYPES",
    "Attachment",
    "ChatMessage",
    "ChatRole",
    "SessionState",
    "UnsupportedFileError",
    "guess_mime_type",
    "is_accepted_mime_type",
]

ACCEPTED_MIME_TYPES: frozenset[str] = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)

# mimetypes does not know .docx on every platform.
_EXTRA_TYPES = {
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class UnsupportedFileError(ValueError):
    """Raised when a selected file is not an image, PDF, or Word document."""


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class SessionState(str, Enum):
    IDLE = "idle"
    WAITING = "waiting"


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One transcript entry."""

    role: ChatRole
    text: str


@dataclass(frozen=True, slots=True)
class Attachment:
    """A resume file read into memory.

    Attributes:
        name: Original file name shown in the transcript.
        mime_type: MIME type sent alongside the bytes.
        data: Raw file contents.
    """

    name: str
    mime_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: Path) -> Attachment:
        """Read *path* fully into memory.

        Raises:
            UnsupportedFileError: If the file type is not accepted.
            OSError: If the file cannot be read.
        """
        mime_type = guess_mime_type(path)
        if not is_accepted_mime_type(mime_type):
            raise UnsupportedFileError(f"Unsupported file type for {path.name}: {mime_type}")
        return cls(name=path.name, mime_type=mime_type, data=path.read_bytes())

    @property
    def size(self) -> int:
        return len(self.data)


def guess_mime_type(path: Path) -> str:
    """Guess a MIME type from the file name, defaulting to octet-stream."""
    suffix = path.suffix.lower()
    if suffix in _EXTRA_TYPES:
        return _EXTRA_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or "application/octet-stream"


def is_accepted_mime_type(mime_type: str) -> bool:
    return mime_type.startswith("image/") or mime_type in ACCEPTED_MIME_TYPES
