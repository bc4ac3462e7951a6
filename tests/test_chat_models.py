from __future__ import annotations

from pathlib import Path

import pytest

from resume_builder.models.chat import (
    Attachment,
    UnsupportedFileError,
    guess_mime_type,
    is_accepted_mime_type,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("cv.pdf", "application/pdf"),
        ("CV.DOCX", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
        ("cv.doc", "application/msword"),
        ("cv.png", "image/png"),
        ("cv", "application/octet-stream"),
    ],
)
def test_guess_mime_type(name: str, expected: str) -> None:
    assert guess_mime_type(Path(name)) == expected


def test_accepted_types() -> None:
    assert is_accepted_mime_type("image/webp")
    assert is_accepted_mime_type("application/pdf")
    assert not is_accepted_mime_type("text/plain")
    assert not is_accepted_mime_type("application/octet-stream")


def test_attachment_from_path(tmp_path: Path) -> None:
    path = tmp_path / "cv.jpg"
    path.write_bytes(b"\xff\xd8\xff")

    attachment = Attachment.from_path(path)

    assert attachment.name == "cv.jpg"
    assert attachment.mime_type == "image/jpeg"
    assert attachment.size == 3


def test_attachment_rejects_unsupported(tmp_path: Path) -> None:
    path = tmp_path / "cv.txt"
    path.write_text("plain")

    with pytest.raises(UnsupportedFileError):
        Attachment.from_path(path)


def test_attachment_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        Attachment.from_path(tmp_path / "missing.pdf")
