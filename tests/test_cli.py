from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

import resume_builder.cli as cli
from resume_builder.models.chat import Attachment
from resume_builder.models.resume import ResumeRecord
from resume_builder.services.assistant import AssistantSession
from resume_builder.services.llm_providers import LLMProvider, extract_response_text
from resume_builder.services.llm_service import LLMService


class _CannedProvider(LLMProvider):
    def __init__(self, text: str) -> None:
        self.text = text
        self.prompts: list[str] = []

    def send_prompt(self, prompt: str, config: dict, attachment: Attachment | None = None) -> str:
        self.prompts.append(prompt)
        part = SimpleNamespace(text=self.text)
        content = SimpleNamespace(parts=[part])
        return extract_response_text(SimpleNamespace(candidates=[SimpleNamespace(content=content)]))


@pytest.fixture
def canned(monkeypatch: pytest.MonkeyPatch) -> _CannedProvider:
    provider = _CannedProvider("Looks good.")

    def _session(store):
        return AssistantSession(store, service_factory=lambda: LLMService(provider))

    monkeypatch.setattr(cli, "AssistantSession", _session)
    return provider


@pytest.fixture
def resume_file(tmp_path: Path) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(ResumeRecord(full_name="Jane Doe", skills="Python").model_dump_json())
    return path


def test_init_writes_blank_record(tmp_path: Path) -> None:
    path = tmp_path / "out" / "resume.json"

    assert cli.main(["init", str(path)]) == 0
    assert ResumeRecord.model_validate_json(path.read_text()) == ResumeRecord()


def test_init_refuses_to_overwrite(resume_file: Path) -> None:
    assert cli.main(["init", str(resume_file)]) == 1
    assert json.loads(resume_file.read_text())["full_name"] == "Jane Doe"


def test_init_force_overwrites(resume_file: Path) -> None:
    assert cli.main(["init", str(resume_file), "--force"]) == 0
    assert json.loads(resume_file.read_text())["full_name"] == ""


def test_preview_prints_markdown(resume_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["preview", str(resume_file)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("# JANE DOE")
    assert "## SKILLS" in out


def test_export_docx(resume_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "exports"

    args = ["export", str(resume_file), "--format", "docx", "--output-dir", str(out_dir)]

    assert cli.main(args) == 0
    assert (out_dir / "Jane Doe.docx").exists()


def test_invalid_json_exits_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    assert cli.main(["preview", str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_missing_file_exits_one(tmp_path: Path) -> None:
    assert cli.main(["preview", str(tmp_path / "nope.json")]) == 1


def test_review_prints_reply(
    resume_file: Path, canned: _CannedProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["review", str(resume_file)]) == 0

    assert capsys.readouterr().out.strip() == "Looks good."
    assert '"full_name": "Jane Doe"' in canned.prompts[0]


def test_ask_joins_words(canned: _CannedProvider, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["ask", "how", "long?"]) == 0

    assert "The user's question is: how long?" in canned.prompts[0]
    assert "Looks good." in capsys.readouterr().out


def test_ask_without_key_reports_missing_credential(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)

    assert cli.main(["ask", "hello"]) == 1
    assert "API Key is missing" in capsys.readouterr().out


def test_analyze_unreadable_file(
    tmp_path: Path, canned: _CannedProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["analyze", str(tmp_path / "gone.pdf")]) == 1

    assert "error reading your file" in capsys.readouterr().out
    assert canned.prompts == []


def test_analyze_unsupported_type(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("hi")

    assert cli.main(["analyze", str(path)]) == 1
    assert "Unsupported file type" in capsys.readouterr().err


def test_analyze_sends_file(
    tmp_path: Path, canned: _CannedProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "cv.png"
    path.write_bytes(b"\x89PNG\r\n")

    assert cli.main(["analyze", str(path)]) == 0
    assert "Looks good." in capsys.readouterr().out


def test_no_command_runs_tui(monkeypatch: pytest.MonkeyPatch) -> None:
    launched: list[object] = []
    monkeypatch.setattr("resume_builder.tui.main", launched.append)

    assert cli.main([]) == 0
    assert len(launched) == 1


def test_keyboard_interrupt_exits_130(
    resume_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "export_resume", _interrupt)

    assert cli.main(["export", str(resume_file)]) == 130


@pytest.mark.parametrize(
    ("value", "expected"),
    [("DEBUG", 10), ("info", 20), ("", 30), ("bogus", 30)],
)
def test_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int
) -> None:
    monkeypatch.setenv(cli.LOG_LEVEL_ENV, value)
    assert cli._log_level() == expected
