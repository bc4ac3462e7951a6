from __future__ import annotations

from resume_builder.models.chat import ChatMessage, ChatRole
from resume_builder.models.resume import ExperienceEntry, ProjectEntry, ResumeRecord
from resume_builder.preview import render_preview
from resume_builder.tui_rendering import render_preview_markdown, render_transcript_markdown


def test_preview_markdown_blank_record() -> None:
    text = render_preview_markdown(render_preview(ResumeRecord()))

    assert text.startswith("# YOUR NAME\n")
    assert "your.email@example.com | (123) 456-7890" in text
    assert "##" not in text


def test_preview_markdown_sections_and_items() -> None:
    record = ResumeRecord(
        full_name="Jane Doe",
        website="https://janedoe.dev",
        experience=(
            ExperienceEntry(
                title="Engineer",
                company="Acme",
                dates="2020",
                responsibilities="Shipped v1\nHired team",
            ),
        ),
        projects=(ProjectEntry(name="CLI", link="https://github.com/jane/cli"),),
        skills="Python",
    )
    text = render_preview_markdown(render_preview(record))

    assert "[https://janedoe.dev](https://janedoe.dev)" in text
    assert "## EXPERIENCE" in text
    assert "### Engineer | 2020" in text
    assert "*Acme* | *Location*" in text
    assert "Shipped v1  \nHired team  " in text
    assert "## PROJECTS" in text
    assert "(https://github.com/jane/cli)" in text
    assert text.rstrip().endswith("Python")


def test_preview_markdown_escapes_user_text() -> None:
    record = ResumeRecord(full_name="#1 *Star*", skills="C#, my_lib")
    text = render_preview_markdown(render_preview(record))

    assert "# \\#1 \\*STAR\\*" in text
    assert "C\\#, my\\_lib" in text


def test_transcript_markdown() -> None:
    messages = [
        ChatMessage(ChatRole.ASSISTANT, "Hello!"),
        ChatMessage(ChatRole.USER, "line one\nline two"),
    ]
    text = render_transcript_markdown(messages)

    assert text == "**Assistant**\n\nHello!\n\n---\n\n**You**\n\n> line one\n> line two"


def test_transcript_markdown_waiting_indicator() -> None:
    text = render_transcript_markdown([ChatMessage(ChatRole.USER, "Hi")], waiting=True)

    assert text.endswith("**Assistant**\n\n_Thinking..._")


def test_transcript_markdown_empty_user_text() -> None:
    text = render_transcript_markdown([ChatMessage(ChatRole.USER, "")])
    assert text == "**You**\n\n> "


def test_preview_markdown_escapes_leading_block_markers() -> None:
    record = ResumeRecord(
        experience=(
            ExperienceEntry(
                title="Engineer",
                responsibilities="Led the team\n---\n- shipped\n+ grew\n> quoted\n1. first\n`code`",
            ),
        ),
    )
    text = render_preview_markdown(render_preview(record))

    assert "Led the team  \n\\---  \n" in text
    assert "\\- shipped  " in text
    assert "\\+ grew  " in text
    assert "\\> quoted  " in text
    assert "1\\. first  " in text
    assert "\\`code`  " in text


def test_preview_markdown_keeps_inner_markers() -> None:
    record = ResumeRecord(full_name="Mary-Jane", skills="C++ > Java, 3.5 GPA")
    text = render_preview_markdown(render_preview(record))

    assert "# MARY-JANE" in text
    assert "C++ > Java, 3.5 GPA" in text
