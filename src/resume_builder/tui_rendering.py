from __future__ import annotations

import re
from collections.abc import Iterable

from resume_builder.models.chat import ChatMessage, ChatRole
from resume_builder.preview import PreviewDocument, PreviewItem

_BLOCK_MARKER = re.compile(r"^([ \t]*)([-+>=`|])", re.MULTILINE)
_ORDERED_MARKER = re.compile(r"^([ \t]*\d+)([.)])", re.MULTILINE)


def _escape(text: str) -> str:
    """Keep user text from being read as emphasis, headings, quotes or list markers."""
    text = text.replace("\\", "\\\\").replace("*", "\\*").replace("_", "\\_").replace("#", "\\#")
    text = _BLOCK_MARKER.sub(r"\1\\\2", text)
    return _ORDERED_MARKER.sub(r"\1\\\2", text)


def _item_markdown(item: PreviewItem) -> list[str]:
    parts: list[str] = []
    heading = f"### {_escape(item.heading)}"
    if item.heading_aside:
        heading += f" | {_escape(item.heading_aside)}"
    parts.append(heading)

    if item.subheading is not None:
        sub = f"*{_escape(item.subheading)}*"
        if item.subheading_aside:
            sub += f" | *{_escape(item.subheading_aside)}*"
        parts.append(sub)
    if item.link:
        parts.append(f"[{_escape(item.link)}]({item.link})")
    if item.body:
        parts.append("")
        # Two trailing spaces keep line breaks inside the paragraph.
        parts.extend(f"{_escape(line)}  " for line in item.body.splitlines())
    parts.append("")
    return parts


def render_preview_markdown(document: PreviewDocument) -> str:
    header = document.header
    parts: list[str] = [f"# {_escape(header.name.upper())}", ""]

    contact = [_escape(header.email), _escape(header.phone)]
    if header.website:
        contact.append(f"[{_escape(header.website)}]({header.website})")
    parts.append(" | ".join(contact))
    parts.append("")

    for section in document.sections:
        parts.append(f"## {section.title.upper()}")
        parts.append("")
        if section.text is not None:
            parts.append(_escape(section.text))
            parts.append("")
        for item in section.items:
            parts.extend(_item_markdown(item))

    return "\n".join(parts).rstrip() + "\n"


def render_transcript_markdown(messages: Iterable[ChatMessage], waiting: bool = False) -> str:
    """Render the chat transcript; assistant replies are markdown already."""
    parts: list[str] = []
    for msg in messages:
        if msg.role is ChatRole.USER:
            quoted = "\n".join(f"> {line}" for line in msg.text.splitlines() or [""])
            parts.append(f"**You**\n\n{quoted}")
        else:
            parts.append(f"**Assistant**\n\n{msg.text}")
    if waiting:
        parts.append("**Assistant**\n\n_Thinking..._")
    return "\n\n---\n\n".join(parts)
