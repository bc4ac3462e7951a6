from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from resume_builder.models.resume import ResumeRecord
from resume_builder.preview import render_preview
from resume_builder.services.assistant import AssistantSession, CompletionOutcome
from resume_builder.services.resume_editor import ResumeStore
from resume_builder.templates import list_templates
from resume_builder.tui_rendering import render_preview_markdown
from resume_builder.utils import export_resume

LOG_LEVEL_ENV = "RESUME_BUILDER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(tui: bool = False) -> None:
    """Send log records to stderr, or to the Textual devtools console for the TUI."""
    if tui:
        from textual.logging import TextualHandler

        logging.basicConfig(level=_log_level(), handlers=[TextualHandler()], force=True)
    else:
        logging.basicConfig(
            level=_log_level(),
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )


def load_record(path: Path) -> ResumeRecord:
    """Read a resume saved by ``init`` or by hand; raises on invalid JSON."""
    return ResumeRecord.model_validate_json(path.read_text(encoding="utf-8"))


def _print_outcome(outcome: CompletionOutcome | None) -> int:
    if outcome is None:
        return 1
    print(outcome.message)
    return 0 if outcome.ok else 1


def _cmd_tui(args: argparse.Namespace) -> int:
    from resume_builder.tui import main as tui_main

    record = load_record(args.path) if args.path else None
    tui_main(ResumeStore(record))
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    path: Path = args.path
    if path.exists() and not args.force:
        print(f"{path} already exists (use --force to overwrite).")
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(ResumeRecord().model_dump_json(indent=2), encoding="utf-8")
    print(f"Wrote blank resume to {path}")
    return 0


def _cmd_preview(args: argparse.Namespace) -> int:
    print(render_preview_markdown(render_preview(load_record(args.path))), end="")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    record = load_record(args.path)
    path = export_resume(record, output_dir=args.output_dir, export_format=args.format)
    print(f"Exported to {path}")
    return 0


def _cmd_review(args: argparse.Namespace) -> int:
    session = AssistantSession(ResumeStore(load_record(args.path)))
    return _print_outcome(session.request_feedback())


def _cmd_ask(args: argparse.Namespace) -> int:
    session = AssistantSession(ResumeStore())
    question = " ".join(args.question)
    if not question.strip():
        print("Please enter a question.")
        return 1
    return _print_outcome(session.send_user_message(question))


def _cmd_analyze(args: argparse.Namespace) -> int:
    session = AssistantSession(ResumeStore())
    session.select_file(args.file)
    outcome = session.analyze_uploaded_file()
    if outcome is None:
        # The session explains what went wrong in its last transcript entry.
        print(session.transcript[-1].text)
        return 1
    return _print_outcome(outcome)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-builder",
        description="Build a resume, preview it, export it, and ask an AI assistant about it.",
    )
    sub = parser.add_subparsers(dest="command")

    tui = sub.add_parser("tui", help="Open the interactive editor (default).")
    tui.add_argument("path", nargs="?", type=Path, help="Resume JSON to start from.")
    tui.set_defaults(handler=_cmd_tui)

    init = sub.add_parser("init", help="Write a blank resume JSON file.")
    init.add_argument("path", type=Path)
    init.add_argument("--force", action="store_true", help="Overwrite an existing file.")
    init.set_defaults(handler=_cmd_init)

    preview = sub.add_parser("preview", help="Print the resume preview as markdown.")
    preview.add_argument("path", type=Path)
    preview.set_defaults(handler=_cmd_preview)

    export = sub.add_parser("export", help="Export the resume as a PDF or Word document.")
    export.add_argument("path", type=Path)
    export.add_argument("--format", choices=list_templates(), default="pdf")
    export.add_argument("--output-dir", type=Path, default=None)
    export.set_defaults(handler=_cmd_export)

    review = sub.add_parser("review", help="Ask the assistant for feedback on a resume.")
    review.add_argument("path", type=Path)
    review.set_defaults(handler=_cmd_review)

    ask = sub.add_parser("ask", help="Ask the assistant a career question.")
    ask.add_argument("question", nargs="+")
    ask.set_defaults(handler=_cmd_ask)

    analyze = sub.add_parser("analyze", help="Ask the assistant to review a resume file.")
    analyze.add_argument("file", type=Path)
    analyze.set_defaults(handler=_cmd_analyze)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        args = build_parser().parse_args(["tui"])

    configure_logging(tui=args.command == "tui")
    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting.")
        return 130
    except Exception as exc:
        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
