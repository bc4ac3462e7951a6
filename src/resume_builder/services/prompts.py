"""Prompt builders for the resume assistant."""

from __future__ import annotations

from dataclasses import dataclass

from resume_builder.models.resume import ResumeRecord

__all__ = [
    "FEEDBACK_REQUEST_MESSAGE",
    "GREETING",
    "Prompt",
    "build_feedback_prompt",
    "build_file_review_prompt",
    "build_question_prompt",
    "file_review_message",
    "serialize_resume",
]

GREETING = (
    "Hello! Ask a question, get feedback on the resume you build here, "
    "or upload your own for analysis."
)

FEEDBACK_REQUEST_MESSAGE = "Please give me detailed feedback on the resume I built."

_CAREER_ASSISTANT_RULES = (
    "You are a helpful and detailed career assistant for students. Your tone is "
    "encouraging and professional. Answer the question thoroughly and give a "
    "comprehensive, elongated response. Where it helps, use examples or step-by-step "
    "lists. Format your answer using markdown."
)

_REVIEW_RULES = (
    "You are an expert resume reviewer and career coach. Your tone should be "
    "encouraging, professional, and very thorough. Provide a detailed, "
    "section-by-section review in a long, elongated format. For each section, first "
    "praise what is good, then give specific, actionable suggestions for improvement, "
    "and explain the 'why' behind each suggestion so the user learns. Conclude with a "
    "summary of the top 3 most impactful changes the user can make. Format the entire "
    "response using markdown for readability."
)


@dataclass(frozen=True, slots=True)
class Prompt:
    """System instructions plus the user content they apply to."""

    system_instructions: str
    user_content: str


def serialize_resume(record: ResumeRecord) -> str:
    """Render *record* as indented JSON for the review prompt."""
    return record.model_dump_json(indent=2)


def build_question_prompt(question: str) -> Prompt:
    return Prompt(_CAREER_ASSISTANT_RULES, f"The user's question is: {question}")


def build_feedback_prompt(record: ResumeRecord) -> Prompt:
    """Ask for a section-by-section review of the built resume.

    Sections are Summary, Education, Experience, Volunteer Experience,
    Extracurricular Activities, Projects, and Skills; the JSON keys follow the
    record's field names.
    """
    user_content = (
        "Analyze the following resume data, which is in JSON format.\n\n"
        "Here is the resume data:\n\n"
        f"{serialize_resume(record)}"
    )
    return Prompt(_REVIEW_RULES, user_content)


def build_file_review_prompt() -> Prompt:
    return Prompt(
        _REVIEW_RULES,
        "Analyze the attached resume file (an image, PDF, or Word document). "
        "Review every section you can identify.",
    )


def file_review_message(file_name: str) -> str:
    return f"Reviewing uploaded file: {file_name}"
