"""Assistant chat session.

The session owns the transcript and moves between ``IDLE`` and ``WAITING``.
Each request runs in three steps:

1. ``begin_*`` validates local preconditions, appends the user entry and
   returns a :class:`CompletionRequest` (or ``None`` when nothing is sent).
2. :meth:`AssistantSession.complete` talks to the provider and returns a
   :class:`CompletionOutcome`. It does not touch the transcript, so it can run
   on a worker thread.
3. :meth:`AssistantSession.resolve` appends the assistant entry and returns
   the session to ``IDLE``.

``send_user_message``, ``request_feedback`` and ``analyze_uploaded_file`` run
all three steps in one call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from resume_builder.models.chat import (
    Attachment,
    ChatMessage,
    ChatRole,
    SessionState,
    UnsupportedFileError,
    guess_mime_type,
    is_accepted_mime_type,
)
from resume_builder.services.llm_providers import (
    LLMAPIError,
    LLMError,
    LLMResponseError,
    MissingCredentialError,
)
from resume_builder.services.llm_service import LLMService
from resume_builder.services.prompts import (
    FEEDBACK_REQUEST_MESSAGE,
    GREETING,
    Prompt,
    build_feedback_prompt,
    build_file_review_prompt,
    build_question_prompt,
    file_review_message,
)
from resume_builder.services.resume_editor import ResumeStore

logger = logging.getLogger(__name__)

__all__ = [
    "AssistantBusyError",
    "AssistantSession",
    "CompletionOutcome",
    "CompletionRequest",
    "OutcomeKind",
]

NO_FILE_MESSAGE = "Please upload a file first."
READ_ERROR_MESSAGE = "Sorry, there was an error reading your file."


class AssistantBusyError(RuntimeError):
    """Raised when a request is started while another one is outstanding."""


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    MISSING_CREDENTIAL = "missing_credential"
    API_ERROR = "api_error"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    prompt: Prompt
    attachment: Attachment | None = None


@dataclass(frozen=True, slots=True)
class CompletionOutcome:
    """Result of one provider call and the transcript text it maps to."""

    kind: OutcomeKind
    text: str

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def message(self) -> str:
        if self.kind in (OutcomeKind.SUCCESS, OutcomeKind.MISSING_CREDENTIAL):
            return self.text
        return f"Error: {self.text}"


class AssistantSession:
    """Chat transcript plus the requests that feed it.

    Args:
        store: Store holding the resume the feedback request reads.
        service_factory: Builds the LLM service for each request, so the
            credential is read from the environment at call time.
    """

    def __init__(
        self,
        store: ResumeStore,
        service_factory: Callable[[], LLMService] = LLMService,
    ) -> None:
        self._store = store
        self._service_factory = service_factory
        self._transcript: tuple[ChatMessage, ...] = (ChatMessage(ChatRole.ASSISTANT, GREETING),)
        self._state = SessionState.IDLE
        self._selected_file: Path | None = None

    # ------------------------------------------------------------------
    # state

    @property
    def transcript(self) -> tuple[ChatMessage, ...]:
        return self._transcript

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_waiting(self) -> bool:
        return self._state is SessionState.WAITING

    @property
    def selected_file(self) -> Path | None:
        return self._selected_file

    def _append(self, role: ChatRole, text: str) -> None:
        self._transcript = (*self._transcript, ChatMessage(role, text))

    def _ensure_idle(self) -> None:
        if self.is_waiting:
            raise AssistantBusyError("The assistant is still answering the previous request.")

    def _start(self, user_text: str, request: CompletionRequest) -> CompletionRequest:
        self._append(ChatRole.USER, user_text)
        self._state = SessionState.WAITING
        return request

    # ------------------------------------------------------------------
    # begin steps

    def begin_user_message(self, text: str) -> CompletionRequest | None:
        """Start a general career question; blank text is ignored."""
        if not text or not text.strip():
            return None
        self._ensure_idle()
        return self._start(text, CompletionRequest(build_question_prompt(text)))

    def begin_feedback(self) -> CompletionRequest:
        """Start a review of the resume currently held by the store."""
        self._ensure_idle()
        prompt = build_feedback_prompt(self._store.record)
        return self._start(FEEDBACK_REQUEST_MESSAGE, CompletionRequest(prompt))

    def select_file(self, path: Path) -> None:
        """Remember *path* for the next analysis.

        Raises:
            UnsupportedFileError: If it is not an image, PDF, or Word document.
        """
        mime_type = guess_mime_type(path)
        if not is_accepted_mime_type(mime_type):
            raise UnsupportedFileError(f"Unsupported file type for {path.name}: {mime_type}")
        self._selected_file = path
        logger.info("Selected %s (%s)", path.name, mime_type)

    def begin_file_analysis(self) -> CompletionRequest | None:
        """Read the selected file and start a review of it.

        Returns ``None`` after appending an explanatory assistant entry when no
        file is selected or the file cannot be read.
        """
        self._ensure_idle()
        if self._selected_file is None:
            self._append(ChatRole.ASSISTANT, NO_FILE_MESSAGE)
            return None
        try:
            attachment = Attachment.from_path(self._selected_file)
        except (OSError, UnsupportedFileError):
            logger.exception("Error reading %s", self._selected_file)
            self._append(ChatRole.ASSISTANT, READ_ERROR_MESSAGE)
            return None

        logger.info(
            "Analyzing %s (%s, %d bytes)", attachment.name, attachment.mime_type, attachment.size
        )
        request = CompletionRequest(build_file_review_prompt(), attachment)
        return self._start(file_review_message(attachment.name), request)

    # ------------------------------------------------------------------
    # network and resolve steps

    def complete(self, request: CompletionRequest) -> CompletionOutcome:
        """Send *request* and map the result to an outcome. Never raises LLM errors."""
        try:
            service = self._service_factory()
            text = service.generate_llm_response(
                system_instructions=request.prompt.system_instructions,
                user_content=request.prompt.user_content,
                attachment=request.attachment,
            )
        except MissingCredentialError as e:
            logger.warning("No Gemini API key configured")
            return CompletionOutcome(OutcomeKind.MISSING_CREDENTIAL, str(e))
        except LLMAPIError as e:
            logger.error("Completion API error: %s", e)
            return CompletionOutcome(OutcomeKind.API_ERROR, str(e))
        except LLMResponseError as e:
            logger.error("Malformed completion response: %s", e)
            return CompletionOutcome(OutcomeKind.MALFORMED_RESPONSE, str(e))
        except LLMError as e:
            logger.error("Completion request failed: %s", e)
            return CompletionOutcome(OutcomeKind.TRANSPORT_ERROR, str(e))
        except Exception as e:
            # Client construction failures surface here, not inside send_prompt.
            logger.exception("Unexpected failure while contacting the LLM")
            return CompletionOutcome(OutcomeKind.TRANSPORT_ERROR, str(e))

        # Providers other than Gemini may hand back blank text.
        if not text or not text.strip():
            return CompletionOutcome(
                OutcomeKind.MALFORMED_RESPONSE, "No valid content in AI response."
            )
        return CompletionOutcome(OutcomeKind.SUCCESS, text.strip())

    def resolve(self, outcome: CompletionOutcome) -> None:
        """Append the assistant entry for *outcome* and return to ``IDLE``."""
        self._append(ChatRole.ASSISTANT, outcome.message)
        self._state = SessionState.IDLE

    def _run(self, request: CompletionRequest | None) -> CompletionOutcome | None:
        if request is None:
            return None
        outcome = self.complete(request)
        self.resolve(outcome)
        return outcome

    # ------------------------------------------------------------------
    # one-call entry points

    def send_user_message(self, text: str) -> CompletionOutcome | None:
        return self._run(self.begin_user_message(text))

    def request_feedback(self) -> CompletionOutcome | None:
        return self._run(self.begin_feedback())

    def analyze_uploaded_file(self) -> CompletionOutcome | None:
        return self._run(self.begin_file_analysis())
