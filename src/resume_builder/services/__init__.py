"""Services"""

from resume_builder.services.assistant import (
    AssistantBusyError,
    AssistantSession,
    CompletionOutcome,
    CompletionRequest,
    OutcomeKind,
)
from resume_builder.services.llm_providers import (
    GeminiProvider,
    LLMAPIError,
    LLMError,
    LLMProvider,
    LLMResponseError,
    LLMTransportError,
    MissingCredentialError,
)
from resume_builder.services.llm_service import LLMService
from resume_builder.services.resume_editor import (
    EntryAdded,
    EntryChanged,
    EntryRemoved,
    FieldChanged,
    ResumeStore,
    add_entry,
    reduce,
    remove_entry,
    update_entry,
    update_field,
)

__all__ = [
    "AssistantBusyError",
    "AssistantSession",
    "CompletionOutcome",
    "CompletionRequest",
    "OutcomeKind",
    "GeminiProvider",
    "LLMAPIError",
    "LLMError",
    "LLMProvider",
    "LLMResponseError",
    "LLMService",
    "LLMTransportError",
    "MissingCredentialError",
    "EntryAdded",
    "EntryChanged",
    "EntryRemoved",
    "FieldChanged",
    "ResumeStore",
    "add_entry",
    "reduce",
    "remove_entry",
    "update_entry",
    "update_field",
]
