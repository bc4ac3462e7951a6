from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

if TYPE_CHECKING:
    from resume_builder.models.chat import Attachment

"""LLM provider implementations."""

# Load environment variables for LLM API keys (GEMINI_API_KEY, LLM_MODEL, etc.)
load_dotenv()

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"

MISSING_KEY_MESSAGE = (
    "API Key is missing. Please add your Gemini API key to a .env file "
    "(GEMINI_API_KEY=...)."
)


class LLMError(RuntimeError):
    """Raised when LLM service cannot be used or fails."""


class MissingCredentialError(LLMError):
    """Raised before any request when no usable API key is configured."""


class LLMAPIError(LLMError):
    """Raised when the API answers with a non-success status."""


class LLMTransportError(LLMError):
    """Raised when the request fails before a response is received."""


class LLMResponseError(LLMError):
    """Raised when a success response carries no extractable text."""


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def generate_llm_config(
        self,
        temperature: float | None,
        max_tokens: int | None,
        seed: int | None,
    ) -> dict:
        """Generate llm configs

        Args:
            temperature: Controls randomness
            max_tokens: Maximum response length
            seed: Random seed for reproducibility

        Returns:
            Configuration dictionary with common parameters
        """
        config = {}

        if temperature is not None:
            config["temperature"] = temperature
        if max_tokens is not None:
            config["max_tokens"] = max_tokens
        if seed is not None:
            config["seed"] = seed

        return config

    @abstractmethod
    def send_prompt(
        self,
        prompt: str,
        config: dict,
        attachment: Attachment | None = None,
    ) -> str:
        """Send a prompt to the LLM and return the text response.

        Args:
            prompt: The full prompt string to send to the LLM.
            config: Configuration dictionary for the LLM request.
            attachment: Optional file sent inline with the prompt.

        Returns:
            The text response from the LLM.
        """


def resolve_api_key() -> str:
    """Read the Gemini API key from the environment.

    Raises:
        MissingCredentialError: If the key is unset, blank, or still the placeholder.
    """
    api_key = (os.environ.get("GEMINI_API_KEY") or "").strip()
    if not api_key or api_key == PLACEHOLDER_API_KEY:
        raise MissingCredentialError(MISSING_KEY_MESSAGE)
    return api_key


def extract_response_text(response: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a Gemini response.

    Raises:
        LLMResponseError: If any step of that path is missing or the text is empty.
    """
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    parts = getattr(content, "parts", None) or []
    text = getattr(parts[0], "text", None) if parts else None
    if not text or not text.strip():
        raise LLMResponseError("No valid content in AI response.")
    return text.strip()


class GeminiProvider(LLMProvider):
    """Gemini implementation."""

    def __init__(self) -> None:
        """Initialize Gemini provider with API key from environment.

        Note: Environment variables are loaded via load_dotenv() at module import.
        """
        from google import genai

        self.api_key = resolve_api_key()
        self.model = os.environ.get("LLM_MODEL", DEFAULT_GEMINI_MODEL)
        self.client = genai.Client(api_key=self.api_key)

    def generate_llm_config(
        self,
        temperature: float | None,
        max_tokens: int | None,
        seed: int | None,
    ) -> dict:
        """Generate Gemini-specific configuration dictionary."""
        config = super().generate_llm_config(temperature, max_tokens, seed)

        # Map common 'max_tokens' to Gemini's 'max_output_tokens'
        if "max_tokens" in config:
            config["max_output_tokens"] = config.pop("max_tokens")

        return config

    def build_contents(self, prompt: str, attachment: Attachment | None = None) -> list:
        """Build a single ``user`` content with a text part and an optional inline file."""
        from google.genai import types

        parts = [types.Part.from_text(text=prompt)]
        if attachment is not None:
            parts.append(
                types.Part.from_bytes(data=attachment.data, mime_type=attachment.mime_type)
            )
        return [types.Content(role="user", parts=parts)]

    def send_prompt(
        self,
        prompt: str,
        config: dict,
        attachment: Attachment | None = None,
    ) -> str:
        """Send prompt to Gemini and return response text.

        Args:
            prompt: The full prompt string.
            config: Configuration dictionary for the Gemini API.
            attachment: Optional file sent as inline data.

        Returns:
            The response text from Gemini.
        """
        from google.genai import errors

        contents = self.build_contents(prompt, attachment)
        logger.info(
            "Sending Gemini request (model=%s, attachment=%s)",
            self.model,
            attachment.mime_type if attachment else None,
        )
        try:
            response = self.client.models.generate_content(
                model=self.model, contents=contents, config=config or None
            )
        except errors.APIError as e:
            raise LLMAPIError(f"API request failed: {e.message or 'Unknown error'}") from e
        except Exception as e:
            raise LLMTransportError(f"Gemini API call failed: {e}") from e
        return extract_response_text(response)
