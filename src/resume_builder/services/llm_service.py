from __future__ import annotations

import os
from typing import TYPE_CHECKING

from resume_builder.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
)

if TYPE_CHECKING:
    from resume_builder.models.chat import Attachment

"""LLM service with multi-provider support. (Gemini for now.)"""


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize LLM service with a specific provider.
        Args:
            provider: LLM provider instance
        """
        self.provider = provider or LLMService._get_default_llm_provider_from_env()

    @staticmethod
    def _get_default_llm_provider_from_env() -> LLMProvider:
        """Get the configured LLM provider.

        Returns:
            An instance of the configured LLM provider.
        """
        provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()

        if provider_name == "gemini":
            return GeminiProvider()
        raise LLMError(f"Unknown LLM provider: {provider_name}.")

    def build_prompt(self, system_instructions: str, user_content: str) -> str:
        """Construct a full prompt with system and user parts.

        Args:
            system_instructions: System-level instructions
            user_content: User-provided content

        Returns:
            The complete formatted prompt.
        """
        return f"System instruction:\n{system_instructions}\n\nUser content:\n{user_content}"

    def generate_llm_response(
        self,
        system_instructions: str,
        user_content: str,
        attachment: Attachment | None = None,
        temperature: float | None = 0.7,
        max_tokens: int | None = None,
        seed: int | None = None,
    ) -> str:
        """Build a prompt and send it to the LLM in one step.

        Args:
            system_instructions: System-level instructions.
            user_content: User content.
            attachment: Optional file sent inline with the prompt.
            temperature: Controls randomness (0.0-2.0). Lower = more deterministic.
            max_tokens: Maximum response length. None = provider default.
            seed: Random seed for reproducibility (if supported by provider).

        Returns:
            The text response from the LLM.
        """
        prompt = self.build_prompt(system_instructions, user_content)
        config = self.provider.generate_llm_config(temperature, max_tokens, seed)
        return self.provider.send_prompt(prompt, config, attachment)
