from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_llm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env (loaded at import) out of the tests."""
    for name in ("GEMINI_API_KEY", "LLM_PROVIDER", "LLM_MODEL", "RESUME_BUILDER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
