"""LLM provider factory with timeout and token limits.

Usage:
    from quizmo.services.llm_service.llm import ProviderConfig, build_chat_model

    config = ProviderConfig.from_settings(settings)
    llm = build_chat_model(config)

    response = await llm.ainvoke("Hello")
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from quizmo.core.config import Settings

logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Everything needed to build a chat model for one provider."""

    model_config = ConfigDict(frozen=True)

    provider: str = "GOOGLE"
    model: str
    api_key: str = ""
    temperature: float = 0.4
    max_tokens: Optional[int] = None
    timeout: float = Field(default=30, gt=0)

    @classmethod
    def from_settings(cls, s: Settings) -> "ProviderConfig":
        model = s.GOOGLE_MODEL if s.LLM_PROVIDER == "GOOGLE" else s.OLLAMA_MODEL
        return cls(
            provider=s.LLM_PROVIDER,
            model=model,
            api_key=s.GOOGLE_API_KEY,
            temperature=s.LLM_TEMPERATURE_STRUCTURED,
            max_tokens=s.LLM_MAX_TOKENS,
            timeout=s.LLM_TIMEOUT,
        )


# ── Builder functions ─────────────────────────────────────────


def _build_google(config: ProviderConfig):
    """Build Google Gemini client."""
    from langchain_google_genai import ChatGoogleGenerativeAI

    kw: Dict[str, Any] = {
        "model": config.model,
        "google_api_key": config.api_key,
        "temperature": config.temperature,
        "timeout": config.timeout,
        # One call per request; failures are surfaced, not retried
        "max_retries": 0,
    }
    if config.max_tokens:
        kw["max_output_tokens"] = config.max_tokens
    return ChatGoogleGenerativeAI(**kw)


def _build_ollama(config: ProviderConfig):
    """Build local Ollama client."""
    from langchain_ollama import ChatOllama

    kw: Dict[str, Any] = {
        "model": config.model,
        "temperature": config.temperature,
        "client_kwargs": {"timeout": config.timeout},
    }
    if config.max_tokens:
        kw["num_predict"] = config.max_tokens
    return ChatOllama(**kw)


_PROVIDERS: Dict[str, Callable[[ProviderConfig], Any]] = {
    "GOOGLE": _build_google,
    "OLLAMA": _build_ollama,
}


# ── Public API ────────────────────────────────────────────────


def build_chat_model(config: ProviderConfig):
    """Return a LangChain chat model for *config*.

    Raises:
        ValueError: if the provider is not registered.
    """
    builder = _PROVIDERS.get(config.provider.upper())
    if builder is None:
        raise ValueError(f"Unknown LLM provider {config.provider!r}; expected one of {sorted(_PROVIDERS)}")
    logger.info("Building %s chat model %s (timeout=%ss)", config.provider, config.model, config.timeout)
    return builder(config)
