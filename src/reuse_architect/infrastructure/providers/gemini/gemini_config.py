from __future__ import annotations

from dataclasses import dataclass

from reuse_architect.core.domain.exceptions.configuration_error import ConfigurationError
from reuse_architect.infrastructure.configuration.llm_settings import LlmSettings

MISSING_KEY_MESSAGE = "API Key not found in environment variables (GEMINI_API_KEY, API_KEY or GOOGLE_API_KEY)"


@dataclass(frozen=True, slots=True)
class GeminiConfig:
    api_key: str
    text_model: str
    tts_model: str

    @staticmethod
    def from_env() -> GeminiConfig:
        """Read the credential at call time; a missing key is fatal for the current call."""
        settings = LlmSettings()
        key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else ""
        if not key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        return GeminiConfig(
            api_key=key,
            text_model=settings.gemini_text_model,
            tts_model=settings.gemini_tts_model,
        )
