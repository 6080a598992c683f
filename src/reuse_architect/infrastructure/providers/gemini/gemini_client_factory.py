from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from google import genai

from reuse_architect.infrastructure.providers.gemini.gemini_config import GeminiConfig


@dataclass(frozen=True, slots=True)
class GeminiClientFactory:
    config_loader: Callable[[], GeminiConfig] = field(default=GeminiConfig.from_env)

    def create(self) -> tuple[Any, GeminiConfig]:
        """Build a fresh client for one call. Raises ConfigurationError when no key is set."""
        config = self.config_loader()
        return genai.Client(api_key=config.api_key), config
