from __future__ import annotations

from dataclasses import dataclass, field

from reuse_architect.core.application.ports.text_generation_port import TextGenerationPort
from reuse_architect.core.application.prompts.architecture_prompt import ArchitecturePrompt
from reuse_architect.infrastructure.observability.logger_factory_service import get_logger
from reuse_architect.infrastructure.providers.gemini.gemini_client_factory import GeminiClientFactory
from reuse_architect.infrastructure.providers.gemini.gemini_error_mapper import map_gemini_error
from reuse_architect.infrastructure.providers.gemini.mappers.gemini_request_mapper import (
    GeminiRequestMapper,
)
from reuse_architect.infrastructure.providers.gemini.mappers.gemini_response_mapper import (
    GeminiResponseMapper,
)

logger = get_logger("gemini_text_generation")


@dataclass(frozen=True, slots=True)
class GeminiTextGenerationProvider(TextGenerationPort):
    client_factory: GeminiClientFactory = field(default_factory=GeminiClientFactory)
    request_mapper: GeminiRequestMapper = field(default_factory=GeminiRequestMapper)
    response_mapper: GeminiResponseMapper = field(default_factory=GeminiResponseMapper)

    async def generate(self, prompt: ArchitecturePrompt) -> str:
        client, config = self.client_factory.create()
        logger.debug("Gemini generation request", model=config.text_model)
        try:
            response = await client.aio.models.generate_content(
                **self.request_mapper.to_generation_kwargs(config.text_model, prompt)
            )
        except Exception as exc:
            error = map_gemini_error(exc)
            logger.error(
                "Gemini generation failed",
                error_type=type(exc).__name__,
                error_code=error.status_code,
                error_details=error.message,
            )
            raise error from exc
        return self.response_mapper.to_text(response)
