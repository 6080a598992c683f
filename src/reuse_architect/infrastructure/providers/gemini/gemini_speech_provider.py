from __future__ import annotations

from dataclasses import dataclass, field

from reuse_architect.core.application.ports.speech_synthesis_port import SpeechSynthesisPort
from reuse_architect.core.domain.value_objects.synthesized_audio import SynthesizedAudio
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig
from reuse_architect.infrastructure.observability.logger_factory_service import get_logger
from reuse_architect.infrastructure.providers.gemini.gemini_client_factory import GeminiClientFactory
from reuse_architect.infrastructure.providers.gemini.gemini_error_mapper import map_gemini_error
from reuse_architect.infrastructure.providers.gemini.mappers.gemini_request_mapper import (
    GeminiRequestMapper,
)
from reuse_architect.infrastructure.providers.gemini.mappers.gemini_response_mapper import (
    GeminiResponseMapper,
)

logger = get_logger("gemini_speech")


@dataclass(frozen=True, slots=True)
class GeminiSpeechProvider(SpeechSynthesisPort):
    client_factory: GeminiClientFactory = field(default_factory=GeminiClientFactory)
    request_mapper: GeminiRequestMapper = field(default_factory=GeminiRequestMapper)
    response_mapper: GeminiResponseMapper = field(default_factory=GeminiResponseMapper)

    async def synthesize(self, text: str, voice: VoiceConfig) -> SynthesizedAudio:
        client, config = self.client_factory.create()
        logger.debug(
            "Gemini TTS request", model=config.tts_model, voice_name=self.request_mapper.voice_name(voice)
        )
        try:
            response = await client.aio.models.generate_content(
                **self.request_mapper.to_speech_kwargs(config.tts_model, text, voice)
            )
        except Exception as exc:
            error = map_gemini_error(exc)
            logger.error(
                "TTS error",
                error_type=type(exc).__name__,
                error_code=error.status_code,
                error_details=error.message,
            )
            raise error from exc
        return self.response_mapper.to_audio(response)
