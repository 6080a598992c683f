from __future__ import annotations

import logging
from dataclasses import dataclass

from reuse_architect.core.application.ports.speech_synthesis_port import SpeechSynthesisPort
from reuse_architect.core.domain.exceptions.input_validation_error import InputValidationError
from reuse_architect.core.domain.value_objects.synthesized_audio import PCM_MIME_TYPE
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig

logger = logging.getLogger(__name__)

SPEECH_MAX_CHARS = 500


@dataclass(frozen=True, slots=True)
class SpeechClip:
    audio_base64: str
    mime_type: str
    speed: float


class SynthesizeSpeechUseCase:
    def __init__(self, synthesizer: SpeechSynthesisPort, max_chars: int = SPEECH_MAX_CHARS) -> None:
        self.synthesizer = synthesizer
        self.max_chars = max_chars

    async def execute(self, text: str, voice: VoiceConfig) -> SpeechClip:
        if not text:
            raise InputValidationError("Nothing to read aloud")
        excerpt = text[: self.max_chars]
        logger.info(
            "Synthesizing speech chars=%d speaker=%s speed=%s", len(excerpt), voice.speaker.value, voice.speed
        )
        audio = await self.synthesizer.synthesize(excerpt, voice)
        return SpeechClip(
            audio_base64=audio.audio_base64,
            mime_type=audio.mime_type or PCM_MIME_TYPE,
            speed=voice.speed,
        )
