from __future__ import annotations

from abc import ABC, abstractmethod

from reuse_architect.core.domain.value_objects.synthesized_audio import SynthesizedAudio
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig


class SpeechSynthesisPort(ABC):
    @abstractmethod
    async def synthesize(self, text: str, voice: VoiceConfig) -> SynthesizedAudio:
        """Return the base64-encoded audio for text, spoken with the given voice, and its mime type."""
