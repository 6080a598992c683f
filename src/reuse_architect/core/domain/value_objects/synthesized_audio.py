from __future__ import annotations

from dataclasses import dataclass

# raw 16-bit mono PCM, as the Gemini TTS models answer when no type is given
PCM_MIME_TYPE = "audio/L16;rate=24000"


@dataclass(frozen=True, slots=True)
class SynthesizedAudio:
    audio_base64: str
    mime_type: str = PCM_MIME_TYPE
