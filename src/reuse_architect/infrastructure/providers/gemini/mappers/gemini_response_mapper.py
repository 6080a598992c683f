from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

from reuse_architect.core.domain.exceptions.missing_audio_error import MissingAudioError
from reuse_architect.core.domain.exceptions.provider_error import ProviderError
from reuse_architect.core.domain.value_objects.synthesized_audio import PCM_MIME_TYPE, SynthesizedAudio

PROVIDER = "gemini"


@dataclass(frozen=True, slots=True)
class GeminiResponseMapper:
    def to_text(self, response: Any) -> str:
        text = getattr(response, "text", None)
        if isinstance(text, str) and text.strip():
            return text
        raise ProviderError(provider=PROVIDER, message="No response from AI")

    def to_audio(self, response: Any) -> SynthesizedAudio:
        """Audio of the first candidate part, keeping the mime type the model reports."""
        inline = self._inline_data(response)
        data = getattr(inline, "data", None)
        if not data:
            raise MissingAudioError()
        if isinstance(data, (bytes, bytearray)):
            data = base64.b64encode(bytes(data)).decode("ascii")
        mime_type = getattr(inline, "mime_type", None)
        return SynthesizedAudio(
            audio_base64=str(data),
            mime_type=mime_type if isinstance(mime_type, str) and mime_type else PCM_MIME_TYPE,
        )

    def _inline_data(self, response: Any) -> Any:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return None
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        if not parts:
            return None
        return getattr(parts[0], "inline_data", None)
