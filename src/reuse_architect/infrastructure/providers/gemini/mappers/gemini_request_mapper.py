from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from google.genai import types

from reuse_architect.core.application.prompts.architecture_prompt import ArchitecturePrompt
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig
from reuse_architect.core.domain.value_objects.voice_speaker import VoiceSpeaker

VOICE_NAMES: Mapping[VoiceSpeaker, str] = {
    VoiceSpeaker.MALE_EXPERT: "Kore",
    VoiceSpeaker.FEMALE_WARM: "Fenrir",
}


@dataclass(frozen=True, slots=True)
class GeminiRequestMapper:
    def to_generation_kwargs(self, model: str, prompt: ArchitecturePrompt) -> Mapping[str, Any]:
        return {
            "model": model,
            "contents": prompt.user_instruction,
            "config": types.GenerateContentConfig(
                system_instruction=prompt.system_instruction,
                response_mime_type="application/json",
                response_json_schema=dict(prompt.response_schema),
            ),
        }

    def to_speech_kwargs(self, model: str, text: str, voice: VoiceConfig) -> Mapping[str, Any]:
        return {
            "model": model,
            "contents": text,
            "config": types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=types.SpeechConfig(
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=self.voice_name(voice)),
                    ),
                ),
            ),
        }

    @staticmethod
    def voice_name(voice: VoiceConfig) -> str:
        return VOICE_NAMES[voice.speaker]
