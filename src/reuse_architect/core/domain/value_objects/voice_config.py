from __future__ import annotations

from dataclasses import dataclass

from reuse_architect.core.domain.exceptions.input_validation_error import InputValidationError
from reuse_architect.core.domain.value_objects.voice_speaker import VoiceSpeaker

MIN_SPEED = 0.5
MAX_SPEED = 2.0


@dataclass(frozen=True, slots=True)
class VoiceConfig:
    speaker: VoiceSpeaker = VoiceSpeaker.MALE_EXPERT
    speed: float = 1.0

    def __post_init__(self) -> None:
        if not MIN_SPEED <= self.speed <= MAX_SPEED:
            raise InputValidationError(
                f"VoiceConfig.speed must be within [{MIN_SPEED}, {MAX_SPEED}], got {self.speed}"
            )
