from pydantic import BaseModel, Field

from reuse_architect.core.domain.value_objects.voice_config import MAX_SPEED, MIN_SPEED
from reuse_architect.core.domain.value_objects.voice_speaker import VoiceSpeaker


class SpeechRequestDTO(BaseModel):
    text: str
    speaker: VoiceSpeaker = VoiceSpeaker.MALE_EXPERT
    speed: float = Field(1.0, ge=MIN_SPEED, le=MAX_SPEED)


class SpeechResponseDTO(BaseModel):
    audio_base64: str
    mime_type: str
    speed: float
