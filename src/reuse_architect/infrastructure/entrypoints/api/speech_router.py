import structlog
from fastapi import APIRouter, Depends

from reuse_architect.core.application.usecases.synthesize_speech_usecase import (
    SynthesizeSpeechUseCase,
)
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig
from reuse_architect.infrastructure.entrypoints.api.dependencies import get_speech_usecase
from reuse_architect.infrastructure.entrypoints.api.dtos.speech_dtos import (
    SpeechRequestDTO,
    SpeechResponseDTO,
)

logger = structlog.get_logger()
router = APIRouter()


@router.post("/speech", response_model=SpeechResponseDTO)
async def synthesize_speech(
    payload: SpeechRequestDTO,
    usecase: SynthesizeSpeechUseCase = Depends(get_speech_usecase),
) -> SpeechResponseDTO:
    clip = await usecase.execute(payload.text, VoiceConfig(speaker=payload.speaker, speed=payload.speed))
    logger.info("Speech served", processing_status="SUCCESS", audio_chars=len(clip.audio_base64))
    return SpeechResponseDTO(audio_base64=clip.audio_base64, mime_type=clip.mime_type, speed=clip.speed)
