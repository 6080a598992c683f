from fastapi import Request

from reuse_architect.core.application.usecases.generate_architecture_usecase import (
    GenerateArchitectureUseCase,
)
from reuse_architect.core.application.usecases.synthesize_speech_usecase import (
    SynthesizeSpeechUseCase,
)
from reuse_architect.infrastructure.configuration.main_settings import Settings
from reuse_architect.presentation.studio_session import StudioSession


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_generate_usecase(request: Request) -> GenerateArchitectureUseCase:
    return request.app.state.studio.generate_usecase


def get_speech_usecase(request: Request) -> SynthesizeSpeechUseCase:
    return request.app.state.studio.speech_usecase


def get_studio(request: Request) -> StudioSession:
    return request.app.state.studio
