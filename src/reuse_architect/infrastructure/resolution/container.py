"""Functional DI container: builds fully-wired use cases and the studio session.

Free functions so the app factory and tests can assemble only what they need.
"""

from reuse_architect.core.application.policies.result_size_guard import ResultSizeGuard
from reuse_architect.core.application.prompts.architecture_prompt_builder import (
    ArchitecturePromptBuilder,
)
from reuse_architect.core.application.usecases.generate_architecture_usecase import (
    GenerateArchitectureUseCase,
)
from reuse_architect.core.application.usecases.synthesize_speech_usecase import (
    SynthesizeSpeechUseCase,
)
from reuse_architect.infrastructure.configuration.main_settings import Settings
from reuse_architect.infrastructure.providers.gemini.gemini_speech_provider import (
    GeminiSpeechProvider,
)
from reuse_architect.infrastructure.providers.gemini.gemini_text_generation_provider import (
    GeminiTextGenerationProvider,
)
from reuse_architect.presentation.studio_session import StudioSession


def build_generate_usecase(settings: Settings) -> GenerateArchitectureUseCase:
    return GenerateArchitectureUseCase(
        generator=GeminiTextGenerationProvider(),
        prompt_builder=ArchitecturePromptBuilder(max_content_lines=settings.max_content_lines),
        size_guard=ResultSizeGuard(max_content_lines=settings.max_content_lines),
    )


def build_speech_usecase(settings: Settings) -> SynthesizeSpeechUseCase:
    return SynthesizeSpeechUseCase(GeminiSpeechProvider(), max_chars=settings.speech_max_chars)


def build_studio_session(
    settings: Settings,
    generate_usecase: GenerateArchitectureUseCase | None = None,
    speech_usecase: SynthesizeSpeechUseCase | None = None,
) -> StudioSession:
    return StudioSession(
        generate_usecase=generate_usecase or build_generate_usecase(settings),
        speech_usecase=speech_usecase or build_speech_usecase(settings),
        context=settings.default_context,
    )
