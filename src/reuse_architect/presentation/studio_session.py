from __future__ import annotations

from reuse_architect.core.application.usecases.generate_architecture_usecase import (
    GenerateArchitectureUseCase,
)
from reuse_architect.core.application.usecases.synthesize_speech_usecase import (
    SynthesizeSpeechUseCase,
)
from reuse_architect.core.domain.entities.generated_result import GeneratedResult
from reuse_architect.core.domain.entities.generation_request import (
    DEFAULT_CONTEXT,
    GenerationRequest,
)
from reuse_architect.core.domain.exceptions.domain_error import DomainError
from reuse_architect.core.domain.exceptions.input_validation_error import InputValidationError
from reuse_architect.core.domain.exceptions.operation_in_flight_error import (
    OperationInFlightError,
)
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig
from reuse_architect.infrastructure.observability.logger_factory_service import get_logger
from reuse_architect.presentation.playback import AudioSession, PlaybackController
from reuse_architect.presentation.studio_state import (
    NO_DOCUMENTATION_MESSAGE,
    FormSubmitted,
    GenerationFailed,
    GenerationStarted,
    GenerationSucceeded,
    NodeSelected,
    SpeechFailed,
    SpeechFinished,
    SpeechStarted,
    StudioAction,
    StudioState,
    StudioTab,
    TabSelected,
    ValidationFailed,
    VoiceChanged,
    reduce,
)
from reuse_architect.presentation.tree_view import find_node

logger = get_logger("studio_session")


class StudioSession:
    """
    Holds the page state of the single-user studio and runs its two operations.

    Generation and speech are single-flight: while one is outstanding its trigger
    is disabled in the page, and a second trigger raises OperationInFlightError.
    Every failure is recorded in the state and the operation returns to idle.
    """

    def __init__(
        self,
        generate_usecase: GenerateArchitectureUseCase,
        speech_usecase: SynthesizeSpeechUseCase,
        context: str | None = None,
        playback: PlaybackController | None = None,
    ) -> None:
        self.generate_usecase = generate_usecase
        self.speech_usecase = speech_usecase
        self.context = context
        self.playback = playback or PlaybackController()
        self.state = StudioState()

    def dispatch(self, action: StudioAction) -> StudioState:
        self.state = reduce(self.state, action)
        return self.state

    async def generate(self, form: FormSubmitted) -> GeneratedResult:
        if self.state.loading:
            raise OperationInFlightError("generate")
        self.dispatch(form)
        try:
            request = GenerationRequest.create(
                form.library_path,
                form.requirements,
                form.app_type,
                form.tech_stack,
                form.architecture,
                context=self.context or DEFAULT_CONTEXT,
            )
        except InputValidationError as exc:
            self.dispatch(ValidationFailed(str(exc)))
            raise

        self.dispatch(GenerationStarted())
        try:
            result = await self.generate_usecase.execute(request)
        except DomainError as exc:
            self.dispatch(GenerationFailed(str(exc)))
            raise
        except Exception:
            self.dispatch(GenerationFailed())
            raise
        self.dispatch(GenerationSucceeded(result))
        return result

    def select_tab(self, tab: StudioTab) -> StudioState:
        return self.dispatch(TabSelected(tab))

    def select_node(self, path: str) -> StudioState:
        node = find_node(self.state.result.file_tree if self.state.result else None, path)
        if node is None:
            return self.state
        return self.dispatch(NodeSelected(path=path, node=node))

    async def speak(self, voice: VoiceConfig) -> AudioSession:
        if self.state.speech_loading:
            raise OperationInFlightError("speech")
        self.dispatch(VoiceChanged(voice))
        documentation = self.state.result.documentation if self.state.result else ""
        if not documentation:
            self.dispatch(SpeechFailed(NO_DOCUMENTATION_MESSAGE))
            raise InputValidationError(NO_DOCUMENTATION_MESSAGE)

        self.dispatch(SpeechStarted())
        try:
            clip = await self.speech_usecase.execute(documentation, voice)
            session = self.playback.start(clip)
        except DomainError as exc:
            self.dispatch(SpeechFailed(str(exc)))
            raise
        except Exception:
            self.dispatch(SpeechFailed())
            raise
        self.dispatch(SpeechFinished())
        return session

    def toggle_playback(self) -> bool:
        playing = self.playback.toggle()
        logger.info("Playback toggled", playing=playing)
        return playing
