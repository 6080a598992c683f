"""Explicit UI state for the studio page and the reducer that evolves it.

The page never mutates state in place: every user or network event becomes an
action, and ``reduce`` returns the next immutable ``StudioState``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from reuse_architect.core.domain.entities.file_node import FileNode
from reuse_architect.core.domain.entities.generated_result import GeneratedResult
from reuse_architect.core.domain.options import (
    DEFAULT_APP_TYPE,
    DEFAULT_ARCHITECTURE,
    DEFAULT_TECH_STACK,
    AppType,
    ArchitecturePattern,
    TechStack,
)
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig

GENERIC_FAILURE_MESSAGE = "Có lỗi xảy ra trong quá trình xử lý AI."
SPEECH_FAILURE_MESSAGE = "Không thể tạo giọng đọc lúc này. Vui lòng kiểm tra API Key."
NO_DOCUMENTATION_MESSAGE = "Chưa có tài liệu để đọc. Hãy tạo kiến trúc trước."


class StudioTab(str, Enum):
    TREE = "tree"
    DOCS = "docs"
    VIZ = "viz"


@dataclass(frozen=True, slots=True)
class StudioState:
    library_path: str = ""
    app_type: AppType = DEFAULT_APP_TYPE
    tech_stack: TechStack = DEFAULT_TECH_STACK
    architecture: ArchitecturePattern = DEFAULT_ARCHITECTURE
    requirements: str = ""
    loading: bool = False
    result: GeneratedResult | None = None
    error: str | None = None
    active_tab: StudioTab = StudioTab.TREE
    selected_path: str | None = None
    selected_file: FileNode | None = None
    voice: VoiceConfig = field(default_factory=VoiceConfig)
    speech_loading: bool = False
    speech_error: str | None = None


@dataclass(frozen=True, slots=True)
class FormSubmitted:
    library_path: str
    requirements: str
    app_type: AppType
    tech_stack: TechStack
    architecture: ArchitecturePattern


@dataclass(frozen=True, slots=True)
class ValidationFailed:
    message: str


@dataclass(frozen=True, slots=True)
class GenerationStarted:
    pass


@dataclass(frozen=True, slots=True)
class GenerationSucceeded:
    result: GeneratedResult


@dataclass(frozen=True, slots=True)
class GenerationFailed:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class TabSelected:
    tab: StudioTab


@dataclass(frozen=True, slots=True)
class NodeSelected:
    path: str
    node: FileNode


@dataclass(frozen=True, slots=True)
class VoiceChanged:
    voice: VoiceConfig


@dataclass(frozen=True, slots=True)
class SpeechStarted:
    pass


@dataclass(frozen=True, slots=True)
class SpeechFinished:
    pass


@dataclass(frozen=True, slots=True)
class SpeechFailed:
    message: str | None = None


StudioAction = (
    FormSubmitted
    | ValidationFailed
    | GenerationStarted
    | GenerationSucceeded
    | GenerationFailed
    | TabSelected
    | NodeSelected
    | VoiceChanged
    | SpeechStarted
    | SpeechFinished
    | SpeechFailed
)


def reduce(state: StudioState, action: StudioAction) -> StudioState:
    if isinstance(action, FormSubmitted):
        return replace(
            state,
            library_path=action.library_path,
            requirements=action.requirements,
            app_type=action.app_type,
            tech_stack=action.tech_stack,
            architecture=action.architecture,
        )
    if isinstance(action, ValidationFailed):
        return replace(state, error=action.message)
    if isinstance(action, GenerationStarted):
        return replace(
            state, loading=True, error=None, result=None, selected_path=None, selected_file=None
        )
    if isinstance(action, GenerationSucceeded):
        tree = action.result.file_tree
        # first top-level node is shown by default, whatever its kind
        return replace(
            state,
            loading=False,
            result=action.result,
            selected_path="0" if tree else None,
            selected_file=tree[0] if tree else None,
        )
    if isinstance(action, GenerationFailed):
        return replace(state, loading=False, error=action.message or GENERIC_FAILURE_MESSAGE)
    if isinstance(action, TabSelected):
        return replace(state, active_tab=action.tab)
    if isinstance(action, NodeSelected):
        if not action.node.is_file:
            return state
        return replace(state, selected_path=action.path, selected_file=action.node)
    if isinstance(action, VoiceChanged):
        return replace(state, voice=action.voice)
    if isinstance(action, SpeechStarted):
        return replace(state, speech_loading=True, speech_error=None)
    if isinstance(action, SpeechFinished):
        return replace(state, speech_loading=False)
    if isinstance(action, SpeechFailed):
        return replace(state, speech_loading=False, speech_error=action.message or SPEECH_FAILURE_MESSAGE)
    raise TypeError(f"Unknown studio action: {type(action).__name__}")
