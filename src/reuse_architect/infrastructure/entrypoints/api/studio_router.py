from enum import Enum
from pathlib import Path
from typing import Annotated, TypeVar

import structlog
from fastapi import APIRouter, Depends, Form, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from reuse_architect.core.domain.exceptions.domain_error import DomainError
from reuse_architect.core.domain.exceptions.input_validation_error import InputValidationError
from reuse_architect.core.domain.exceptions.operation_in_flight_error import (
    OperationInFlightError,
)
from reuse_architect.core.domain.options import (
    DEFAULT_APP_TYPE,
    DEFAULT_ARCHITECTURE,
    DEFAULT_TECH_STACK,
    AppType,
    ArchitecturePattern,
    TechStack,
)
from reuse_architect.core.domain.value_objects.voice_config import VoiceConfig
from reuse_architect.core.domain.value_objects.voice_speaker import VoiceSpeaker
from reuse_architect.infrastructure.configuration.main_settings import Settings
from reuse_architect.infrastructure.entrypoints.api.dependencies import get_settings, get_studio
from reuse_architect.presentation.studio_session import StudioSession
from reuse_architect.presentation.studio_state import FormSubmitted, StudioTab
from reuse_architect.presentation.studio_view import build_view

logger = structlog.get_logger()
router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "presentation" / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

OptionT = TypeVar("OptionT", bound=Enum)


def _option(option_type: type[OptionT], value: str) -> OptionT:
    try:
        return option_type(value)
    except ValueError as exc:
        raise InputValidationError(f"Unknown {option_type.__name__}: {value!r}") from exc


@router.get("/", response_class=HTMLResponse)
def studio_page(
    request: Request,
    tab: StudioTab | None = None,
    node: str | None = None,
    studio: StudioSession = Depends(get_studio),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    if tab is not None:
        studio.select_tab(tab)
    if node is not None:
        studio.select_node(node)
    # the player element only exists on the documentation tab
    with_player = studio.state.result is not None and studio.state.active_tab is StudioTab.DOCS
    autoplay = studio.playback.claim_autoplay(with_player=with_player)
    context = build_view(studio.state, studio.playback, autoplay=autoplay)
    context["app_name"] = settings.app_name
    return templates.TemplateResponse(request, "studio.html.j2", context)


@router.post("/studio/generate")
async def studio_generate(
    library_path: Annotated[str, Form()] = "",
    requirements: Annotated[str, Form()] = "",
    app_type: Annotated[str, Form()] = DEFAULT_APP_TYPE.value,
    tech_stack: Annotated[str, Form()] = DEFAULT_TECH_STACK.value,
    architecture: Annotated[str, Form()] = DEFAULT_ARCHITECTURE.value,
    studio: StudioSession = Depends(get_studio),
) -> RedirectResponse:
    form = FormSubmitted(
        library_path=library_path,
        requirements=requirements,
        app_type=_option(AppType, app_type),
        tech_stack=_option(TechStack, tech_stack),
        architecture=_option(ArchitecturePattern, architecture),
    )
    try:
        await studio.generate(form)
    except OperationInFlightError:
        raise
    except DomainError as exc:
        logger.warning("Generation failed", error_type=type(exc).__name__, error_details=str(exc))
    except Exception as exc:
        logger.error(
            "Unexpected generation failure",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
    return RedirectResponse("/?tab=tree", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/studio/speech")
async def studio_speech(
    speaker: Annotated[str, Form()] = VoiceSpeaker.MALE_EXPERT.value,
    speed: Annotated[float, Form()] = 1.0,
    studio: StudioSession = Depends(get_studio),
) -> RedirectResponse:
    voice = VoiceConfig(speaker=_option(VoiceSpeaker, speaker), speed=speed)
    try:
        await studio.speak(voice)
    except OperationInFlightError:
        raise
    except DomainError as exc:
        logger.warning("Failed to play audio", error_type=type(exc).__name__, error_details=str(exc))
    except Exception as exc:
        logger.error(
            "Unexpected speech failure",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
    return RedirectResponse("/?tab=docs", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/studio/playback/toggle")
def studio_toggle_playback(studio: StudioSession = Depends(get_studio)) -> RedirectResponse:
    studio.toggle_playback()
    return RedirectResponse("/?tab=docs", status_code=status.HTTP_303_SEE_OTHER)


# events reported by the page's audio element
@router.post("/studio/playback/play", status_code=status.HTTP_204_NO_CONTENT)
def studio_playback_play(studio: StudioSession = Depends(get_studio)) -> Response:
    studio.playback.resume()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/studio/playback/pause", status_code=status.HTTP_204_NO_CONTENT)
def studio_playback_pause(studio: StudioSession = Depends(get_studio)) -> Response:
    studio.playback.pause()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/studio/playback/finished", status_code=status.HTTP_204_NO_CONTENT)
def studio_playback_finished(studio: StudioSession = Depends(get_studio)) -> Response:
    studio.playback.finished()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/studio/audio")
def studio_audio(studio: StudioSession = Depends(get_studio)) -> Response:
    session = studio.playback.session
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No audio session")
    return Response(content=session.wav_bytes, media_type="audio/wav")
