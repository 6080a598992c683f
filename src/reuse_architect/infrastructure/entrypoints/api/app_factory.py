from fastapi import FastAPI

from reuse_architect.infrastructure.configuration.llm_settings import LlmSettings
from reuse_architect.infrastructure.configuration.main_settings import Settings
from reuse_architect.infrastructure.entrypoints.api.architecture_router import (
    router as architecture_router,
)
from reuse_architect.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from reuse_architect.infrastructure.entrypoints.api.health_router import router as health_router
from reuse_architect.infrastructure.entrypoints.api.speech_router import router as speech_router
from reuse_architect.infrastructure.entrypoints.api.studio_router import router as studio_router
from reuse_architect.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from reuse_architect.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from reuse_architect.infrastructure.resolution.container import build_studio_session
from reuse_architect.presentation.studio_session import StudioSession


def create_app(settings: Settings, studio: StudioSession | None = None) -> FastAPI:
    configure_logging(settings.log_level, settings.log_format)
    logger = get_logger("app_factory")
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        text_model=settings.gemini_text_model,
        tts_model=settings.gemini_tts_model,
        # read again on every call; this only reports the state at boot
        gemini_key_present=bool(LlmSettings().gemini_api_key),
    )

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.studio = studio or build_studio_session(settings)
    app.add_middleware(CorrelationMiddleware)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(studio_router)
    app.include_router(architecture_router, prefix="/api/v1")
    app.include_router(speech_router, prefix="/api/v1")

    return app
