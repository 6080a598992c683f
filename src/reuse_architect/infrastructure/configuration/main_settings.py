from reuse_architect.infrastructure.configuration.llm_settings import LlmSettings
from reuse_architect.infrastructure.configuration.studio_settings import StudioSettings


class Settings(StudioSettings, LlmSettings):
    """
    Combines all settings.
    Inherits from StudioSettings and LlmSettings.
    """
    app_name: str = "Reuse Architect Studio"
