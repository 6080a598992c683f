from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reuse_architect.core.domain.entities.generation_request import DEFAULT_CONTEXT


class StudioSettings(BaseSettings):
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    speech_max_chars: int = Field(default=500, alias="SPEECH_MAX_CHARS", gt=0)
    max_content_lines: int = Field(default=10, alias="MAX_CONTENT_LINES", gt=0)
    default_context: str = Field(default=DEFAULT_CONTEXT, alias="DEFAULT_CONTEXT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
