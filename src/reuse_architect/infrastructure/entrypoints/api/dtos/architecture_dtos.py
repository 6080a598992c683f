from pydantic import BaseModel, ConfigDict, Field

from reuse_architect.core.domain.options import (
    DEFAULT_APP_TYPE,
    DEFAULT_ARCHITECTURE,
    DEFAULT_TECH_STACK,
    AppType,
    ArchitecturePattern,
    TechStack,
)


class ArchitectureRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    library_path: str = Field("", alias="libraryPath")
    app_type: AppType = Field(DEFAULT_APP_TYPE, alias="appType")
    tech_stack: TechStack = Field(DEFAULT_TECH_STACK, alias="techStack")
    architecture: ArchitecturePattern = DEFAULT_ARCHITECTURE
    requirements: str = ""
    context: str | None = None


class OptionSetDTO(BaseModel):
    values: list[str]
    default: str


class OptionsResponseDTO(BaseModel):
    app_types: OptionSetDTO = Field(alias="appTypes")
    tech_stacks: OptionSetDTO = Field(alias="techStacks")
    architectures: OptionSetDTO
