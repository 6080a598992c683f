from typing import Any

import structlog
from fastapi import APIRouter, Depends

from reuse_architect.core.application.usecases.generate_architecture_usecase import (
    GenerateArchitectureUseCase,
)
from reuse_architect.core.domain.entities.generation_request import GenerationRequest
from reuse_architect.core.domain.options import (
    DEFAULT_APP_TYPE,
    DEFAULT_ARCHITECTURE,
    DEFAULT_TECH_STACK,
    AppType,
    ArchitecturePattern,
    TechStack,
)
from reuse_architect.infrastructure.configuration.main_settings import Settings
from reuse_architect.infrastructure.entrypoints.api.dependencies import (
    get_generate_usecase,
    get_settings,
)
from reuse_architect.infrastructure.entrypoints.api.dtos.architecture_dtos import (
    ArchitectureRequestDTO,
    OptionSetDTO,
    OptionsResponseDTO,
)

logger = structlog.get_logger()
router = APIRouter()


@router.post("/architecture")
async def generate_architecture(
    payload: ArchitectureRequestDTO,
    usecase: GenerateArchitectureUseCase = Depends(get_generate_usecase),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    request = GenerationRequest.create(
        library_path=payload.library_path,
        requirements=payload.requirements,
        app_type=payload.app_type,
        tech_stack=payload.tech_stack,
        architecture=payload.architecture,
        context=payload.context or settings.default_context,
    )
    result = await usecase.execute(request)
    logger.info("Architecture served", processing_status="SUCCESS", nodes=len(result.file_tree))
    return result.to_wire()


@router.get("/options", response_model=OptionsResponseDTO, response_model_by_alias=True)
def list_options() -> OptionsResponseDTO:
    return OptionsResponseDTO(
        appTypes=OptionSetDTO(values=[o.value for o in AppType], default=DEFAULT_APP_TYPE.value),
        techStacks=OptionSetDTO(values=[o.value for o in TechStack], default=DEFAULT_TECH_STACK.value),
        architectures=OptionSetDTO(
            values=[o.value for o in ArchitecturePattern], default=DEFAULT_ARCHITECTURE.value
        ),
    )
