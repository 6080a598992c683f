from __future__ import annotations

from dataclasses import dataclass

from reuse_architect.core.domain.exceptions.input_validation_error import InputValidationError
from reuse_architect.core.domain.options import (
    DEFAULT_APP_TYPE,
    DEFAULT_ARCHITECTURE,
    DEFAULT_TECH_STACK,
    AppType,
    ArchitecturePattern,
    TechStack,
)

DEFAULT_CONTEXT = "Người dùng muốn tối ưu hóa code cũ."
MISSING_INPUT_MESSAGE = "Vui lòng nhập đường dẫn thư viện và yêu cầu chi tiết."


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    library_path: str
    requirements: str
    app_type: AppType = DEFAULT_APP_TYPE
    tech_stack: TechStack = DEFAULT_TECH_STACK
    architecture: ArchitecturePattern = DEFAULT_ARCHITECTURE
    context: str = DEFAULT_CONTEXT

    @classmethod
    def create(
        cls,
        library_path: str | None,
        requirements: str | None,
        app_type: AppType | str = DEFAULT_APP_TYPE,
        tech_stack: TechStack | str = DEFAULT_TECH_STACK,
        architecture: ArchitecturePattern | str = DEFAULT_ARCHITECTURE,
        context: str = DEFAULT_CONTEXT,
    ) -> GenerationRequest:
        """Validate raw form values and build an immutable request."""
        if not (library_path or "").strip() or not (requirements or "").strip():
            raise InputValidationError(MISSING_INPUT_MESSAGE)
        try:
            return cls(
                library_path=library_path,
                requirements=requirements,
                app_type=AppType(app_type),
                tech_stack=TechStack(tech_stack),
                architecture=ArchitecturePattern(architecture),
                context=context,
            )
        except ValueError as exc:
            raise InputValidationError(str(exc)) from exc
