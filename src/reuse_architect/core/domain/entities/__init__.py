from reuse_architect.core.domain.entities.file_node import FileKind, FileNode
from reuse_architect.core.domain.entities.generated_result import DiagramPoint, GeneratedResult
from reuse_architect.core.domain.entities.generation_request import (
    DEFAULT_CONTEXT,
    GenerationRequest,
)

__all__ = [
    "DEFAULT_CONTEXT",
    "DiagramPoint",
    "FileKind",
    "FileNode",
    "GeneratedResult",
    "GenerationRequest",
]
