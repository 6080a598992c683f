from reuse_architect.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from reuse_architect.infrastructure.observability.logging.studio_schema_processor import (
    studio_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "studio_schema_processor",
]
