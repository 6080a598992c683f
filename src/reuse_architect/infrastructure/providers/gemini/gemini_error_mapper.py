from __future__ import annotations

from reuse_architect.core.domain.exceptions.provider_error import ProviderError
from reuse_architect.infrastructure.observability.redaction_service import redact_text

PROVIDER = "gemini"


def map_gemini_error(exc: Exception) -> ProviderError:
    """Wrap an SDK/transport failure, keeping its message and HTTP status when exposed."""
    status = getattr(exc, "code", None)
    code = status.value if hasattr(status, "value") else status
    return ProviderError(
        provider=PROVIDER,
        message=redact_text(str(exc)) or type(exc).__name__,
        status_code=code if isinstance(code, int) else None,
    )
