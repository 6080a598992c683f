from __future__ import annotations

from dataclasses import dataclass

from reuse_architect.core.domain.exceptions.domain_error import DomainError


@dataclass(eq=False)
class ProviderError(DomainError):
    provider: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
