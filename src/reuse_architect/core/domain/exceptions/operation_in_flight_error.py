from __future__ import annotations

from reuse_architect.core.domain.exceptions.domain_error import DomainError


class OperationInFlightError(DomainError):
    """Raised when an operation is triggered while the previous one is still running."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"'{operation}' is already in progress")
        self.operation = operation
