from __future__ import annotations

from reuse_architect.core.domain.exceptions.domain_error import DomainError


class InputValidationError(DomainError):
    """Raised when user input is missing or out of range. No outbound call is made."""
