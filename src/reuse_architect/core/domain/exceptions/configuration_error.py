from __future__ import annotations

from reuse_architect.core.domain.exceptions.domain_error import DomainError


class ConfigurationError(DomainError):
    """Raised when configuration is invalid or incomplete."""
