from __future__ import annotations

from reuse_architect.core.domain.exceptions.domain_error import DomainError


class MissingAudioError(DomainError):
    """Raised when the speech model answers without an audio payload."""

    def __init__(self, message: str = "No audio data returned") -> None:
        super().__init__(message)
