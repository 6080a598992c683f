from __future__ import annotations

from reuse_architect.core.domain.exceptions.domain_error import DomainError

MALFORMED_RESULT_HINT = (
    "Dữ liệu trả về bị lỗi cấu trúc (JSON Error). Hãy thử lại với yêu cầu ngắn gọn hơn."
)


class MalformedResultError(DomainError):
    """Raised when the model output cannot be recovered into a GeneratedResult."""

    def __init__(self, message: str = MALFORMED_RESULT_HINT, raw_tail: str = "") -> None:
        super().__init__(message)
        self.raw_tail = raw_tail
