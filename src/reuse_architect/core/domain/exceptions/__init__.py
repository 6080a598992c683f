from reuse_architect.core.domain.exceptions.configuration_error import ConfigurationError
from reuse_architect.core.domain.exceptions.domain_error import DomainError
from reuse_architect.core.domain.exceptions.input_validation_error import InputValidationError
from reuse_architect.core.domain.exceptions.malformed_result_error import (
    MALFORMED_RESULT_HINT,
    MalformedResultError,
)
from reuse_architect.core.domain.exceptions.missing_audio_error import MissingAudioError
from reuse_architect.core.domain.exceptions.operation_in_flight_error import (
    OperationInFlightError,
)
from reuse_architect.core.domain.exceptions.provider_error import ProviderError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "InputValidationError",
    "MALFORMED_RESULT_HINT",
    "MalformedResultError",
    "MissingAudioError",
    "OperationInFlightError",
    "ProviderError",
]
