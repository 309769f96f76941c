"""Response validation exports."""

from .response_validator import validate_response, validate_status_code

__all__ = [
    "validate_response",
    "validate_status_code",
]
