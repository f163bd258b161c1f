"""
Errors raised while decoding Base45 data

Every failure is reported through a single exception type whose
``error_type`` is one of a closed set of kinds, so callers can branch on
the kind instead of parsing messages.
"""

from enum import Enum


class Base45Error(ValueError):
    """An error when decoding Base45 (or URL-safe Base45) input"""

    class ErrorType(Enum):
        """Types of decoding errors"""
        EMPTY_INPUT = "empty_input"
        INVALID_ENCODING_CHARACTERS = "invalid_encoding_characters"
        INVALID_LENGTH = "invalid_length"
        INVALID_ENCODED_DATA_OVERFLOW = "invalid_encoded_data_overflow"
        INVALID_URL_SAFE_ESCAPING = "invalid_url_safe_escaping"

    # Default human readable description for each kind
    DESCRIPTIONS = {
        ErrorType.EMPTY_INPUT: "empty input given",
        ErrorType.INVALID_ENCODING_CHARACTERS: "invalid characters in encoded string",
        ErrorType.INVALID_LENGTH: "invalid input length",
        ErrorType.INVALID_ENCODED_DATA_OVERFLOW: "invalid encoded data leads to unexpected overflow",
        ErrorType.INVALID_URL_SAFE_ESCAPING: "invalid escaped input given",
    }

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        if not message:
            message = self.DESCRIPTIONS[error_type]
        super().__init__(f"{error_type.value}: {message}")
