"""Custom exceptions for the domain layer."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Discriminant of a name validation failure."""

    EMPTY_LABEL = "empty_label"
    MALFORMED_SEPARATORS = "malformed_separators"
    LABEL_TOO_LONG = "label_too_long"
    NAME_TOO_LONG = "name_too_long"
    INVALID_CHARACTER = "invalid_character"
    INVALID_HYPHEN_PLACEMENT = "invalid_hyphen_placement"
    CODEC_FAILURE = "codec_failure"
    INVALID_STRUCTURE = "invalid_structure"


class FqdnException(Exception):
    """Base exception for the package."""
    pass


class ValidationException(FqdnException, ValueError):
    """
    Raised when a label or a domain name fails validation.

    Subclasses ValueError so that pydantic reports it as a field error.
    """

    kind: ErrorKind

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class EmptyLabel(ValidationException):
    """Raised when a label has zero length."""

    kind = ErrorKind.EMPTY_LABEL


class MalformedSeparators(EmptyLabel):
    """Raised on a leading dot or consecutive dots in a name."""

    kind = ErrorKind.MALFORMED_SEPARATORS


class LabelTooLong(ValidationException):
    """Raised when a label exceeds the active label length limit."""

    kind = ErrorKind.LABEL_TOO_LONG

    def __init__(self, message: str, value: Optional[str] = None, length: int = 0, limit: int = 0):
        super().__init__(message, value)
        self.length = length
        self.limit = limit


class NameTooLong(ValidationException):
    """Raised when the encoded name exceeds the active name length limit."""

    kind = ErrorKind.NAME_TOO_LONG

    def __init__(self, message: str, value: Optional[str] = None, length: int = 0, limit: int = 0):
        super().__init__(message, value)
        self.length = length
        self.limit = limit


class InvalidCharacter(ValidationException):
    """Raised when a label contains a character outside the allowed set."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, message: str, value: Optional[str] = None, char: str = "", position: int = 0):
        super().__init__(message, value)
        self.char = char
        self.position = position


class InvalidHyphenPlacement(ValidationException):
    """Raised when a label starts or ends with a hyphen."""

    kind = ErrorKind.INVALID_HYPHEN_PLACEMENT

    def __init__(self, message: str, value: Optional[str] = None, position: str = "start"):
        super().__init__(message, value)
        self.position = position


class CodecFailure(ValidationException):
    """Raised when an internationalized label cannot be transcoded."""

    kind = ErrorKind.CODEC_FAILURE


class InvalidStructure(ValidationException):
    """Raised when length octets of a wire-form name are inconsistent."""

    kind = ErrorKind.INVALID_STRUCTURE


class FileOperationException(FqdnException):
    """Raised when file operations fail."""
    pass


class ConfigurationException(FqdnException):
    """Raised when configuration is invalid."""
    pass
