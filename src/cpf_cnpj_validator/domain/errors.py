from __future__ import annotations

from enum import Enum

from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType


class ErrorKind(str, Enum):
    INVALID_LENGTH = "INVALID_LENGTH"
    NON_DIGIT_CHARACTER = "NON_DIGIT_CHARACTER"
    REPEATED_DIGIT = "REPEATED_DIGIT"
    CHECK_DIGIT_MISMATCH = "CHECK_DIGIT_MISMATCH"


class IdentifierValidationError(ValueError):
    """Base error for a rejected CPF/CNPJ. ``kind`` tells callers which check failed."""

    kind: ErrorKind


class InvalidLengthError(IdentifierValidationError):
    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, value: str, expected_type: IdentifierType | None = None) -> None:
        self.value = value
        self.length = len(value)
        self.expected_type = expected_type
        if expected_type is None:
            label = "CPF or CNPJ"
        else:
            label = expected_type.name
        super().__init__(f"invalid {label} with length {self.length}: {value}")


class NonDigitCharacterError(IdentifierValidationError):
    kind = ErrorKind.NON_DIGIT_CHARACTER

    def __init__(self, value: str, position: int, character: str) -> None:
        self.value = value
        self.position = position  # 1-based
        self.character = character
        super().__init__(f"invalid character {character!r} at position {position}: {value}")


class RepeatedDigitError(IdentifierValidationError):
    kind = ErrorKind.REPEATED_DIGIT

    def __init__(self, value: str, identifier_type: IdentifierType) -> None:
        self.value = value
        self.identifier_type = identifier_type
        super().__init__(f"invalid {identifier_type.name} with no distinct digit: {value}")


class CheckDigitMismatchError(IdentifierValidationError):
    kind = ErrorKind.CHECK_DIGIT_MISMATCH

    def __init__(self, position: int, expected: int, got: int) -> None:
        self.position = position
        self.expected = expected
        self.got = got
        super().__init__(f"expected digit at position {position} to be {expected}, but got {got}")
