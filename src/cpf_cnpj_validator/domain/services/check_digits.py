from __future__ import annotations

from collections.abc import Sequence

from cpf_cnpj_validator.domain.errors import (
    CheckDigitMismatchError,
    InvalidLengthError,
    NonDigitCharacterError,
    RepeatedDigitError,
)
from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType

# CNPJ weights for the 1st (positions 0-11) and 2nd (positions 0-12) check digits
CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _digits(value: str, *, strict: bool) -> list[int]:
    if strict:
        for i, ch in enumerate(value):
            if ch not in "0123456789":
                raise NonDigitCharacterError(value, i + 1, ch)
    # without strict mode any character maps through its code point
    return [ord(ch) - ord("0") for ch in value]


def _has_distinct_digits(value: str) -> bool:
    return any(value[i - 1] != value[i] for i in range(1, len(value)))


def _cpf_check_digit(digits: Sequence[int]) -> int:
    # weights run from len+1 down to 2: (A*10 + B*9 + ... + I*2) for the 10th digit
    total = sum((len(digits) + 1 - i) * d for i, d in enumerate(digits))
    return total * 10 % 11 % 10


def _cnpj_check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    remainder = sum(w * d for w, d in zip(weights, digits)) % 11
    return 0 if remainder < 2 else 11 - remainder


def _check(position: int, expected: int, got: int) -> None:
    if expected != got:
        raise CheckDigitMismatchError(position, expected, got)


def validate_cpf(value: str, *, strict: bool = True) -> None:
    """Validates an already sanitized 11 digit CPF.

    Raises an ``IdentifierValidationError`` subclass naming the first failed check.
    """
    if len(value) != 11:
        raise InvalidLengthError(value, IdentifierType.CPF)
    digits = _digits(value, strict=strict)
    if not _has_distinct_digits(value):
        raise RepeatedDigitError(value, IdentifierType.CPF)

    _check(10, _cpf_check_digit(digits[:9]), digits[9])
    _check(11, _cpf_check_digit(digits[:10]), digits[10])


def validate_cnpj(value: str, *, strict: bool = True) -> None:
    """Validates an already sanitized 14 digit CNPJ."""
    if len(value) != 14:
        raise InvalidLengthError(value, IdentifierType.CNPJ)
    digits = _digits(value, strict=strict)
    if not _has_distinct_digits(value):
        raise RepeatedDigitError(value, IdentifierType.CNPJ)

    _check(13, _cnpj_check_digit(digits[:12], CNPJ_WEIGHTS_1), digits[12])
    _check(14, _cnpj_check_digit(digits[:13], CNPJ_WEIGHTS_2), digits[13])


def identifier_type_for(value: str) -> IdentifierType | None:
    if len(value) == 11:
        return IdentifierType.CPF
    if len(value) == 14:
        return IdentifierType.CNPJ
    return None


def validate_identifier(value: str, *, strict: bool = True) -> None:
    """Dispatches on length: 11 -> CPF, 14 -> CNPJ, anything else is rejected."""
    kind = identifier_type_for(value)
    if kind is IdentifierType.CPF:
        validate_cpf(value, strict=strict)
    elif kind is IdentifierType.CNPJ:
        validate_cnpj(value, strict=strict)
    else:
        raise InvalidLengthError(value)


class CheckDigitValidator:
    """Validator bound to a digit policy; satisfies ``IdentifierValidatorPort``."""

    def __init__(self, *, strict: bool = True) -> None:
        self.strict = strict

    def identifier_type(self, value: str) -> IdentifierType | None:
        return identifier_type_for(value)

    def validate(self, value: str, expected_type: IdentifierType | None = None) -> None:
        if expected_type is IdentifierType.CPF:
            validate_cpf(value, strict=self.strict)
        elif expected_type is IdentifierType.CNPJ:
            validate_cnpj(value, strict=self.strict)
        else:
            validate_identifier(value, strict=self.strict)
