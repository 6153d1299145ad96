from cpf_cnpj_validator.application.dtos.validation_result_dto import ValidationResult
from cpf_cnpj_validator.application.use_cases.validate_identifier import ValidateIdentifierUseCase
from cpf_cnpj_validator.domain.errors import (
    CheckDigitMismatchError,
    ErrorKind,
    IdentifierValidationError,
    InvalidLengthError,
    NonDigitCharacterError,
    RepeatedDigitError,
)
from cpf_cnpj_validator.domain.services.check_digits import (
    CheckDigitValidator,
    validate_cnpj,
    validate_cpf,
    validate_identifier,
)
from cpf_cnpj_validator.domain.value_objects.cnpj import CNPJ
from cpf_cnpj_validator.domain.value_objects.cpf import CPF
from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType

__all__ = [
    "validate_identifier", "validate_cpf", "validate_cnpj", "CheckDigitValidator",
    "CPF", "CNPJ", "IdentifierType",
    "ValidateIdentifierUseCase", "ValidationResult",
    "ErrorKind", "IdentifierValidationError", "InvalidLengthError",
    "NonDigitCharacterError", "RepeatedDigitError", "CheckDigitMismatchError",
]
