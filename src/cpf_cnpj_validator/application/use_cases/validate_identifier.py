from __future__ import annotations

import logging

from cpf_cnpj_validator.application.dtos.validation_result_dto import ValidationResult
from cpf_cnpj_validator.application.ports.identifier_validator_port import IdentifierValidatorPort
from cpf_cnpj_validator.domain.errors import IdentifierValidationError
from cpf_cnpj_validator.domain.services.check_digits import CheckDigitValidator
from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType

logger = logging.getLogger(__name__)


class ValidateIdentifierUseCase:
    """Validates one CPF/CNPJ and reports the outcome as a ValidationResult."""

    def __init__(self, validator: IdentifierValidatorPort | None = None) -> None:
        self.validator = validator or CheckDigitValidator()

    def execute(self, value: str, expected_type: IdentifierType | None = None) -> ValidationResult:
        kind = expected_type or self.validator.identifier_type(value)
        try:
            self.validator.validate(value, expected_type)
        except IdentifierValidationError as e:
            logger.debug("Rejected %r (%s): %s", value, e.kind.value, e)
            return ValidationResult(value, "INVALID", kind, str(e), e.kind)
        return ValidationResult(value, "VALID", kind, f"valid {kind.name if kind else 'identifier'}")
