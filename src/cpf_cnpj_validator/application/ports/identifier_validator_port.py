from typing import Protocol

from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType


class IdentifierValidatorPort(Protocol):
    def identifier_type(self, value: str) -> IdentifierType | None: ...
    def validate(self, value: str, expected_type: IdentifierType | None = None) -> None:
        """Returns None when valid. Raises IdentifierValidationError otherwise."""
        ...
