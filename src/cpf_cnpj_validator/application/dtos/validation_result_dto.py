from dataclasses import dataclass

from cpf_cnpj_validator.domain.errors import ErrorKind
from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType


@dataclass(frozen=True)
class ValidationResult:
    identifier: str
    status: str  # "VALID" | "INVALID"
    identifier_type: IdentifierType | None
    message: str
    error_kind: ErrorKind | None = None

    @property
    def valid(self) -> bool:
        return self.status == "VALID"
