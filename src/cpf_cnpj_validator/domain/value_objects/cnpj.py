from cpf_cnpj_validator.domain.services.check_digits import validate_cnpj


class CNPJ(str):
    """Value Object para CNPJ (14 dígitos, dígitos verificadores conferidos)."""
    def __new__(cls, value: str) -> "CNPJ":
        validate_cnpj(value)
        return str.__new__(cls, value)
