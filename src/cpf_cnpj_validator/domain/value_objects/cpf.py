from cpf_cnpj_validator.domain.services.check_digits import validate_cpf


class CPF(str):
    """Value Object para CPF (11 dígitos, dígitos verificadores conferidos)."""
    def __new__(cls, value: str) -> "CPF":
        validate_cpf(value)
        return str.__new__(cls, value)
