from enum import Enum


class IdentifierType(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"
