from __future__ import annotations

from typing import List, Optional

import typer

from cpf_cnpj_validator.application.use_cases.validate_identifier import ValidateIdentifierUseCase
from cpf_cnpj_validator.config import configure_logging, settings
from cpf_cnpj_validator.domain.services.check_digits import CheckDigitValidator
from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType

app = typer.Typer(help="CPF/CNPJ check digit validator CLI")


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)


@app.command()
def validate(
    values: List[str] = typer.Argument(..., help="CPF/CNPJ já sanitizados (só dígitos)"),
    kind: Optional[IdentifierType] = typer.Option(None, "--type", "-t", help="Força CPF ou CNPJ"),
    lenient: bool = typer.Option(False, "--lenient", help="Não rejeita caracteres não numéricos"),
) -> None:
    strict = settings.strict_digits and not lenient
    uc = ValidateIdentifierUseCase(validator=CheckDigitValidator(strict=strict))
    invalid = 0
    for value in values:
        res = uc.execute(value, expected_type=kind)
        if res.valid:
            typer.echo(f"VALID {value} ({res.identifier_type.value})")
        else:
            invalid += 1
            typer.echo(f"INVALID {value}: {res.message}")
    if invalid:
        raise typer.Exit(code=1)
