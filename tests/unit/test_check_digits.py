# Pytest para os algoritmos de dígito verificador
import pytest

from cpf_cnpj_validator.domain.errors import (
    CheckDigitMismatchError,
    ErrorKind,
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
from cpf_cnpj_validator.domain.value_objects.identifier_type import IdentifierType


@pytest.mark.parametrize("val", ["", "0123456789", "012345678910", "0123456789101213", "1234567890123"])
def test_invalid_length(val):
    with pytest.raises(InvalidLengthError) as exc:
        validate_identifier(val)
    assert exc.value.length == len(val)
    assert exc.value.kind is ErrorKind.INVALID_LENGTH
    assert f"length {len(val)}: {val}" in str(exc.value)


@pytest.mark.parametrize("digit", "0123456789")
def test_repeated_digits_rejected(digit):
    for size in (11, 14):
        with pytest.raises(RepeatedDigitError):
            validate_identifier(digit * size)


@pytest.mark.parametrize("val", ["66849734008", "45091647007", "52998224725"])
def test_valid_cpf(val):
    assert validate_identifier(val) is None


def test_cpf_tenth_digit_changed():
    with pytest.raises(CheckDigitMismatchError) as exc:
        validate_identifier("66849734018")
    assert (exc.value.position, exc.value.expected, exc.value.got) == (10, 0, 1)
    assert str(exc.value) == "expected digit at position 10 to be 0, but got 1"


def test_cpf_eleventh_digit_changed():
    with pytest.raises(CheckDigitMismatchError) as exc:
        validate_identifier("66849734005")
    assert (exc.value.position, exc.value.expected, exc.value.got) == (11, 8, 5)


@pytest.mark.parametrize("val", ["45291647007", "45091607007"])
def test_cpf_any_digit_changed(val):
    with pytest.raises(CheckDigitMismatchError) as exc:
        validate_identifier(val)
    assert exc.value.position == 10


def test_valid_cnpj():
    assert validate_identifier("11222333000181") is None


def test_cnpj_thirteenth_digit_changed():
    with pytest.raises(CheckDigitMismatchError) as exc:
        validate_identifier("11222333000191")
    assert (exc.value.position, exc.value.expected, exc.value.got) == (13, 8, 9)


def test_cnpj_fourteenth_digit_changed():
    with pytest.raises(CheckDigitMismatchError) as exc:
        validate_identifier("11222333000182")
    assert (exc.value.position, exc.value.expected, exc.value.got) == (14, 1, 2)


def test_cnpj_remainder_below_two_maps_to_zero():
    # 1st digit: sum 100, remainder 1 -> 0
    assert validate_cnpj("11222333000009") is None
    assert validate_cnpj("11444777000161") is None


def test_validation_is_pure():
    val = "66849734018"
    first = second = None
    try:
        validate_identifier(val)
    except CheckDigitMismatchError as e:
        first = str(e)
    try:
        validate_identifier(val)
    except CheckDigitMismatchError as e:
        second = str(e)
    assert first == second is not None
    assert val == "66849734018"


def test_non_digit_rejected_in_strict_mode():
    with pytest.raises(NonDigitCharacterError) as exc:
        validate_identifier("668.4973400")
    assert exc.value.position == 4
    assert exc.value.character == "."


def test_length_checked_before_digits():
    with pytest.raises(InvalidLengthError):
        validate_identifier("abc")


def test_lenient_mode_uses_character_arithmetic():
    with pytest.raises(CheckDigitMismatchError) as exc:
        validate_identifier("6684973400a", strict=False)
    assert (exc.value.position, exc.value.expected, exc.value.got) == (11, 8, 49)


def test_forced_type_checks_its_own_length():
    with pytest.raises(InvalidLengthError) as exc:
        validate_cpf("11222333000181")
    assert exc.value.expected_type is IdentifierType.CPF
    assert str(exc.value).startswith("invalid CPF with length 14")
    with pytest.raises(InvalidLengthError):
        CheckDigitValidator().validate("66849734008", IdentifierType.CNPJ)


def test_validator_identifier_type():
    v = CheckDigitValidator()
    assert v.identifier_type("66849734008") is IdentifierType.CPF
    assert v.identifier_type("11222333000181") is IdentifierType.CNPJ
    assert v.identifier_type("123") is None
