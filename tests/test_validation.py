import pytest

from ureg.core.validation import (
    MSG_PASSWORD_COMPOSITION,
    MSG_PASSWORD_LENGTH,
    FormValidator,
    min_length,
    user_form_validator,
)


@pytest.mark.parametrize("password", ["Abcdefg1", "ZZZZZZZ9", "contraseñA1x"])
def test_valid_passwords_have_no_errors(password):
    assert user_form_validator().validate({"password": password}) == []


@pytest.mark.parametrize("password", ["Abc1", "A1", "Abcdef1"])
def test_short_password_only_fails_length(password):
    assert user_form_validator().validate({"password": password}) == [MSG_PASSWORD_LENGTH]


@pytest.mark.parametrize("password", ["abcdefg1", "ABCDEFGH", "abcdefgh"])
def test_long_password_missing_upper_or_digit(password):
    assert user_form_validator().validate({"password": password}) == [MSG_PASSWORD_COMPOSITION]


def test_both_rules_reported_in_order():
    errors = user_form_validator().validate({"password": "abc"})
    assert errors == [MSG_PASSWORD_LENGTH, MSG_PASSWORD_COMPOSITION]


def test_missing_field_validated_as_empty():
    errors = user_form_validator().validate({"name": "Ana"})
    assert errors == [MSG_PASSWORD_LENGTH, MSG_PASSWORD_COMPOSITION]


def test_fields_without_rules_are_ignored():
    v = FormValidator({"name": [min_length(2, "corto")]})
    assert v.validate({"name": "Al", "password": ""}) == []
    assert v.validate_field("email", "") == []


@pytest.mark.parametrize("password", ["Abcdefg١", "ABCDEFG１"])
def test_only_ascii_digits_count(password):
    assert user_form_validator().validate({"password": password}) == [MSG_PASSWORD_COMPOSITION]


@pytest.mark.parametrize("password", ["abcdefgA1\n", "Abcdefg1\nxyz"])
def test_newlines_are_not_accepted_by_composition_rule(password):
    assert user_form_validator().validate({"password": password}) == [MSG_PASSWORD_COMPOSITION]
