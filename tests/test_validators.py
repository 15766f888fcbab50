"""
Unit tests for validation utilities
"""
import pytest

from utils.validators import is_digit_token, validate_otp_code


@pytest.mark.parametrize("text", ["0", "7", "42", "123456", "000000"])
def test_digit_tokens(text):
    assert is_digit_token(text)


@pytest.mark.parametrize("text", ["", " ", "a", "1a", "12.5", "-1", "+1", "1 2", "٣", "²", "12\n"])
def test_not_digit_tokens(text):
    assert not is_digit_token(text)


def test_none_is_not_a_digit_token():
    assert not is_digit_token(None)


def test_validate_otp_code_ok():
    assert validate_otp_code("123456", 6) == (True, "")


@pytest.mark.parametrize("code,message", [
    ("", "Code is required"),
    ("12a456", "Code must contain only digits"),
    ("12345", "Code must be exactly 6 digits"),
    ("1234567", "Code must be exactly 6 digits"),
])
def test_validate_otp_code_errors(code, message):
    valid, error = validate_otp_code(code, 6)

    assert not valid
    assert error == message
