"""
Validation utilities for OTP input.
"""
import re
from typing import Tuple

# ASCII only: \d would also accept other Unicode decimal digits
_DIGIT_TOKEN = re.compile(r'[0-9]+')


def is_digit_token(text: str) -> bool:
    """
    Check whether text is a digit token.

    A digit token is a non-empty string made only of ASCII digits,
    so "" and "12.5" are not tokens while "0" and "123456" are.
    """
    if not text:
        return False
    return _DIGIT_TOKEN.fullmatch(text) is not None


def validate_otp_code(code: str, length: int) -> Tuple[bool, str]:
    """
    Validate a complete OTP code.

    Args:
        code: Code to validate
        length: Required number of digits

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code:
        return False, "Code is required"

    if not is_digit_token(code):
        return False, "Code must contain only digits"

    if len(code) != length:
        return False, f"Code must be exactly {length} digits"

    return True, ""
