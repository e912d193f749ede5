"""
Promotion code validation rules
"""

from typing import Optional, Union

from .models import CODE_FIELD, MAX_CODE_LENGTH, EligibilityError, ErrorKind

RawCode = Union[str, bytes, bytearray]


def coerce_code(code: RawCode) -> str:
    """
    Turn raw input into a code string without normalizing it.

    Bytes are decoded as latin-1 so each byte becomes exactly one
    character: lengths are byte counts and any non-ASCII byte lands
    outside a-z.

    Raises:
        TypeError: code is neither str nor bytes
    """
    if isinstance(code, str):
        return code
    if isinstance(code, (bytes, bytearray)):
        return bytes(code).decode("latin-1")
    raise TypeError(f"code must be str or bytes, not {type(code).__name__}")


def validate_code(code: RawCode) -> Optional[EligibilityError]:
    """
    Validate a promotion code against the business rules.

    Rules are checked in order and the first failure is returned:
    non-empty, at most five characters, lowercase ASCII letters only.

    Returns:
        None when the code is valid, otherwise the validation error
    """
    code = coerce_code(code)

    if len(code) == 0:
        return EligibilityError(
            kind=ErrorKind.EMPTY_CODE,
            field=CODE_FIELD,
            message="code cannot be empty",
        )

    if len(code) > MAX_CODE_LENGTH:
        return EligibilityError(
            kind=ErrorKind.TOO_LONG,
            field=CODE_FIELD,
            message=f"code must be at most {MAX_CODE_LENGTH} characters",
        )

    for char in code:
        if char < "a" or char > "z":
            return EligibilityError(
                kind=ErrorKind.INVALID_CHARACTER,
                field=CODE_FIELD,
                message="code must contain only lowercase letters (a-z)",
            )

    return None


def is_valid_code(code: RawCode) -> bool:
    return validate_code(code) is None


__all__ = ["RawCode", "coerce_code", "validate_code", "is_valid_code"]
