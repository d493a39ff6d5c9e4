"""Formatting, slicing, case conversion, encoding and parsing helpers for single strings.

Every function in this module is pure: it takes one string (plus an index or a
default where noted) and returns a new value without side effects.

The phone number and substring helpers never raise, whatever the input. The case
conversion, Base64 and integer helpers expect well-formed input and raise on
anything else; see `stringext.exceptions`.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'to_phone_number_with_parens',
    'to_phone_number_no_parens',
    'substring_safe',
    'convert_pascal_case_to_camel_case',
    'convert_camel_case_to_pascal_case',
    'base64_encode',
    'base64_decode',
    'to_int'
]

import base64
from typing import Optional
from stringext.exceptions import ArgumentNullError, FormatError
from stringext.patterns import (
    PHONE_LENGTH,
    PHONE_PATTERN,
    PHONE_WITH_PARENS_FORMAT,
    PHONE_NO_PARENS_FORMAT,
    INTEGER_PATTERN,
    ENCODING,
    WHITESPACE_PATTERN
)

def _format_phone(phone: Optional[str], template: str) -> Optional[str]:
    if not phone or len(phone) != PHONE_LENGTH:
        return phone
    return PHONE_PATTERN.fullmatch(phone).expand(template)

def to_phone_number_with_parens(phone: Optional[str]) -> Optional[str]:
    """
    Format a 10-character string as a phone number with the area code in parentheses.

    The characters are split by position only and are not checked for digits.

    Args:
        phone: String to format, may be empty or None

    Returns:
        Formatted phone number, or unmodified input if it is not exactly 10 characters long

    Example:
        >>> to_phone_number_with_parens('1234567890')
        '(123) 456-7890'
        >>> to_phone_number_with_parens('12345')
        '12345'
        >>> to_phone_number_with_parens('abcdefghij')
        '(abc) def-ghij'
    """
    return _format_phone(phone, PHONE_WITH_PARENS_FORMAT)

def to_phone_number_no_parens(phone: Optional[str]) -> Optional[str]:
    """
    Format a 10-character string as a hyphenated phone number.

    Args:
        phone: String to format, may be empty or None

    Returns:
        Formatted phone number, or unmodified input if it is not exactly 10 characters long

    Example:
        >>> to_phone_number_no_parens('1234567890')
        '123-456-7890'
        >>> to_phone_number_no_parens('123-456-7890')
        '123-456-7890'
    """
    return _format_phone(phone, PHONE_NO_PARENS_FORMAT)

def substring_safe(value: Optional[str], index: int) -> Optional[str]:
    """
    Get the substring beginning at `index` without raising for an out-of-range index.

    Args:
        value: String to slice, may be empty or None
        index: Position of the first character to keep

    Returns:
        Suffix of `value` starting at `index`, or unmodified input if the index
        falls outside the string

    Example:
        >>> substring_safe('Hello', 2)
        'llo'
        >>> substring_safe('Hello', 5)
        'Hello'
        >>> substring_safe('Hello', -1)
        'Hello'
    """
    if not value or index < 0 or len(value) <= index:
        return value
    return value[index:]

def convert_pascal_case_to_camel_case(value: str) -> str:
    """
    Convert a string from PascalCase to camelCase by lowercasing its first character.

    The input must not be empty; an empty string raises `IndexError`.
    Full Unicode case mapping is used, so the first character may become more than
    one character, e.g. '\u0130' lowercases to 'i\u0307'.

    Example:
        >>> convert_pascal_case_to_camel_case('HelloWorld')
        'helloWorld'
    """
    return value[0].lower() + value[1:]

def convert_camel_case_to_pascal_case(value: str) -> str:
    """
    Convert a string from camelCase to PascalCase by uppercasing its first character.

    The input must not be empty; an empty string raises `IndexError`.
    Full Unicode case mapping is used, so the first character may become more than
    one character, e.g. '\u00df' uppercases to 'SS'.

    Example:
        >>> convert_camel_case_to_pascal_case('helloWorld')
        'HelloWorld'
    """
    return value[0].upper() + value[1:]

def base64_encode(value: str) -> str:
    """
    Encode the UTF-8 bytes of a string as standard Base64.

    Args:
        value: String to encode

    Returns:
        Padded Base64 text

    Raises:
        ArgumentNullError: If `value` is None

    Example:
        >>> base64_encode('hello')
        'aGVsbG8='
        >>> base64_encode('')
        ''
    """
    if value is None:
        raise ArgumentNullError('value')
    return base64.b64encode(value.encode(ENCODING)).decode('ascii')

def base64_decode(value: str) -> str:
    """
    Decode standard Base64 text and read the bytes as UTF-8.

    Whitespace inside the payload is ignored. Byte sequences that are not valid
    UTF-8 are replaced with U+FFFD rather than raising.

    Args:
        value: Base64 text to decode

    Returns:
        Decoded string

    Raises:
        ArgumentNullError: If `value` is None
        FormatError: If `value` is not valid Base64

    Example:
        >>> base64_decode('aGVsbG8=')
        'hello'
        >>> base64_decode('aGVs bG8=')
        'hello'
    """
    if value is None:
        raise ArgumentNullError('value')
    payload = WHITESPACE_PATTERN.sub('', value)
    try:
        data = base64.b64decode(payload, validate=True)
    except ValueError as e:
        raise FormatError(f'Input is not a valid Base64 string: {value!r}') from e
    return data.decode(ENCODING, errors='replace')

def to_int(value: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """
    Parse a base-10 integer, falling back to `default` only for empty input.

    Args:
        value: Integer literal, may be empty or None
        default: Value returned when `value` is empty or None

    Returns:
        Parsed integer, or `default` if input is empty

    Raises:
        FormatError: If `value` is not empty and is not an integer literal

    Example:
        >>> to_int('42')
        42
        >>> to_int(' -7 ')
        -7
        >>> to_int('', 5)
        5
        >>> to_int(None) is None
        True
    """
    if not value:
        return default
    if INTEGER_PATTERN.fullmatch(value) is None:
        raise FormatError(f'Input string was not in a correct integer format: {value!r}')
    return int(value)
