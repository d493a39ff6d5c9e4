"""Constants and regex patterns shared by the string helpers.
"""

__docformat__ = 'google'

import re

## Phone numbers
# Constants
PHONE_LENGTH: int = 10
"""Number of characters a string must have to be reformatted as a phone number.

Only the length is checked. The characters themselves are not validated, so
any 10-character string is split positionally into area code, exchange and line."""

# Building blocks
AREA: str = "(?P<area>.{3})"
EXCHANGE: str = "(?P<exchange>.{3})"
LINE: str = "(?P<line>.{4})"

# Patterns
PHONE_PATTERN: re.Pattern = re.compile(f"{AREA}{EXCHANGE}{LINE}", re.S)
"""Compiled regex splitting a 10-character string into its phone number parts.

Must be applied with `fullmatch`.

Capture groups:
    * area
    * exchange
    * line

Used in `stringext.strings.to_phone_number_with_parens` and
`stringext.strings.to_phone_number_no_parens`."""

# Templates
PHONE_WITH_PARENS_FORMAT: str = r"(\g<area>) \g<exchange>-\g<line>"
"""Phone number layout with the area code in parentheses, e.g. '(123) 456-7890'."""

PHONE_NO_PARENS_FORMAT: str = r"\g<area>-\g<exchange>-\g<line>"
"""Phone number layout with hyphens only, e.g. '123-456-7890'."""


## Integers
INTEGER_PATTERN: re.Pattern = re.compile("\\s*[+-]?[0-9]+\\s*")
"""Compiled regex matching a base-10 integer literal.

Surrounding whitespace and a leading sign are allowed. Underscores, decimal
points and non-ASCII digits are not, even though `int()` would accept some of them.

Used in `stringext.strings.to_int`."""

INT64_MIN: int = -2 ** 63
INT64_MAX: int = 2 ** 63 - 1
"""Bounds of the nullable `Int64` dtype.

Used in `stringext.accessor.StringExtensionsAccessor.to_int`."""


## Base64
ENCODING: str = 'utf-8'
"""Text encoding used on both sides of the Base64 conversion."""

WHITESPACE_PATTERN: re.Pattern = re.compile("\\s+")
"""Compiled regex matching whitespace, which is ignored inside a Base64 payload.

Used in `stringext.strings.base64_decode`."""
