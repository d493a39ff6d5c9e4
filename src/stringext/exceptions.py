"""Exceptions raised by `stringext.strings`.
"""

__docformat__ = 'google'

__all__ = [
    'ArgumentNullError',
    'FormatError'
]

class ArgumentNullError(TypeError, ValueError):
    """
    Raised when a required string argument is None.

    This is a precondition violation on the caller's side. It subclasses both
    `TypeError` and `ValueError` so callers can catch it either way.

    Args:
        param_name: Name of the argument that was None
    """
    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f'Argument must not be None: {param_name}')

class FormatError(ValueError):
    """
    Raised when a non-empty string does not have the expected format.

    Used for malformed Base64 payloads and for integer literals that do not parse.
    """
