"""String helper functions.

This module provides functions for formatting phone numbers, taking substrings
without index errors, switching the case of the first character, converting to and
from Base64, and parsing integers with a default.
"""

from .strings import __all__
from .strings import *
