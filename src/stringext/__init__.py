"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import strings
from . import patterns
from . import exceptions
from . import accessor

__all__ = [
    'strings',
    'patterns',
    'exceptions',
    'accessor'
]
