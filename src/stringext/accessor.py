"""Series accessor exposing the string helpers on pandas columns.

Importing `stringext` registers the accessor, after which every helper in
`stringext.strings` is available element-wise on a Series of strings, e.g.
`df['phone'].strext.to_phone_number_no_parens()`.

Missing values are skipped and come back unchanged, except in `to_int`,
where they count as empty input and receive the default.
"""

__docformat__ = 'google'

__all__ = [
    'StringExtensionsAccessor'
]

import pandas as pd
from typing import Callable, Optional
from stringext import strings
from stringext.exceptions import FormatError
from stringext.patterns import INT64_MIN, INT64_MAX

@pd.api.extensions.register_series_accessor('strext')
class StringExtensionsAccessor:
    """
    Element-wise access to `stringext.strings` under the `strext` namespace.

    Args:
        series: A Series with object or string dtype
    """
    def __init__(self, series: pd.Series):
        self._validate(series)
        self._series = series

    @staticmethod
    def _validate(series: pd.Series):
        if not (pd.api.types.is_object_dtype(series) or pd.api.types.is_string_dtype(series)):
            raise AttributeError('Can only use .strext accessor with string values')

    def _map(self, func: Callable, *args) -> pd.Series:
        return self._series.map(lambda value: func(value, *args), na_action='ignore')

    def to_phone_number_with_parens(self) -> pd.Series:
        """See `stringext.strings.to_phone_number_with_parens`."""
        return self._map(strings.to_phone_number_with_parens)

    def to_phone_number_no_parens(self) -> pd.Series:
        """See `stringext.strings.to_phone_number_no_parens`."""
        return self._map(strings.to_phone_number_no_parens)

    def substring_safe(self, index: int) -> pd.Series:
        """See `stringext.strings.substring_safe`."""
        return self._map(strings.substring_safe, index)

    def convert_pascal_case_to_camel_case(self) -> pd.Series:
        return self._map(strings.convert_pascal_case_to_camel_case)

    def convert_camel_case_to_pascal_case(self) -> pd.Series:
        return self._map(strings.convert_camel_case_to_pascal_case)

    def base64_encode(self) -> pd.Series:
        return self._map(strings.base64_encode)

    def base64_decode(self) -> pd.Series:
        return self._map(strings.base64_decode)

    def to_int(self, default: Optional[int] = None) -> pd.Series:
        """
        Parse every element as an integer.

        Missing and empty elements become `default`, or `<NA>` if no default is given.
        Unlike `stringext.strings.to_int`, results are limited to the `Int64` range.

        Returns:
            Series with nullable `Int64` dtype

        Raises:
            FormatError: If any present element is not an integer literal, or if a
                parsed value (or `default`) falls outside the `Int64` range
        """
        parsed = [
            self._to_int64(None if pd.isna(value) else value, default)
            for value in self._series
        ]
        return pd.Series(
            pd.array(parsed, dtype='Int64'),
            index=self._series.index,
            name=self._series.name
        )

    @staticmethod
    def _to_int64(value: Optional[str], default: Optional[int]) -> Optional[int]:
        number = strings.to_int(value, default)
        if number is not None and not INT64_MIN <= number <= INT64_MAX:
            raise FormatError(f'Value out of Int64 range: {number}')
        return number
