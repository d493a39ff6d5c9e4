import unittest
import pandas as pd
from pandas.testing import assert_series_equal
import stringext
from stringext.exceptions import FormatError

class TestAccessorPhoneNumbers(unittest.TestCase):
    def test_with_parens(self):
        phones = pd.Series(['2075551234', '555'], dtype=object)
        result = phones.strext.to_phone_number_with_parens()
        self.assertEqual(result.tolist(), ['(207) 555-1234', '555'])

    def test_missing_values_kept(self):
        phones = pd.Series(['2075551234', None], dtype=object)
        result = phones.strext.to_phone_number_no_parens()
        self.assertEqual(result.iloc[0], '207-555-1234')
        self.assertTrue(pd.isna(result.iloc[1]))

    def test_index_and_name_kept(self):
        phones = pd.Series(['2075551234'], index=['a'], name='phone', dtype=object)
        result = phones.strext.to_phone_number_no_parens()
        self.assertEqual(list(result.index), ['a'])
        self.assertEqual(result.name, 'phone')

class TestAccessorSubstringAndCase(unittest.TestCase):
    def test_substring_safe(self):
        towns = pd.Series(['Portland', 'Bar'], dtype=object)
        self.assertEqual(towns.strext.substring_safe(4).tolist(), ['land', 'Bar'])

    def test_case_conversion(self):
        names = pd.Series(['TownName', 'CountyCode'], dtype=object)
        camel = names.strext.convert_pascal_case_to_camel_case()
        self.assertEqual(camel.tolist(), ['townName', 'countyCode'])
        self.assertEqual(camel.strext.convert_camel_case_to_pascal_case().tolist(), names.tolist())

    def test_empty_string_raises(self):
        names = pd.Series(['TownName', ''], dtype=object)
        with self.assertRaises(IndexError):
            names.strext.convert_pascal_case_to_camel_case()

class TestAccessorBase64(unittest.TestCase):
    def test_round_trip(self):
        values = pd.Series(['Maine', 'naïve'], dtype=object)
        encoded = values.strext.base64_encode()
        self.assertEqual(encoded.iloc[0], 'TWFpbmU=')
        self.assertEqual(encoded.strext.base64_decode().tolist(), values.tolist())

    def test_invalid_raises(self):
        values = pd.Series(['TWFpbmU=', 'not-valid-base64!!'], dtype=object)
        with self.assertRaises(FormatError):
            values.strext.base64_decode()

class TestAccessorToInt(unittest.TestCase):
    def test_missing_without_default(self):
        values = pd.Series(['1', None, ''], dtype=object)
        expected = pd.Series([1, pd.NA, pd.NA], dtype='Int64')
        assert_series_equal(values.strext.to_int(), expected)

    def test_missing_with_default(self):
        values = pd.Series(['1', None, ''], dtype=object)
        expected = pd.Series([1, 0, 0], dtype='Int64')
        assert_series_equal(values.strext.to_int(0), expected)

    def test_invalid_raises(self):
        values = pd.Series(['1', 'abc'], dtype=object)
        with self.assertRaises(FormatError):
            values.strext.to_int()

    def test_int64_bounds_kept_exactly(self):
        values = pd.Series(['9223372036854775807', None, '-9223372036854775808'], dtype=object)
        expected = pd.Series([2 ** 63 - 1, pd.NA, -2 ** 63], dtype='Int64')
        assert_series_equal(values.strext.to_int(), expected)

    def test_out_of_int64_range_raises(self):
        values = pd.Series(['99999999999999999999'], dtype=object)
        with self.assertRaises(FormatError):
            values.strext.to_int()

    def test_default_out_of_int64_range_raises(self):
        values = pd.Series([None], dtype=object)
        with self.assertRaises(FormatError):
            values.strext.to_int(2 ** 64)

    def test_index_and_name_kept(self):
        values = pd.Series(['7'], index=['a'], name='count', dtype=object)
        result = values.strext.to_int()
        self.assertEqual(list(result.index), ['a'])
        self.assertEqual(result.name, 'count')

class TestAccessorValidation(unittest.TestCase):
    def test_numeric_series_rejected(self):
        with self.assertRaises(AttributeError):
            pd.Series([1, 2, 3]).strext
