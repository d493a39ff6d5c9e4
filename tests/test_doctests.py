import doctest
import unittest
from stringext.strings import strings

class TestDocstringExamples(unittest.TestCase):
    def test_strings_examples(self):
        results = doctest.testmod(strings)
        self.assertEqual(results.failed, 0)
