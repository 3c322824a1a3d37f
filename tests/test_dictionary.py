import tempfile
import unittest
from pathlib import Path

from wordsieve.dictionary import is_valid_word, load_dictionary


class TestLoadDictionary(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "words"
        self.path.write_text(
            "Crane\ncrane\n  slate \ncan't\ncafés\nabc\nSlated\n\n", encoding="utf-8"
        )

    def tearDown(self):
        self.tmp.cleanup()

    def test_cleans_filters_and_sorts(self):
        self.assertEqual(load_dictionary(self.path), ["crane", "slate"])

    def test_other_lengths(self):
        self.assertEqual(load_dictionary(self.path, word_length=3), ["abc"])
        self.assertEqual(load_dictionary(str(self.path), word_length=6), ["slated"])

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_dictionary(Path(self.tmp.name) / "missing")

    def test_no_matching_words(self):
        with self.assertRaises(ValueError):
            load_dictionary(self.path, word_length=9)

    def test_invalid_length(self):
        with self.assertRaises(ValueError):
            load_dictionary(self.path, word_length=0)

    def test_is_valid_word(self):
        self.assertTrue(is_valid_word("crane", 5))
        self.assertFalse(is_valid_word("can't", 5))
        self.assertFalse(is_valid_word("cafés", 5))
        self.assertFalse(is_valid_word("crane", 4))


if __name__ == '__main__':
    unittest.main()
