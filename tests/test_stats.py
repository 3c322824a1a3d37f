import unittest

from wordsieve.stats import LetterStats, letter_frequencies


class TestLetterFrequencies(unittest.TestCase):

    def test_counts_words_containing_each_letter(self):
        frequencies = letter_frequencies(["crane", "slate", "trace", "grate"])
        self.assertEqual(frequencies["a"], 4)
        self.assertEqual(frequencies["r"], 3)
        self.assertEqual(frequencies["c"], 2)
        self.assertEqual(frequencies["n"], 1)
        self.assertNotIn("z", frequencies)

    def test_repeated_letters_count_once_per_word(self):
        self.assertEqual(letter_frequencies(["speed"])["e"], 1)

    def test_empty(self):
        self.assertEqual(letter_frequencies([]), {})


class TestLetterStats(unittest.TestCase):

    def setUp(self):
        self.stats = LetterStats()

    def test_cache_hit_for_same_contents(self):
        first = self.stats.get_letter_frequencies(["crane", "slate"])
        second = self.stats.get_letter_frequencies({"slate", "crane"})
        self.assertIs(first, second)
        self.assertEqual(self.stats.get_cache_size(), 1)

    def test_shrunken_set_is_recomputed(self):
        full = self.stats.get_letter_frequencies(["crane", "slate"])
        shrunk = self.stats.get_letter_frequencies(["slate"])
        self.assertEqual(full["a"], 2)
        self.assertEqual(shrunk["a"], 1)
        self.assertEqual(self.stats.get_cache_size(), 1)

    def test_clear_cache(self):
        self.stats.get_letter_frequencies(["crane"])
        self.stats.clear_cache()
        self.assertEqual(self.stats.get_cache_size(), 0)


if __name__ == '__main__':
    unittest.main()
