import unittest

from wordsieve.commands import Action, Command, parse_command, parse_positions
from wordsieve.errors import MalformedInput


class TestParsePositions(unittest.TestCase):

    def test_empty_forms(self):
        self.assertEqual(parse_positions(""), frozenset())
        self.assertEqual(parse_positions("  - "), frozenset())

    def test_digit_string(self):
        self.assertEqual(parse_positions("03"), {0, 3})

    def test_separated(self):
        self.assertEqual(parse_positions("0,3"), {0, 3})
        self.assertEqual(parse_positions("10 11"), {10, 11})
        self.assertEqual(parse_positions("10,"), {10})

    def test_invalid(self):
        for text in ("0x", "1,-2", "a"):
            with self.assertRaises(MalformedInput):
                parse_positions(text)


class TestParseCommand(unittest.TestCase):

    def test_bare_word_is_guess_without_positions(self):
        self.assertEqual(parse_command("Crane"), Command(Action.GUESS, word="crane"))

    def test_inline_guess(self):
        command = parse_command("guess crane 03 1")
        self.assertEqual(command.word, "crane")
        self.assertEqual(command.correct, {0, 3})
        self.assertEqual(command.incorrect, {1})

    def test_inline_guess_without_incorrect(self):
        command = parse_command("guess crane 03")
        self.assertEqual(command.incorrect, frozenset())

    def test_prune_and_require(self):
        self.assertEqual(parse_command("prune E"), Command(Action.PRUNE, letter="e"))
        self.assertEqual(parse_command("REQUIRE a 2"),
                         Command(Action.REQUIRE, letter="a", index=2))

    def test_contains(self):
        self.assertEqual(parse_command("contains Slate"),
                         Command(Action.CONTAINS, word="slate"))

    def test_no_argument_commands(self):
        self.assertEqual(parse_command("LIST").action, Action.LIST)
        self.assertEqual(parse_command("suggest").action, Action.SUGGEST)
        self.assertEqual(parse_command("history").action, Action.HISTORY)
        self.assertEqual(parse_command("help").action, Action.HELP)
        self.assertEqual(parse_command("quit").action, Action.QUIT)
        self.assertEqual(parse_command("exit").action, Action.QUIT)

    def test_malformed(self):
        for line in ("", "   ", "prune ab", "prune a x", "require", "list extra",
                     "contains", "guess cr4ne", "guess crane 0x", "foo bar", "12345"):
            with self.assertRaises(MalformedInput, msg=line):
                parse_command(line)


if __name__ == '__main__':
    unittest.main()
