import unittest

from wordsieve.errors import (
    ConflictingClassification,
    EmptyCandidateSet,
    IndexOutOfRange,
    MalformedInput,
    UnknownGuess,
)
from wordsieve.session import Session
from wordsieve.tiles import TileState

WORDS = ["crane", "slate", "trace", "grate"]


class TestSession(unittest.TestCase):

    def setUp(self):
        self.session = Session.from_words(WORDS)

    def test_guess_solves(self):
        # Answer "grate": R, A and E in place, C and N absent
        tiles = self.session.submit_guess("crane", {1, 2, 4}, set())
        self.assertEqual(tiles[0].state, TileState.UNUSED)
        self.assertTrue(self.session.is_solved)
        self.assertEqual(self.session.solution, "grate")
        self.assertEqual(self.session.history, ("crane",))

    def test_guess_exhausts_candidates(self):
        self.session.submit_guess("crane", {0, 3}, set())
        self.assertTrue(self.session.is_exhausted)
        self.assertIsNone(self.session.solution)
        with self.assertRaises(EmptyCandidateSet):
            self.session.recommend()

    def test_guess_is_case_insensitive(self):
        self.session.submit_guess("CRANE", {1, 2, 4}, set())
        self.assertEqual(self.session.history, ("crane",))

    def test_unknown_guess_rejected(self):
        with self.assertRaises(UnknownGuess) as ctx:
            self.session.submit_guess("bumpy")
        self.assertIsInstance(ctx.exception, MalformedInput)
        self.assertEqual(self.session.remaining, 4)
        self.assertEqual(self.session.history, ())

    def test_accept_any_guess(self):
        session = Session.from_words(WORDS, accept_any_guess=True)
        session.submit_guess("bumpy")
        self.assertEqual(session.remaining, 4)
        self.assertEqual(session.history, ("bumpy",))

    def test_malformed_guesses(self):
        for guess in ("cran", "cranes", "cr4ne"):
            with self.assertRaises(MalformedInput):
                self.session.submit_guess(guess)
        self.assertEqual(self.session.remaining, 4)

    def test_failed_guess_is_not_recorded(self):
        with self.assertRaises(IndexOutOfRange):
            self.session.submit_guess("crane", {5}, set())
        with self.assertRaises(ConflictingClassification):
            self.session.submit_guess("crane", {1}, {1})
        self.assertEqual(self.session.remaining, 4)
        self.assertEqual(self.session.history, ())

    def test_positions_must_be_integers(self):
        with self.assertRaises(MalformedInput):
            self.session.submit_guess("crane", "03", "")
        self.assertEqual(self.session.remaining, 4)
        self.assertEqual(self.session.history, ())

    def test_manual_constraints(self):
        self.session.prune("s")
        self.assertFalse(self.session.contains("slate"))
        self.session.require_at("g", 0)
        self.assertEqual(self.session.solution, "grate")

    def test_manual_positional_constraints(self):
        self.session.prune_at("t", 3)
        self.session.require("c")
        self.assertEqual(self.session.remaining, 2)
        self.assertTrue(self.session.contains("crane"))
        self.assertTrue(self.session.contains("trace"))

    def test_sessions_are_independent(self):
        other = Session.from_words(WORDS)
        self.session.prune("a")
        self.assertEqual(self.session.remaining, 0)
        self.assertEqual(other.remaining, 4)

    def test_recommend_and_rank(self):
        self.assertEqual(self.session.recommend().word, "trace")
        self.assertEqual([r.word for r in self.session.rank(2)], ["trace", "grate"])


if __name__ == '__main__':
    unittest.main()
