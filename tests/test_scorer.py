import unittest
from itertools import product

from game.score import Score, ScorePeg
from game.scorer import Scorer
from game.secret_code import Code, InvalidCodeError


B = ScorePeg.BLACK
W = ScorePeg.WHITE


def _score(secret, guess):
    return Scorer(Code(secret)).score(Code(guess))


class TestScorer(unittest.TestCase):
    def test_given_no_shared_colors_when_scoring_then_no_feedback(self):
        self.assertEqual(_score("ABCD", "EEFF"), Score([None, None, None, None]))

    def test_given_identical_codes_when_scoring_then_all_black(self):
        self.assertEqual(_score("ABCD", "ABCD"), Score([B, B, B, B]))
        self.assertTrue(_score("ABCD", "ABCD").is_win())

    def test_given_reversed_code_when_scoring_then_all_white(self):
        self.assertEqual(_score("ABCD", "DCBA"), Score([W, W, W, W]))

    def test_given_two_positions_match_when_scoring_then_two_blacks(self):
        self.assertEqual(_score("CCAF", "CDDF"), Score([B, B, None, None]))

    def test_given_one_exact_and_one_misplaced_when_scoring_then_black_packed_before_white(self):
        # the white peg comes from guess position 0, the black from position 3
        self.assertEqual(_score("ACEF", "CDDF"), Score([B, W, None, None]))

    def test_given_repeated_guess_color_when_scoring_then_counted_only_once(self):
        self.assertEqual(_score("ABEF", "AADD"), Score([B, None, None, None]))
        self.assertEqual(_score("ABCD", "EAAA").get_feedback(), (0, 1))

    def test_given_repeated_secret_color_when_scoring_then_capped_by_guess(self):
        self.assertEqual(_score("AAAB", "BCDA").get_feedback(), (0, 2))
        self.assertEqual(_score("AABB", "BBAA").get_feedback(), (0, 4))
        self.assertEqual(_score("AABC", "ADAA").get_feedback(), (1, 1))

    def test_given_guess_of_wrong_length_when_scoring_then_error(self):
        class ShortCode:
            def __len__(self):
                return 3

        with self.assertRaises(InvalidCodeError):
            Scorer(Code("ABCD")).score(ShortCode())

    def test_given_scorer_when_scoring_twice_then_same_result(self):
        scorer = Scorer(Code("ABCD"))
        self.assertEqual(scorer.score(Code("DCBA")), scorer.score(Code("DCBA")))
        self.assertEqual(scorer.secret, Code("ABCD"))


class TestScorerProperties(unittest.TestCase):
    # every code against a fixed sample of secrets
    SECRETS = ["ABCD", "AABB", "CCAF", "FFFF", "ABEF", "DAAD"]

    def _all_codes(self):
        return [Code(seq) for seq in product("ABCDEF", repeat=4)]

    def test_given_any_guess_when_scoring_then_blacks_equal_matching_positions(self):
        for secret in map(Code, self.SECRETS):
            scorer = Scorer(secret)
            for guess in self._all_codes():
                black, white = scorer.score(guess).get_feedback()
                expected = sum(1 for s, g in zip(secret, guess) if s == g)
                self.assertEqual(black, expected, f"{secret} vs {guess}")
                self.assertLessEqual(black + white, 4)

    def test_given_swapped_codes_when_scoring_then_counts_symmetric(self):
        for secret in map(Code, self.SECRETS):
            for guess in self._all_codes():
                self.assertEqual(
                    Scorer(secret).score(guess).get_feedback(),
                    Scorer(guess).score(secret).get_feedback(),
                    f"{secret} vs {guess}",
                )

    def test_given_any_guess_when_scoring_then_blacks_before_whites_before_empty(self):
        order = {B: 0, W: 1, None: 2}
        for secret in map(Code, self.SECRETS):
            scorer = Scorer(secret)
            for guess in self._all_codes():
                ranks = [order[peg] for peg in scorer.score(guess).pegs]
                self.assertEqual(ranks, sorted(ranks))

    def test_given_any_guess_when_scoring_then_total_matches_color_multiset(self):
        for secret in map(Code, self.SECRETS):
            scorer = Scorer(secret)
            for guess in self._all_codes():
                common = sum(
                    min(list(secret).count(c), list(guess).count(c))
                    for c in set(secret)
                )
                self.assertEqual(sum(scorer.score(guess).get_feedback()), common)

    def test_given_every_code_when_scored_against_itself_then_win(self):
        for code in self._all_codes():
            score = Scorer(code).score(code)
            self.assertTrue(score.is_win())
            self.assertEqual(score.get_feedback(), (4, 0))


if __name__ == "__main__":
    unittest.main()
