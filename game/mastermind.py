from __future__ import annotations

import logging

from .players import CodeMaker, Guesser
from .ruleset import DEFAULT_RULES
from .scorer import Scorer
from .secret_code import Code, InvalidCodeError


logger = logging.getLogger(__name__)


class Game:
    """
    Turn loop between a code maker and a guesser.

    Each round the guesser submits a code and always receives its score. A
    score of all black pegs ends the game as a win. When the round budget
    runs out first, the guesser is told it lost. Nothing is kept between
    calls to play().

    Attributes:
        max_round (int): Round budget per game.
        code_maker (CodeMaker): Supplies the secret code.
        guesser (Guesser): Supplies guesses and receives scores.
    """

    def __init__(
        self,
        code_maker: CodeMaker,
        guesser: Guesser,
        max_round: int | None = None,
    ):
        if max_round is None:
            max_round = DEFAULT_RULES["max_attempts"]
        if isinstance(max_round, bool) or not isinstance(max_round, int):
            raise TypeError(
                f"Round budget must be an int, got {type(max_round).__name__}."
            )
        if max_round < 1:
            raise ValueError(f"Round budget must be positive, got {max_round}.")
        self.max_round = max_round
        self.code_maker = code_maker
        self.guesser = guesser

    def play(self) -> None:
        """Play one game to a win or until the round budget is used up."""
        secret = _require_code(self.code_maker.make_code(), "secret")
        scorer = Scorer(secret)
        logger.debug("Secret code: %s", secret)

        for round_idx in range(1, self.max_round + 1):
            guess = _require_code(self.guesser.guess(), "guess")
            score = scorer.score(guess)
            logger.debug(
                "Round %d: %s -> %s", round_idx, guess, score.get_feedback()
            )
            self.guesser.set_score(score)

            if score.is_win():
                logger.info("Code cracked in round %d.", round_idx)
                return

        logger.info("No more rounds left after %d guesses.", self.max_round)
        self.guesser.lose()


def _require_code(value, role: str) -> Code:
    # collaborators must hand back well-formed codes
    if not isinstance(value, Code):
        raise InvalidCodeError(
            f"Expected a Code as {role}, got {type(value).__name__}."
        )
    return value
