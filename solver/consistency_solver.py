from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from itertools import product
from typing import Literal

from game.guess import Guess
from game.ruleset import DEFAULT_RULES
from game.score import Score
from game.scorer import Scorer
from game.secret_code import Code, normalize, validate_sequence


logger = logging.getLogger(__name__)

Strategy = Literal["first", "minimax"]


@dataclass(frozen=True)
class SolverConfig:
    strategy: Strategy = "minimax"
    # first guess, skips the full minimax sweep over all codes
    opening: str | None = "AABB"

    def __post_init__(self):
        if self.strategy not in ("first", "minimax"):
            raise ValueError(f"Unknown strategy '{self.strategy}'.")
        if self.opening is not None:
            validate_sequence(normalize(self.opening))


class ConsistencySolver:
    """
    Guesser that only plays codes consistent with every score seen so far.

    - candidates = all codes that would have produced the received scores
    - "first": guess the first remaining candidate
    - "minimax": guess the candidate whose worst-case feedback leaves the
      fewest candidates

    Attributes:
        cfg: SolverConfig
        candidates: list[Code]
        history: list[Guess]
        lost: bool
    """

    def __init__(self, config: SolverConfig | None = None):
        self.cfg = config or SolverConfig()
        self.candidates = [
            Code(seq)
            for seq in product(DEFAULT_RULES["colors"], repeat=DEFAULT_RULES["code_length"])
        ]
        self.history: list[Guess] = []
        self.lost = False

    def guess(self) -> Code:
        if not self.candidates:
            raise RuntimeError("No code is consistent with the received scores.")

        if not self.history and self.cfg.opening:
            code = Code(self.cfg.opening)
        elif self.cfg.strategy == "minimax":
            code = self._minimax_guess()
        else:
            code = self.candidates[0]

        self.history.append(Guess(code))
        return code

    def set_score(self, score: Score) -> None:
        last = self.history[-1]
        last.apply_feedback(score)

        feedback = score.get_feedback()
        scorer = Scorer(last.get_guess())
        self.candidates = [
            c for c in self.candidates if scorer.score(c).get_feedback() == feedback
        ]
        logger.debug(
            "%s -> %s leaves %d candidates", last, feedback, len(self.candidates)
        )

    def lose(self) -> None:
        self.lost = True

    def _minimax_guess(self) -> Code:
        """
        Worst case over all feedbacks for each candidate guess.
        Returns:
            The candidate with the smallest worst-case partition, the earliest
            one on ties.
        """
        best_code = self.candidates[0]
        best_worst = len(self.candidates) + 1
        for code in self.candidates:
            scorer = Scorer(code)
            partitions = Counter(
                scorer.score(c).get_feedback() for c in self.candidates
            )
            worst = max(partitions.values())
            if worst < best_worst:
                best_code, best_worst = code, worst
        return best_code
