from __future__ import annotations

import random
from typing import Iterable, Protocol

from .guess import Guess
from .ruleset import DEFAULT_RULES
from .score import Score
from .secret_code import Code, check_rules


class CodeMaker(Protocol):
    """Produces the secret code, once per game."""

    def make_code(self) -> Code: ...


class Guesser(Protocol):
    """Produces guesses and receives their scores."""

    def guess(self) -> Code: ...

    def set_score(self, score: Score) -> None: ...

    def lose(self) -> None: ...


class FixedCodeMaker:
    """Always hands out the same secret."""

    def __init__(self, code: Code | str):
        self.code = code if isinstance(code, Code) else Code(code)

    def make_code(self) -> Code:
        return self.code


class RandomCodeMaker:
    """
    Draws a secret uniformly over the color set of a ruleset.

    Args:
        rules (dict, optional): Ruleset with colors, code length and the
            duplicates flag. Defaults to DEFAULT_RULES. Only the duplicates
            flag may differ from the default.
        rng (random.Random, optional): Source of randomness, for
            reproducible games.
    """

    def __init__(self, rules: dict | None = None, rng: random.Random | None = None):
        self.rules = check_rules(rules or DEFAULT_RULES)
        self.rng = rng or random.Random()

    def make_code(self) -> Code:
        colors = self.rules["colors"]
        length = self.rules["code_length"]

        # Generate the secret code depending on whether duplicates are allowed.
        if self.rules.get("allow_duplicates", True):
            sequence = self.rng.choices(colors, k=length)
        else:
            sequence = self.rng.sample(colors, k=length)
        return Code(sequence)


class ScriptedGuesser:
    """
    Replays a fixed list of guesses and records what comes back.

    Attributes:
        history (list[Guess]): Submitted guesses with their scores.
        lost (bool): Whether the game reported a loss.
    """

    def __init__(self, guesses: Iterable[Code | str]):
        self._pending = [g if isinstance(g, Code) else Code(g) for g in guesses]
        self.history: list[Guess] = []
        self.lost = False

    def guess(self) -> Code:
        if len(self.history) >= len(self._pending):
            raise RuntimeError(
                f"No scripted guess left after {len(self.history)} rounds."
            )
        code = self._pending[len(self.history)]
        self.history.append(Guess(code))
        return code

    def set_score(self, score: Score) -> None:
        self.history[-1].apply_feedback(score)

    def lose(self) -> None:
        self.lost = True

    @property
    def won(self) -> bool:
        if not self.history or self.history[-1].score is None:
            return False
        return self.history[-1].score.is_win()
