from .ruleset import DEFAULT_RULES
from .secret_code import check_rules


class Guess:
    """
        Represents a single submitted guess together with its feedback, as
        kept in a guesser's history.
    Attributes:
        code (Code): The guessed code.
        score (Score | None): The score received for the guess, None until
        it has been applied.
    """

    def __init__(self, code, score=None):
        self.code = code
        self.score = score

    def apply_feedback(self, score):
        """
        Store the score returned by the game.
        Args:
            score (Score): The score for this guess.
        """
        self.score = score

    def get_feedback(self):
        """
        Return the stored feedback as a tuple (black_pegs, white_pegs).
        Returns:
            tuple[int, int]: The feedback tuple.
        """
        return self.score.get_feedback()

    def get_guess(self):
        """
        Return the stored guess.

        Returns:
            Code: The guessed code."""
        return self.code

    def __str__(self):
        return self.code.as_string()


def render_row(guess, rules=None):
    """
    Render one history row as text: guess pegs, then feedback pegs.

    Args:
        guess (Guess): A guess with feedback applied.
        rules (dict, optional): Ruleset with the display map.
            Defaults to DEFAULT_RULES.
    Returns:
        str: The rendered row.
    """
    rules = check_rules(rules or DEFAULT_RULES)
    colors = rules["display"]["emoji_map"]
    length = rules["code_length"]

    row = ""
    for peg in guess.get_guess():
        row += "| " + colors[peg.value] + " "
    black, white = guess.get_feedback()
    for _ in range(black):
        row += "| " + colors["BK"] + " "
    for _ in range(white):
        row += "| " + colors["W"] + " "
    for _ in range(max(0, length - black - white)):
        row += "|    "
    return row + "|"
