from .score import Score, ScorePeg
from .secret_code import Code, InvalidCodeError


class Scorer:
    """
        Compares guesses against the secret code of one game.
    Attributes:
        secret (Code): The code every guess is scored against.
    """

    def __init__(self, secret: Code):
        self.secret = secret

    def score(self, guess: Code) -> Score:
        """
        Compare a guess with the secret code and compute Mastermind-style
        feedback.

        Args:
            guess (Code): The guessed code. Must be as long as the secret.

        Returns:
            Score: Black pegs (correct color in the correct position) first,
            followed by white pegs (correct color in the wrong position).

        Raises:
            InvalidCodeError: If guess and secret differ in length.

        Notes:
            Each secret peg and each guess peg contributes to at most one
            feedback peg.
        """
        if len(guess) != len(self.secret):
            raise InvalidCodeError(
                f"Guess length {len(guess)} does not match "
                f"code length {len(self.secret)}."
            )

        feedback = []
        remaining_code = []
        remaining_guess = []

        # Compare secret code with guess. Count the color and position.
        for code_peg, guess_peg in zip(self.secret, guess):
            if code_peg == guess_peg:
                feedback.append(ScorePeg.BLACK)
            else:
                remaining_code.append(code_peg)
                remaining_guess.append(guess_peg)

        # Compare the unmatched pegs. Count the color.
        for peg in remaining_guess:
            if peg in remaining_code:
                feedback.append(ScorePeg.WHITE)
                remaining_code.remove(peg)

        return Score(feedback)
