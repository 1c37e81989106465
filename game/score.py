from enum import Enum

from .secret_code import CODE_LENGTH


class ScorePeg(Enum):
    """Feedback peg: BLACK for color and position, WHITE for color only."""

    BLACK = "BK"
    WHITE = "W"


_PACKING_ORDER = {ScorePeg.BLACK: 0, ScorePeg.WHITE: 1, None: 2}


class Score:
    """
        Feedback for one guess. Slots are packed: black pegs first, then white
        pegs, then empty slots. Slot order says nothing about which guess peg
        earned the feedback.
    Attributes:
        pegs (tuple[ScorePeg | None, ...]): CODE_LENGTH feedback slots.
    """

    __slots__ = ("pegs",)

    def __init__(self, pegs=()):
        """
        Initialize a Score from the produced feedback pegs.

        Args:
            pegs (Iterable[ScorePeg | None]): Feedback pegs in the order they
            were produced, at most CODE_LENGTH. Missing slots are filled
            with None.
        """
        pegs = list(pegs)
        if len(pegs) > CODE_LENGTH:
            raise ValueError(
                f"A score holds at most {CODE_LENGTH} pegs, got {len(pegs)}."
            )
        ranks = [_PACKING_ORDER[peg] for peg in pegs]
        if ranks != sorted(ranks):
            raise ValueError(
                "Score pegs must be packed: black pegs, then white pegs, "
                "then empty slots."
            )
        pegs += [None] * (CODE_LENGTH - len(pegs))
        self.pegs = tuple(pegs)

    def get_feedback(self) -> tuple[int, int]:
        """
        Return the feedback as a tuple (black_pegs, white_pegs).
        Returns:
            tuple[int, int]: The feedback tuple.
        """
        black = sum(1 for peg in self.pegs if peg is ScorePeg.BLACK)
        white = sum(1 for peg in self.pegs if peg is ScorePeg.WHITE)
        return (black, white)

    def is_win(self) -> bool:
        """True if every slot holds a black peg."""
        return all(peg is ScorePeg.BLACK for peg in self.pegs)

    def __eq__(self, other):
        if isinstance(other, Score):
            return self.pegs == other.pegs
        return NotImplemented

    def __hash__(self):
        return hash(self.pegs)

    def __repr__(self):
        names = ", ".join(peg.name if peg else "None" for peg in self.pegs)
        return f"Score([{names}])"
